import suite
from dgen import from_schema, Generator
from iterq import Seq

test = suite.test
assert_that = suite.assert_that

user_schema = {
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'city': {'_qen_provider': 'choice', 'from': ['new york', 'london', 'paris']},
    'greeting': {'_qen_provider': 'ref', 'key': 'name', 'format': 'hi {}'},
    'kind': {'_qen_provider': 'literal', 'value': 'user'},
}


@test("take generates records matching the schema")
def test_take_records():
    users = from_schema(user_schema, seed=1).take(20)
    assert_that(isinstance(users, Seq), "take returns a seq")
    for user in users:
        assert_that(18 <= user['age'] <= 65, f"age out of range: {user['age']}")
        assert_that(user['city'] in ('new york', 'london', 'paris'), f"unexpected city {user['city']}")
        assert_that(user['greeting'] == f"hi {user['name']}", "ref should format the sibling field")
        assert_that(user['kind'] == 'user', "literal value")


@test("the same seed gives the same records")
def test_seeded():
    first = from_schema(user_schema, seed=99).take(5).to.list()
    second = from_schema(user_schema, seed=99).take(5).to.list()
    assert_that(first == second, "seeded generation should be reproducible")


@test("take can be walked twice but stream only once")
def test_take_vs_stream():
    taken = from_schema(user_schema, seed=5).take(3)
    assert_that(taken.to.count() == 3 and taken.to.count() == 3, "take is re-iterable")
    streamed = from_schema(user_schema, seed=5).stream(3)
    assert_that(streamed.to.count() == 3, "first walk of stream")
    assert_that(streamed.to.count() == 0, "stream is exhausted")


@test("list schemas honour counts")
def test_list_counts():
    gen = Generator(seed=4)
    fixed = gen.create([{'_qen_items': 'word', '_qen_count': 3}])
    assert_that(len(fixed) == 3, "fixed count")
    ranged = gen.create([{'_qen_items': 'word', '_qen_count': (1, 2)}])
    assert_that(1 <= len(ranged) <= 2, "ranged count")


@test("unknown providers raise")
def test_unknown_provider():
    gen = Generator(seed=4)
    suite.assert_raises(ValueError, lambda: gen.create({'_qen_provider': 'nope'}))
    suite.assert_raises(ValueError, lambda: gen.create(('not_a_provider', {})))
    suite.assert_raises(ValueError, lambda: gen.create({'_qen_provider': 'ref', 'key': 'missing'}))


if __name__ == "__main__":
    suite.run(title="dgen test suite")
