import suite
from iterq import Q, empty, Seq

test = suite.test
assert_that = suite.assert_that


@test("distinct removes duplicates keeping first occurrence order")
def test_distinct_basic():
    result = Q([1, 2, 2, 3, 3, 4]).set.distinct().to.list()
    assert_that(result == [1, 2, 3, 4], f"got {result}")


@test("distinct keeps order of first appearance for unsorted input")
def test_distinct_order():
    result = Q([3, 1, 3, 2, 1]).set.distinct().to.list()
    assert_that(result == [3, 1, 2], f"got {result}")


@test("distinct on empty is empty")
def test_distinct_empty():
    assert_that(empty().set.distinct().to.list() == [], "should be empty")


@test("distinct_by keeps the first element for each key")
def test_distinct_by_selector():
    words = Q(['apple', 'banana', 'apricot', 'blueberry', 'cherry'])
    result = words.set.distinct_by(len).to.list()
    assert_that(result == ['apple', 'banana', 'apricot', 'blueberry'],
                f"cherry shares banana's length and should be dropped, got {result}")


@test("distinct_by without a selector matches distinct")
def test_distinct_by_identity():
    data = Q(['x', 'y', 'x', 'z', 'y'])
    assert_that(data.set.distinct_by().to.list() == data.set.distinct().to.list(), "should behave like distinct")


@test("distinct is lazy")
def test_distinct_lazy():
    pulled = []
    def source():
        for n in [1, 1, 2, 3]:
            pulled.append(n)
            yield n
    result = Q(source()).set.distinct()
    assert_that(isinstance(result, Seq), "should return a seq")
    assert_that(pulled == [], "nothing should be pulled before iteration")
    first_two = result.take(2).to.list()
    assert_that(first_two == [1, 2], f"got {first_two}")
    assert_that(pulled == [1, 1, 2], f"should pull only what is needed, pulled {pulled}")


@test("distinct result can be walked again over a list source")
def test_distinct_reiterable():
    unique = Q([1, 1, 2]).set.distinct()
    assert_that(unique.to.list() == [1, 2], "first walk")
    assert_that(unique.to.list() == [1, 2], "second walk should start with a fresh seen-set")


@test("distinct_by propagates unhashable key errors")
def test_distinct_by_unhashable():
    suite.assert_raises(TypeError, lambda: Q([[1], [2]]).set.distinct().to.list())


if __name__ == "__main__":
    suite.run(title="iterq set operations test suite")
