#!/usr/bin/env python3
"""walkthrough of the iterq surface, section by section."""

import argparse
import logging
from dgen import from_schema
from iterq import Q, empty

# configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)

user_schema = {
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 70}),
    'city': {'_qen_provider': 'choice', 'from': ['new york', 'london', 'paris']}
}


def null_safe_section():
    print('1. null-safe operations:')
    numbers = Q([1, 2, 3, 4, 5])
    print(f'  numbers.get.first_or_none(): {numbers.get.first_or_none()}')
    print(f'  empty().get.first_or_none(): {empty().get.first_or_none()}')
    print(f'  first even: {numbers.get.first_where_or_none(lambda n: n % 2 == 0)}')
    print(f'  element at 10: {numbers.get.element_at_or_none(10)}')
    print(f"  index of 'b': {Q(['a', 'b', 'c']).get.index_of_or_none('b')}")
    print()


def collection_section():
    print('2. collection utilities:')
    fruits = Q(['apple', 'banana', 'apricot', 'blueberry', 'avocado'])
    print(f'  grouped by first letter: {fruits.group.group_by(lambda f: f[0])}')
    duplicates = Q([1, 2, 2, 3, 3, 3, 4, 5, 5])
    print(f'  unique: {duplicates.set.distinct().to.list()}')
    print(f'  chunked by 2: {Q([1, 2, 3, 4, 5]).group.chunked(2).to.list()}')
    print()


def math_section():
    print('3. mathematical operations:')
    scores = Q([85, 92, 78, 96, 88])
    print(f'  scores: {scores.to.list()}')
    print(f'  sum: {scores.stats.sum()}')
    print(f'  average: {scores.stats.average()}')
    print(f'  min: {scores.stats.min_or_none()}, max: {scores.stats.max_or_none()}')
    print(f'  empty sum: {empty().stats.sum_or_none()}')
    print()


def predicate_section():
    print('4. predicates:')
    mixed = Q(range(1, 11))
    print(f'  all even in [2, 4, 6, 8]: {Q([2, 4, 6, 8]).to.all(lambda n: n % 2 == 0)}')
    print(f'  none > 10: {mixed.to.none(lambda n: n > 10)}')
    print(f'  all < 5: {mixed.to.all(lambda n: n < 5)}')
    print()


def functional_section():
    print('5. functional operations:')
    words = Q(['elephant', 'cat', 'hippopotamus', 'dog'])
    print(f'  shortest: {words.stats.min_by_or_none(len)}, longest: {words.stats.max_by_or_none(len)}')
    combined = Q(['a', 'b', 'c']) + Q([4, 5, 6]).select(str)
    print(f'  combined: {combined.to.list()}')
    print('  indexed iteration:')
    words.take(3).util.for_each_indexed(lambda i, w: print(f'    {i}: {w}'))
    print(f'  indexed pairs: {words.take(2).indexed().to.list()}')
    print(f'  reversed: {words.reversed().to.list()}')
    print()


def users_section(seed: int, count: int):
    print('6. generated users:')
    users = from_schema(user_schema, seed=seed).take(count)
    logger.debug(f"generated {count} users with seed {seed}")

    for city, members in users.group.group_by(lambda u: u['city']).items():
        print(f"    {city}: {', '.join(u['name'] for u in members)}")

    youngest = users.stats.min_by_or_none(lambda u: u['age'])
    oldest = users.stats.max_by_or_none(lambda u: u['age'])
    if youngest is not None:
        print(f"  youngest: {youngest['name']} ({youngest['age']})")
        print(f"  oldest: {oldest['name']} ({oldest['age']})")
    print(f"  average age: {users.stats.average(lambda u: u['age'])}")
    print(f"  all adults: {users.to.all(lambda u: u['age'] >= 18)}")
    print()


def create_cli_interface() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='iterq feature walkthrough')
    parser.add_argument('--seed', type=int, default=42, help='Seed for generated users (default: 42)')
    parser.add_argument('--users', type=int, default=5, help='Number of generated users (default: 5)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def main():
    args = create_cli_interface().parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    logger.info("running iterq walkthrough")
    null_safe_section()
    collection_section()
    math_section()
    predicate_section()
    functional_section()
    users_section(args.seed, args.users)
    logger.info("all examples completed")


if __name__ == "__main__":
    main()
