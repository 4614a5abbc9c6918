from playcheck import (
    assert_equal,
    assert_equal_types,
    assert_false,
    assert_true,
    describe,
)


def is_multiple(a: int, b: int) -> bool:
    return a % b == 0


def is_greater(a: int, b: int) -> bool:
    return a > b


closure = lambda a, b: is_multiple(a, b)
assert_true(closure(30, 15))
assert_true(is_greater(14, 3))
assert_equal_types(closure, is_greater)
assert_false(closure(14, 3))

closure = is_greater
assert_true(closure(3, 2))


def make_combiner(a, b, evaluator):
    def combine(x, y, z):
        if evaluator(a, b):
            return x + y + z
        return x - y - z

    return combine


assert_equal(make_combiner(6, 2, is_multiple)(1, 2, 3), 6)
assert_equal(make_combiner(6, 5, is_multiple)(1, 2, 3), -4)


def get_number() -> int:
    print("Executed")
    return 12


# Deferred: get_number runs inside the check, not before it
assert_true(lambda: get_number() == 12)
print(describe(get_number()))
