from playcheck import assert_equal, assert_true


def is_multiple(a: int, b: int) -> bool:
    return a % b == 0


# Replace None with a closure that returns True when a is a multiple of b
closure = None

assert_true(lambda: closure(30, 15))
assert_equal(closure and closure(14, 3), False)
