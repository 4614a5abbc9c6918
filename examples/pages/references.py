import weakref

from playcheck import DeallocatedError, Retained, assert_equal, assert_nil, reference_counter


class Counter:
    def __init__(self):
        self.count = 0

    def increment(self) -> int:
        self.count += 1
        return self.count


example = Counter()
watch = reference_counter(example)
watch()

observer = weakref.ref(example)
watch()

example = None
assert_equal(watch(), 0)
assert_nil(observer())

shared = Retained(Counter())
back_ref = shared.unowned()
print(shared.inspect().render())
shared.release()
print(shared.inspect().render())
try:
    back_ref.get()
except DeallocatedError as e:
    print(f"unowned access failed: {e}")
