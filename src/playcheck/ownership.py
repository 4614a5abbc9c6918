"""Cooperative reference counting.

``Retained`` makes ownership explicit: owners call ``retain()``/``release()``
and the wrapped object is dropped when the last owner lets go. Weak handles
observe the drop by returning None; unowned handles raise
``DeallocatedError``. This models strong, weak and unowned references without
depending on interpreter internals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from playcheck.inspector import ReferenceReport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class OwnershipError(RuntimeError):
    """Raised when a handle is used against the ownership rules."""


class DeallocatedError(OwnershipError):
    """Raised when an unowned handle is dereferenced after deallocation."""


@dataclass(frozen=True)
class OwnershipCounts:
    strong: int
    weak: int
    unowned: int


class Retained(Generic[T]):
    """Shared ownership of ``value`` with explicit bookkeeping."""

    def __init__(self, value: T) -> None:
        if value is None:
            raise TypeError("Retained requires a value, got None")
        self._value: T | None = value
        self.type_name = type(value).__qualname__
        self._strong = 1
        self._weak = 0
        self._unowned = 0

    @property
    def alive(self) -> bool:
        return self._value is not None

    @property
    def value(self) -> T:
        if self._value is None:
            raise DeallocatedError(f"{self.type_name} instance has been deallocated")
        return self._value

    def retain(self) -> Retained[T]:
        if not self.alive:
            raise OwnershipError(f"Cannot retain deallocated {self.type_name}")
        self._strong += 1
        return self

    def release(self) -> None:
        if not self.alive:
            raise OwnershipError(f"Over-release of deallocated {self.type_name}")
        self._strong -= 1
        if self._strong == 0:
            self._value = None
            logger.debug(f"{self.type_name} instance deallocated")

    def weak(self) -> WeakHandle[T]:
        if not self.alive:
            raise OwnershipError(f"Cannot take weak reference to deallocated {self.type_name}")
        self._weak += 1
        return WeakHandle(self)

    def unowned(self) -> UnownedHandle[T]:
        if not self.alive:
            raise OwnershipError(f"Cannot take unowned reference to deallocated {self.type_name}")
        self._unowned += 1
        return UnownedHandle(self)

    def counts(self) -> OwnershipCounts:
        if not self.alive:
            return OwnershipCounts(strong=0, weak=0, unowned=0)
        return OwnershipCounts(strong=self._strong, weak=self._weak, unowned=self._unowned)

    def inspect(self) -> ReferenceReport:
        if not self.alive:
            return ReferenceReport(type_name=self.type_name, alive=False)
        return ReferenceReport(
            type_name=self.type_name,
            alive=True,
            strong=self._strong,
            weak=self._weak,
            unowned=self._unowned,
        )

    def _drop_weak(self) -> None:
        self._weak -= 1

    def _drop_unowned(self) -> None:
        self._unowned -= 1

    def __repr__(self) -> str:
        state = "alive" if self.alive else "deallocated"
        return f"Retained({self.type_name}, {state}, strong={self._strong})"


class WeakHandle(Generic[T]):
    """Non-owning reference that reads as None once the owner count hits zero."""

    def __init__(self, owner: Retained[T]) -> None:
        self._owner: Retained[T] | None = owner

    def get(self) -> T | None:
        if self._owner is None or not self._owner.alive:
            return None
        return self._owner.value

    def drop(self) -> None:
        if self._owner is None:
            raise OwnershipError("Weak handle already dropped")
        self._owner._drop_weak()
        self._owner = None


class UnownedHandle(Generic[T]):
    """Non-owning reference that assumes the object outlives it."""

    def __init__(self, owner: Retained[T]) -> None:
        self._owner: Retained[T] | None = owner

    def get(self) -> T:
        if self._owner is None:
            raise OwnershipError("Unowned handle already dropped")
        return self._owner.value

    def drop(self) -> None:
        if self._owner is None:
            raise OwnershipError("Unowned handle already dropped")
        self._owner._drop_unowned()
        self._owner = None
