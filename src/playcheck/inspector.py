"""Point-in-time reference inspection for live objects."""

from __future__ import annotations

import logging
import sys
import weakref
from dataclasses import dataclass
from typing import IO, Any

import typer

logger = logging.getLogger(__name__)


def _raw_counts(ref: weakref.ref) -> tuple[int, int] | None:
    """Interpreter strong and weak reference counts for a weakly held object."""
    instance = ref()
    if instance is None:
        return None
    return sys.getrefcount(instance), weakref.getweakrefcount(instance)


class _Probe:
    pass


def _measure_temporaries() -> int:
    # The probe has exactly one owner: this frame.
    probe = _Probe()
    counts = _raw_counts(weakref.ref(probe))
    return counts[0] - 1


# References _raw_counts itself adds; varies between interpreter versions.
_INSPECTOR_TEMPORARIES = _measure_temporaries()


@dataclass(frozen=True)
class ReferenceReport:
    """Snapshot of how an object is referenced.

    Attributes:
        type_name: Class name of the inspected object.
        alive: False once the object has been deallocated.
        strong: Owning references (0 when deallocated).
        weak: Weak references, excluding the inspector's own.
        unowned: Non-owning references that fail loudly after deallocation.
            Only tracked by the cooperative ownership model.
    """

    type_name: str
    alive: bool
    strong: int = 0
    weak: int = 0
    unowned: int | None = None

    def render(self) -> str:
        if not self.alive:
            return f"Class: {self.type_name} | Deallocated"
        parts = [
            f"Class: {self.type_name}",
            f"Strong: {self.strong}",
            f"Weak: {self.weak}",
        ]
        if self.unowned is not None:
            parts.append(f"Unowned: {self.unowned}")
        return " | ".join(parts)


class ReferenceInspector:
    """Reports the references held to an object without keeping it alive.

    Calling the inspector prints a one-line report and returns the strong
    count, which drops to 0 as soon as the object is collected.
    """

    def __init__(self, obj: Any, stream: IO[str] | None = None) -> None:
        self.type_name = type(obj).__qualname__
        self.stream = stream
        try:
            # A callback keeps this ref distinct from plain weakref.ref(obj)
            # calls made by the caller, so they are counted separately.
            self._ref = weakref.ref(obj, self._on_finalize)
        except TypeError as e:
            raise TypeError(
                f"Cannot inspect references to {self.type_name}: "
                "object does not support weak references"
            ) from e

    def _on_finalize(self, _ref: weakref.ref) -> None:
        logger.debug(f"{self.type_name} instance deallocated")

    @property
    def alive(self) -> bool:
        return self._ref() is not None

    def inspect(self) -> ReferenceReport:
        counts = _raw_counts(self._ref)
        if counts is None:
            return ReferenceReport(type_name=self.type_name, alive=False)

        raw_strong, raw_weak = counts
        # A live object has at least one owner outside the inspector.
        strong = max(raw_strong - _INSPECTOR_TEMPORARIES, 1)
        weak = raw_weak - 1
        return ReferenceReport(
            type_name=self.type_name, alive=True, strong=strong, weak=weak
        )

    def __call__(self) -> int:
        report = self.inspect()
        logger.debug(report.render())
        typer.echo(report.render(), file=self.stream)
        return report.strong


def reference_counter(obj: Any, stream: IO[str] | None = None) -> ReferenceInspector:
    """Return an inspector bound weakly to ``obj``."""
    return ReferenceInspector(obj, stream=stream)
