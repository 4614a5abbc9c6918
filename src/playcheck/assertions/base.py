"""Base data structures for the assertion system."""

from dataclasses import dataclass

PASS_GLYPH = "✅"
FAIL_GLYPH = "❌"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of evaluating a single check.

    Results are produced per call and handed straight to a reporter; nothing
    collects them.

    Attributes:
        name: Name of the check that ran (e.g. "assert_equal").
        line: Source line identifier supplied by (or resolved for) the caller.
        passed: Whether the condition held.
        message: Diagnostic text for a failure, "passed" otherwise.
    """

    name: str
    line: int | str
    passed: bool
    message: str = "passed"

    def render(self) -> str:
        glyph = PASS_GLYPH if self.passed else FAIL_GLYPH
        return f"{glyph} {self.line}: {self.name} {self.message}"
