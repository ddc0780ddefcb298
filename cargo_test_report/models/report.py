"""Models for the structured report built from a cargo test transcript."""

from collections.abc import Sequence
from typing import Literal, Self

from pydantic import Field, model_validator

from cargo_test_report.models.base import Model

Status = Literal["pass", "fail"]


class Test(Model):
    """Outcome of one named test case."""

    __test__ = False

    name: str = Field(..., description="Test path as printed by the harness")
    status: Status = Field(..., description="Outcome keyword of the test line")
    error: str | None = Field(
        default=None, description="First line of the correlated failure output"
    )


class Suite(Model):
    """One test binary's run, from its header line to its summary line."""

    name: str = Field(..., description="Suite display name, verbatim")
    state: Status = Field(..., description="Outcome keyword of the summary line")
    passed: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    ignored: int = Field(..., ge=0)
    measured: int = Field(..., ge=0)
    total: int = Field(..., ge=0, description="passed + failed + ignored")
    tests: Sequence[Test] = Field(
        default_factory=list, description="Tests in transcript order"
    )

    @model_validator(mode="after")
    def check_total(self) -> Self:
        """Reject suites whose total disagrees with their counts."""
        expected = self.passed + self.failed + self.ignored
        if self.total != expected:
            raise ValueError(
                f"total must equal passed + failed + ignored ({expected}), "
                f"got {self.total}"
            )
        return self


type Report = Sequence[Suite]
