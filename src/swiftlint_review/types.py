"""Type definitions for swiftlint-review."""
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator


class Severity(str, Enum):
    """Severity tokens emitted by SwiftLint's JSON reporter."""

    ERROR = "Error"
    WARNING = "Warning"


class ViolationDecodeError(ValueError):
    """Raised when linter output is not a valid list of violations."""


class Violation(BaseModel):
    """Single SwiftLint finding."""

    model_config = ConfigDict(extra="ignore")

    file: str
    line: int = Field(gt=0)
    severity: Severity
    reason: str
    rule_id: str | None = None
    type: str | None = None
    character: int | None = None

    @field_validator("severity", mode="before")
    @classmethod
    def normalize_severity(cls, v: Any) -> Any:
        """Accept severity tokens in any case."""
        if isinstance(v, str):
            for member in Severity:
                if member.value.lower() == v.strip().lower():
                    return member
        return v

    def update_file(self, file: str) -> None:
        """Replace the reported path with the one that was linted.

        SwiftLint reports absolute paths even when given a relative one.
        """
        self.file = file

    def to_markdown_row(self) -> str:
        """Render as one row of the report table."""
        reason = self.reason.replace("|", "\\|")
        return f"| {self.severity.value} | {self.file}:{self.line} | {reason} |"


_violation_list = TypeAdapter(list[Violation])


def parse_violations(output: str) -> list[Violation]:
    """Decode SwiftLint JSON reporter output.

    The array is decoded as a unit: one bad element rejects the whole output.

    Args:
        output: Raw stdout of ``swiftlint lint --reporter json``

    Returns:
        Violations in reporter order

    Raises:
        ViolationDecodeError: If output is not a JSON array of violations
    """
    try:
        return _violation_list.validate_json(output)
    except ValidationError as e:
        raise ViolationDecodeError(str(e)) from e
