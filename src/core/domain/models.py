"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Immutable, validated values at the edge (CLI arguments) without coupling the
  core to typer.
- `model_dump` gives a stable representation for debug logging.

Note:
- These models describe *what* a run is, not *how* inputs are read.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.numbering import NumberingMode

STDIN_NAME = "-"


class Configuration(BaseModel):
    """Validated result of argument resolution, consumed once by the emitter."""

    model_config = ConfigDict(frozen=True)

    inputs: tuple[str, ...] = Field(
        default=(STDIN_NAME,),
        description="Input names in order; '-' means standard input.",
    )
    mode: NumberingMode = Field(
        default=NumberingMode.default(),
        description="Active line numbering policy.",
    )

    @field_validator("inputs", mode="before")
    @classmethod
    def _default_to_stdin(cls, value: object) -> object:
        if value is None:
            return (STDIN_NAME,)
        if isinstance(value, str):
            return (value,)
        if isinstance(value, Sequence) and len(value) == 0:
            return (STDIN_NAME,)
        return value

    @property
    def number_all_lines(self) -> bool:
        return self.mode is NumberingMode.NUMBER_ALL

    @property
    def number_nonblank_lines(self) -> bool:
        return self.mode is NumberingMode.NUMBER_NONBLANK

    @classmethod
    def from_flags(
        cls,
        inputs: Sequence[str] | None,
        *,
        number_lines: bool = False,
        number_nonblank_lines: bool = False,
    ) -> "Configuration":
        """Build a configuration from the raw CLI values.

        Raises `ConflictingFlagsError` if both numbering flags are set.
        """

        mode = NumberingMode.from_flags(
            number_lines=number_lines,
            number_nonblank_lines=number_nonblank_lines,
        )
        return cls(inputs=tuple(inputs or ()), mode=mode)


class OpenFailure(BaseModel):
    """An input that could not be opened and was skipped."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Input name as given on the command line.")
    reason: str = Field(..., description="Operating system reason for the failure.")

    def message(self) -> str:
        return f"Failed to open {self.name}: {self.reason}"


class EmitReport(BaseModel):
    """Outcome of one emitter run."""

    inputs_processed: int = Field(default=0, ge=0)
    lines_written: int = Field(default=0, ge=0)
    failures: list[OpenFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
