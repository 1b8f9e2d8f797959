"""Line numbering modes.

The two CLI flags (`-n`, `-b`) are mutually exclusive, so the choice is kept
as a single enumeration instead of two booleans. An invalid "both on" state
cannot be represented once the resolver has picked a mode.
"""

from __future__ import annotations

from enum import Enum


class NumberingMode(str, Enum):
    """How each emitted line is labelled."""

    PLAIN = "plain"
    NUMBER_ALL = "number-all"
    NUMBER_NONBLANK = "number-nonblank"

    @classmethod
    def default(cls) -> "NumberingMode":
        return cls.PLAIN

    @classmethod
    def from_flags(cls, *, number_lines: bool, number_nonblank_lines: bool) -> "NumberingMode":
        """Derive the mode from the two CLI booleans.

        Raises `ConflictingFlagsError` when both are set.
        """

        if number_lines and number_nonblank_lines:
            raise ConflictingFlagsError("--number and --number-nonblank are mutually exclusive")
        if number_lines:
            return cls.NUMBER_ALL
        if number_nonblank_lines:
            return cls.NUMBER_NONBLANK
        return cls.default()

    def label(self) -> str:
        """Human readable label for logging."""

        return {
            NumberingMode.PLAIN: "plain",
            NumberingMode.NUMBER_ALL: "number all lines",
            NumberingMode.NUMBER_NONBLANK: "number non-blank lines",
        }[self]


class ConflictingFlagsError(ValueError):
    """Both numbering flags were requested at once."""
