"""
Hack Assembler Error Hierarchy
==============================

This module defines the exception hierarchy for the Hack assembler.
All exceptions inherit from HackError, allowing callers to catch every
assembler-related error with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
└── AssemblerError (assembly-related)
    ├── UnknownMnemonicError - dest/comp/jump field not in its table
    ├── AddressRangeError - A-instruction value does not fit in a word
    └── TooManyErrors - error collector limit reached

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)

An address symbol that is not yet known is never an error: it is
allocated as a new variable.
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all Hack assembler errors.

        try:
            assembler.assemble_file("Prog.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, 0 when unknown)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for assembly errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Max.asm:7:3: error: unknown comp mnemonic 'D+Q'
                D=D+Q
                  ^
            hint: did you mean 'D+1', 'D+A', 'D+M'?
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnknownMnemonicError(AssemblerError):
    """
    A compute-instruction field has no entry in its encoding table.

    Raised by the table lookups for the dest, comp and jump fields.
    The empty string is a valid dest and jump, so this only fires for
    text that was actually written in the source.

    Attributes:
        field: Which field failed ("dest", "comp" or "jump")
        mnemonic: The text that was looked up
        similar: Close matches from the table, used for the hint
    """

    def __init__(
        self,
        field: str,
        mnemonic: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        similar: Optional[list[str]] = None,
    ):
        self.field = field
        self.mnemonic = mnemonic
        self.similar = similar or []

        hint = None
        if self.similar:
            suggestions = ", ".join(f"'{s}'" for s in self.similar[:3])
            hint = f"did you mean {suggestions}?"

        super().__init__(
            f"unknown {field} mnemonic '{mnemonic}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )

    def at(self, location: SourceLocation, source_line: str) -> "UnknownMnemonicError":
        """Return a copy of this error pinned to a source location."""
        return UnknownMnemonicError(
            self.field,
            self.mnemonic,
            location=location,
            source_line=source_line,
            similar=self.similar,
        )


class AddressRangeError(AssemblerError):
    """
    An A-instruction value needs more than 16 bits.

    Values from 32768 to 65535 still fit in the output word and only
    produce a warning; from 65536 up there is nothing sensible to emit.

    Attributes:
        value: The decimal literal or resolved symbol value
    """

    def __init__(
        self,
        value: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        super().__init__(
            f"address {value} does not fit in 16 bits",
            location=location,
            hint="A-instruction values must be between 0 and 32767",
            source_line=source_line,
        )


# =============================================================================
# Error Collection for Multiple Error Reporting
# =============================================================================

class ErrorCollector:
    """
    Collects multiple errors for batch reporting.

    Pass 2 keeps encoding after a failed lookup so that every bad line is
    reported in one run. Output is still all-or-nothing: the assembler
    raises once the pass is over if anything was collected.

    Example:
        collector = ErrorCollector(max_errors=100)
        collector.add(UnknownMnemonicError("comp", "D+Q"))

        if collector:
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before raising TooManyErrors
        """
        self.errors: list[AssemblerError] = []
        self.max_errors = max_errors

    def add(self, error: AssemblerError) -> None:
        """
        Add an error to the collection.

        Raises:
            TooManyErrors: If max_errors has been reached
        """
        self.errors.append(error)
        if len(self.errors) >= self.max_errors:
            raise TooManyErrors(
                f"Too many errors ({self.max_errors}), stopping\n\n{self.report()}"
            )

    def __len__(self) -> int:
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display, followed by a summary line."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        lines.append(count_errors(len(self.errors)))

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()


class TooManyErrors(AssemblerError):
    """
    Raised when too many errors have been encountered.

    This stops a hopeless run (for example a file that is not Hack
    assembly at all) from producing thousands of messages.
    """

    def __init__(self, message: str = "Too many errors"):
        super().__init__(message)


def count_errors(count: int) -> str:
    """Return '1 error' or 'N errors'."""
    return f"{count} {'error' if count == 1 else 'errors'}"
