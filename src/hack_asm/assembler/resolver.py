"""
Label Resolver (Pass 1)
=======================

The first pass walks the raw source lines once and:

- strips ``//`` comments and surrounding whitespace,
- drops lines that end up empty (they consume no address),
- records each ``(NAME)`` label declaration in the symbol table at the
  address of the next real instruction,
- passes every other line through unchanged as a FilteredInstruction.

Label Detection
---------------
A stripped line is a label declaration when it starts with ``(`` and ends
with ``)``. The name is everything between the outermost pair with any
further parentheses deleted. Whitespace inside is kept::

    (LOOP)          ->  LOOP
    (MY LOOP)       ->  MY LOOP
    ((A)(B))        ->  AB
    (A) (B)         ->  A B

Nothing else is validated here. A line that looks like a broken label
(``(LOOP`` for example) is treated as an instruction and will fail in
pass 2 when its fields are looked up.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from hack_asm.errors import SourceLocation
from hack_asm.assembler.symbols import SymbolTable

logger = logging.getLogger(__name__)

COMMENT_MARKER = "//"


@dataclass(frozen=True)
class FilteredInstruction:
    """
    One instruction that survived pass 1.

    Attributes:
        text: Instruction text with comment and outer whitespace removed
        address: 0-based ROM address (index in the filtered sequence)
        location: Where the instruction starts in the source
    """
    text: str
    address: int
    location: SourceLocation


def strip_comment(line: str) -> str:
    """Remove a trailing ``//`` comment and surrounding whitespace."""
    index = line.find(COMMENT_MARKER)
    if index != -1:
        line = line[:index]
    return line.strip()


def parse_label(text: str) -> Optional[str]:
    """
    Return the label name if ``text`` is a label declaration.

    Args:
        text: A stripped source line

    Returns:
        The interior with every parenthesis removed, or None if not a label
    """
    if len(text) >= 2 and text.startswith("(") and text.endswith(")"):
        return text[1:-1].replace("(", "").replace(")", "")
    return None


class LabelResolver:
    """
    Pass 1: collect labels and filter out non-instructions.

    Usage:
        symbols = SymbolTable()
        resolver = LabelResolver(symbols)
        instructions = resolver.resolve(lines, "Prog.asm")
    """

    def __init__(self, symbols: SymbolTable):
        self._symbols = symbols

    def resolve(
        self, lines: Iterable[str], filename: str = "<input>"
    ) -> list[FilteredInstruction]:
        """
        Run pass 1 over the source lines.

        Args:
            lines: Raw source lines, without line terminators
            filename: Name used in source locations

        Returns:
            The filtered instruction sequence, in source order
        """
        instructions: list[FilteredInstruction] = []
        label_count = 0

        for line_number, raw in enumerate(lines, start=1):
            text = strip_comment(raw)
            if not text:
                continue

            label = parse_label(text)
            if label is not None:
                self._symbols.define_label(label, len(instructions), line_number)
                label_count += 1
                continue

            column = len(raw) - len(raw.lstrip()) + 1
            instructions.append(FilteredInstruction(
                text=text,
                address=len(instructions),
                location=SourceLocation(filename, line_number, column),
            ))

        logger.debug(
            "Pass 1: %d instructions, %d label declarations",
            len(instructions), label_count,
        )
        return instructions
