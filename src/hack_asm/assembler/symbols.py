"""
Hack Symbol Table
=================

The symbol table maps case-sensitive names to non-negative addresses.
It is shared by both assembler passes:

- Construction seeds it with the predefined symbols (R0-R15, SP, LCL,
  ARG, THIS, THAT, SCREEN, KBD).
- Pass 1 adds labels. The first declaration of a label wins; later
  declarations of the same name are ignored.
- Pass 2 adds variables. A name that is not yet known under any kind
  gets the next RAM slot, starting at 16. Slots are never reused.

Entries are never removed. A fresh table is built for every assembly run.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from hack_asm.assembler.tables import PREDEFINED_SYMBOLS, VARIABLE_BASE

logger = logging.getLogger(__name__)


class SymbolKind(Enum):
    """Where a symbol's address came from."""
    PREDEFINED = "predefined"
    LABEL = "label"
    VARIABLE = "variable"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Symbol:
    """
    Symbol table entry.

    Attributes:
        name: Symbol name, exactly as written
        value: ROM address for labels, RAM address otherwise
        kind: Predefined, label or variable
        line: Source line that introduced the symbol (0 for predefined)
    """
    name: str
    value: int
    kind: SymbolKind
    line: int = 0


class SymbolTable:
    """
    Name to address mapping for one assembly run.

    Usage:
        table = SymbolTable()
        table.define_label("LOOP", 4)
        table.resolve("counter")    # 16, allocated on first use
        table.resolve("counter")    # 16 again
    """

    def __init__(self):
        self._symbols: dict[str, Symbol] = {
            name: Symbol(name, value, SymbolKind.PREDEFINED)
            for name, value in PREDEFINED_SYMBOLS.items()
        }
        self._next_variable = VARIABLE_BASE

    # =========================================================================
    # Mutation
    # =========================================================================

    def define_label(self, name: str, address: int, line: int = 0) -> bool:
        """
        Record a label if the name is not already defined.

        Args:
            name: Label name
            address: Index of the instruction following the declaration
            line: Source line of the declaration

        Returns:
            True if the label was added, False if the name already existed
        """
        if name in self._symbols:
            logger.debug(
                "Ignoring redeclaration of '%s' at line %d (keeps %d)",
                name, line, self._symbols[name].value,
            )
            return False

        self._symbols[name] = Symbol(name, address, SymbolKind.LABEL, line)
        logger.debug("Label '%s' = %d", name, address)
        return True

    def resolve(self, name: str, line: int = 0) -> int:
        """
        Return the address of a symbol, allocating a variable if needed.

        Args:
            name: Symbol name from an A-instruction
            line: Source line of the reference

        Returns:
            The symbol's address
        """
        symbol = self._symbols.get(name)
        if symbol is None:
            symbol = Symbol(name, self._next_variable, SymbolKind.VARIABLE, line)
            self._symbols[name] = symbol
            self._next_variable += 1
            logger.debug("Variable '%s' allocated at %d", name, symbol.value)
        return symbol.value

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def next_variable_address(self) -> int:
        """The RAM address the next new variable will receive."""
        return self._next_variable

    def get(self, name: str) -> Optional[Symbol]:
        """Return the entry for a name, or None if it is not defined."""
        return self._symbols.get(name)

    def symbols_of_kind(self, kind: SymbolKind) -> list[Symbol]:
        """Return entries of one kind in the order they were added."""
        return [sym for sym in self._symbols.values() if sym.kind is kind]

    def as_dict(self) -> dict[str, int]:
        """Return a plain name to address dictionary."""
        return {name: sym.value for name, sym in self._symbols.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __getitem__(self, name: str) -> int:
        return self._symbols[name].value

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __len__(self) -> int:
        return len(self._symbols)
