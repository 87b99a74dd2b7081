"""
Hack Instruction Set Tables
===========================

This module defines the static encoding tables for the Hack computer's
16-bit instruction set, plus the predefined symbols every program starts
with.

Instruction Formats
-------------------
The Hack CPU has exactly two instruction formats:

1. **A-instruction**: ``@value``
   - Binary: ``0vvvvvvvvvvvvvvv``
   - Loads a 15-bit unsigned constant into the A register.

2. **C-instruction**: ``dest=comp;jump``
   - Binary: ``111accccccdddjjj``
   - ``a`` selects whether the ALU's second input is A (0) or M (1).
   - ``cccccc`` is the ALU control word (COMP_TABLE).
   - ``ddd`` selects which of A, D, M receive the result (DEST_TABLE).
   - ``jjj`` selects the jump condition on the result (JUMP_TABLE).

The A and M forms of a computation share the same six control bits;
only the ``a`` bit tells them apart. The ``a`` bit itself is not stored
in COMP_TABLE: it is derived from whether the mnemonic mentions ``M``.

All tables are read-only mappings built once at import time and shared
by every assembly run.

Reference
---------
- Nisan & Schocken, "The Elements of Computing Systems", chapter 4 and 6
"""

from types import MappingProxyType
from typing import Mapping

from hack_asm.errors import UnknownMnemonicError


# =============================================================================
# Instruction Layout Constants
# =============================================================================

WORD_BITS = 16
ADDRESS_BITS = 15
MAX_ADDRESS = (1 << ADDRESS_BITS) - 1   # 32767

C_PREFIX = "111"
MEMORY_OPERAND = "M"

# First RAM address handed out to variables (just past R0-R15)
VARIABLE_BASE = 16


# =============================================================================
# Destination Table
# =============================================================================
# Bit positions: d1=A, d2=D, d3=M. The empty string means "store nowhere".
# =============================================================================

DEST_TABLE: Mapping[str, str] = MappingProxyType({
    "":    "000",
    "M":   "001",
    "D":   "010",
    "MD":  "011",
    "A":   "100",
    "AM":  "101",
    "AD":  "110",
    "AMD": "111",
})


# =============================================================================
# Computation Table
# =============================================================================
# ALU control bits zx nx zy ny f no. Mnemonics that differ only in A vs M
# map to the same code.
# =============================================================================

COMP_TABLE: Mapping[str, str] = MappingProxyType({
    # Constants
    "0":   "101010",
    "1":   "111111",
    "-1":  "111010",

    # Single register
    "D":   "001100",
    "A":   "110000",
    "M":   "110000",
    "!D":  "001101",
    "!A":  "110001",
    "!M":  "110001",
    "-D":  "001111",
    "-A":  "110011",
    "-M":  "110011",

    # Increment / decrement
    "D+1": "011111",
    "A+1": "110111",
    "M+1": "110111",
    "D-1": "001110",
    "A-1": "110010",
    "M-1": "110010",

    # Two operands
    "D+A": "000010",
    "D+M": "000010",
    "D-A": "010011",
    "D-M": "010011",
    "A-D": "000111",
    "M-D": "000111",
    "D&A": "000000",
    "D&M": "000000",
    "D|A": "010101",
    "D|M": "010101",
})


# =============================================================================
# Jump Table
# =============================================================================
# Bit positions: j1 (out < 0), j2 (out = 0), j3 (out > 0).
# =============================================================================

JUMP_TABLE: Mapping[str, str] = MappingProxyType({
    "":    "000",
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
})


# =============================================================================
# Predefined Symbols
# =============================================================================
# Virtual registers, the VM pointer aliases that overlap them, and the
# memory-mapped I/O base addresses.
# =============================================================================

PREDEFINED_SYMBOLS: Mapping[str, int] = MappingProxyType({
    "SP":   0x0000,
    "LCL":  0x0001,
    "ARG":  0x0002,
    "THIS": 0x0003,
    "THAT": 0x0004,
    **{f"R{i}": i for i in range(16)},
    "SCREEN": 0x4000,
    "KBD":    0x6000,
})


# =============================================================================
# Lookup Functions
# =============================================================================

def _lookup(table: Mapping[str, str], field: str, mnemonic: str) -> str:
    try:
        return table[mnemonic]
    except KeyError:
        raise UnknownMnemonicError(
            field, mnemonic, similar=_find_similar(table, mnemonic)
        ) from None


def lookup_dest(mnemonic: str) -> str:
    """
    Get the 3-bit destination code for a dest field.

    Args:
        mnemonic: The dest field text ("" when the instruction has no '=')

    Returns:
        Three-character binary string

    Raises:
        UnknownMnemonicError: If the field is not in DEST_TABLE
    """
    return _lookup(DEST_TABLE, "dest", mnemonic)


def lookup_comp(mnemonic: str) -> str:
    """
    Get the 6-bit ALU control code for a comp field.

    Raises:
        UnknownMnemonicError: If the field is not in COMP_TABLE
    """
    return _lookup(COMP_TABLE, "comp", mnemonic)


def lookup_jump(mnemonic: str) -> str:
    """
    Get the 3-bit jump code for a jump field.

    Raises:
        UnknownMnemonicError: If the field is not in JUMP_TABLE
    """
    return _lookup(JUMP_TABLE, "jump", mnemonic)


def uses_memory_operand(comp: str) -> bool:
    """Return True if a comp mnemonic reads M (sets the a-bit)."""
    return MEMORY_OPERAND in comp


# =============================================================================
# Suggestions for Error Hints
# =============================================================================

def _find_similar(table: Mapping[str, str], name: str) -> list[str]:
    """
    Find table entries with names close to an unknown mnemonic.

    Catches case slips ("amd") and single-character typos ("D+Q").
    """
    if not name:
        return []

    name_upper = name.upper()
    similar = []

    for entry in table:
        if not entry:
            continue
        if entry == name_upper or (
            abs(len(entry) - len(name)) <= 1
            and _edit_distance(name_upper, entry) <= 1
        ):
            similar.append(entry)

    similar.sort(key=lambda entry: entry != name_upper)
    return similar[:3]


def _edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance between two strings."""
    if len(s1) < len(s2):
        s1, s2 = s2, s1

    distances = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        new_distances = [i + 1]
        for j, c2 in enumerate(s2):
            if c1 == c2:
                new_distances.append(distances[j])
            else:
                new_distances.append(
                    1 + min(distances[j], distances[j + 1], new_distances[-1])
                )
        distances = new_distances
    return distances[-1]
