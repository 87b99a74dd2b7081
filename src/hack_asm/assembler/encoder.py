"""
Instruction Encoder (Pass 2)
============================

The second pass turns each FilteredInstruction into a 16-character
binary string.

A-instructions
--------------
``@value`` where value is either a non-negative decimal literal or a
symbol. Symbols are resolved through the shared table; unknown symbols
become variables (RAM 16, 17, ...). The result is written as a
zero-padded 16-bit binary string::

    @21        ->  0000000000010101
    @LOOP      ->  address of label LOOP
    @counter   ->  0000000000010000   (first variable)

C-instructions
--------------
Everything else, with grammar ``[dest=]comp[;jump]``::

    D=D+A      ->  111 0 000010 010 000
    0;JMP      ->  111 0 101010 000 111
    AM=M-1     ->  111 1 110010 101 000

Field lookups that fail raise UnknownMnemonicError, and A-values of
65536 or more raise AddressRangeError. The encoder keeps
going so that every bad line is reported, then raises one AssemblerError
for the whole pass.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from hack_asm.errors import (
    AddressRangeError,
    AssemblerError,
    ErrorCollector,
    UnknownMnemonicError,
    count_errors,
)
from hack_asm.assembler.resolver import FilteredInstruction
from hack_asm.assembler.symbols import SymbolTable
from hack_asm.assembler.tables import (
    C_PREFIX,
    MAX_ADDRESS,
    WORD_BITS,
    lookup_comp,
    lookup_dest,
    lookup_jump,
    uses_memory_operand,
)

logger = logging.getLogger(__name__)

A_PREFIX = "@"


@dataclass(frozen=True)
class ComputeFields:
    """The three text fields of a C-instruction (empty when omitted)."""
    dest: str
    comp: str
    jump: str


def is_address_instruction(text: str) -> bool:
    """Return True for ``@...`` instructions."""
    return text.startswith(A_PREFIX)


def parse_compute(text: str) -> ComputeFields:
    """
    Split a C-instruction into dest, comp and jump.

    Only the first two parts of each split are used, so ``A=B=C``
    keeps ``A`` as dest and ``B`` as comp.
    """
    parts = text.split("=")
    if len(parts) == 1:
        dest, comp_and_jump = "", parts[0]
    else:
        dest, comp_and_jump = parts[0], parts[1]

    parts = comp_and_jump.split(";")
    if len(parts) == 1:
        comp, jump = parts[0], ""
    else:
        comp, jump = parts[0], parts[1]

    return ComputeFields(dest, comp, jump)


def encode_address(value: int) -> str:
    """Encode an integer as a 16-bit zero-padded binary string."""
    return format(value, f"0{WORD_BITS}b")


def encode_compute(fields: ComputeFields) -> str:
    """
    Encode parsed C-instruction fields.

    Raises:
        UnknownMnemonicError: If any field is not in its table
    """
    a_bit = "1" if uses_memory_operand(fields.comp) else "0"
    return (
        C_PREFIX
        + a_bit
        + lookup_comp(fields.comp)
        + lookup_dest(fields.dest)
        + lookup_jump(fields.jump)
    )


class InstructionEncoder:
    """
    Pass 2: encode filtered instructions against a symbol table.

    The symbol table must already hold the labels from pass 1; this pass
    only adds variables to it.

    Usage:
        encoder = InstructionEncoder(symbols)
        code = encoder.encode(instructions)
    """

    def __init__(self, symbols: SymbolTable, max_errors: int = 100):
        self._symbols = symbols
        self._errors = ErrorCollector(max_errors=max_errors)

    def encode(self, instructions: Iterable[FilteredInstruction]) -> list[str]:
        """
        Encode every instruction, in order.

        Returns:
            One 16-character binary string per instruction

        Raises:
            AssemblerError: If any field lookup failed or any address was
                too wide. The message holds a report of every failure in
                the pass.
        """
        self._errors.clear()
        code: list[str] = []

        for inst in instructions:
            try:
                code.append(self.encode_instruction(inst))
            except UnknownMnemonicError as e:
                self._errors.add(e.at(inst.location, inst.text))
            except AddressRangeError as e:
                self._errors.add(e)

        if self._errors:
            raise AssemblerError(
                f"Assembly failed with {count_errors(len(self._errors))}:\n\n"
                f"{self._errors.report()}"
            )

        logger.debug(
            "Pass 2: encoded %d instructions, next variable at %d",
            len(code), self._symbols.next_variable_address,
        )
        return code

    def encode_instruction(self, inst: FilteredInstruction) -> str:
        """Encode a single filtered instruction."""
        if is_address_instruction(inst.text):
            return self._encode_a(inst)
        return encode_compute(parse_compute(inst.text))

    def _encode_a(self, inst: FilteredInstruction) -> str:
        field = inst.text[len(A_PREFIX):]

        if field.isascii() and field.isdigit():
            value = int(field)
        else:
            value = self._symbols.resolve(field, inst.location.line)

        if value >= 1 << WORD_BITS:
            raise AddressRangeError(value, inst.location, inst.text)
        if value > MAX_ADDRESS:
            logger.warning(
                "%s: address %d does not fit in 15 bits", inst.location, value
            )

        return encode_address(value)
