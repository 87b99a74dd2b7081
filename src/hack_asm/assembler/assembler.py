"""
Hack Assembler - Main Interface
===============================

This module provides the Assembler class, the primary interface for
translating Hack assembly into Hack machine code. It runs the label
resolver and the instruction encoder over one shared symbol table.

Example Usage
-------------
>>> from hack_asm.assembler import Assembler
>>>
>>> asm = Assembler()
>>> asm.assemble_string('''
... (LOOP)
...     @LOOP
...     0;JMP
... ''')
['0000000000000000', '1110101010000111']
>>>
>>> asm.write_hack("Loop.hack")

Command-Line Usage
------------------
    $ hackasm Prog.asm -o Prog.hack -s Prog.sym -l Prog.lst

Every call to an assemble method starts from a fresh symbol table, so
assembling the same source twice gives identical output.
"""

import logging
from pathlib import Path
from typing import Iterable

from hack_asm.assembler.encoder import InstructionEncoder
from hack_asm.assembler.resolver import FilteredInstruction, LabelResolver
from hack_asm.assembler.symbols import SymbolKind, SymbolTable
from hack_asm.errors import AssemblerError, SourceLocation

logger = logging.getLogger(__name__)

SOURCE_ENCODING = "ascii"


class Assembler:
    """
    Main Hack assembler class.

    After a successful assemble call the machine code, symbol table and
    listing of that run stay available until the next call.

    Attributes:
        verbose: If True, log progress at INFO level instead of DEBUG
    """

    def __init__(self, verbose: bool = False):
        self._verbose = verbose
        self._symbols = SymbolTable()
        self._instructions: list[FilteredInstruction] = []
        self._code: list[str] = []

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_lines(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Assemble a sequence of source lines.

        The pipeline is:
        1. Pass 1 (LabelResolver): strip comments, record labels
        2. Pass 2 (InstructionEncoder): allocate variables, encode

        Args:
            lines: Source lines without line terminators
            filename: Virtual filename for error messages

        Returns:
            One 16-character binary string per instruction

        Raises:
            AssemblerError: If any instruction field is unknown. Nothing from
                the failed run is kept.
        """
        symbols = SymbolTable()

        instructions = LabelResolver(symbols).resolve(lines, filename)
        self._log(f"Resolved {len(instructions)} instructions in {filename}")

        code = InstructionEncoder(symbols).encode(instructions)
        self._log(f"Encoded {len(code)} instructions")

        self._symbols = symbols
        self._instructions = instructions
        self._code = code
        return list(code)

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages

        Returns:
            One 16-character binary string per instruction
        """
        return self.assemble_lines(source.splitlines(), filename)

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        The whole file is read before pass 1 starts. Source is ASCII.

        Raises:
            AssemblerError: If assembly fails or the file is not ASCII
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        self._log(f"Assembling {filepath}...")

        data = filepath.read_bytes()
        try:
            source = data.decode(SOURCE_ENCODING)
        except UnicodeDecodeError as e:
            line_start = data.rfind(b"\n", 0, e.start) + 1
            location = SourceLocation(
                str(filepath),
                data.count(b"\n", 0, e.start) + 1,
                e.start - line_start + 1,
            )
            raise AssemblerError(
                f"byte 0x{data[e.start]:02X} is not valid {SOURCE_ENCODING}",
                location=location,
                hint="Hack assembly source must be plain ASCII text",
            ) from None

        return self.assemble_string(source, str(filepath))

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_code(self) -> list[str]:
        """Return the machine code lines from the last run."""
        return list(self._code)

    def get_symbols(self) -> dict[str, int]:
        """Return the symbol table from the last run as name to address."""
        return self._symbols.as_dict()

    def get_symbol_table(self) -> SymbolTable:
        """Return the SymbolTable object from the last run."""
        return self._symbols

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            Listing with ROM address, machine code, source line and text,
            followed by the labels and variables of the run.
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 60)
        lines.append("")
        lines.append("Addr   Code              Line  Source")
        lines.append("-" * 60)
        for inst, word in zip(self._instructions, self._code):
            lines.append(
                f"{inst.address:5d}  {word}  {inst.location.line:4d}  {inst.text}"
            )
        lines.append("")
        lines.append("Symbol Table")
        lines.append("-" * 30)
        for kind in (SymbolKind.LABEL, SymbolKind.VARIABLE):
            for sym in self._symbols.symbols_of_kind(kind):
                lines.append(f"{sym.name:20s} = {sym.value:5d}  ({kind})")
        return "\n".join(lines)

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write the machine code, one 16-character line per instruction.

        Args:
            filepath: Output file path
        """
        text = "".join(f"{word}\n" for word in self._code)
        Path(filepath).write_text(text, encoding="ascii")
        self._log(f"Wrote {len(self._code)} instructions to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write symbol table file.

        Format: name, decimal address and kind, one per line. Predefined
        symbols are left out since they are the same for every program.
        """
        with open(filepath, "w") as f:
            f.write("# Symbol table\n")
            f.write("# Generated by hackasm\n")
            for kind in (SymbolKind.LABEL, SymbolKind.VARIABLE):
                for sym in self._symbols.symbols_of_kind(kind):
                    f.write(f"{sym.name} {sym.value} {kind}\n")
        self._log(f"Wrote symbols to {filepath}")

    def write_listing(self, filepath: str | Path) -> None:
        """Write assembly listing file."""
        with open(filepath, "w") as f:
            f.write(self.get_listing())
            f.write("\n")
        self._log(f"Wrote listing to {filepath}")

    def _log(self, message: str) -> None:
        logger.log(logging.INFO if self._verbose else logging.DEBUG, message)


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>") -> list[str]:
    """
    Convenience function to assemble source code.

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_string(source, filename)


def assemble_file(filepath: str | Path) -> list[str]:
    """
    Convenience function to assemble a file.

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_file(filepath)
