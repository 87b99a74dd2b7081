"""
Hack Assembler
==============

This package translates Hack assembly language (the symbolic machine
language of the 16-bit Hack computer) into Hack machine code: one
16-character string of '0' and '1' per instruction.

Main Components
---------------
- **Assembler**: Main class that runs both passes and writes output files
- **LabelResolver**: Pass 1, strips comments and records labels
- **InstructionEncoder**: Pass 2, allocates variables and encodes
- **SymbolTable**: Shared name to address mapping
- **tables**: Static dest/comp/jump tables and predefined symbols

Assembly Process
----------------
1. **Pass 1 (LabelResolver)**:
   - Remove ``//`` comments and blank lines
   - Record ``(LABEL)`` declarations at the next instruction's address
   - Produce the filtered instruction list

2. **Pass 2 (InstructionEncoder)**:
   - ``@value`` instructions: resolve symbols, allocating variables from
     RAM address 16
   - ``dest=comp;jump`` instructions: look up each field and pack
     ``111accccccdddjjj``

Example Usage
-------------
>>> from hack_asm.assembler import assemble
>>> assemble("@2\\nD=A\\n@3\\nD=D+A\\n@0\\nM=D")
['0000000000000010', '1110110000010000', '0000000000000011', '1110000010010000', '0000000000000000', '1110001100001000']
"""

from hack_asm.assembler.assembler import Assembler, assemble, assemble_file
from hack_asm.assembler.resolver import (
    FilteredInstruction,
    LabelResolver,
    parse_label,
    strip_comment,
)
from hack_asm.assembler.encoder import (
    ComputeFields,
    InstructionEncoder,
    encode_address,
    encode_compute,
    parse_compute,
)
from hack_asm.assembler.symbols import Symbol, SymbolKind, SymbolTable
from hack_asm.assembler.tables import (
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    PREDEFINED_SYMBOLS,
    lookup_comp,
    lookup_dest,
    lookup_jump,
)

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Pass 1
    "FilteredInstruction",
    "LabelResolver",
    "parse_label",
    "strip_comment",
    # Pass 2
    "ComputeFields",
    "InstructionEncoder",
    "encode_address",
    "encode_compute",
    "parse_compute",
    # Symbols
    "Symbol",
    "SymbolKind",
    "SymbolTable",
    # Tables
    "COMP_TABLE",
    "DEST_TABLE",
    "JUMP_TABLE",
    "PREDEFINED_SYMBOLS",
    "lookup_comp",
    "lookup_dest",
    "lookup_jump",
]
