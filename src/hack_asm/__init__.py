"""
hackasm - Assembler for the Hack Computer
=========================================

This package translates programs written in Hack assembly language into
the binary machine code executed by the 16-bit Hack computer from
"The Elements of Computing Systems" (Nand2Tetris).

Main Components
---------------
- **assembler**: Two-pass Hack assembler
    Converts assembly source files (.asm) to machine code text (.hack)

- **cli**: Command-line tool (hackasm)

Quick Start
-----------
Assemble a program:
    >>> from hack_asm import Assembler
    >>> asm = Assembler()
    >>> code = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or use the command-line tool:
    $ hackasm Max.asm -o Max.hack

Version History
---------------
1.0.0 - Initial release
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_asm.assembler import Assembler, assemble, assemble_file
from hack_asm.errors import (
    HackError,
    AssemblerError,
    UnknownMnemonicError,
    AddressRangeError,
    SourceLocation,
)

__all__ = [
    # Version info
    "__version__",
    # Assembler
    "Assembler",
    "assemble",
    "assemble_file",
    # Exception hierarchy
    "HackError",
    "AssemblerError",
    "UnknownMnemonicError",
    "AddressRangeError",
    "SourceLocation",
]
