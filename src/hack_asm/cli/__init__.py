"""
hackasm Command-Line Interface
==============================

- **hackasm**: Hack assembler

Implemented as a Click-based CLI application with help text and
consistent exit codes.
"""

__all__ = ["hackasm"]
