"""
hackasm - Hack Assembler Command-Line Interface
===============================================

This module implements the command-line interface for the Hack assembler.

Usage Examples
--------------
Basic assembly (writes Max.hack next to the source):
    $ hackasm Max.asm

With output file:
    $ hackasm Max.asm -o build/Max.hack

Also write the symbol table and a listing:
    $ hackasm Max.asm -s Max.sym -l Max.lst

Verbose mode:
    $ hackasm -v Max.asm
"""

import logging
from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.assembler import Assembler
from hack_asm.cli.errors import handle_cli_exception


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .hack file (default: input with .hack suffix)",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file (labels and variables)",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_file: Path,
    output: Optional[Path],
    symbols: Optional[Path],
    listing: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly source into Hack machine code.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    The output has one line per instruction, each a 16-character string
    of 0s and 1s. Nothing is written if any instruction fails to assemble.
    The output path may not be the input file itself, so a .hack input
    needs -o.

    \b
    Examples:
        hackasm Max.asm              # Outputs Max.hack
        hackasm Max.asm -o out.hack  # Specify output file
        hackasm Max.asm -s Max.sym   # Also write symbol table
    """
    setup_logging(verbose)

    output_file = output if output is not None else input_file.with_suffix(".hack")

    asm = Assembler(verbose=verbose)

    try:
        if output_file.resolve() == input_file.resolve():
            raise click.BadParameter(
                f"output would overwrite the input file {input_file}",
                param_hint="'-o' / '--output'",
            )

        code = asm.assemble_file(input_file)

        asm.write_hack(output_file)
        if verbose:
            click.echo(f"Wrote {len(code)} instructions to {output_file}")

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if listing:
            asm.write_listing(listing)
            if verbose:
                click.echo(f"Wrote listing to {listing}")

        if verbose:
            table = asm.get_symbol_table()
            click.echo(
                f"Assembly complete: {len(code)} instructions, "
                f"variables end at {table.next_variable_address}"
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
