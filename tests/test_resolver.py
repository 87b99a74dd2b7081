# =============================================================================
# test_resolver.py - Label Resolver (Pass 1) Tests
# =============================================================================
# Tests for comment stripping, label detection and instruction filtering.
#
# Test coverage includes:
#   - Comments and blank lines consume no address
#   - Label addresses point at the next instruction
#   - First declaration of a label wins
#   - Label names keep whitespace and lose inner parentheses
#   - Malformed labels pass through as instructions
#   - Source locations on filtered instructions
# =============================================================================

from hack_asm.assembler.resolver import LabelResolver, parse_label, strip_comment
from hack_asm.assembler.symbols import SymbolKind, SymbolTable


def resolve(source: str):
    """Run pass 1 on a source string; return (instructions, symbols)."""
    symbols = SymbolTable()
    instructions = LabelResolver(symbols).resolve(source.splitlines(), "<test>")
    return instructions, symbols


# =============================================================================
# Helper Function Tests
# =============================================================================

class TestStripComment:
    """Test comment and whitespace removal."""

    def test_plain_instruction(self):
        assert strip_comment("D=A") == "D=A"

    def test_surrounding_whitespace(self):
        assert strip_comment("   @17 \t") == "@17"

    def test_trailing_comment(self):
        assert strip_comment("D=D+A   // add") == "D=D+A"

    def test_comment_only(self):
        assert strip_comment("// just a comment") == ""

    def test_first_marker_wins(self):
        """Everything from the first // is dropped."""
        assert strip_comment("0;JMP // a // b") == "0;JMP"

    def test_single_slash_kept(self):
        """A lone slash is not a comment."""
        assert strip_comment("D=D/A") == "D=D/A"


class TestParseLabel:
    """Test label declaration detection."""

    def test_simple_label(self):
        assert parse_label("(LOOP)") == "LOOP"

    def test_not_a_label(self):
        assert parse_label("@LOOP") is None
        assert parse_label("0;JMP") is None

    def test_internal_whitespace_kept(self):
        """Whitespace inside the parentheses is kept."""
        assert parse_label("( LOOP )") == " LOOP "

    def test_inner_parentheses_removed(self):
        """Every parenthesis inside the outer pair is deleted."""
        assert parse_label("((A)(B))") == "AB"

    def test_separate_groups_joined(self):
        assert parse_label("(A) (B)") == "A B"

    def test_empty_parentheses(self):
        assert parse_label("()") == ""
        assert parse_label("(())") == ""

    def test_unbalanced_is_not_label(self):
        assert parse_label("(LOOP") is None
        assert parse_label("LOOP)") is None


# =============================================================================
# Pass 1 Tests
# =============================================================================

class TestFiltering:
    """Test which lines become instructions."""

    def test_blank_and_comment_lines_dropped(self):
        """Only real instructions remain, with consecutive addresses."""
        instructions, _ = resolve(
            "// header\n"
            "\n"
            "   @2\n"
            "   \n"
            "D=A // load\n"
        )
        assert [i.text for i in instructions] == ["@2", "D=A"]
        assert [i.address for i in instructions] == [0, 1]

    def test_labels_not_emitted(self):
        """Label declarations produce no instruction."""
        instructions, _ = resolve("(START)\n@START\n0;JMP")
        assert [i.text for i in instructions] == ["@START", "0;JMP"]

    def test_empty_source(self):
        instructions, symbols = resolve("")
        assert instructions == []
        assert symbols.symbols_of_kind(SymbolKind.LABEL) == []

    def test_malformed_label_passes_through(self):
        """A broken label is left for pass 2 to reject."""
        instructions, symbols = resolve("(LOOP\n@1")
        assert [i.text for i in instructions] == ["(LOOP", "@1"]
        assert "LOOP" not in symbols
        assert "(LOOP" not in symbols

    def test_source_location(self):
        """Line and column point at the start of the instruction."""
        instructions, _ = resolve("// c\n\n    M=D\n")
        loc = instructions[0].location
        assert loc.filename == "<test>"
        assert loc.line == 3
        assert loc.column == 5


class TestLabelAddresses:
    """Test label address assignment."""

    def test_label_at_start(self):
        _, symbols = resolve("(LOOP)\n@LOOP\n0;JMP")
        assert symbols["LOOP"] == 0

    def test_label_after_instructions(self):
        """Address is the index of the following instruction."""
        _, symbols = resolve("@0\nD=A\n(NEXT)\n@1")
        assert symbols["NEXT"] == 2

    def test_comments_between_do_not_count(self):
        _, symbols = resolve("@0\n// skip\n\n(HERE) \n// more\nD=A")
        assert symbols["HERE"] == 1

    def test_consecutive_labels_share_address(self):
        _, symbols = resolve("@0\n(A1)\n(B1)\nD=A")
        assert symbols["A1"] == 1
        assert symbols["B1"] == 1

    def test_label_at_end(self):
        """A trailing label points one past the last instruction."""
        _, symbols = resolve("@0\nD=A\n(END)")
        assert symbols["END"] == 2

    def test_duplicate_label_keeps_first(self):
        _, symbols = resolve("(L)\n@0\n@1\n(L)\n@2")
        assert symbols["L"] == 0

    def test_label_line_recorded(self):
        _, symbols = resolve("@0\n(L)\nD=A")
        assert symbols.get("L").line == 2

    def test_label_name_normalisation(self):
        _, symbols = resolve("( SPACED )\n((A)(B))\n(C) (D)\n@0")
        assert symbols[" SPACED "] == 0
        assert symbols["AB"] == 0
        assert symbols["C D"] == 0
        assert "(A)(B)" not in symbols

    def test_labels_do_not_allocate_variables(self):
        _, symbols = resolve("(A1)\n@0\n(B1)\n@1")
        assert symbols.next_variable_address == 16
