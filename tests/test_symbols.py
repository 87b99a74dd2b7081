# =============================================================================
# test_symbols.py - Symbol Table Tests
# =============================================================================
# Tests for the shared symbol table.
#
# Test coverage includes:
#   - Predefined symbols present at construction
#   - Label insertion (first declaration wins)
#   - Sequential variable allocation from 16
#   - Case sensitivity
# =============================================================================

from hack_asm.assembler.symbols import SymbolKind, SymbolTable
from hack_asm.assembler.tables import PREDEFINED_SYMBOLS


class TestPredefined:
    """Test the initial contents of a new table."""

    def test_all_predefined_present(self):
        """Every predefined name is in a fresh table."""
        table = SymbolTable()
        for name, value in PREDEFINED_SYMBOLS.items():
            assert table[name] == value
            assert table.get(name).kind is SymbolKind.PREDEFINED

    def test_resolving_predefined_does_not_allocate(self):
        """Predefined names never consume a variable slot."""
        table = SymbolTable()
        for name, value in PREDEFINED_SYMBOLS.items():
            assert table.resolve(name) == value
        assert table.next_variable_address == 16
        assert table.symbols_of_kind(SymbolKind.VARIABLE) == []

    def test_fresh_tables_are_independent(self):
        """Variables in one table do not appear in another."""
        first = SymbolTable()
        first.resolve("x")
        second = SymbolTable()
        assert "x" not in second
        assert second.resolve("y") == 16


class TestLabels:
    """Test label definition."""

    def test_define_label(self):
        """A new label is stored with its address."""
        table = SymbolTable()
        assert table.define_label("LOOP", 7, line=3)
        sym = table.get("LOOP")
        assert sym.value == 7
        assert sym.kind is SymbolKind.LABEL
        assert sym.line == 3

    def test_first_declaration_wins(self):
        """Redeclaring a label keeps the first address."""
        table = SymbolTable()
        table.define_label("LOOP", 2)
        assert not table.define_label("LOOP", 9)
        assert table["LOOP"] == 2

    def test_label_cannot_override_predefined(self):
        """A label named like a predefined symbol is ignored."""
        table = SymbolTable()
        assert not table.define_label("SCREEN", 5)
        assert table["SCREEN"] == 16384

    def test_labels_do_not_move_variable_counter(self):
        """Label insertion leaves the variable counter alone."""
        table = SymbolTable()
        table.define_label("A1", 0)
        table.define_label("B1", 4)
        assert table.next_variable_address == 16


class TestVariables:
    """Test variable allocation."""

    def test_first_variable_at_16(self):
        """The first new name gets RAM 16."""
        table = SymbolTable()
        assert table.resolve("counter") == 16

    def test_sequential_allocation(self):
        """New names get strictly increasing addresses."""
        table = SymbolTable()
        addresses = [table.resolve(name) for name in ("i", "j", "k", "sum")]
        assert addresses == [16, 17, 18, 19]

    def test_reuse_keeps_address(self):
        """Seeing a variable again neither moves it nor allocates."""
        table = SymbolTable()
        table.resolve("i")
        table.resolve("j")
        assert table.resolve("i") == 16
        assert table.next_variable_address == 18

    def test_label_resolves_without_allocation(self):
        """A known label is returned as-is."""
        table = SymbolTable()
        table.define_label("END", 42)
        assert table.resolve("END") == 42
        assert table.next_variable_address == 16

    def test_case_sensitive(self):
        """'loop' and 'LOOP' are different symbols."""
        table = SymbolTable()
        table.define_label("LOOP", 3)
        assert table.resolve("loop") == 16
        assert table["LOOP"] == 3

    def test_variable_records_kind_and_line(self):
        """Allocated variables are tagged with their first reference."""
        table = SymbolTable()
        table.resolve("x", line=12)
        sym = table.get("x")
        assert sym.kind is SymbolKind.VARIABLE
        assert sym.line == 12

    def test_as_dict(self):
        """as_dict includes every kind."""
        table = SymbolTable()
        table.define_label("LOOP", 1)
        table.resolve("x")
        d = table.as_dict()
        assert d["LOOP"] == 1
        assert d["x"] == 16
        assert d["KBD"] == 24576
        assert len(d) == len(table) == 25
