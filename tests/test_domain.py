"""Tests for domain primitives."""

import pytest
from pydantic import ValidationError

from yaml2ddl.domain import (
    Column,
    Dictionary,
    DomainRegistry,
    IndexMembership,
    Reference,
    Table,
    merge_attributes,
)
from yaml2ddl.domain.placeholders import (
    find_path_placeholders,
    substitute_column_placeholder,
    substitute_path_placeholders,
)
from yaml2ddl.errors import UnresolvedPlaceholderError


class TestDictionary:
    """Tests for Dictionary translation."""

    def test_translate_single_segment(self):
        dictionary = Dictionary(entries={"word1": "AAA"})
        assert dictionary.translate("word1") == "AAA"

    def test_translate_segments_in_order(self):
        dictionary = Dictionary(entries={"word1": "AAA", "word2": "BBB"})
        assert dictionary.translate("word1.word2") == "AAABBB"
        assert dictionary.translate("word2.word1") == "BBBAAA"

    def test_unknown_segment_passes_through(self):
        dictionary = Dictionary(entries={"word1": "AAA"})
        assert dictionary.translate("word1.word4") == "AAAword4"

    def test_no_partial_match_within_segment(self):
        dictionary = Dictionary(entries={"word": "W"})
        assert dictionary.translate("word1") == "word1"

    def test_empty_input(self):
        assert Dictionary(entries={"a": "b"}).translate("") == ""
        assert Dictionary().translate(None) == ""

    def test_contains_and_len(self):
        dictionary = Dictionary(entries={"word1": "AAA"})
        assert "word1" in dictionary
        assert "word2" not in dictionary
        assert len(dictionary) == 1


class TestDomainRegistry:
    """Tests for DomainRegistry and attribute merging."""

    def test_resolve_existing_domain(self):
        registry = DomainRegistry(domains={"domain1": {"type": "number", "size": 10}})
        assert registry.resolve("domain1") == {"type": "number", "size": 10}

    def test_resolve_missing_domain(self):
        registry = DomainRegistry(domains={"domain1": {"type": "number"}})
        assert registry.resolve("domain2") is None
        assert registry.resolve(None) is None

    def test_resolve_returns_copy(self):
        registry = DomainRegistry(domains={"domain1": {"type": "number"}})
        template = registry.resolve("domain1")
        assert template is not None
        template["type"] = "varchar"
        assert registry.resolve("domain1") == {"type": "number"}

    def test_merge_override_wins(self):
        base = {"type": "number", "size": 10, "nullable": False}
        override = {"size": 4, "comment": "x"}
        merged = merge_attributes(base, override)
        assert merged == {"type": "number", "size": 4, "nullable": False, "comment": "x"}

    def test_merge_does_not_modify_inputs(self):
        base = {"type": "number"}
        override = {"type": "date"}
        merge_attributes(base, override)
        assert base == {"type": "number"}
        assert override == {"type": "date"}


class TestPlaceholders:
    """Tests for check expression placeholder substitution."""

    def test_column_placeholder_replaced(self):
        assert substitute_column_placeholder("nvl(<name>, 0) <= 1000", "TEST1") == (
            "nvl(TEST1, 0) <= 1000"
        )

    def test_column_without_placeholder_prefixed(self):
        assert substitute_column_placeholder(">= 100", "PROP") == "PROP >= 100"

    def test_path_placeholders(self):
        names = {"word2.word3": "BBBCCC", "word3.GGG": "CCCGGG"}
        result = substitute_path_placeholders("<word2.word3> = <word3.GGG>", names.get)
        assert result == "BBBCCC = CCCGGG"

    def test_unresolved_path_becomes_empty(self):
        assert substitute_path_placeholders("<nope> > 0", lambda _: None) == " > 0"

    def test_find_path_placeholders(self):
        assert find_path_placeholders("<a.b> < <c> and d") == ["a.b", "c"]
        assert find_path_placeholders("x > 0") == []


class TestIndexMembership:
    """Tests for IndexMembership."""

    def test_invalid_key(self):
        with pytest.raises(ValidationError):
            IndexMembership(key="idx1", rank=1)


class TestReference:
    """Tests for Reference ordering."""

    def test_defaults(self):
        ref = Reference(table_index=0, column="TEST1", remote_column="TEST1")
        assert ref.order == 0

    def test_ordered_by_order_only(self):
        first = Reference(table_index=1, order=999, column="A")
        second = Reference(table_index=0, order=0, column="B")
        assert sorted([first, second]) == [second, first]


class TestColumn:
    """Tests for Column."""

    def test_name_strips_separators(self):
        column = Column(logical_name="word1.word2")
        assert column.name == "word1word2"
        assert Column().name == ""

    def test_defaults(self):
        column = Column(physical_name="C")
        assert column.nullable is True
        assert column.comment == ""
        assert column.checks == []
        assert column.references == ()
        assert not column.is_primary_key

    def test_checks_bind_physical_name(self):
        column = Column(
            physical_name="PROP",
            check_expressions=(">= 100", "nvl(<name>, 0) <= 1000"),
        )
        assert column.checks == ["PROP >= 100", "nvl(PROP, 0) <= 1000"]

    def test_indexes_view(self):
        column = Column(
            physical_name="col1",
            index_memberships=(
                IndexMembership(key="index2", rank=2),
                IndexMembership(key="index1", rank=1),
            ),
        )
        assert column.indexes == {"index2": 2, "index1": 1}
        assert column.index_rank("index1") == 1
        assert column.index_rank("index3") is None

    def test_frozen(self):
        column = Column(physical_name="C")
        with pytest.raises(ValidationError):
            column.physical_name = "D"  # type: ignore[misc]


def _column(pname, logical=None, pkey=None, indexes=None, refs=()):
    return Column(
        logical_name=logical,
        physical_name=pname,
        primary_key_rank=pkey,
        index_memberships=tuple(
            IndexMembership(key=k, rank=v) for k, v in (indexes or {}).items()
        ),
        references=tuple(refs),
    )


class TestTable:
    """Tests for Table derivations."""

    def test_primary_key_sorted_by_rank(self):
        table = Table(
            columns=(
                _column("AAABBB"),
                _column("BBBCCC", pkey=2),
                _column("CCCGGG", pkey=1),
            )
        )
        assert [c.physical_name for c in table.primary_key()] == ["CCCGGG", "BBBCCC"]

    def test_primary_key_stable_on_ties(self):
        table = Table(columns=(_column("A", pkey=1), _column("B", pkey=1)))
        assert [c.physical_name for c in table.primary_key()] == ["A", "B"]

    def test_rank_zero_is_part_of_primary_key(self):
        table = Table(columns=(_column("A", pkey=1), _column("B", pkey=0)))
        assert [c.physical_name for c in table.primary_key()] == ["B", "A"]

    def test_index_keys_and_order(self):
        table = Table(
            columns=(
                _column("col1", indexes={"index2": 2, "index1": 1}),
                _column("col2", indexes={"index2": 1}),
                _column("col3"),
            )
        )
        assert table.index_keys() == ["index1", "index2"]
        assert [c.physical_name for c in table.index("index1")] == ["col1"]
        assert [c.physical_name for c in table.index("index2")] == ["col2", "col1"]
        assert table.index("index3") == []

    def test_index_stable_on_ties(self):
        table = Table(
            columns=(
                _column("B", indexes={"index1": 1}),
                _column("A", indexes={"index1": 1}),
            )
        )
        assert [c.physical_name for c in table.index("index1")] == ["B", "A"]

    def test_table_references_absent(self):
        assert Table().table_references() is None
        assert Table(refers=()).table_references() == []

    def test_references_to_sorted_by_order(self):
        table = Table(
            columns=(
                _column("TEST1", refs=[Reference(table_index=1, order=999, column="TEST1")]),
                _column("TEST2", refs=[Reference(table_index=1, column="TEST2")]),
                _column("TEST3", refs=[Reference(table_index=0, column="TEST3")]),
            )
        )
        refs = table.references_to(1)
        assert [r.column for r in refs] == ["TEST2", "TEST1"]
        assert refs[1].order == 999
        assert [r.column for r in table.references_to(0)] == ["TEST3"]
        assert table.references_to(5) == []

    def test_references_to_stable_on_ties(self):
        table = Table(
            columns=(
                _column("TEST2", refs=[Reference(table_index=0, order=1, column="TEST2")]),
                _column("TEST1", refs=[Reference(table_index=0, order=1, column="TEST1")]),
            )
        )
        assert [r.column for r in table.references_to(0)] == ["TEST2", "TEST1"]

    def test_checks_resolve_logical_paths(self):
        table = Table(
            columns=(
                _column("BBBCCC", logical="word2.word3"),
                _column("CCCGGG", logical="word3.GGG"),
            ),
            check_expressions=("<word2.word3> = <word3.GGG>",),
        )
        assert table.checks() == ["BBBCCC = CCCGGG"]

    def test_unresolved_check_is_permissive(self):
        table = Table(
            columns=(_column("AAA", logical="word1"),),
            check_expressions=("<word9> > 0",),
        )
        assert table.checks() == [" > 0"]
        assert table.unresolved_placeholders() == ["word9"]

    def test_unresolved_check_strict(self):
        table = Table(
            columns=(_column("AAA", logical="word1"),),
            check_expressions=("<word9> > <word1>",),
        )
        with pytest.raises(UnresolvedPlaceholderError) as exc_info:
            table.checks(strict=True)
        assert exc_info.value.paths == ["word9"]

    def test_sql_table_name(self):
        assert Table(physical_name="T").sql_table_name == "T"
        assert Table().sql_table_name == ""
