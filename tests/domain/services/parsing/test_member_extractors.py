#!/usr/bin/env python3

"""Unit tests for the section member extractors."""

import pytest

from dumpcs_catalog.domain.models.catalog import MemberKind, TypeInfo
from dumpcs_catalog.domain.services.parsing import (
    ParserState,
    Section,
    count_parameters,
    extract_enum_member,
    extract_method_member,
    extract_plain_member,
    parse_method_declaration,
)


@pytest.fixture
def methods_state() -> ParserState:
    """State positioned in the Methods section of type ``Foo``."""
    state = ParserState()
    state.begin_type(TypeInfo(name="Foo"))
    state.begin_section(Section.METHODS)
    return state


class TestCountParameters:
    """Tests for parameter counting."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "params, expected",
        [
            ("", 0),
            ("   ", 0),
            ("int a", 1),
            ("int a, string b", 2),
            ("Dictionary<int,string> m", 1),
            ("Dictionary<int, List<string>> m, int n", 2),
            ("int[,] grid", 1),
            ('string s = "a,b", int c', 2),
        ],
    )
    def test_count_parameters(self, params: str, expected: int) -> None:
        assert count_parameters(params) == expected


class TestParseMethodDeclaration:
    """Tests for declaration splitting and classification."""

    @pytest.mark.unit
    def test_plain_method(self) -> None:
        member = parse_method_declaration("public static float Dot(Vector3 a, Vector3 b) { }", "Vector3")
        assert member is not None
        assert member.kind == MemberKind.METHOD
        assert member.name == "Dot"
        assert member.signature == "public static float Dot(Vector3 a, Vector3 b)"
        assert member.param_count == 2

    @pytest.mark.unit
    def test_generic_return_type_is_one_token(self) -> None:
        member = parse_method_declaration(
            "public Dictionary<int, string> Build(List<int> keys) { }", "Foo"
        )
        assert member is not None
        assert member.name == "Build"
        assert member.signature == "public Dictionary<int, string> Build(List<int> keys)"

    @pytest.mark.unit
    def test_constructor_by_type_name(self) -> None:
        member = parse_method_declaration("public Foo(int a) { }", "Foo")
        assert member is not None
        assert member.kind == MemberKind.CONSTRUCTOR
        assert member.name == ".ctor"
        assert member.signature == "public .ctor(int a)"

    @pytest.mark.unit
    def test_constructor_of_generic_type(self) -> None:
        member = parse_method_declaration("public List() { }", "List<T>", "List")
        assert member is not None
        assert member.kind == MemberKind.CONSTRUCTOR

    @pytest.mark.unit
    def test_dotted_constructor_names(self) -> None:
        ctor = parse_method_declaration("public void .ctor() { }", "Foo")
        cctor = parse_method_declaration("private static void .cctor() { }", "Foo")
        assert ctor is not None and cctor is not None
        assert (ctor.kind, ctor.name, ctor.signature) == (MemberKind.CONSTRUCTOR, ".ctor", "public .ctor()")
        assert (cctor.kind, cctor.name) == (MemberKind.CONSTRUCTOR, ".cctor")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name, kind",
        [
            ("get_Value", MemberKind.PROPERTY),
            ("set_Value", MemberKind.PROPERTY),
            ("add_Changed", MemberKind.EVENT),
            ("remove_Changed", MemberKind.EVENT),
            ("Update", MemberKind.METHOD),
        ],
    )
    def test_accessor_prefixes(self, name: str, kind: MemberKind) -> None:
        member = parse_method_declaration(f"public void {name}() {{ }}", "Foo")
        assert member is not None
        assert member.kind == kind

    @pytest.mark.unit
    def test_line_without_parenthesis_is_not_a_method(self) -> None:
        assert parse_method_declaration("public int Count;", "Foo") is None

    @pytest.mark.unit
    def test_unbalanced_parenthesis_is_not_a_method(self) -> None:
        assert parse_method_declaration("public void Foo(int a", "Foo") is None


class TestExtractMethodMember:
    """Tests for the pending-metadata state machine."""

    @pytest.mark.unit
    def test_metadata_then_declaration(self, methods_state: ParserState) -> None:
        assert extract_method_member(methods_state, "// RVA: 0x1000 Offset: 0x2000 VA: 0x3000") is None
        assert methods_state.pending.has_pending

        member = extract_method_member(methods_state, "public void Bar() { }")
        assert member is not None
        assert member.kind == MemberKind.METHOD
        assert (member.rva, member.offset, member.va) == (0x1000, 0x2000, 0x3000)
        assert member.param_count == 0
        assert not methods_state.pending.has_pending

    @pytest.mark.unit
    def test_declaration_without_metadata_is_dropped(self, methods_state: ParserState) -> None:
        assert extract_method_member(methods_state, "public void Bar() { }") is None

    @pytest.mark.unit
    def test_offset_falls_back_to_rva(self, methods_state: ParserState) -> None:
        extract_method_member(methods_state, "// RVA: 0x1234 VA: 0x5678")
        member = extract_method_member(methods_state, "public void Bar() { }")
        assert member is not None
        assert member.offset == 0x1234
        assert member.va == 0x5678

    @pytest.mark.unit
    def test_consecutive_metadata_lines_accumulate(self, methods_state: ParserState) -> None:
        extract_method_member(methods_state, "// RVA: 0x10 Offset: 0x20")
        extract_method_member(methods_state, "// RVA: 0x11 VA: 0x30")
        member = extract_method_member(methods_state, "public void Bar() { }")
        assert member is not None
        assert (member.rva, member.offset, member.va) == (0x11, 0x20, 0x30)

    @pytest.mark.unit
    def test_structural_and_comment_lines_keep_pending(self, methods_state: ParserState) -> None:
        extract_method_member(methods_state, "// RVA: 0x10")
        for line in ("", "{", "}", "// Slot: 3", "[CompilerGenerated]"):
            assert extract_method_member(methods_state, line) is None
        assert methods_state.pending.has_pending
        assert methods_state.pending.rva == 0x10

    @pytest.mark.unit
    def test_block_comment_is_skipped(self, methods_state: ParserState) -> None:
        extract_method_member(methods_state, "// RVA: 0x10")
        for line in ("/* GenericInstMethod :", "|", "|-RVA: 0x99 Offset: 0x99 VA: 0x99", "|-Foo.Bar<int>", "*/"):
            assert extract_method_member(methods_state, line) is None
        assert not methods_state.in_block_comment

        member = extract_method_member(methods_state, "public void Bar() { }")
        assert member is not None
        assert member.rva == 0x10

    @pytest.mark.unit
    def test_wide_value_resets_earlier_key(self, methods_state: ParserState) -> None:
        extract_method_member(methods_state, "// RVA: 0x10 VA: 0x7F000010")
        extract_method_member(methods_state, "// VA: 0x10000000000000000")
        member = extract_method_member(methods_state, "public void Foo() { }")
        assert member is not None
        assert (member.rva, member.offset, member.va) == (0x10, 0x10, 0)

    @pytest.mark.unit
    def test_attribute_with_metadata_comment_keeps_pending(self, methods_state: ParserState) -> None:
        extract_method_member(methods_state, "// RVA: 0x20")
        assert extract_method_member(methods_state, '[Obsolete("Use Bar")] // RVA: 0x4A10') is None
        member = extract_method_member(methods_state, "public void Foo() { }")
        assert member is not None
        assert member.rva == 0x20

    @pytest.mark.unit
    def test_abstract_method_without_addresses(self, methods_state: ParserState) -> None:
        extract_method_member(methods_state, "// RVA: -1 Offset: -1")
        member = extract_method_member(methods_state, "public abstract void Run();")
        assert member is not None
        assert (member.rva, member.offset, member.va) == (0, 0, 0)


class TestExtractEnumMember:
    """Tests for enum Fields extraction."""

    @pytest.mark.unit
    def test_backing_field(self) -> None:
        member = extract_enum_member("public int value__; // 0x10")
        assert member is not None
        assert member.kind == MemberKind.FIELD
        assert member.name == "value__"
        assert member.signature == "public int value__;"
        assert member.offset == 0x10

    @pytest.mark.unit
    def test_enum_value(self) -> None:
        member = extract_enum_member("public const Color Red = 0;")
        assert member is not None
        assert member.kind == MemberKind.ENUM_VALUE
        assert member.name == "Red"
        assert member.signature == "Red = 0"

    @pytest.mark.unit
    def test_enum_value_without_semicolon(self) -> None:
        member = extract_enum_member("public const Flags All = -1")
        assert member is not None
        assert member.signature == "All = -1"

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["Red = 0;", "public const Color Red;", "// Red = 0", ""])
    def test_other_lines_are_dropped(self, line: str) -> None:
        assert extract_enum_member(line) is None


class TestExtractPlainMember:
    """Tests for Fields/Properties/Events extraction."""

    @pytest.mark.unit
    def test_field_with_offset(self) -> None:
        member = extract_plain_member("private int health; // 0x18", Section.FIELDS)
        assert member is not None
        assert member.kind == MemberKind.FIELD
        assert member.name == "health"
        assert member.signature == "private int health;"
        assert member.offset == 0x18
        assert (member.rva, member.va) == (0, 0)

    @pytest.mark.unit
    def test_property(self) -> None:
        member = extract_plain_member("public int Health { get; set; }", Section.PROPERTIES)
        assert member is not None
        assert member.kind == MemberKind.PROPERTY
        assert member.name == "Health"
        assert member.offset == 0

    @pytest.mark.unit
    def test_event(self) -> None:
        member = extract_plain_member("public event Action<int> OnDamaged;", Section.EVENTS)
        assert member is not None
        assert member.kind == MemberKind.EVENT
        assert member.name == "OnDamaged"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        [
            "",
            "{",
            "}",
            "// 0x10",
            "[SerializeField]",
            "[SerializeField] // RVA: 0x4A10 Offset: 0x4A10 VA: 0x4A10",
            "[CompilerGenerated] // 0x4A20",
        ],
    )
    def test_non_member_lines(self, line: str) -> None:
        assert extract_plain_member(line, Section.FIELDS) is None

    @pytest.mark.unit
    def test_methods_section_is_not_plain(self) -> None:
        assert extract_plain_member("public int x;", Section.METHODS) is None
