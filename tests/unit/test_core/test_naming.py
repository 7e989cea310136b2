"""
test_naming.py - class and namespace name derivation
"""

import pytest

from script_generator.core.naming import (
    extract_class_name,
    extract_namespace_name,
    substring_between,
)


class TestSubstringBetween:

    def test_between_anchors(self):
        assert substring_between("a [b] c", "[", "]") == "b"

    def test_missing_start(self):
        assert substring_between("a b c", "[", "]") == ""

    def test_missing_end_after_start(self):
        assert substring_between("a ] [b", "[", "]") == ""

    def test_empty_start_matches_beginning(self):
        assert substring_between("Foo : Bar", "", ":") == "Foo "


class TestExtractNamespaceName:

    def test_simple(self):
        assert extract_namespace_name("namespace Game {\n}") == "Game"

    def test_brace_on_next_line(self):
        assert extract_namespace_name("namespace Game.Data\n{\n}") == "Game.Data"

    def test_no_namespace(self):
        assert extract_namespace_name("class C {\n}") == ""

    def test_no_brace(self):
        assert extract_namespace_name("namespace Game;") == ""

    def test_first_namespace_only(self):
        code = "namespace A {\n}\nnamespace B {\n}\n"
        assert extract_namespace_name(code) == "A"


class TestExtractClassName:

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("class C {\n}", "C"),
            ("public sealed class Player\n{\n}", "Player"),
            ("public class Player : MonoBehaviour {\n}", "Player"),
            ("class Store : Base, IStore\n{", "Store"),
            ("public static class Tags<T> {", "Tags<T>"),
        ],
    )
    def test_class_names(self, code, expected):
        assert extract_class_name(code) == expected

    def test_no_class(self):
        assert extract_class_name("struct S {\n}") == ""

    def test_no_brace(self):
        assert extract_class_name("class C;") == ""

    def test_first_class_only(self):
        assert extract_class_name("class A {\n}\nclass B {\n}\n") == "A"

    def test_textual_anchor(self):
        # Only the text is scanned, comments included
        assert extract_class_name("// the class below {\nclass C {") == "below"
