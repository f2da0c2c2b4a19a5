"""Tests for SelectorCategory and Combinator enums."""

import pytest

from selectorctl.domain.types import Combinator, SelectorCategory


class TestSelectorCategory:
    def test_canonical_order(self) -> None:
        assert [c.value for c in SelectorCategory] == [
            "element",
            "id",
            "class",
            "attribute",
            "pseudo-class",
            "pseudo-element",
        ]

    def test_rank_follows_declaration(self) -> None:
        ranks = [c.rank for c in SelectorCategory]
        assert ranks == sorted(ranks) == list(range(6))

    @pytest.mark.parametrize(
        "category,expected",
        [
            (SelectorCategory.ELEMENT, "div"),
            (SelectorCategory.ID, "#div"),
            (SelectorCategory.CLASS, ".div"),
            (SelectorCategory.ATTRIBUTE, "[div]"),
            (SelectorCategory.PSEUDO_CLASS, ":div"),
            (SelectorCategory.PSEUDO_ELEMENT, "::div"),
        ],
    )
    def test_wrap(self, category: SelectorCategory, expected: str) -> None:
        assert category.wrap("div") == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("element", SelectorCategory.ELEMENT),
            ("ID", SelectorCategory.ID),
            (" class ", SelectorCategory.CLASS),
            ("attr", SelectorCategory.ATTRIBUTE),
            ("attribute", SelectorCategory.ATTRIBUTE),
            ("pseudoClass", SelectorCategory.PSEUDO_CLASS),
            ("pseudo_class", SelectorCategory.PSEUDO_CLASS),
            ("pseudo-class", SelectorCategory.PSEUDO_CLASS),
            ("pseudoElement", SelectorCategory.PSEUDO_ELEMENT),
            ("pseudo_element", SelectorCategory.PSEUDO_ELEMENT),
        ],
    )
    def test_parse(self, raw: str, expected: SelectorCategory) -> None:
        assert SelectorCategory.parse(raw) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown selector category 'tag'"):
            SelectorCategory.parse("tag")

    def test_method_names_exist_on_builder(self) -> None:
        from selectorctl.domain.selector import SelectorBuilder

        for category in SelectorCategory:
            assert callable(getattr(SelectorBuilder, category.method_name))


class TestCombinator:
    def test_values(self) -> None:
        assert {c.value for c in Combinator} == {" ", ">", "+", "~"}

    @pytest.mark.parametrize(
        "raw,expected",
        [
            (" ", Combinator.DESCENDANT),
            ("", Combinator.DESCENDANT),
            (">", Combinator.CHILD),
            (" > ", Combinator.CHILD),
            ("+", Combinator.NEXT_SIBLING),
            ("~", Combinator.SUBSEQUENT_SIBLING),
            ("child", Combinator.CHILD),
            ("next-sibling", Combinator.NEXT_SIBLING),
            ("subsequent_sibling", Combinator.SUBSEQUENT_SIBLING),
            ("descendant", Combinator.DESCENDANT),
        ],
    )
    def test_parse(self, raw: str, expected: Combinator) -> None:
        assert Combinator.parse(raw) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown combinator"):
            Combinator.parse("||")

    def test_str_is_token(self) -> None:
        assert f"a {Combinator.CHILD} b" == "a > b"
