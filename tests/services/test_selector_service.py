"""Tests for SelectorService — results, error codes, config fallbacks."""

from __future__ import annotations

import json
from pathlib import Path

from selectorctl.config.settings import SelectorSettings
from selectorctl.domain.errors import DUPLICATE_CATEGORY_MESSAGE, ORDER_MESSAGE
from selectorctl.domain.types import SelectorCategory
from selectorctl.services.selector import SelectorService
from selectorctl.services.telemetry import enable_telemetry


class TestBuild:
    def test_build_from_strings(self, service: SelectorService) -> None:
        result = service.build(["element=a", "id=main", "class=x"])
        assert result.ok
        assert result.op == "build"
        assert result.data["selector"] == "a#main.x"
        assert result.data["parts"] == 3

    def test_build_from_pairs(self, service: SelectorService) -> None:
        result = service.build([(SelectorCategory.ELEMENT, "a"), ("pseudo-class", "focus")])
        assert result.data["selector"] == "a:focus"

    def test_build_returns_document(self, service: SelectorService) -> None:
        result = service.build(["element=a", "class=x"])
        assert result.data["document"] == {
            "kind": "compound",
            "parts": [
                {"category": "element", "value": "a"},
                {"category": "class", "value": "x"},
            ],
        }

    def test_document_renders_back(self, service: SelectorService) -> None:
        built = service.build(["id=main", "class=container", "class=editable"])
        rendered = service.render_document(json.dumps(built.data["document"]))
        assert rendered.data["selector"] == built.data["selector"] == "#main.container.editable"

    def test_empty_build_warns(self, service: SelectorService) -> None:
        result = service.build([])
        assert result.ok
        assert result.data["selector"] == ""
        assert result.warnings

    def test_duplicate_category(self, service: SelectorService) -> None:
        result = service.build(["element=a", "element=b"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DUPLICATE_CATEGORY"
        assert result.error.message == DUPLICATE_CATEGORY_MESSAGE
        assert result.error.detail == {"category": "element", "rank": 0}

    def test_order_error(self, service: SelectorService) -> None:
        result = service.build(["id=main", "element=div"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ORDER"
        assert result.error.message == ORDER_MESSAGE
        assert result.error.detail == {
            "category": "element",
            "rank": 0,
            "conflict": "id",
            "conflict_rank": 1,
        }

    def test_invalid_part(self, service: SelectorService) -> None:
        result = service.build(["element"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PART"

    def test_verbose_adds_telemetry(self, service: SelectorService) -> None:
        enable_telemetry()
        result = service.build(["element=a"])
        assert result.meta is not None
        assert result.meta["telemetry"]["children"][0]["name"] == "apply_parts"


class TestCombine:
    def test_combine(self, service: SelectorService) -> None:
        result = service.combine(["element=div"], "+", ["element=table"])
        assert result.ok
        assert result.data == {"selector": "div + table", "combinator": "+"}

    def test_named_combinator(self, service: SelectorService) -> None:
        result = service.combine(["element=ul"], "child", ["element=li"])
        assert result.data["selector"] == "ul > li"

    def test_default_combinator_from_settings(self, service: SelectorService) -> None:
        result = service.combine(["element=h1"], None, ["element=p"])
        assert result.data["selector"] == "h1   p"

    def test_configured_default_combinator(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "selectorctl.toml").write_text('[render]\ndefault_combinator = "~"\n')
        svc = SelectorService(SelectorSettings.from_cli(start=isolated_cwd))
        result = svc.combine(["element=h1"], None, ["element=p"])
        assert result.data["selector"] == "h1 ~ p"

    def test_invalid_combinator(self, service: SelectorService) -> None:
        result = service.combine(["element=a"], "||", ["element=b"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_COMBINATOR"

    def test_error_in_operand(self, service: SelectorService) -> None:
        result = service.combine(["element=a"], "+", ["pseudo-element=a", "pseudo-class=b"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ORDER"

    def test_invalid_operand_part(self, service: SelectorService) -> None:
        result = service.combine(["bogus=a"], "+", ["element=b"])
        assert result.error is not None
        assert result.error.code == "INVALID_PART"


class TestRenderDocument:
    def test_render_combination(self, service: SelectorService) -> None:
        doc = {
            "kind": "combination",
            "left": {"kind": "compound", "parts": [{"category": "element", "value": "a"}]},
            "combinator": ">",
            "right": {"kind": "compound", "parts": [{"category": "class", "value": "b"}]},
        }
        result = service.render_document(json.dumps(doc))
        assert result.ok
        assert result.data == {"selector": "a > .b", "kind": "combination"}

    def test_invalid_json(self, service: SelectorService) -> None:
        result = service.render_document("{nope")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DOCUMENT"
        assert "selector document" in result.error.message

    def test_rule_violation_in_document(self, service: SelectorService) -> None:
        doc = {
            "kind": "compound",
            "parts": [{"category": "id", "value": "a"}, {"category": "id", "value": "b"}],
        }
        result = service.render_document(json.dumps(doc))
        assert result.error is not None
        assert result.error.code == "DUPLICATE_CATEGORY"


class TestArea:
    def test_area(self, service: SelectorService) -> None:
        result = service.area(10.0, 20.0)
        assert result.ok
        assert result.data == {"width": 10.0, "height": 20.0, "area": 200.0}


class TestDefaultSettings:
    def test_service_without_settings(self, isolated_cwd: Path) -> None:
        svc = SelectorService()
        assert svc.settings.render.default_combinator == " "
        assert svc.build(["element=a"]).data["selector"] == "a"
