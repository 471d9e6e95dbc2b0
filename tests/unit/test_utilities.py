"""
Utility engine tests.

Covers selector escaping, class candidate extraction, plugin
registration, prefix resolution and CSS rendering.
"""

from __future__ import annotations

from typing import Any

import pytest

from src.components.design_tokens import build_theme
from src.components.utilities import (
    CssRule,
    GenerateCssInput,
    PluginApi,
    UtilityEngine,
    collect_candidates,
    escape_class,
    extract_candidates,
    render_css,
    run,
    run_generate_css,
    selector_for,
)


def size_plugin(api: PluginApi) -> None:
    """Registers ``box-<token>`` using the spacing scale."""

    def box(token: str) -> dict[str, str]:
        size = api.theme(f"spacing.{token}")
        return {"width": size, "height": size}

    api.match_components({"box": box}, values={"4": "4", "0.5": "0.5"})


@pytest.fixture
def engine() -> UtilityEngine:
    engine = UtilityEngine()
    engine.use(size_plugin)
    return engine


class TestSelectors:
    def test_plain_class_unchanged(self) -> None:
        assert escape_class("remix-search") == "remix-search"

    def test_special_characters_escaped(self) -> None:
        assert escape_class("hover:box-0.5") == "hover\\:box-0\\.5"
        assert escape_class("w-[1/2]") == "w-\\[1\\/2\\]"

    def test_any_non_identifier_character_escaped(self) -> None:
        assert escape_class("remix-c++") == "remix-c\\+\\+"
        assert escape_class("a@b!") == "a\\@b\\!"
        assert escape_class("snake_case-9") == "snake_case-9"

    def test_selector_has_dot(self) -> None:
        assert selector_for("box-0.5") == ".box-0\\.5"


class TestExtractCandidates:
    def test_html_class_attribute(self) -> None:
        html = '<i class="remix-search text-lg"></i><span class=\'remix-home\'></span>'
        assert extract_candidates(html) == ["remix-search", "text-lg", "remix-home"]

    def test_jsx_class_name(self) -> None:
        jsx = '<Icon className="remix-search" />'
        assert extract_candidates(jsx) == ["remix-search"]

    def test_class_name_expression(self) -> None:
        jsx = '<Icon className={cn("remix-search", active && "remix-close-line")} />'
        assert extract_candidates(jsx) == ["remix-search", "remix-close-line"]

    def test_template_literal_interpolation_dropped(self) -> None:
        jsx = "<Icon className={`remix-home ${size} mr-2`} />"
        assert extract_candidates(jsx) == ["remix-home", "mr-2"]

    def test_duplicates_removed_in_order(self) -> None:
        html = '<i class="remix-a remix-b"></i><i class="remix-a"></i>'
        assert extract_candidates(html) == ["remix-a", "remix-b"]

    def test_invalid_tokens_skipped(self) -> None:
        assert extract_candidates('<i class="ok {{bad}}"></i>') == ["ok"]

    def test_no_classes(self) -> None:
        assert extract_candidates("<p>plain text</p>") == []


class TestEngine:
    def test_resolves_registered_value(self, engine: UtilityEngine) -> None:
        assert engine.resolve("box-4") == {"width": "1rem", "height": "1rem"}

    def test_value_with_dot(self, engine: UtilityEngine) -> None:
        assert engine.resolve("box-0.5") == {"width": "0.125rem", "height": "0.125rem"}

    def test_unknown_value_is_none(self, engine: UtilityEngine) -> None:
        assert engine.resolve("box-7") is None
        assert engine.claims("box-7")

    def test_unknown_prefix_is_none(self, engine: UtilityEngine) -> None:
        assert engine.resolve("flex") is None
        assert not engine.claims("flex")

    def test_theme_comes_from_engine(self) -> None:
        engine = UtilityEngine(build_theme({"spacing": {"4": "18px"}}))
        engine.use(size_plugin)
        assert engine.resolve("box-4") == {"width": "18px", "height": "18px"}

    def test_longest_prefix_first(self) -> None:
        def plugin(api: PluginApi) -> None:
            api.match_components({"icon": lambda v: {"a": v}}, values={"set-x": "short"})
            api.match_components({"icon-set": lambda v: {"b": v}}, values={"x": "long"})

        engine = UtilityEngine()
        engine.use(plugin)

        assert engine.prefixes == ("icon-set", "icon")
        assert engine.resolve("icon-set-x") == {"b": "long"}

    def test_falls_back_to_shorter_prefix(self) -> None:
        def plugin(api: PluginApi) -> None:
            api.match_components({"icon": lambda v: {"a": v}}, values={"set-y": "short"})
            api.match_components({"icon-set": lambda v: {"b": v}}, values={"x": "long"})

        engine = UtilityEngine()
        engine.use(plugin)

        assert engine.resolve("icon-set-y") == {"a": "short"}

    def test_component_returning_none_is_unmatched(self) -> None:
        def plugin(api: PluginApi) -> None:
            api.match_components({"nil": lambda v: None}, values={"x": 1})

        engine = UtilityEngine()
        engine.use(plugin)
        assert engine.resolve("nil-x") is None

    def test_reregistering_prefix_replaces_rule(self, caplog: pytest.LogCaptureFixture) -> None:
        engine = UtilityEngine()
        engine.use(size_plugin)

        def other(api: PluginApi) -> None:
            api.match_components({"box": lambda v: {"x": v}}, values={"4": "y"})

        engine.use(other)

        assert engine.resolve("box-4") == {"x": "y"}
        assert "Replacing utility rule" in caplog.text

    def test_rule_for_builds_css_rule(self, engine: UtilityEngine) -> None:
        rule = engine.rule_for("box-0.5")
        assert rule is not None
        assert rule.selector == ".box-0\\.5"
        assert rule.declarations == (("width", "0.125rem"), ("height", "0.125rem"))


class TestRenderCss:
    def test_render_single_rule(self) -> None:
        rule = CssRule("a", ".a", (("width", "1rem"), ("height", "1rem")))
        assert rule.render() == ".a {\n  width: 1rem;\n  height: 1rem;\n}"

    def test_render_empty(self) -> None:
        assert render_css([]) == ""

    def test_render_joins_rules(self) -> None:
        rules = [CssRule("a", ".a", (("x", "1"),)), CssRule("b", ".b", (("y", "2"),))]
        assert render_css(rules) == ".a {\n  x: 1;\n}\n\n.b {\n  y: 2;\n}\n"


class TestGenerateCss:
    def test_collect_sorted_unique(self) -> None:
        inp = GenerateCssInput(class_names=("box-4", "box-0.5"), content=('<i class="box-4">',))
        assert collect_candidates(inp) == ["box-0.5", "box-4"]

    def test_generates_sorted_rules(self, engine: UtilityEngine) -> None:
        output = run_generate_css(
            GenerateCssInput(class_names=("box-4",), content=('<i class="box-0.5 flex"></i>',)),
            engine=engine,
        )

        assert output.matched == ("box-0.5", "box-4")
        assert output.css.index(".box-0\\.5 {") < output.css.index(".box-4 {")
        assert output.unmatched == ()

    def test_unmatched_explicit_and_claimed(self, engine: UtilityEngine) -> None:
        output = run(
            GenerateCssInput(class_names=("grid",), content=('<i class="box-9 flex"></i>',)),
            engine=engine,
        )

        assert output.css == ""
        assert output.matched == ()
        assert output.unmatched == ("box-9", "grid")

    def test_each_candidate_resolved_once(self) -> None:
        calls: list[Any] = []

        def plugin(api: PluginApi) -> None:
            def fn(value: Any) -> dict[str, str]:
                calls.append(value)
                return {"x": "1"}

            api.match_components({"c": fn}, values={"a": "a"})

        engine = UtilityEngine()
        engine.use(plugin)
        run_generate_css(
            GenerateCssInput(class_names=("c-a", "c-a"), content=('<i class="c-a">',)),
            engine=engine,
        )
        assert calls == ["a"]
