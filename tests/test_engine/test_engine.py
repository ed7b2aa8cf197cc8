"""Tests for the transmutation engine."""

import pytest

from gcsst.engine import ScanState, Transmutation, process_css, transmute
from gcsst.errors import InvalidInput
from gcsst.tokenizer import ParseError


def _never(name: str) -> bool:
    return False


# ---------------------------------------------------------------------------
# Basic rules
# ---------------------------------------------------------------------------


class TestBasicRules:
    def test_single_class(self):
        assert process_css(".button { color: red; }") == {"button": {"color=red"}}

    def test_multiple_declarations(self):
        result = process_css(".a { color: red; margin: 0 auto; }")
        assert result == {"a": {"color=red", "margin=0_auto"}}

    def test_duplicate_declarations_collapse(self):
        result = process_css(".a { color: red; color: red; }")
        assert result == {"a": {"color=red"}}

    def test_unterminated_declaration_dropped(self):
        result = process_css(".a { color: red; margin: 0 }")
        assert result == {"a": {"color=red"}}

    def test_function_value_kept_verbatim(self):
        result = process_css(".a { background: rgba(0, 0, 0, 0.5); }")
        assert result == {"a": {"background=rgba(0,_0,_0,_0.5)"}}

    def test_tag_selector(self):
        assert process_css("div { color: red; }") == {"div": {"color=red"}}

    def test_universal_selector(self):
        assert process_css("* { margin: 0; }") == {"*": {"{*}margin=0"}}

    def test_same_class_in_two_rules_merges(self):
        result = process_css(".a { color: red; } .a { margin: 0; }")
        assert result == {"a": {"color=red", "margin=0"}}

    def test_rule_without_declarations_omitted(self):
        assert process_css(".a { } .b { color: red; }") == {"b": {"color=red"}}

    def test_unnamed_selector_omitted(self):
        assert process_css("#main { color: red; }") == {}


# ---------------------------------------------------------------------------
# Qualifiers
# ---------------------------------------------------------------------------


class TestQualifiers:
    def test_comma_alternatives(self):
        result = process_css(".a:hover, .b { color: red; }")
        assert result == {"a": {"{:hover}color=red"}, "b": {"color=red"}}

    def test_child_combinator(self):
        result = process_css(".a > .b { color: red; }")
        assert result == {"a": {"{>_b}color=red"}}

    def test_descendant_tag(self):
        assert process_css(".a span { color: red; }") == {"a": {"{_span}color=red"}}

    def test_pseudo_element(self):
        result = process_css(".a::before { content: 'x'; }")
        assert result == {"a": {"{::before}content='x'"}}

    def test_attribute(self):
        result = process_css(".a[href='x'] { color: red; }")
        assert result == {"a": {"{[href='x']}color=red"}}

    def test_functional_pseudo(self):
        result = process_css(".a:not(.b) { color: red; }")
        assert result == {"a": {"{:not(.b)}color=red"}}

    def test_compound_classes_get_same_spells(self):
        result = process_css(".a.b { color: red; }")
        assert result == {"a": {"color=red"}, "b": {"color=red"}}

    def test_pseudo_only_selector_keeps_colons_in_name(self):
        result = process_css(":root { --main: red; }")
        assert result == {":root": {"{:root}--main=red"}}

    def test_cartesian_product(self):
        result = process_css(".a:hover, .a:focus { color: red; margin: 0; }")
        assert result == {
            "a": {
                "{:hover}color=red",
                "{:hover}margin=0",
                "{:focus}color=red",
                "{:focus}margin=0",
            }
        }


# ---------------------------------------------------------------------------
# @media nesting
# ---------------------------------------------------------------------------


class TestMedia:
    def test_media_area_prefix(self):
        result = process_css("@media (min-width: 700px) { .a { color: blue; } }")
        assert result == {"a": {"(min-width:_700px)__color=blue"}}

    def test_media_area_with_qualifier(self):
        result = process_css("@media print { .a:hover { color: red; } }")
        assert result == {"a": {"print__{:hover}color=red"}}

    def test_area_does_not_leak(self):
        """Prelude words such as "screen and" are not kept as a selector.

        The media block resets the rule state on entry, so no stray
        "screen" entry picks up spells from the following rule.
        """
        css = """
        @media screen and (max-width: 600px) { .a { color: red; } }
        .b { color: blue; }
        """
        result = process_css(css)
        assert result == {
            "a": {"screen_and_(max-width:_600px)__color=red"},
            "b": {"color=blue"},
        }

    def test_every_alternative_in_media_gets_area(self):
        result = process_css("@media print { .a, .b { color: red; } }")
        assert result == {"a": {"print__color=red"}, "b": {"print__color=red"}}

    def test_media_merges_with_top_level(self):
        css = ".a { color: red; } @media print { .a { color: black; } }"
        assert process_css(css) == {"a": {"color=red", "print__color=black"}}

    def test_nested_media_uses_innermost_area(self):
        css = "@media print { @media (min-width: 1px) { .a { color: red; } } }"
        assert process_css(css) == {"a": {"(min-width:_1px)__color=red"}}

    def test_rule_after_nested_media_drops_area(self):
        css = """
        @media print {
            @media (min-width: 1px) { .a { color: red; } }
            .b { color: blue; }
        }
        """
        assert process_css(css) == {
            "a": {"(min-width:_1px)__color=red"},
            "b": {"color=blue"},
        }

    def test_rule_before_nested_media_keeps_area(self):
        css = (
            "@media print { .b { color: blue; } "
            "@media (hover) { .a { color: red; } } }"
        )
        assert process_css(css) == {
            "a": {"(hover)__color=red"},
            "b": {"print__color=blue"},
        }

    def test_top_level_media_leaves_caller_without_area(self):
        state = ScanState()
        process_css("@media print { .a { color: red; } } .b { color: blue; }", state)
        assert state.area is None


# ---------------------------------------------------------------------------
# Recognized spells
# ---------------------------------------------------------------------------


class TestRecognizedSpells:
    def test_oracle_skips_rule(self):
        css = ".a { color: red; } .b { color: blue; }"
        result = process_css(css, oracle=lambda name: name == "a")
        assert result == {"b": {"color=blue"}}

    def test_oracle_consulted_with_class_name(self):
        seen: list[str] = []

        def oracle(name: str) -> bool:
            seen.append(name)
            return False

        process_css(".a { color: red; } div { margin: 0; }", oracle=oracle)
        assert seen == ["a", "div"]

    def test_escaped_spell_class_skipped_by_default(self):
        css = ".color\\=red { color: red; } .b { color: blue; }"
        assert process_css(css) == {"b": {"color=blue"}}

    def test_skipped_rule_resets_state(self):
        css = ".x, .color\\=red { color: red; } .b { margin: 0; }"
        assert process_css(css) == {"b": {"margin=0"}}


# ---------------------------------------------------------------------------
# transmute()
# ---------------------------------------------------------------------------


class TestTransmute:
    def test_returns_classes_and_duration(self):
        result = transmute(".button { color: red; }", oracle=_never)
        assert isinstance(result, Transmutation)
        assert result.classes == {"button": {"color=red"}}
        assert result.duration >= 0

    def test_empty_input(self):
        with pytest.raises(InvalidInput, match="nothing to transmute"):
            transmute("")

    def test_no_named_selectors(self):
        with pytest.raises(InvalidInput):
            transmute("#main { color: red; }")

    def test_unterminated_block(self):
        with pytest.raises(ParseError):
            transmute(".a { color: red;")
