from __future__ import annotations

import unittest
from concurrent.futures import ThreadPoolExecutor

from niji_fixtures import SampleFormat

from niji_templates import (
    NIL,
    CannotInsertCollectionError,
    CannotInvertSectionError,
    Color,
    IndexOutOfBoundsError,
    InvalidIndexError,
    StringValue,
    Template,
    UnknownPlaceholderError,
    parse,
)
from niji_templates.core.models import Insert, Name, Section, Text


def _render(source: str, value=None) -> str:
    return Template.parse(source).render(value)


# --------------------------------------------------------------------------- #
#  1. Literal text and inserts                                                #
# --------------------------------------------------------------------------- #
class InsertTests(unittest.TestCase):
    def test_literal_text_is_unchanged_for_any_value(self) -> None:
        for value in (None, True, "x", ["a"], {"a": "b"}):
            with self.subTest(value=value):
                self.assertEqual(_render("hello\n  world { }", value), "hello\n  world { }")

    def test_render_static_tokens(self) -> None:
        template = Template((Text("AAA"), Text("BBB"), Text("CCC")))
        self.assertEqual(template.render(NIL), "AAABBBCCC")

    def test_render_whole_value(self) -> None:
        template = Template((Text("Value: "), Insert(Name.self_ref())))
        self.assertEqual(template.render(StringValue(":3c")), "Value: :3c")

    def test_named_value(self) -> None:
        self.assertEqual(_render("Value: {{foo}}", {"foo": ">:3"}), "Value: >:3")

    def test_dotted_lookup(self) -> None:
        self.assertEqual(_render("{{a.b}}", {"a": {"b": "x"}}), "x")

    def test_index_value(self) -> None:
        self.assertEqual(_render("Value: {{1}}", [None, "^-^"]), "Value: ^-^")

    def test_deep_value(self) -> None:
        self.assertEqual(_render("{{foo.0.bar}}", {"foo": [{"bar": "c:"}]}), "c:")

    def test_index_then_missing_key_renders_nothing(self) -> None:
        self.assertEqual(_render("[{{items.0.c}}]", {"items": [{"b": "1"}], "c": "outer"}), "[]")

    def test_booleans(self) -> None:
        self.assertEqual(_render("{{a}}/{{b}}", {"a": True, "b": False}), "true/false")

    def test_nil_inserts_nothing(self) -> None:
        self.assertEqual(_render("[{{missing}}]", {}), "[]")
        self.assertEqual(_render("[{{.}}]", None), "[]")

    def test_strings_are_not_escaped(self) -> None:
        self.assertEqual(_render("{{s}}", {"s": "<b>&\"'"}), "<b>&\"'")

    def test_collection_insert_is_rejected(self) -> None:
        with self.assertRaises(CannotInsertCollectionError) as cm:
            _render("{{list}}", {"list": ["a"]})
        self.assertEqual(cm.exception.kind, "array")
        with self.assertRaises(CannotInsertCollectionError) as cm:
            _render("{{map}}", {"map": {"a": "b"}})
        self.assertEqual(cm.exception.kind, "map")

    def test_index_errors(self) -> None:
        with self.assertRaises(InvalidIndexError):
            _render("{{items.x}}", {"items": ["a"]})
        with self.assertRaises(IndexOutOfBoundsError):
            _render("{{items.3}}", {"items": ["a"]})


# --------------------------------------------------------------------------- #
#  2. Sections                                                                #
# --------------------------------------------------------------------------- #
class SectionTests(unittest.TestCase):
    def test_scope_chain_inside_section(self) -> None:
        self.assertEqual(_render("{{#a}}{{b}}{{/a}}", {"a": {"b": "x"}}), "x")

    def test_scope_chain_falls_back_outwards(self) -> None:
        self.assertEqual(
            _render("{{#a}}{{b}}-{{c}}{{/a}}", {"a": {"c": "inner"}, "b": "outer"}),
            "outer-inner",
        )

    def test_list_iteration_order(self) -> None:
        self.assertEqual(_render("{{#list}}{{.}}{{/list}}", {"list": [1, 2, 3]}), "123")

    def test_list_of_maps(self) -> None:
        value = {"people": [{"name": "a"}, {"name": "b"}], "sep": ","}
        self.assertEqual(_render("{{#people}}{{name}}{{sep}}{{/people}}", value), "a,b,")

    def test_inverted_list_renders_each_item_in_reverse(self) -> None:
        self.assertEqual(_render("{{^list}}{{.}}{{/list}}", {"list": [1, 2, 3]}), "321")

    def test_empty_list(self) -> None:
        self.assertEqual(_render("{{#l}}X{{/l}}", {"l": []}), "")
        self.assertEqual(_render("{{^l}}X{{/l}}", {"l": []}), "")

    def test_boolean_sections(self) -> None:
        self.assertEqual(_render("{{^flag}}X{{/flag}}", {"flag": False}), "X")
        self.assertEqual(_render("{{^flag}}X{{/flag}}", {"flag": True}), "")
        self.assertEqual(_render("{{#flag}}X{{/flag}}", {"flag": False}), "")
        self.assertEqual(_render("{{#flag}}X{{/flag}}", {"flag": True}), "X")

    def test_nil_sections(self) -> None:
        self.assertEqual(_render("{{#missing}}X{{/missing}}", {}), "")
        self.assertEqual(_render("{{^missing}}X{{/missing}}", {}), "X")

    def test_string_section_pushes_value(self) -> None:
        self.assertEqual(_render("{{#s}}[{{.}}]{{/s}}", {"s": "hi"}), "[hi]")

    def test_map_section_pushes_value(self) -> None:
        self.assertEqual(_render("{{#p}}{{name}}{{/p}}", {"p": {"name": "n"}}), "n")

    def test_formattable_section_pushes_value(self) -> None:
        self.assertEqual(_render("{{#c}}<{{.}}>{{/c}}", {"c": Color(1, 2, 3)}), "<#010203ff>")

    def test_inverting_non_boolean_values_fails(self) -> None:
        for value in ("text", {"a": "b"}, Color(0, 0, 0)):
            with self.subTest(value=value):
                with self.assertRaises(CannotInvertSectionError):
                    _render("{{^v}}X{{/v}}", {"v": value})

    def test_section_after_delimiter_change(self) -> None:
        self.assertEqual(_render("{{=<% %>=}}<%#l%><%.%><%/l%>", {"l": ["a", "b"]}), "ab")

    def test_deeply_nested_section_tokens_render(self) -> None:
        tokens = (Text("x"),)
        for _ in range(2000):
            tokens = (Section(Name(("a",)), False, tokens),)
        self.assertEqual(Template(tokens).render({"a": True}), "x")

    def test_deeply_nested_template_source_renders(self) -> None:
        depth = 2000
        source = "{{#a}}" * depth + "{{b}}" + "{{/a}}" * depth
        self.assertEqual(_render(source, {"a": True, "b": "deep"}), "deep")

    def test_deeply_nested_render_error_is_typed(self) -> None:
        depth = 2000
        source = "{{#a}}" * depth + "{{^s}}{{/s}}" + "{{/a}}" * depth
        with self.assertRaises(CannotInvertSectionError):
            _render(source, {"a": True, "s": "text"})

    def test_nested_lists_keep_item_order(self) -> None:
        value = {"rows": [{"cells": ["a", "b"]}, {"cells": ["c"]}]}
        self.assertEqual(_render("{{#rows}}[{{#cells}}{{.}}{{/cells}}]{{/rows}}", value), "[ab][c]")


# --------------------------------------------------------------------------- #
#  3. Formattable values                                                      #
# --------------------------------------------------------------------------- #
class FormatPrecedenceTests(unittest.TestCase):
    def test_unformatted_insert(self) -> None:
        self.assertEqual(Template.parse("Value: {{.}}").render(SampleFormat()), "Value: default: STRING VALUE :)")

    def test_inline_format(self) -> None:
        template = Template.parse('Value: {{.:"«{string}»"}}')
        self.assertEqual(template.render(SampleFormat()), "Value: «STRING VALUE :)»")

    def test_template_override(self) -> None:
        template = Template.parse("Value: {{.}}")
        template.set_format("sample", "“{string}”")
        self.assertEqual(template.render(SampleFormat()), "Value: “STRING VALUE :)”")

    def test_inline_beats_override(self) -> None:
        template = Template.parse('Value: {{.:"«{string}»"}}')
        template.set_format("sample", "“{string}”")
        self.assertEqual(template.render(SampleFormat()), "Value: «STRING VALUE :)»")

    def test_override_applies_only_to_its_type(self) -> None:
        template = Template.parse("{{s}} {{c}}")
        template.set_format("sample", "[{int}]")
        value = {"s": SampleFormat(), "c": Color(255, 0, 0)}
        self.assertEqual(template.render(value), "[69] #ff0000ff")

    def test_set_format_token_affects_later_inserts_only(self) -> None:
        template = Template.parse('{{v}} {{=sample:"<{int}>"=}}{{v}}')
        self.assertEqual(template.render({"v": SampleFormat()}), "default: STRING VALUE :) <69>")

    def test_set_format_token_beats_seeded_override(self) -> None:
        template = Template.parse('{{=color:"{r}"=}}{{c}}')
        template.set_format("color", "{g}")
        self.assertEqual(template.render({"c": Color(1, 2, 3)}), "1")

    def test_set_format_persists_across_renders(self) -> None:
        template = Template.parse('{{v}}{{=sample:"<{int}>"=}}')
        value = {"v": SampleFormat()}
        self.assertEqual(template.render(value), "default: STRING VALUE :)")
        self.assertEqual(template.render(value), "<69>")
        self.assertEqual(dict(template.formats), {"sample": "<{int}>"})

    def test_set_format_inside_unrendered_section_has_no_effect(self) -> None:
        template = Template.parse('{{#off}}{{=sample:"<{int}>"=}}{{/off}}{{v}}')
        self.assertEqual(
            template.render({"off": False, "v": SampleFormat()}),
            "default: STRING VALUE :)",
        )

    def test_unknown_placeholder(self) -> None:
        with self.assertRaises(UnknownPlaceholderError) as cm:
            _render('{{v:"{nope}"}}', {"v": SampleFormat()})
        self.assertEqual((cm.exception.type_name, cm.exception.key), ("sample", "nope"))


# --------------------------------------------------------------------------- #
#  4. Template instance behaviour                                             #
# --------------------------------------------------------------------------- #
class TemplateInstanceTests(unittest.TestCase):
    def test_reassigned_delimiters_parse_identically(self) -> None:
        self.assertEqual(parse("{{=<% %>=}}<%value%>"), parse("{{value}}"))

    def test_custom_initial_delimiters(self) -> None:
        template = Template.parse("[[a]] {{a}}", start_delimiter="[[", end_delimiter="]]")
        self.assertEqual(template.render({"a": "1"}), "1 {{a}}")

    def test_copy_isolates_overrides(self) -> None:
        template = Template.parse('{{=sample:"<{int}>"=}}{{v}}')
        clone = template.copy()
        template.render({"v": SampleFormat()})
        self.assertEqual(dict(template.formats), {"sample": "<{int}>"})
        self.assertEqual(dict(clone.formats), {})
        self.assertIs(clone.tokens, template.tokens)

    def test_formats_snapshot_is_read_only(self) -> None:
        template = Template()
        template.set_format("color", "{r}")
        with self.assertRaises(TypeError):
            template.formats["color"] = "{g}"  # type: ignore[index]

    def test_failed_render_leaves_tree_usable(self) -> None:
        template = Template.parse("{{v}}")
        with self.assertRaises(CannotInsertCollectionError):
            template.render({"v": ["a"]})
        self.assertEqual(template.render({"v": "ok"}), "ok")

    def test_concurrent_renders_of_one_instance(self) -> None:
        template = Template.parse('{{#items}}{{.}}{{/items}}{{=sample:"<{int}>"=}}{{v}}')
        value = {"items": ["a", "b"], "v": SampleFormat()}
        template.render(value)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: template.render(value), range(32)))
        self.assertEqual(set(results), {"ab<69>"})


if __name__ == "__main__":
    unittest.main()
