from __future__ import annotations

import unittest

from niji_templates.core.errors import IndexOutOfBoundsError, InvalidIndexError
from niji_templates.core.models import Name
from niji_templates.core.values import NIL, StringValue, to_value
from niji_templates.rendering.resolver import NameResolver


class NameResolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.resolver = NameResolver()

    def _resolve(self, path: str, *context):
        return self.resolver.resolve(Name.dotted(path), [to_value(c) for c in context])

    def test_empty_stack_is_nil(self) -> None:
        self.assertIs(self.resolver.resolve(Name.dotted("a"), []), NIL)
        self.assertIs(self.resolver.resolve(Name.self_ref(), []), NIL)

    def test_self_reference_returns_innermost(self) -> None:
        self.assertEqual(self._resolve(".", "inner", {"a": "outer"}), StringValue("inner"))

    def test_map_lookup(self) -> None:
        self.assertEqual(self._resolve("a.b", {"a": {"b": "x"}}), StringValue("x"))

    def test_map_miss_falls_back_to_outer_scope(self) -> None:
        self.assertEqual(self._resolve("b", {"a": "1"}, {"b": "outer"}), StringValue("outer"))

    def test_scalars_are_skipped(self) -> None:
        for inner in ("text", True, None):
            with self.subTest(inner=inner):
                self.assertEqual(self._resolve("b", inner, {"b": "outer"}), StringValue("outer"))

    def test_unresolved_name_is_nil(self) -> None:
        self.assertIs(self._resolve("missing", {"a": "1"}), NIL)

    def test_partial_hit_continues_in_outer_scopes(self) -> None:
        # `a` is found innermost, then `c` is looked up from `a` outwards.
        self.assertEqual(
            self._resolve("a.c", {"a": {"b": "1"}}, {"c": "outer"}),
            StringValue("outer"),
        )

    def test_list_index(self) -> None:
        self.assertEqual(self._resolve("1", [None, "^-^"]), StringValue("^-^"))

    def test_index_then_miss_does_not_reach_the_replaced_scope(self) -> None:
        # `items` replaces the root scope, so `c` is never looked up on the root.
        root = {"items": [{"b": "1"}], "c": "outer"}
        self.assertIs(self._resolve("items.0.c", root), NIL)

    def test_index_then_miss_falls_back_to_outer_scopes(self) -> None:
        self.assertEqual(
            self._resolve("items.0.c", {"items": [{"b": "1"}]}, {"c": "outer"}),
            StringValue("outer"),
        )

    def test_deep_path(self) -> None:
        root = {"foo": [{"bar": "c:"}]}
        self.assertEqual(self._resolve("foo.0.bar", root), StringValue("c:"))

    def test_invalid_index(self) -> None:
        with self.assertRaises(InvalidIndexError) as cm:
            self._resolve("x", ["a"])
        self.assertEqual(cm.exception.segment, "x")

    def test_negative_looking_index_is_invalid(self) -> None:
        with self.assertRaises(InvalidIndexError):
            self._resolve("-1", ["a"])

    def test_index_out_of_bounds(self) -> None:
        with self.assertRaises(IndexOutOfBoundsError) as cm:
            self._resolve("items.5", {"items": ["a", "b"]})
        self.assertEqual((cm.exception.index, cm.exception.length), (5, 2))
        self.assertEqual(str(cm.exception), "Index 5 is out of bounds for array of length 2")


if __name__ == "__main__":
    unittest.main()
