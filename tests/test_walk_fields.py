"""
Tests for the custom-field walker and shape classification.
"""

import pytest

from safelist.filters.filter_field import CLASS_FIELD_PATTERNS
from safelist.walk_fields import ContentRef, FieldWalker, Shape, classify, walk_plain


@pytest.fixture
def walker():
    return FieldWalker(CLASS_FIELD_PATTERNS)


def nested(levels: int) -> dict:
    """level k holds <div class="lvl-k">, level k+1 sits under "child"."""
    node = {"html": f'<div class="lvl-{levels - 1}"></div>'}
    for k in range(levels - 2, -1, -1):
        node = {"html": f'<div class="lvl-{k}"></div>', "child": node}
    return node


class TestClassify:

    @pytest.mark.parametrize("value", [None, "", False, True, 0, 3.5, [], {}])
    def test_skip(self, value):
        assert classify(value) is Shape.SKIP

    def test_flat_value(self):
        assert classify("text") is Shape.FLAT_VALUE

    def test_repeater_rows(self):
        assert classify([{"a": 1}, {"a": 2}]) is Shape.ROW_LIST

    def test_repeater_rows_with_integer_keys(self):
        assert classify({0: {"a": 1}, 1: {"a": 2}}) is Shape.ROW_LIST
        assert classify({"0": {"a": 1}, "1": {"a": 2}}) is Shape.ROW_LIST

    def test_flexible_layouts(self):
        assert classify([{"acf_fc_layout": "x", "a": 1}]) is Shape.LAYOUT_LIST

    def test_layouts_need_discriminator_on_every_row(self):
        assert classify([{"acf_fc_layout": "x"}, {"a": 1}]) is Shape.ROW_LIST

    def test_group_is_nested_object(self):
        assert classify({"title": "x", "link": {"url": "/"}}) is Shape.NESTED_OBJECT
        assert classify({1: {"a": 1}}) is Shape.NESTED_OBJECT  # keys not starting at 0
        assert classify(["a", "b"]) is Shape.NESTED_OBJECT

    def test_content_reference(self):
        assert classify(ContentRef(id=3, body="")) is Shape.CONTENT_REFERENCE
        assert classify({"ID": 3, "post_content": "<p></p>"}) is Shape.CONTENT_REFERENCE


class TestFieldWalker:

    def test_class_field_value_is_split(self, walker):
        tokens = walker.walk({"wrapper_class": "px-4 py-8", "title": "px-4 py-8"})
        assert tokens == ["px-4", "py-8"]

    def test_class_field_match_is_case_insensitive(self, walker):
        assert walker.walk({"Button_STYLE": "btn btn-lg"}) == ["btn", "btn-lg"]

    def test_markup_in_any_field(self, walker):
        assert walker.walk({"text": '<p class="lead">x</p>'}) == ["lead"]

    def test_class_field_with_markup_adds_both(self, walker):
        tokens = walker.walk({"section_class": 'mt-4 class="x"'})
        assert "x" in tokens
        assert "mt-4" in tokens

    def test_scalars_are_skipped(self, walker):
        assert walker.walk({"count": 3, "enabled": True, "empty": "", "none": None}) == []

    def test_repeater(self, walker):
        fields = {"cards": [{"card_class": "shadow"}, {"card_class": "rounded"}]}
        assert walker.walk(fields) == ["shadow", "rounded"]

    def test_flexible_content(self, walker):
        fields = {"sections": [
            {"acf_fc_layout": "hero", "wrapper_class": "py-24"},
            {"acf_fc_layout": "text", "body": '<div class="prose"></div>'},
        ]}
        assert walker.walk(fields) == ["py-24", "prose"]

    def test_group(self, walker):
        fields = {"cta": {"label": "Go", "link_classes": "underline"}}
        assert walker.walk(fields) == ["underline"]

    def test_content_reference_uses_body_only(self, walker):
        ref = ContentRef(id=7, body='<span class="badge"></span>')
        assert walker.walk({"related_class": ref}) == ["badge"]

    def test_top_level_string(self, walker):
        assert walker.walk('<i class="icon"></i>') == ["icon"]

    def test_depth_guard(self, walker):
        tokens = walker.walk(nested(12))
        assert tokens == [f"lvl-{k}" for k in range(11)]
        assert "lvl-11" not in tokens

    def test_no_patterns(self):
        assert FieldWalker().walk({"wrapper_class": "px-4"}) == []


class TestWalkPlain:

    def test_widget_options(self):
        settings = {2: {"title": "x", "text": '<div class="grid gap-4"></div>'}, "_multiwidget": 1}
        assert walk_plain(settings) == ["grid", "gap-4"]

    def test_key_names_are_ignored(self):
        assert walk_plain({"wrapper_class": "px-4"}) == []

    def test_depth_guard(self):
        tokens = walk_plain(nested(12))
        assert tokens == [f"lvl-{k}" for k in range(11)]
        assert "lvl-11" not in tokens

    def test_list_mixing_mappings_and_strings(self):
        assert walk_plain(['<b class="a"></b>', {"html": '<i class="b"></i>'}]) == ["a", "b"]


class TestMixedLists:

    def test_mixed_list_is_nested_object(self):
        assert classify([{"a": 1}, "text"]) is Shape.NESTED_OBJECT

    def test_mixed_list_walks_every_element(self, walker):
        fields = {"items": [{"item_class": "card"}, '<p class="lead"></p>', {"acf_fc_layout": "x", "body": '<hr class="my-8">'}]}
        assert walker.walk(fields) == ["card", "lead", "my-8"]
