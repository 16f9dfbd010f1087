"""
Tests for block editor attribute extraction.
"""

from safelist.extract_blocks import extract_block_classes


class TestExtractBlockClasses:

    def test_plain_html_has_no_blocks(self):
        assert extract_block_classes('<div class="p-4"></div>') == []
        assert extract_block_classes("") == []

    def test_class_name_and_colors(self):
        content = (
            '<!-- wp:paragraph {"className":"lead text-lg","align":"center","backgroundColor":"primary","textColor":"white"} -->\n'
            '<p>Hello</p>\n'
            '<!-- /wp:paragraph -->'
        )
        assert extract_block_classes(content) == [
            "lead", "text-lg", "aligncenter", "has-primary-background-color", "has-white-color",
        ]

    def test_acf_block_data(self):
        content = '<!-- wp:acf/hero {"name":"acf/hero","data":{"wrapper_class":"py-24 bg-gray-50","title":"Hi","button_style":"btn-lg"}} /-->'
        assert extract_block_classes(content) == ["py-24", "bg-gray-50", "btn-lg"]

    def test_nested_blocks(self):
        content = (
            '<!-- wp:group {"className":"container"} -->\n'
            '<div class="wp-block-group container">'
            '<!-- wp:heading {"className":"text-3xl"} -->\n<h2>T</h2>\n<!-- /wp:heading -->'
            '</div>\n'
            '<!-- /wp:group -->'
        )
        assert extract_block_classes(content) == ["container", "text-3xl"]

    def test_broken_json_is_ignored(self):
        content = '<!-- wp:paragraph {"className": oops} -->\n<p>x</p>\n<!-- /wp:paragraph -->'
        assert extract_block_classes(content) == []
