import json

import pytest


@pytest.fixture
def export_data():
    """A small content export: pages, a contact form, options and widgets."""
    return {
        "post_types": {"post": {"public": True}, "page": {"public": True}, "attachment": {"public": False}},
        "posts": [
            {
                "id": 1, "type": "page", "status": "publish",
                "content": (
                    '<!-- wp:group {"className":"container mx-auto"} -->\n'
                    '<div class="wp-block-group container mx-auto"><p class="text-lg">Hi</p></div>\n'
                    '<!-- /wp:group -->'
                ),
                "fields": {
                    "sections": [
                        {"acf_fc_layout": "hero", "wrapper_class": "py-24 bg-gray-50"},
                        {"acf_fc_layout": "cards", "cards": [{"card_class": "shadow"}, {"card_class": "rounded-xl"}]},
                    ],
                    "related": {"ID": 2, "post_content": '<span class="badge"></span>', "post_type": "post"},
                },
                "meta": {"_edit_lock": '<b class="private-meta"></b>', "subtitle": ['<em class="italic"></em>']},
            },
            {"id": 2, "type": "post", "status": "draft", "content": '<p class="prose wp-caption">x</p>'},
            {"id": 3, "type": "post", "status": "trash", "content": '<p class="trashed"></p>'},
            {"id": 4, "type": "attachment", "status": "inherit", "content": '<p class="attached"></p>'},
            {
                "id": 5, "type": "wpcf7_contact_form", "status": "publish", "content": "",
                "form": '<label class="block text-sm">[text* your-name class:wpcf7-text]</label>',
                "mail": {"subject": "Hi", "body": '<p class="mail-body">[your-name]</p>'},
            },
        ],
        "options": {
            "footer": {"footer_classes": "bg-black text-white"},
            "options": {"banner": '<div class="banner"></div>'},
        },
        "sidebars_widgets": {
            "wp_inactive_widgets": [],
            "sidebar-1": ["text-2", "text-3", "custom_html-4"],
            "array_version": 3,
        },
        "widgets": {
            "text": {"2": {"text": '<p class="widget-text">a</p>'}, "3": {"text": '<p class="widget-text-2">b</p>'}, "_multiwidget": 1},
            "custom_html": {"4": {"content": '<div class="grid gap-4"></div>'}},
        },
    }


@pytest.fixture
def export_path(tmp_path, export_data):
    path = tmp_path / "content-export.json"
    path.write_text(json.dumps(export_data), encoding="utf-8")
    return path
