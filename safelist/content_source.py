from safelist.walk_fields import ContentRef
from dataclasses import dataclass, field
from pathlib import Path
import json, re

SCAN_STATUSES = ('publish', 'draft', 'private')
FORM_TYPE = 'wpcf7_contact_form'  # Contact Form 7 forms are not public but hold markup

@dataclass
class Post:
    id : int
    type : str = 'post'
    status : str = 'publish'
    content : str = ''
    fields : dict | list | None = None  # custom fields (get_fields)
    meta : dict[str, list] = field(default_factory=dict)  # raw post meta, key -> values
    form : str = ''  # form template (contact forms)
    mail : dict | None = None  # mail template (contact forms)

class ContentSource:
    '''read access to a CMS content export (one JSON document)'''

    def __init__(self, data: dict):
        self.data = data or {}
        self._posts = [_to_post(p) for p in self.data.get('posts') or []]

    @classmethod
    def from_json(cls, path: str | Path) -> 'ContentSource':
        with open(path, 'r', encoding='utf-8') as f:
            return cls(json.load(f))

    def post_types(self) -> list[str]:
        declared = self.data.get('post_types') or {}
        if isinstance(declared, (list, tuple)):
            types = [str(name) for name in declared]  # plain list of names
        elif isinstance(declared, dict) and declared:
            types = [name for name, info in declared.items() if not isinstance(info, dict) or info.get('public', True)]
        else: types = sorted({p.type for p in self._posts if p.type != FORM_TYPE})  # nothing declared: every type found
        if any(p.type == FORM_TYPE for p in self._posts) and FORM_TYPE not in types: types.append(FORM_TYPE)
        return types

    def posts(self, post_types=None) -> list[Post]:
        types = set(post_types) if post_types else set(self.post_types())
        return [p for p in self._posts if p.type in types and p.status in SCAN_STATUSES]

    def get_post(self, content_id: int) -> Post | None:
        for p in self._posts:
            if p.id == content_id: return p
        return None

    def option_pages(self) -> dict[str, object]:
        '''option page slug -> field tree, "options" first'''
        pages = self.data.get('options') or {}
        if not isinstance(pages, dict): return {}
        ordered = {'options': pages['options']} if 'options' in pages else {}
        for slug, fields in pages.items():
            if slug != 'options': ordered[slug] = fields
        return ordered

    def widget_settings(self) -> list[object]:
        '''settings of every widget base placed in a sidebar, once per base'''
        sidebars = self.data.get('sidebars_widgets') or {}
        settings = self.data.get('widgets') or {}
        out = []
        seen = set()
        for widget_ids in sidebars.values():
            if not isinstance(widget_ids, list): continue  # array_version and friends
            for widget_id in widget_ids:
                base = re.sub(r'-\d+$', '', str(widget_id))  # text-2 -> text
                if base in seen: continue
                seen.add(base)
                if settings.get(base): out.append(settings[base])
        return out

def _to_post(raw: dict) -> Post:
    return Post(
        id=int(raw.get('id', raw.get('ID', 0))),
        type=raw.get('type') or raw.get('post_type') or 'post',
        status=raw.get('status') or raw.get('post_status') or 'publish',
        content=raw.get('content') or raw.get('post_content') or '',
        fields=_to_refs(raw.get('fields')),
        meta=raw.get('meta') or {},
        form=raw.get('form') or '',
        mail=raw.get('mail') if isinstance(raw.get('mail'), dict) else None,
    )

def _to_refs(value):
    '''turns exported post objects ({"ID": .., "post_content": ..}) into ContentRef'''
    if isinstance(value, dict):
        if 'ID' in value and 'post_content' in value:
            body = value.get('post_content')
            return ContentRef(id=value.get('ID'), body=body if isinstance(body, str) else '')
        return {k: _to_refs(v) for k, v in value.items()}
    if isinstance(value, list): return [_to_refs(v) for v in value]
    return value
