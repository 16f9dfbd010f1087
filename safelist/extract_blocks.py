from safelist.extract_classes import split_classes
from lxml import etree as ET
import json, re

_BLOCK_COMMENT = re.compile(r'^\s*wp:([a-z][a-z0-9_-]*(?:/[a-z][a-z0-9_-]*)?)\s+(\{.*\})\s*/?\s*$', re.S)  # <!-- wp:name {...} -->

def extract_block_classes(content: str) -> list[str]:
    '''collects classes stored in block editor attributes (<!-- wp:name {...} -->)'''
    if not content or 'wp:' not in content: return []  # not block markup
    classes: list[str] = []
    for attrs in _get_block_attrs(content):
        classes.extend(_classes_from_attrs(attrs))
    return classes

def _html_to_ET(html: str) -> ET.Element:
    '''creates a correct working lxml tree'''
    import html5lib
    doc = html5lib.parse('<body>' + html, treebuilder='lxml', namespaceHTMLElements=False)  # <body> first keeps leading comments inside the tree
    return doc.getroot()

def _get_block_attrs(content: str):
    root = _html_to_ET(content)
    for comment in root.iter(ET.Comment):
        m = _BLOCK_COMMENT.match(comment.text or '')
        if not m: continue  # closing comment, block without attributes, or plain comment
        try: attrs = json.loads(m.group(2))
        except ValueError: continue  # broken attribute JSON
        if isinstance(attrs, dict): yield attrs

def _classes_from_attrs(attrs: dict) -> list[str]:
    classes: list[str] = []
    if isinstance(attrs.get('className'), str): classes.extend(split_classes(attrs['className']))
    if isinstance(attrs.get('align'), str) and attrs['align']: classes.append(f'align{attrs["align"]}')
    if isinstance(attrs.get('backgroundColor'), str) and attrs['backgroundColor']:
        classes.append(f'has-{attrs["backgroundColor"]}-background-color')
    if isinstance(attrs.get('textColor'), str) and attrs['textColor']:
        classes.append(f'has-{attrs["textColor"]}-color')
    if isinstance(attrs.get('data'), (dict, list)): classes.extend(_classes_from_data(attrs['data']))  # ACF block fields
    return classes

def _classes_from_data(data, depth: int = 0) -> list[str]:
    '''class-like values of block field data, by key name'''
    if depth > 10: return []
    items = data.items() if isinstance(data, dict) else enumerate(data)
    classes: list[str] = []
    for key, value in items:
        if isinstance(value, (dict, list)): classes.extend(_classes_from_data(value, depth + 1))
        elif isinstance(value, str) and isinstance(key, str):
            if 'class' in key or 'style' in key: classes.extend(split_classes(value))  # also covers className
    return classes
