from safelist.extract_classes import extract_classes, split_classes
from dataclasses import dataclass
from enum import Enum

MAX_DEPTH = 10  # deeper field trees are cut off
LAYOUT_KEY = 'acf_fc_layout'  # discriminator of flexible content layouts

@dataclass(frozen=True)
class ContentRef:
    '''reference to another content item (post object / relationship field)'''
    id : int
    body : str = ''

class Shape(Enum):
    SKIP = 'skip'  # null, empty, bool, number
    FLAT_VALUE = 'flat_value'  # plain string
    LAYOUT_LIST = 'layout_list'  # flexible content
    ROW_LIST = 'row_list'  # repeater
    NESTED_OBJECT = 'nested_object'  # group or any other container
    CONTENT_REFERENCE = 'content_reference'  # post object

def classify(value) -> Shape:
    '''decides once how a field value is walked'''
    if value is None or value is False or value == '': return Shape.SKIP
    if isinstance(value, str): return Shape.FLAT_VALUE
    if isinstance(value, (bool, int, float)): return Shape.SKIP
    if isinstance(value, ContentRef) or _is_content_ref(value): return Shape.CONTENT_REFERENCE
    if not isinstance(value, (dict, list, tuple)) or not value: return Shape.SKIP

    rows = _sequence_items(value)
    if rows is not None and all(isinstance(r, dict) for r in rows):
        if all(LAYOUT_KEY in r for r in rows): return Shape.LAYOUT_LIST
        return Shape.ROW_LIST
    return Shape.NESTED_OBJECT

def _is_content_ref(value) -> bool:
    return isinstance(value, dict) and 'ID' in value and 'post_content' in value

def _sequence_items(value) -> list | None:
    '''elements of a list, or of a mapping keyed 0..n-1; None for any other mapping'''
    if isinstance(value, (list, tuple)): return list(value)
    keys = list(value.keys())
    for i, key in enumerate(keys):
        if isinstance(key, bool): return None
        if isinstance(key, int) and key == i: continue
        if isinstance(key, str) and key.isdigit() and int(key) == i: continue  # JSON object keys
        return None
    return list(value.values())

def _as_ref(value) -> ContentRef:
    if isinstance(value, ContentRef): return value
    body = value.get('post_content')
    return ContentRef(id=value.get('ID'), body=body if isinstance(body, str) else '')

def _iter_items(value):
    return value.items() if isinstance(value, dict) else enumerate(value)

class FieldWalker:
    '''walks custom-field trees (flexible content, repeaters, groups) and collects class tokens'''

    def __init__(self, class_field_patterns=()):
        self.class_field_patterns = tuple(p.lower() for p in class_field_patterns)

    def is_class_field(self, name) -> bool:
        '''field name suggests the value is a bare class list'''
        if not isinstance(name, str): return False
        name = name.lower()
        return any(p in name for p in self.class_field_patterns)

    def walk(self, fields, depth: int = 0) -> list[str]:
        if depth > MAX_DEPTH: return []
        if isinstance(fields, str): return extract_classes(fields)
        if isinstance(fields, ContentRef) or _is_content_ref(fields): return extract_classes(_as_ref(fields).body)
        if not isinstance(fields, (dict, list, tuple)): return []

        classes: list[str] = []
        for name, value in _iter_items(fields):
            classes.extend(self._walk_field(name, value, depth))
        return classes

    def _walk_field(self, name, value, depth: int) -> list[str]:
        shape = classify(value)
        if shape is Shape.SKIP: return []
        if shape is Shape.FLAT_VALUE:
            classes = extract_classes(value)
            if self.is_class_field(name): classes.extend(split_classes(value))  # e.g. wrapper_class: "px-4 py-8"
            return classes
        if shape is Shape.CONTENT_REFERENCE: return extract_classes(_as_ref(value).body)
        if shape in (Shape.LAYOUT_LIST, Shape.ROW_LIST):
            classes: list[str] = []
            for row in _sequence_items(value):
                classes.extend(self.walk(row, depth + 1))
            return classes
        return self.walk(value, depth + 1)  # NESTED_OBJECT

def walk_plain(data, depth: int = 0) -> list[str]:
    '''field-name agnostic walk (post meta, widget options): every string leaf is scanned'''
    if depth > MAX_DEPTH: return []
    if isinstance(data, str): return extract_classes(data)
    if not isinstance(data, (dict, list, tuple)): return []
    classes: list[str] = []
    for _, value in _iter_items(data):
        if isinstance(value, (dict, list, tuple)): classes.extend(walk_plain(value, depth + 1))
        elif isinstance(value, str): classes.extend(extract_classes(value))
    return classes
