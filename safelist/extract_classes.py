import re

_CLASS_ATTR = re.compile(r'class="([^"\']+)"|class=\'([^"\']+)\'')  # class="..." / class='...'
_CLASS_DIRECTIVE = re.compile(r'@class\(\[([^\]]+)\]\)')  # Blade @class([...])
_QUOTED = re.compile(r'["\']([^"\']+)["\']')
_WHITESPACE = re.compile(r'\s+')

def extract_classes(content: str) -> list[str]:
    '''collects raw class tokens from markup (duplicates and empty strings included)'''
    if not content or not isinstance(content, str): return []
    classes: list[str] = []
    for m in _CLASS_ATTR.finditer(content):
        value = m.group(1) if m.group(1) is not None else m.group(2)
        classes.extend(_WHITESPACE.split(value))
    for m in _CLASS_DIRECTIVE.finditer(content):
        for value in _QUOTED.findall(m.group(1)):  # only the quoted entries, conditions are skipped
            classes.extend(_WHITESPACE.split(value))
    return classes

def split_classes(value: str) -> list[str]:
    '''splits a bare class list ("px-4  py-2") into tokens'''
    if not value or not isinstance(value, str): return []
    return [c for c in _WHITESPACE.split(value.strip()) if c]
