import re

_DELIMITED = re.compile(r'^/(.*)/([A-Za-z]*)$', re.S)  # PHP style: /^wp-/i
_FLAGS = {'i': re.I, 'm': re.M, 's': re.S, 'x': re.X, 'u': 0}  # u: str patterns are unicode already

def compile_pattern(pattern: str) -> re.Pattern:
    '''compiles a bare regex or a delimiter-wrapped one'''
    if (m := _DELIMITED.match(pattern)):
        flags = 0
        for f in m.group(2):
            if f not in _FLAGS: raise ValueError(f'unsupported regex flag {f!r} in {pattern!r}')
            flags |= _FLAGS[f]
        return re.compile(m.group(1), flags)
    return re.compile(pattern)

class ClassFilter:
    '''trims, drops excluded and empty tokens, dedupes and sorts'''

    def __init__(self, exclude_patterns=()):
        self.exclude_patterns = tuple(compile_pattern(p) for p in exclude_patterns)  # order kept, first match wins

    def is_excluded(self, token: str) -> bool:
        for pattern in self.exclude_patterns:
            if pattern.search(token): return True
        return False

    def apply(self, tokens) -> list[str]:
        kept = set()
        for token in tokens:
            if not isinstance(token, str): continue
            token = token.strip()
            if not token: continue  # empty split leftovers
            if self.is_excluded(token): continue
            kept.add(token)
        return sorted(kept)
