from safelist.filters.filter_exclude import *  # exclude rules
from safelist.filters.filter_field import *  # class-field name patterns
from dataclasses import dataclass, fields, replace
from pathlib import Path
import json

ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = ROOT / 'config' / 'safelist.json'
_PATH_KEYS = ('output_path', 'mirror_path', 'db_path', 'template_dir')
_PATTERN_KEYS = ('exclude_patterns', 'class_field_patterns')

@dataclass(frozen=True)
class ScanConfig:
    exclude_patterns : tuple[str, ...] = EXCLUDE_PATTERNS
    class_field_patterns : tuple[str, ...] = CLASS_FIELD_PATTERNS
    output_path : Path = ROOT / 'tailwind-safelist.txt'  # base64 blob read by tailwind.config
    mirror_path : Path = ROOT / 'tailwind-safelist.html'  # markup copy for content scanning
    db_path : Path = ROOT / 'data' / 'safelist.sqlite3'
    table_name : str = 'tailwind_safelist'
    template_dir : Path | None = None  # theme resources/views

    def walker(self):
        from safelist.walk_fields import FieldWalker
        return FieldWalker(self.class_field_patterns)

    def filter(self):
        from safelist.filter_classes import ClassFilter
        return ClassFilter(self.exclude_patterns)

def load_config(path: str | Path | None = None, root: str | Path = ROOT) -> ScanConfig:
    '''defaults, overridden by the keys of a JSON config file (if it exists)'''
    root = Path(root)
    config = ScanConfig(
        output_path=root / 'tailwind-safelist.txt',
        mirror_path=root / 'tailwind-safelist.html',
        db_path=root / 'data' / 'safelist.sqlite3',
    )
    if path is None:
        path = CONFIG_PATH
        if not path.exists(): return config  # no site overrides
    path = Path(path)
    if not path.exists(): raise FileNotFoundError(f'config file not found: {path}')

    with open(path, 'r', encoding='utf-8') as f:
        raw = json.load(f)
    if not isinstance(raw, dict): raise ValueError(f'{path}: expected a JSON object')

    known = {f.name for f in fields(ScanConfig)}
    unknown = sorted(set(raw) - known)
    if unknown: raise ValueError(f'{path}: unknown config keys: {", ".join(unknown)}')

    overrides = {}
    for key, value in raw.items():
        if value is None:
            if key == 'template_dir': overrides[key] = None
            continue  # keep default
        if key in _PATTERN_KEYS:
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f'{path}: "{key}" must be a list of strings')
            overrides[key] = tuple(value)
        elif key in _PATH_KEYS:
            p = Path(value)
            overrides[key] = p if p.is_absolute() else root / p  # relative to project root
        else: overrides[key] = str(value)
    return replace(config, **overrides)
