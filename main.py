from safelist.config.settings import ROOT, load_config
from safelist.content_source import ContentSource
from safelist.persist import Persister, SafelistFile, SafelistTable
from safelist.scan_content import Scanner
import argparse, sys

EXPORT_PATH = ROOT / 'data' / 'content-export.json'

def run_scan(config, export_path, post_types=None, include_templates: bool = False, silent: bool = False) -> list[str]:
    '''full rescan: every content source, then file + table rebuilt'''
    if not silent: print('Scanning all content for Tailwind classes...')
    scanner = Scanner(config, ContentSource.from_json(export_path), silent)
    classes = scanner.scan_all(post_types, include_templates)
    _get_persister(config, silent).save(classes)
    if not silent:
        print(f'Found {len(classes)} unique classes.')
        print(f'Safelist saved to {config.output_path.name}')
    return classes

def run_save_item(config, export_path, content_id: int, silent: bool = False) -> bool:
    '''incremental update of one post'''
    scanner = Scanner(config, ContentSource.from_json(export_path), silent=True)
    classes = scanner.scan_item(content_id)
    updated = _get_persister(config, silent).save_item(content_id, classes)
    if not silent and not updated: print(f'Safelist: item {content_id} unchanged')
    return updated

def run_update_db(config, silent: bool = False) -> bool:
    created = SafelistTable(config.db_path, config.table_name).create()
    if not silent: print('Database table created successfully.' if created else 'Database is already up to date.')
    return created

def run_show(config) -> list[str]:
    classes = SafelistFile(config.output_path).read()
    for c in classes: print(c)
    return classes

def _get_persister(config, silent: bool) -> Persister:
    file_sink = SafelistFile(config.output_path, config.mirror_path)
    table_sink = SafelistTable(config.db_path, config.table_name)
    return Persister(file_sink, table_sink, silent)

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description='Scan CMS content for CSS classes and write the Tailwind safelist.')
    ap.add_argument('--config', help='JSON config file (default: config/safelist.json)')
    ap.add_argument('--silent', action='store_true', help='Only print errors')
    sub = ap.add_subparsers(dest='command', required=True)

    scan = sub.add_parser('scan', help='Scan all content and rebuild the safelist')
    scan.add_argument('--export', default=str(EXPORT_PATH), help='Content export (JSON)')
    scan.add_argument('--post-types', nargs='*', default=None, help='Specific post types to scan')
    scan.add_argument('--include-templates', action='store_true', help='Also scan theme templates (skipped by default)')

    item = sub.add_parser('save-item', help='Rescan one post and merge it into the safelist')
    item.add_argument('--id', type=int, required=True, dest='content_id', help='Post ID')
    item.add_argument('--export', default=str(EXPORT_PATH), help='Content export (JSON)')

    sub.add_parser('update-db', help='Create the safelist table')
    sub.add_parser('show', help='Print the current safelist')
    return ap.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(args.config)
        if args.command == 'scan': run_scan(config, args.export, args.post_types, args.include_templates, args.silent)
        elif args.command == 'save-item': run_save_item(config, args.export, args.content_id, args.silent)
        elif args.command == 'update-db': run_update_db(config, args.silent)
        elif args.command == 'show': run_show(config)
    except Exception as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
