from safelist.content_source import ContentSource, Post, FORM_TYPE
from safelist.extract_blocks import extract_block_classes
from safelist.extract_classes import extract_classes
from safelist.walk_fields import walk_plain
from safelist.config.settings import ScanConfig
from pathlib import Path

class Scanner:
    '''collects class tokens from every content source of an export'''

    def __init__(self, config: ScanConfig, source: ContentSource, silent: bool = False):
        self.config = config
        self.source = source
        self.walker = config.walker()
        self.filter = config.filter()
        self.silent = silent

    def scan_all(self, post_types=None, include_templates: bool = False) -> list[str]:
        classes = self.scan_posts(post_types)
        classes += self.scan_options()
        classes += self.scan_widgets()
        if include_templates: classes += self.scan_templates()
        return self.filter.apply(classes)

    def scan_item(self, content_id: int) -> list[str]:
        '''filtered classes of a single post (incremental update)'''
        post = self.source.get_post(content_id)
        if post is None: raise LookupError(f'post {content_id} not found in export')
        return self.filter.apply(self.scan_post(post))

    def scan_posts(self, post_types=None) -> list[str]:
        types = list(post_types) if post_types else self.source.post_types()
        self._log(f'Scanning post types: {", ".join(types)}')
        classes: list[str] = []
        for post_type in types:
            posts = self.source.posts([post_type])
            for post in posts: classes += self.scan_post(post)
            self._log(f'  - {post_type}: {len(posts)} items scanned')
        return classes

    def scan_post(self, post: Post) -> list[str]:
        '''raw classes of one post: blocks, content, custom fields, meta, form'''
        classes = extract_block_classes(post.content)
        classes += extract_classes(post.content)
        if post.fields:
            try: classes += self.walker.walk(post.fields)
            except Exception as e:  # broken field data only costs this post its fields
                self._log(f'  ! post {post.id}: custom fields skipped ({e})')
        for key, values in post.meta.items():
            if str(key).startswith('_'): continue  # private meta
            classes += walk_plain(values if isinstance(values, list) else [values])
        if post.type == FORM_TYPE or post.form:
            classes += extract_classes(post.form)
            if post.mail and isinstance(post.mail.get('body'), str): classes += extract_classes(post.mail['body'])
        return classes

    def scan_options(self) -> list[str]:
        self._log('Scanning option pages...')
        classes: list[str] = []
        for slug, fields in self.source.option_pages().items():
            try: classes += self.walker.walk(fields)
            except Exception as e:
                self._log(f'  ! option page {slug}: skipped ({e})')
        return classes

    def scan_widgets(self) -> list[str]:
        self._log('Scanning widgets...')
        classes: list[str] = []
        for settings in self.source.widget_settings(): classes += walk_plain(settings)
        return classes

    def scan_templates(self, template_dir: str | Path | None = None) -> list[str]:
        '''classes of theme templates (*.php, which includes *.blade.php)'''
        template_dir = Path(template_dir) if template_dir else self.config.template_dir
        if template_dir is None or not Path(template_dir).is_dir(): return []
        self._log(f'Scanning templates in {template_dir}...')
        classes: list[str] = []
        for path in sorted(Path(template_dir).rglob('*.php')):
            if not path.is_file(): continue
            with path.open('r', encoding='utf-8', errors='ignore') as file:
                classes += extract_classes(file.read())
        return classes

    def _log(self, msg: str) -> None:
        if not self.silent: print(msg)
