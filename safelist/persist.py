from bs4 import BeautifulSoup, Comment
from pathlib import Path
import base64, sqlite3

MIRROR_NOTE = ' Auto-generated by the class safelist scanner. Do not edit. '
DB_VERSION = 100

class SafelistFile:
    '''file sink: base64 blob for tailwind.config + markup mirror for content scanning'''

    def __init__(self, output_path: str | Path, mirror_path: str | Path | None = None):
        self.output_path = Path(output_path)
        self.mirror_path = Path(mirror_path) if mirror_path else None

    def write(self, classes: list[str]) -> None:
        encoded = base64.b64encode(' '.join(classes).encode('utf-8')).decode('ascii')
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.output_path, 'w', encoding='utf-8') as f:
            f.write(encoded)
        if self.mirror_path is None: return
        self.mirror_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.mirror_path, 'w', encoding='utf-8') as f:
            f.write(_render_mirror(classes))

    def read(self) -> list[str]:
        if not self.output_path.exists(): return []
        with open(self.output_path, 'r', encoding='utf-8') as f:
            encoded = f.read().strip()
        if not encoded: return []
        return base64.b64decode(encoded).decode('utf-8').split()

    def read_mirror(self) -> list[str]:
        if self.mirror_path is None or not self.mirror_path.exists(): return []
        with open(self.mirror_path, 'r', encoding='utf-8') as f:
            soup = BeautifulSoup(f.read(), 'html.parser')
        div = soup.find('div')
        if div is None: return []
        return list(div.get('class') or [])

def _render_mirror(classes: list[str]) -> str:
    '''<!-- note --> + <div class="..."></div>'''
    soup = BeautifulSoup('', 'html.parser')
    soup.append(Comment(MIRROR_NOTE))
    soup.append('\n')
    div = soup.new_tag('div')
    div['class'] = ' '.join(classes)
    soup.append(div)
    return str(soup)

class SafelistTable:
    '''log table sink: one row per (class_name, post_id)'''

    def __init__(self, db_path: str | Path, table_name: str = 'tailwind_safelist'):
        if not table_name.replace('_', '').isalnum(): raise ValueError(f'invalid table name: {table_name!r}')
        self.db_path = Path(db_path)
        self.table_name = table_name

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return sqlite3.connect(self.db_path)

    def exists(self) -> bool:
        if not self.db_path.exists(): return False
        con = self._connect()
        try: return self._has_table(con)
        finally: con.close()

    def create(self) -> bool:
        '''creates the table; False if the schema is already up to date'''
        con = self._connect()
        try:
            version = con.execute('PRAGMA user_version').fetchone()[0]
            if version >= DB_VERSION and self._has_table(con): return False
            with con:
                con.execute(f'''CREATE TABLE IF NOT EXISTS {self.table_name} (
                    class_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    class_name VARCHAR(191) NOT NULL,
                    post_id INTEGER NOT NULL
                )''')
                con.execute(f'CREATE INDEX IF NOT EXISTS idx_{self.table_name}_post_id ON {self.table_name} (post_id)')
                con.execute(f'CREATE INDEX IF NOT EXISTS idx_{self.table_name}_class_name ON {self.table_name} (class_name)')
                con.execute(f'PRAGMA user_version = {DB_VERSION}')
        finally: con.close()
        return True

    def _has_table(self, con: sqlite3.Connection) -> bool:
        row = con.execute("SELECT name FROM sqlite_master WHERE type = 'table' AND name = ?", (self.table_name,)).fetchone()
        return row is not None

    def replace(self, content_id: int, classes: list[str]) -> None:
        '''drops the previous rows of content_id, then inserts the new ones'''
        con = self._connect()
        try:
            with con:
                con.execute(f'DELETE FROM {self.table_name} WHERE post_id = ?', (content_id,))
                con.executemany(f'INSERT INTO {self.table_name} (class_name, post_id) VALUES (?, ?)',
                                [(c, content_id) for c in classes])
        finally: con.close()

    def truncate(self) -> None:
        con = self._connect()
        try:
            with con: con.execute(f'DELETE FROM {self.table_name}')
        finally: con.close()

    def classes_for(self, content_id: int) -> list[str]:
        con = self._connect()
        try:
            rows = con.execute(f'SELECT class_name FROM {self.table_name} WHERE post_id = ?', (content_id,)).fetchall()
        finally: con.close()
        return sorted(r[0] for r in rows)

    def distinct_classes(self) -> list[str]:
        con = self._connect()
        try:
            rows = con.execute(f'SELECT DISTINCT class_name FROM {self.table_name}').fetchall()
        finally: con.close()
        return sorted(r[0] for r in rows)

class Persister:
    '''writes scan results to the file sink and (if present) the table sink, no rollback between them'''

    def __init__(self, file_sink, table_sink=None, silent: bool = False):
        self.file_sink = file_sink
        self.table_sink = table_sink
        self.silent = silent

    def save(self, classes: list[str]) -> None:
        '''global scan: the table is rebuilt under content id 0'''
        if self.table_sink is not None and self.table_sink.exists():
            self.table_sink.truncate()
            self.table_sink.replace(0, classes)
        elif not self.silent: print('Table: not found, run update-db to create it')
        self.file_sink.write(classes)
        if not self.silent: print(f'Safelist: {len(classes)} classes have been written')

    def save_item(self, content_id: int, classes: list[str]) -> bool:
        '''incremental update of one content item; False if nothing changed'''
        if self.table_sink is None or not self.table_sink.exists():
            if not self.silent: print('Table: not found, run update-db to create it')
            return False
        if self.table_sink.classes_for(content_id) == sorted(set(classes)): return False  # unchanged
        self.table_sink.replace(content_id, classes)
        merged = self.table_sink.distinct_classes()
        self.file_sink.write(merged)
        if not self.silent: print(f'Safelist: item {content_id} updated, {len(merged)} classes have been written')
        return True
