"""
SQLite-backed store for colors, lists, entries, habits and days.

Every public operation is a single statement (or a select/statement pair)
against the calling thread's connection. Storage errors never leave this module: they
are logged and turned into ``None`` (row operations) or ``0`` (counts).
"""

import sqlite3
import itertools
import threading
import logging
from functools import wraps

log = logging.getLogger(__name__)

SCHEMA = """
    CREATE TABLE IF NOT EXISTS colors (
        color_id INTEGER PRIMARY KEY AUTOINCREMENT,
        color_name TEXT NOT NULL,
        color_value TEXT NOT NULL
    );
    CREATE TABLE IF NOT EXISTS lists (
        list_id INTEGER PRIMARY KEY AUTOINCREMENT,
        list_name TEXT NOT NULL,
        list_color INTEGER DEFAULT 1
    );
    CREATE TABLE IF NOT EXISTS entries (
        entry_id INTEGER PRIMARY KEY AUTOINCREMENT,
        list_id INTEGER NOT NULL,
        entry_text TEXT NOT NULL,
        entry_checked BOOLEAN DEFAULT 0,
        FOREIGN KEY (list_id) REFERENCES lists(list_id) ON DELETE CASCADE
    );
    CREATE TABLE IF NOT EXISTS habits (
        habit_id INTEGER PRIMARY KEY AUTOINCREMENT,
        habit_name TEXT NOT NULL,
        habit_color INTEGER DEFAULT 1
    );
    CREATE TABLE IF NOT EXISTS days (
        day_id INTEGER PRIMARY KEY AUTOINCREMENT,
        habit_id INTEGER NOT NULL,
        day_value TEXT NOT NULL,
        day_completion REAL NOT NULL,
        FOREIGN KEY (habit_id) REFERENCES habits(habit_id) ON DELETE CASCADE
    );
"""

# table -> primary key column
ID_FIELDS = {
    "colors": "color_id",
    "lists": "list_id",
    "entries": "entry_id",
    "habits": "habit_id",
    "days": "day_id",
}


def _row(table, row):
    if row is None:
        return None
    d = dict(row)
    if table == "entries":
        d["entry_checked"] = bool(d["entry_checked"])
    return d


def _guarded(default):
    """Turn any storage error raised by the wrapped operation into `default`."""
    def deco(f):
        @wraps(f)
        def decorated(self, *args, **kwargs):
            try:
                return f(self, *args, **kwargs)
            # OverflowError: an id or value outside SQLite's 64-bit INTEGER range
            except (sqlite3.Error, OverflowError) as e:
                log.warning("%s%r failed: %s", f.__name__, args, e)
                return default
        return decorated
    return deco


class Store:
    """
    One sqlite3 connection per thread, opened on first use.

    `lastrowid` and `rowcount` are per connection, so a create's fetch-back
    and a clear's count never see another thread's statement.
    ``":memory:"`` becomes a named shared-cache database so every thread
    sees the same tables.
    """

    _memory_ids = itertools.count()

    def __init__(self, path):
        self.path = path
        if path == ":memory:":
            self._target = f"file:habitlists-{next(self._memory_ids)}?mode=memory&cache=shared"
        else:
            self._target = path
        self._local = threading.local()
        self._conns = []
        self._conns_lock = threading.Lock()
        self._closed = False
        # this first connection also keeps a shared-cache memory db alive
        self.db.execute("PRAGMA journal_mode=WAL")
        self.db.executescript(SCHEMA)

    @property
    def db(self):
        if self._closed:
            raise sqlite3.ProgrammingError("Cannot operate on a closed database.")
        conn = getattr(self._local, "conn", None)
        if conn is None:
            # isolation_level=None: autocommit, every statement is its own transaction
            conn = sqlite3.connect(self._target, uri=True, check_same_thread=False,
                                   isolation_level=None)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys=ON")
            self._local.conn = conn
            with self._conns_lock:
                self._conns.append(conn)
        return conn

    def close(self):
        with self._conns_lock:
            self._closed = True
            conns, self._conns = self._conns, []
        for conn in conns:
            conn.close()

    def ping(self):
        return self.db.execute("SELECT 1").fetchone()[0] == 1

    # ── Generic helpers ───────────────────────────────────────────────────

    def _get(self, table, row_id):
        r = self.db.execute(f"SELECT * FROM {table} WHERE {ID_FIELDS[table]} = ?",
                            (row_id,)).fetchone()
        return _row(table, r)

    def _all(self, table):
        return [_row(table, r) for r in self.db.execute(f"SELECT * FROM {table}").fetchall()]

    def _insert(self, table, **values):
        cols = ", ".join(values)
        marks = ", ".join("?" for _ in values)
        cur = self.db.execute(f"INSERT INTO {table} ({cols}) VALUES ({marks})",
                              tuple(values.values()))
        return self._get(table, cur.lastrowid)

    def _set(self, table, row_id, column, value):
        self.db.execute(f"UPDATE {table} SET {column} = ? WHERE {ID_FIELDS[table]} = ?",
                        (value, row_id))
        return self._get(table, row_id)

    def _delete(self, table, row_id):
        snapshot = self._get(table, row_id)
        if snapshot is None:
            return None
        self.db.execute(f"DELETE FROM {table} WHERE {ID_FIELDS[table]} = ?", (row_id,))
        return snapshot

    # ── Colors ────────────────────────────────────────────────────────────

    @_guarded([])
    def all_colors(self):
        return self._all("colors")

    @_guarded(None)
    def add_color(self, color_name, color_value="#000000"):
        return self._insert("colors", color_name=color_name, color_value=color_value)

    @_guarded(None)
    def delete_color(self, color_id):
        # lists/habits referencing this color keep the stale id
        return self._delete("colors", color_id)

    # ── Lists ─────────────────────────────────────────────────────────────

    @_guarded([])
    def all_lists(self):
        return self._all("lists")

    @_guarded(None)
    def add_list(self, list_name, list_color=1):
        return self._insert("lists", list_name=list_name, list_color=list_color)

    @_guarded(None)
    def update_list_name(self, list_id, list_name):
        return self._set("lists", list_id, "list_name", list_name)

    @_guarded(None)
    def update_list_color(self, list_id, list_color):
        return self._set("lists", list_id, "list_color", list_color)

    @_guarded(None)
    def delete_list(self, list_id):
        return self._delete("lists", list_id)

    @_guarded(0)
    def clear_list(self, list_id):
        return self.db.execute("DELETE FROM entries WHERE list_id = ?", (list_id,)).rowcount

    # ── Entries ───────────────────────────────────────────────────────────

    @_guarded([])
    def all_entries(self):
        return self._all("entries")

    @_guarded(None)
    def add_entry(self, list_id, entry_text, entry_checked=False):
        return self._insert("entries", list_id=list_id, entry_text=entry_text,
                            entry_checked=1 if entry_checked else 0)

    @_guarded(None)
    def update_entry_text(self, entry_id, entry_text):
        return self._set("entries", entry_id, "entry_text", entry_text)

    @_guarded(None)
    def set_entry_checked(self, entry_id, checked):
        return self._set("entries", entry_id, "entry_checked", 1 if checked else 0)

    @_guarded(None)
    def toggle_entry(self, entry_id):
        self.db.execute("UPDATE entries SET entry_checked = NOT entry_checked WHERE entry_id = ?",
                        (entry_id,))
        return self._get("entries", entry_id)

    @_guarded(None)
    def delete_entry(self, entry_id):
        return self._delete("entries", entry_id)

    # ── Habits ────────────────────────────────────────────────────────────

    @_guarded([])
    def all_habits(self):
        return self._all("habits")

    @_guarded(None)
    def add_habit(self, habit_name, habit_color=1):
        return self._insert("habits", habit_name=habit_name, habit_color=habit_color)

    @_guarded(None)
    def update_habit_name(self, habit_id, habit_name):
        return self._set("habits", habit_id, "habit_name", habit_name)

    @_guarded(None)
    def update_habit_color(self, habit_id, habit_color):
        return self._set("habits", habit_id, "habit_color", habit_color)

    @_guarded(None)
    def delete_habit(self, habit_id):
        return self._delete("habits", habit_id)

    @_guarded(0)
    def clear_habit(self, habit_id):
        return self.db.execute("DELETE FROM days WHERE habit_id = ?", (habit_id,)).rowcount

    # ── Days ──────────────────────────────────────────────────────────────

    @_guarded([])
    def all_days(self):
        return self._all("days")

    @_guarded(None)
    def add_day(self, habit_id, day_value, day_completion=1.0):
        return self._insert("days", habit_id=habit_id, day_value=day_value,
                            day_completion=day_completion)

    @_guarded(None)
    def update_day_value(self, day_id, day_value):
        return self._set("days", day_id, "day_value", day_value)

    @_guarded(None)
    def update_day_completion(self, day_id, day_completion):
        return self._set("days", day_id, "day_completion", day_completion)

    @_guarded(None)
    def delete_day(self, day_id):
        return self._delete("days", day_id)
