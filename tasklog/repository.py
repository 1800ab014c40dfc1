"""
SQLite-backed task and entry storage.

Ids come in as the digit strings captured from the URL and are converted here.
Deleting a row that does not exist is a no-op, and so is any id beyond
SQLite's 64-bit INTEGER range: no such row can exist.
"""

import logging
from datetime import datetime, timezone

from .db import get_db

log = logging.getLogger(__name__)


def _now():
    return datetime.now(timezone.utc).isoformat(timespec='seconds')


MAX_ROW_ID = 2 ** 63 - 1


def _row_id(ident):
    """The integer id for ``ident``, or None when SQLite could never store it."""
    value = int(ident)
    return value if value <= MAX_ROW_ID else None


class TaskRepository:

    def list(self):
        rows = get_db().execute('SELECT id, name FROM tasks ORDER BY id').fetchall()
        return [dict(row) for row in rows]

    def create(self, name):
        db = get_db()
        cur = db.execute('INSERT INTO tasks (name) VALUES (?)', (name,))
        db.commit()
        log.info("task %s created", cur.lastrowid)
        return cur.lastrowid

    def delete(self, task_id):
        row_id = _row_id(task_id)
        if row_id is None:
            return
        db = get_db()
        db.execute('DELETE FROM tasks WHERE id = ?', (row_id,))
        db.commit()
        log.info("task %s deleted", task_id)


class EntryRepository:

    def for_task(self, task_id):
        row_id = _row_id(task_id)
        if row_id is None:
            return []
        rows = get_db().execute(
            'SELECT id, task_id, description, created_at FROM task_entries'
            ' WHERE task_id = ? ORDER BY id',
            (row_id,),
        ).fetchall()
        return [dict(row) for row in rows]

    def task_name(self, task_id):
        row_id = _row_id(task_id)
        if row_id is None:
            return None
        row = get_db().execute('SELECT name FROM tasks WHERE id = ?', (row_id,)).fetchone()
        return row['name'] if row else None

    def create(self, task_id, description):
        db = get_db()
        cur = db.execute(
            'INSERT INTO task_entries (task_id, description, created_at) VALUES (?, ?, ?)',
            (int(task_id), description, _now()),
        )
        db.commit()
        log.info("entry %s added to task %s", cur.lastrowid, task_id)
        return cur.lastrowid

    def delete(self, entry_id):
        row_id = _row_id(entry_id)
        if row_id is None:
            return
        db = get_db()
        db.execute('DELETE FROM task_entries WHERE id = ?', (row_id,))
        db.commit()
        log.info("entry %s deleted", entry_id)
