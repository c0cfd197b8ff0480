import json
import logging
import os
import sqlite3
from utils.constants import DB_FILE

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Key/value store of JSON-encoded collections backed by one SQLite file.

    Each collection is an ordered list of plain dict records stored under a
    string key. Reads never raise for missing or malformed values: anything
    that does not decode to a JSON array is treated as an empty collection.
    """

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or DB_FILE
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            if self.db_path != ":memory:":
                self._conn.execute("PRAGMA journal_mode = WAL")
        return self._conn

    def initialize(self):
        """Create schema and seed default settings."""
        conn = self.get_connection()
        self._create_schema(conn)
        self._seed_defaults(conn)
        conn.commit()

    def _create_schema(self, conn: sqlite3.Connection):
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS collections (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS app_settings (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)

    def _seed_defaults(self, conn: sqlite3.Connection):
        conn.execute(
            "INSERT OR IGNORE INTO app_settings(key, value) VALUES (?, ?)",
            ("appearance_mode", "system"),
        )

    # ── Collections ──────────────────────────────────────────────────────────

    def read_collection(self, key: str) -> list[dict]:
        conn = self.get_connection()
        row = conn.execute(
            "SELECT value FROM collections WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return []
        try:
            data = json.loads(row["value"])
        except (TypeError, ValueError):
            logger.warning("Collection %r holds malformed JSON; treating as empty", key)
            return []
        if not isinstance(data, list):
            logger.warning("Collection %r is not an array; treating as empty", key)
            return []
        return data

    def write_collection(self, key: str, records: list[dict]):
        conn = self.get_connection()
        conn.execute(
            "INSERT OR REPLACE INTO collections(key, value) VALUES (?, ?)",
            (key, json.dumps(records, ensure_ascii=False)),
        )
        conn.commit()

    def remove_collection(self, key: str):
        conn = self.get_connection()
        conn.execute("DELETE FROM collections WHERE key = ?", (key,))
        conn.commit()

    # ── Settings ─────────────────────────────────────────────────────────────

    def get_setting(self, key: str, default: str = "") -> str:
        conn = self.get_connection()
        row = conn.execute(
            "SELECT value FROM app_settings WHERE key = ?", (key,)
        ).fetchone()
        return row["value"] if row else default

    def set_setting(self, key: str, value: str):
        conn = self.get_connection()
        conn.execute(
            "INSERT OR REPLACE INTO app_settings(key, value) VALUES (?, ?)",
            (key, value),
        )
        conn.commit()

    @staticmethod
    def open_default(db_folder: str | None = None, db_path: str | None = None) -> "DatabaseManager":
        """Startup factory: resolve the DB file location, open and initialize it.

        db_path wins over db_folder; with neither, the DB lives in the CWD.
        """
        if not db_path:
            db_path = os.path.join(db_folder, DB_FILE) if db_folder else DB_FILE
        folder = os.path.dirname(db_path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        logger.info("Opening database %s", db_path)
        db = DatabaseManager(db_path)
        db.initialize()
        return db

    def close(self):
        if self._conn:
            self._conn.close()
            self._conn = None
