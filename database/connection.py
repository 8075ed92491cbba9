"""
Database connection management
"""
import sqlite3
from contextlib import contextmanager
from typing import Generator


class DatabaseConnection:
    # Manages the sqlite file that backs the key/value store

    def __init__(self, db_path: str = "violetstore.db"):
        # Remember the database path and make sure the schema exists
        self.db_path = db_path
        self.init_database()

    def init_database(self):
        # Create the key/value table used for every persisted snapshot
        with self.get_connection() as conn:
            cursor = conn.cursor()

            cursor.execute('''
            CREATE TABLE IF NOT EXISTS Storage (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            ''')

            conn.commit()

    @contextmanager
    def get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        # Open a connection for the duration of the with-block
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
        finally:
            conn.close()
