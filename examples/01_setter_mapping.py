"""
Example 01: Setter Mapping

This example demonstrates mapping SQLite result rows onto objects whose
setters follow the column naming convention.
"""

import logging
import sqlite3
from datetime import datetime

from row_setter import NameConventionMapper, iter_rows, map_cursor


class User:
    """User with camel-case setters"""

    def __init__(self):
        self.user_id = 0
        self.user_name = None
        self.created_at = None

    def setUserId(self, value: int) -> None:
        self.user_id = value

    def setUserName(self, value: str) -> None:
        self.user_name = value

    def setCreatedAt(self, value: datetime) -> None:
        self.created_at = value

    def __repr__(self):
        return f"User(user_id={self.user_id}, user_name={self.user_name!r}, created_at={self.created_at})"


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    conn = sqlite3.connect(":memory:")
    conn.execute("""
        CREATE TABLE users (
            user_id INTEGER PRIMARY KEY,
            user_name TEXT NOT NULL,
            created_at TEXT
        )
    """)
    conn.execute("INSERT INTO users VALUES (1, 'Alice', '2024-01-02 03:04:05')")
    conn.execute("INSERT INTO users VALUES (2, 'Bob', NULL)")
    conn.execute("INSERT INTO users VALUES (3, 'Carol', 'not a date')")
    conn.commit()

    # Example 1: Map every row to a new User
    print("=== Mapping a result set ===")
    cursor = conn.execute("SELECT USER_ID, USER_NAME, CREATED_AT, 'x' AS EXTRA_COL FROM users")
    for user in map_cursor(cursor, NameConventionMapper(User)):
        print(f"  {user}")

    # Example 2: Populate an existing object from a single row
    print("\n=== Populating an existing instance ===")
    existing = User()
    cursor = conn.execute("SELECT user_name AS USER_NAME FROM users WHERE user_id = 2")
    mapper = NameConventionMapper(existing)
    for row in iter_rows(cursor):
        mapper(row)
    print(f"  {existing}")

    conn.close()


if __name__ == "__main__":
    main()
