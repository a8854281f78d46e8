from flask_sqlalchemy import SQLAlchemy
from sqlite3 import Connection as SQLite3Connection

from sqlalchemy import event
from sqlalchemy.engine import Engine

# Objects returned by an operation keep the state read inside its transaction
db = SQLAlchemy(session_options={"expire_on_commit": False})


# Apply SQLite pragmas on each new connection to reduce locking
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    if not isinstance(dbapi_connection, SQLite3Connection):
        return
    # pysqlite defers BEGIN until the first write; transactions are begun in sqlite_begin instead
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    # WAL allows concurrent readers; busy_timeout makes writes wait instead of failing fast
    cursor.execute("PRAGMA busy_timeout=5000;")  # ms
    cursor.execute("PRAGMA journal_mode=WAL;")
    cursor.execute("PRAGMA foreign_keys=ON;")
    cursor.close()


# Take the write lock when the transaction starts, so reads made before a write
# cannot go stale under a concurrent writer (SQLite ignores FOR UPDATE)
@event.listens_for(Engine, "begin")
def sqlite_begin(conn):
    if conn.dialect.name != "sqlite":
        return
    conn.exec_driver_sql("BEGIN IMMEDIATE")
