from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import mysql.connector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "timesheet_payroll")),
    )


def _connect(target: DBTarget, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


# a run of plain characters or complete quoted strings, up to the next bare ';'
_STATEMENT_RE = re.compile(r"""(?:[^;'"]|'(?:\\.|[^'\\])*'|"(?:\\.|[^"\\])*")+""")
# database selection is done by the connection, not by schema.sql
_DB_LEVEL_RE = re.compile(r"^(?:CREATE\s+DATABASE|USE)\b", re.IGNORECASE)


def schema_statements(sql: str) -> list[str]:
    """Split schema.sql into the statements to run against the configured database.

    ``--`` comment lines are dropped, as are ``CREATE DATABASE`` and ``USE``.
    """
    body = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))
    statements = []
    for chunk in _STATEMENT_RE.findall(body):
        stmt = chunk.strip()
        if stmt and not _DB_LEVEL_RE.match(stmt):
            statements.append(stmt)
    return statements


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    statements = schema_statements(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema %s", schema_path)


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
