from __future__ import annotations

import json
import secrets
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from resume_analyzer.core.config import settings

_SCHEMA = """
CREATE TABLE IF NOT EXISTS resume_analyses (
    id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    resume_text TEXT NOT NULL,
    job_description TEXT,
    target_industry TEXT,
    analysis_json TEXT NOT NULL,
    ip_address TEXT,
    user_agent TEXT,
    ai_provider TEXT NOT NULL,
    version TEXT NOT NULL
)
"""

_INDEX = """
CREATE INDEX IF NOT EXISTS idx_resume_analyses_created_at
ON resume_analyses (created_at)
"""


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _get_db_path() -> Path:
    return Path(settings.history_db_path)


def _connect() -> sqlite3.Connection:
    db_path = _get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.execute(_SCHEMA)
    conn.execute(_INDEX)
    return conn


def init_db() -> None:
    if not settings.history_enabled:
        return
    conn = _connect()
    try:
        conn.commit()
    finally:
        conn.close()
    purge_old_records()


def save_analysis(
    *,
    resume_text: str,
    job_description: str | None,
    target_industry: str | None,
    analysis: dict[str, Any],
    ip_address: str,
    user_agent: str,
    ai_provider: str,
    version: str,
) -> str:
    """Insert one analysis and return its opaque id. Texts are truncated to the configured sizes."""
    record_id = secrets.token_hex(12)
    stored_job_description = (
        job_description[: settings.stored_job_description_chars] if job_description else None
    )
    conn = _connect()
    try:
        with conn:
            conn.execute(
                """
                INSERT INTO resume_analyses (
                    id, created_at, resume_text, job_description, target_industry,
                    analysis_json, ip_address, user_agent, ai_provider, version
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    record_id,
                    _utc_now(),
                    resume_text[: settings.stored_resume_chars],
                    stored_job_description,
                    target_industry,
                    json.dumps(analysis, ensure_ascii=False),
                    ip_address,
                    user_agent,
                    ai_provider,
                    version,
                ),
            )
    finally:
        conn.close()
    return record_id


def _row_to_dict(cursor: sqlite3.Cursor, row: tuple) -> dict[str, Any]:
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


def get_recent_analyses(limit: int = 50, offset: int = 0) -> list[dict[str, Any]]:
    if not settings.history_enabled:
        return []
    conn = _connect()
    try:
        cur = conn.execute(
            """
            SELECT id, created_at, resume_text, analysis_json, version
            FROM resume_analyses
            ORDER BY created_at DESC, rowid DESC
            LIMIT ? OFFSET ?
            """,
            (limit, offset),
        )
        rows = [_row_to_dict(cur, row) for row in cur.fetchall()]
    finally:
        conn.close()

    for row in rows:
        row["analysis"] = json.loads(row.pop("analysis_json") or "{}")
    return rows


def count_analyses() -> int:
    if not settings.history_enabled:
        return 0
    conn = _connect()
    try:
        cur = conn.execute("SELECT COUNT(*) FROM resume_analyses")
        return int(cur.fetchone()[0] or 0)
    finally:
        conn.close()


def purge_old_records() -> int:
    if not settings.history_enabled:
        return 0
    retention_days = max(1, int(settings.history_retention_days))
    cutoff = datetime.now(timezone.utc).timestamp() - retention_days * 86400
    cutoff_iso = datetime.fromtimestamp(cutoff, tz=timezone.utc).isoformat()
    conn = _connect()
    try:
        with conn:
            cur = conn.execute("DELETE FROM resume_analyses WHERE created_at < ?", (cutoff_iso,))
            return int(cur.rowcount or 0)
    finally:
        conn.close()
