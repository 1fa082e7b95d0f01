"""Closet storage abstractions and SQLite implementation."""
from __future__ import annotations

import json
import logging
import sqlite3
import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from models.garment import Garment, from_raw_metadata
from models.outfit import WearLogEntry

logger = logging.getLogger(__name__)

# Shoes are not laundered after a single wear.
LAUNDRY_EXEMPT_TYPES = ("shoe",)


class GarmentNotFoundError(KeyError):
    """Raised when an operation references garment ids the closet does not hold."""

    def __init__(self, garment_ids: Iterable[str]) -> None:
        self.garment_ids = list(garment_ids)
        super().__init__(f"Unknown garment ids: {self.garment_ids}")


class WardrobeStore:
    """Persistence interface for garments and wear history."""

    def add_garment(self, data: Dict[str, Any]) -> str:
        raise NotImplementedError

    def get_garment(self, garment_id: str) -> Optional[Garment]:
        raise NotImplementedError

    def get_all_garments(self) -> List[Garment]:
        raise NotImplementedError

    def update_garment(self, garment_id: str, updated_fields: Dict[str, Any]) -> Optional[Garment]:
        raise NotImplementedError

    def delete_garment(self, garment_id: str) -> bool:
        raise NotImplementedError

    def log_wear(self, garment_ids: List[str], metadata: Optional[Dict[str, Any]] = None) -> WearLogEntry:
        raise NotImplementedError

    def list_wear_logs(self, limit: int = 50) -> List[WearLogEntry]:
        raise NotImplementedError

    def mark_clean(self, garment_ids: List[str]) -> int:
        raise NotImplementedError

    def list_dirty_garments(self) -> List[Garment]:
        raise NotImplementedError

    def clear_all(self) -> None:
        raise NotImplementedError


class SQLiteWardrobeStore(WardrobeStore):
    """Local SQLite-backed store for garments and wear logs."""

    def __init__(self, database_path: str | Path = "data/closet.db", timeout_seconds: float = 10.0) -> None:
        self.database_path = Path(database_path)
        self.timeout_seconds = timeout_seconds
        if self.database_path.parent and not self.database_path.parent.exists():
            self.database_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_tables()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path, timeout=self.timeout_seconds)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_tables(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS garments (
                    id TEXT PRIMARY KEY NOT NULL,
                    type TEXT NOT NULL,
                    name TEXT,
                    colors TEXT NOT NULL,
                    warmth INTEGER NOT NULL,
                    water_resistant INTEGER NOT NULL,
                    dress_codes TEXT NOT NULL,
                    image_uri TEXT,
                    last_worn_at TEXT,
                    times_worn INTEGER DEFAULT 0,
                    is_dirty INTEGER DEFAULT 0,
                    favorite INTEGER DEFAULT 0
                );
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS wear_logs (
                    id TEXT PRIMARY KEY NOT NULL,
                    garment_ids TEXT NOT NULL,
                    worn_at TEXT NOT NULL,
                    weather TEXT,
                    dress_code TEXT
                );
                """
            )

    @staticmethod
    def _serialise_list(values: Optional[List[object]]) -> str:
        return json.dumps(values or [])

    @staticmethod
    def _deserialise_list(raw: str) -> List[object]:
        return json.loads(raw) if raw else []

    def _save(self, conn: sqlite3.Connection, garment: Garment) -> None:
        conn.execute(
            """
            INSERT OR REPLACE INTO garments (
                id, type, name, colors, warmth, water_resistant, dress_codes,
                image_uri, last_worn_at, times_worn, is_dirty, favorite
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                garment.id,
                garment.type,
                garment.name,
                self._serialise_list(garment.colors),
                garment.warmth,
                int(garment.water_resistant),
                self._serialise_list(garment.dress_codes),
                garment.image_uri,
                garment.last_worn_at,
                garment.times_worn,
                int(garment.is_dirty),
                int(garment.favorite),
            ),
        )

    def _row_to_garment(self, row: sqlite3.Row) -> Garment:
        return Garment(
            id=row["id"],
            type=row["type"],
            name=row["name"],
            colors=self._deserialise_list(row["colors"]),
            warmth=row["warmth"],
            water_resistant=row["water_resistant"] == 1,
            dress_codes=self._deserialise_list(row["dress_codes"]) or ["casual"],
            image_uri=row["image_uri"],
            last_worn_at=row["last_worn_at"],
            times_worn=row["times_worn"] or 0,
            is_dirty=row["is_dirty"] == 1,
            favorite=row["favorite"] == 1,
        )

    def _row_to_log(self, row: sqlite3.Row) -> WearLogEntry:
        return WearLogEntry(
            log_id=row["id"],
            garment_ids=[str(value) for value in self._deserialise_list(row["garment_ids"])],
            worn_at=row["worn_at"],
            weather=json.loads(row["weather"]) if row["weather"] else None,
            dress_code=row["dress_code"],
        )

    def add_garment(self, data: Dict[str, Any]) -> str:
        garment = from_raw_metadata({**data, "id": data.get("id") or str(uuid.uuid4())})
        with self._connect() as conn:
            self._save(conn, garment)
        logger.info("Stored garment %s (%s)", garment.id, garment.type)
        return garment.id

    def get_garment(self, garment_id: str) -> Optional[Garment]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM garments WHERE id = ?", (garment_id,)).fetchone()
            return self._row_to_garment(row) if row else None

    def get_all_garments(self) -> List[Garment]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT * FROM garments ORDER BY times_worn ASC, id ASC")
            return [self._row_to_garment(row) for row in cursor.fetchall()]

    def update_garment(self, garment_id: str, updated_fields: Dict[str, Any]) -> Optional[Garment]:
        current = self.get_garment(garment_id)
        if not current:
            return None

        for key, value in updated_fields.items():
            if key == "id":
                continue
            if hasattr(current, key):
                setattr(current, key, value)

        validated = Garment(**asdict(current))
        with self._connect() as conn:
            self._save(conn, validated)
        return validated

    def delete_garment(self, garment_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM garments WHERE id = ?", (garment_id,))
            return cursor.rowcount > 0

    def log_wear(self, garment_ids: List[str], metadata: Optional[Dict[str, Any]] = None) -> WearLogEntry:
        """Record one wear of each garment and append a wear log entry.

        Runs in a single transaction; counters are incremented in SQL so
        overlapping calls never lose a wear. Unknown ids abort the whole call.
        """

        metadata = metadata or {}
        unique_ids = list(dict.fromkeys(str(garment_id) for garment_id in garment_ids))
        worn_at = datetime.now(timezone.utc).isoformat()
        entry = WearLogEntry(
            log_id=str(uuid.uuid4()),
            garment_ids=unique_ids,
            worn_at=worn_at,
            weather=metadata.get("weather"),
            dress_code=metadata.get("dress_code"),
        )
        placeholders = ", ".join("?" for _ in LAUNDRY_EXEMPT_TYPES)

        conn = self._connect()
        try:
            with conn:
                conn.execute("BEGIN IMMEDIATE")
                missing = []
                for garment_id in unique_ids:
                    cursor = conn.execute(
                        f"""
                        UPDATE garments
                        SET times_worn = times_worn + 1,
                            last_worn_at = ?,
                            is_dirty = CASE WHEN type IN ({placeholders}) THEN is_dirty ELSE 1 END
                        WHERE id = ?
                        """,
                        (worn_at, *LAUNDRY_EXEMPT_TYPES, garment_id),
                    )
                    if cursor.rowcount == 0:
                        missing.append(garment_id)
                if missing:
                    raise GarmentNotFoundError(missing)
                conn.execute(
                    "INSERT INTO wear_logs (id, garment_ids, worn_at, weather, dress_code) VALUES (?, ?, ?, ?, ?)",
                    (
                        entry.log_id,
                        self._serialise_list(entry.garment_ids),
                        entry.worn_at,
                        json.dumps(entry.weather) if entry.weather else None,
                        entry.dress_code,
                    ),
                )
        finally:
            conn.close()
        logger.info("Logged wear of %s garments as %s", len(unique_ids), entry.log_id)
        return entry

    def list_wear_logs(self, limit: int = 50) -> List[WearLogEntry]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT * FROM wear_logs ORDER BY worn_at DESC LIMIT ?", (limit,))
            return [self._row_to_log(row) for row in cursor.fetchall()]

    def mark_clean(self, garment_ids: List[str]) -> int:
        """Clear the dirty flag after laundry; returns how many garments changed."""

        with self._connect() as conn:
            cleaned = 0
            for garment_id in garment_ids:
                cursor = conn.execute(
                    "UPDATE garments SET is_dirty = 0 WHERE id = ? AND is_dirty = 1", (garment_id,)
                )
                cleaned += cursor.rowcount
        return cleaned

    def list_dirty_garments(self) -> List[Garment]:
        with self._connect() as conn:
            cursor = conn.execute("SELECT * FROM garments WHERE is_dirty = 1 ORDER BY id")
            return [self._row_to_garment(row) for row in cursor.fetchall()]

    def clear_all(self) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM garments")
            conn.execute("DELETE FROM wear_logs")


__all__ = ["WardrobeStore", "SQLiteWardrobeStore", "GarmentNotFoundError", "LAUNDRY_EXEMPT_TYPES"]
