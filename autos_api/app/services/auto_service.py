"""
Service layer for autos.

``AutoService`` implements lookup, filtering, creation, update and
deletion of autos stored in SQLite.  It validates incoming data and
reports problems with the exceptions from ``core.exceptions``; the
API layer decides which HTTP status each one maps to.

VINs are normalised (trimmed and upper‑cased) before every read and
write, so ``xx89dm`` and ``XX89DM`` address the same auto.  Colour and
make filters match exactly but ignore case.  All queries use
parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import date
from typing import List, Optional

from autos_api.app.core.db import get_connection, get_cursor
from autos_api.app.core.exceptions import (
    AutoNotFoundException,
    InvalidAutoException,
    InvalidUpdateAutoException,
)
from autos_api.app.schemas.auto import Auto, AutosList

# The first production automobile (Benz Patent-Motorwagen).
MIN_YEAR = 1886


class AutoService:
    """Service class for managing autos."""

    @classmethod
    async def get_all_autos(
        cls,
        color: Optional[str] = None,
        make: Optional[str] = None,
    ) -> AutosList:
        """Return all autos, optionally narrowed by colour and/or make.

        Called without arguments it lists every auto.  Passing both
        ``color`` and ``make`` returns only autos matching both.
        """
        clauses: List[str] = []
        params: List[str] = []
        if color is not None:
            clauses.append("color = ? COLLATE NOCASE")
            params.append(color.strip())
        if make is not None:
            clauses.append("make = ? COLLATE NOCASE")
            params.append(make.strip())
        query = "SELECT * FROM autos"
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY vin ASC"
        conn = get_connection()
        try:
            rows = conn.execute(query, params).fetchall()
            return AutosList(autos_list=[cls._row_to_auto(row) for row in rows])
        finally:
            conn.close()

    @classmethod
    async def get_all_autos_by_color(cls, color: str) -> AutosList:
        """Return autos with the given colour."""
        return await cls.get_all_autos(color=color)

    @classmethod
    async def get_all_autos_by_make(cls, make: str) -> AutosList:
        """Return autos built by the given make."""
        return await cls.get_all_autos(make=make)

    @classmethod
    async def get_auto(cls, vin: str) -> Optional[Auto]:
        """Retrieve a single auto by VIN, or ``None`` if it does not exist."""
        conn = get_connection()
        try:
            return cls._fetch(conn, cls._normalize_vin(vin))
        finally:
            conn.close()

    @classmethod
    async def add_auto(cls, auto: Auto) -> Auto:
        """Validate and store a new auto, returning the stored record.

        Raises ``InvalidAutoException`` if a required field is blank,
        the year is implausible or the VIN is already taken.
        """
        logger = logging.getLogger(__name__)
        vin = cls._normalize_vin(auto.vin)
        problems = cls._validate(auto, vin)
        if problems:
            logger.warning("Rejected auto %r: %s", auto.vin, "; ".join(problems))
            raise InvalidAutoException("; ".join(problems))
        owner = auto.owner.strip() if auto.owner and auto.owner.strip() else None
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    """
                    INSERT INTO autos (vin, color, make, model, year, owner)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        vin,
                        auto.color.strip(),
                        auto.make.strip(),
                        auto.model.strip(),
                        auto.year,
                        owner,
                    ),
                )
                created = cls._fetch(cursor.connection, vin)
        except sqlite3.IntegrityError as e:
            logger.warning("Rejected auto %s: VIN already exists", vin)
            raise InvalidAutoException(f"Auto with VIN {vin} already exists") from e
        logger.info("Created auto %s", vin)
        return created

    @classmethod
    async def update_auto(
        cls,
        vin: str,
        color: Optional[str],
        owner: Optional[str],
    ) -> Optional[Auto]:
        """Change the colour and/or owner of an auto.

        Only non‑blank values are applied.  Raises
        ``InvalidUpdateAutoException`` when neither is supplied, and
        returns ``None`` if no auto has the given VIN.
        """
        logger = logging.getLogger(__name__)
        color = color.strip() if color and color.strip() else None
        owner = owner.strip() if owner and owner.strip() else None
        if color is None and owner is None:
            logger.warning("Rejected update for auto %r: nothing to change", vin)
            raise InvalidUpdateAutoException("Update must include a color or an owner")
        vin = cls._normalize_vin(vin)
        with get_cursor() as cursor:
            cursor.execute(
                """
                UPDATE autos
                SET color = COALESCE(?, color),
                    owner = COALESCE(?, owner),
                    updated_at = CURRENT_TIMESTAMP
                WHERE vin = ?
                """,
                (color, owner, vin),
            )
            if cursor.rowcount == 0:
                return None
            updated = cls._fetch(cursor.connection, vin)
        logger.info("Updated auto %s", vin)
        return updated

    @classmethod
    async def delete_auto(cls, vin: str) -> None:
        """Delete an auto by VIN.

        Raises ``AutoNotFoundException`` if nothing was deleted.
        """
        logger = logging.getLogger(__name__)
        vin = cls._normalize_vin(vin)
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM autos WHERE vin = ?", (vin,))
            affected = cursor.rowcount
        if not affected:
            raise AutoNotFoundException(f"Auto with VIN {vin} not found")
        logger.info("Deleted auto %s", vin)

    @staticmethod
    def _normalize_vin(vin: Optional[str]) -> str:
        return (vin or "").strip().upper()

    @staticmethod
    def _validate(auto: Auto, vin: str) -> List[str]:
        """Collect human readable problems with ``auto``; empty if valid."""
        problems = []
        if not vin:
            problems.append("vin is required")
        for field in ("color", "make", "model"):
            value = getattr(auto, field)
            if value is None or not value.strip():
                problems.append(f"{field} is required")
        max_year = date.today().year + 1
        if auto.year is None or not MIN_YEAR <= auto.year <= max_year:
            problems.append(f"year must be between {MIN_YEAR} and {max_year}")
        return problems

    @classmethod
    def _fetch(cls, conn: sqlite3.Connection, vin: str) -> Optional[Auto]:
        row = conn.execute("SELECT * FROM autos WHERE vin = ?", (vin,)).fetchone()
        if not row:
            return None
        return cls._row_to_auto(row)

    @staticmethod
    def _row_to_auto(row: sqlite3.Row) -> Auto:
        """Convert a database row to an ``Auto`` schema instance."""
        return Auto(
            color=row["color"],
            make=row["make"],
            model=row["model"],
            year=row["year"],
            vin=row["vin"],
            owner=row["owner"],
        )
