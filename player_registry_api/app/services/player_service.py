"""
Service layer for players.

``PlayerService`` owns every read and write of the ``players`` table.
Creation validates the full record and computes the derived level
fields; updates merge only the supplied fields, re-validating
birthday and experience; listings load the whole table and run it
through the in-memory pipeline in ``player_query``.

Every method opens its own connection and closes it before
returning.  Rejected input raises ``InvalidPlayerError`` and unknown
identifiers raise ``PlayerNotFoundError``; in both cases nothing is
written.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from player_registry_api.app.core.config import settings
from player_registry_api.app.core.db import get_connection
from player_registry_api.app.core.exceptions import InvalidPlayerError, PlayerNotFoundError
from player_registry_api.app.schemas.player import (
    PlayerCreate,
    PlayerFilter,
    PlayerOrder,
    PlayerRead,
    PlayerUpdate,
)
from player_registry_api.app.services import player_query
from player_registry_api.app.services.player_rules import (
    compute_level,
    compute_until_next_level,
    is_birthday_valid,
    is_experience_valid,
    is_valid_player,
)

logger = logging.getLogger(__name__)


class PlayerService:
    """Service class for managing players."""

    @classmethod
    async def create_player(cls, data: PlayerCreate) -> PlayerRead:
        """Validate, derive the level fields and insert a new player.

        ``banned`` defaults to ``False`` when omitted.  Returns the
        stored player including its new identifier.
        """
        if not is_valid_player(data):
            logger.warning("Rejected player creation: invalid data for name %r", data.name)
            raise InvalidPlayerError("Invalid player data")
        banned = data.banned if data.banned is not None else False
        level = compute_level(data.experience)
        until_next_level = compute_until_next_level(level, data.experience)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                """
                INSERT INTO players (name, title, race, profession, birthday, banned, experience, level, until_next_level)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data.name,
                    data.title,
                    data.race.value,
                    data.profession.value,
                    data.birthday,
                    int(banned),
                    data.experience,
                    level,
                    until_next_level,
                ),
            )
            player_id = cursor.lastrowid
            conn.commit()
            logger.info("Created player %s", player_id)
            return PlayerRead(
                id=player_id,
                name=data.name,
                title=data.title,
                race=data.race,
                profession=data.profession,
                birthday=data.birthday,
                banned=banned,
                experience=data.experience,
                level=level,
                until_next_level=until_next_level,
            )
        finally:
            conn.close()

    @classmethod
    async def get_player(cls, player_id: int) -> PlayerRead:
        """Retrieve a single player by ID.

        Non-positive identifiers are rejected before the database is
        queried.
        """
        cls._check_player_id(player_id)
        conn = get_connection()
        try:
            return cls._find_player(conn.cursor(), player_id)
        finally:
            conn.close()

    @classmethod
    async def list_players(
        cls,
        criteria: Optional[PlayerFilter] = None,
        order: Optional[PlayerOrder] = None,
        page_number: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> List[PlayerRead]:
        """Return one page of the filtered and sorted players.

        ``page_number`` defaults to 0 and ``page_size`` to
        ``settings.default_page_size``.
        """
        players = player_query.filter_players(await cls._load_all(), criteria or PlayerFilter())
        players = player_query.sort_players(players, order)
        return player_query.get_page(
            players,
            page_number if page_number is not None else 0,
            page_size if page_size is not None else settings.default_page_size,
        )

    @classmethod
    async def count_players(cls, criteria: Optional[PlayerFilter] = None) -> int:
        """Return the number of players matching ``criteria``."""
        return len(player_query.filter_players(await cls._load_all(), criteria or PlayerFilter()))

    @classmethod
    async def update_player(cls, player_id: int, data: PlayerUpdate) -> PlayerRead:
        """Merge the supplied fields into an existing player.

        Name, title, race, profession and banned are copied as given.
        Birthday and experience are validated first, and a new
        experience re-derives the level fields.  The merged record is
        written with a single ``UPDATE`` after all checks passed, so a
        rejected update leaves the stored player untouched.
        """
        cls._check_player_id(player_id)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            current = cls._find_player(cursor, player_id)

            changes = {
                field: value
                for field, value in (
                    ("name", data.name),
                    ("title", data.title),
                    ("race", data.race),
                    ("profession", data.profession),
                    ("banned", data.banned),
                )
                if value is not None
            }
            if data.birthday is not None:
                if not is_birthday_valid(data.birthday):
                    logger.warning("Rejected update of player %s: invalid birthday %s", player_id, data.birthday)
                    raise InvalidPlayerError("Invalid birthday", player_id=player_id)
                changes["birthday"] = data.birthday
            if data.experience is not None:
                if not is_experience_valid(data.experience):
                    logger.warning("Rejected update of player %s: invalid experience %s", player_id, data.experience)
                    raise InvalidPlayerError("Invalid experience", player_id=player_id)
                level = compute_level(data.experience)
                changes["experience"] = data.experience
                changes["level"] = level
                changes["until_next_level"] = compute_until_next_level(level, data.experience)

            updated = current.model_copy(update=changes)
            cursor.execute(
                """
                UPDATE players
                SET name = ?, title = ?, race = ?, profession = ?, birthday = ?, banned = ?,
                    experience = ?, level = ?, until_next_level = ?
                WHERE id = ?
                """,
                (
                    updated.name,
                    updated.title,
                    updated.race.value,
                    updated.profession.value,
                    updated.birthday,
                    int(updated.banned),
                    updated.experience,
                    updated.level,
                    updated.until_next_level,
                    player_id,
                ),
            )
            conn.commit()
            logger.info("Updated player %s (%s)", player_id, ", ".join(sorted(changes)) or "no changes")
            return updated
        finally:
            conn.close()

    @classmethod
    async def delete_player(cls, player_id: int) -> None:
        """Delete a player by ID.

        An identifier of exactly zero is rejected without touching the
        database; other identifiers follow the rules of
        ``get_player``.
        """
        if player_id == 0:
            logger.warning("Rejected deletion of player 0")
            raise InvalidPlayerError("Player id must not be zero", player_id=player_id)
        cls._check_player_id(player_id)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cls._find_player(cursor, player_id)
            cursor.execute("DELETE FROM players WHERE id = ?", (player_id,))
            conn.commit()
            logger.info("Deleted player %s", player_id)
        finally:
            conn.close()

    @classmethod
    async def _load_all(cls) -> List[PlayerRead]:
        """Full scan of the table in identifier order."""
        conn = get_connection()
        try:
            rows = conn.cursor().execute("SELECT * FROM players ORDER BY id").fetchall()
            return [cls._row_to_player_read(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _check_player_id(player_id: int) -> None:
        if player_id <= 0:
            logger.warning("Rejected non-positive player id %s", player_id)
            raise InvalidPlayerError(f"Invalid player id {player_id}", player_id=player_id)

    @classmethod
    def _find_player(cls, cursor: sqlite3.Cursor, player_id: int) -> PlayerRead:
        row = cursor.execute("SELECT * FROM players WHERE id = ?", (player_id,)).fetchone()
        if not row:
            raise PlayerNotFoundError(player_id)
        return cls._row_to_player_read(row)

    @staticmethod
    def _row_to_player_read(row: sqlite3.Row) -> PlayerRead:
        """Convert a database row to a PlayerRead schema instance."""
        return PlayerRead(
            id=row["id"],
            name=row["name"],
            title=row["title"],
            race=row["race"],
            profession=row["profession"],
            birthday=row["birthday"],
            banned=bool(row["banned"]),
            experience=row["experience"],
            level=row["level"],
            until_next_level=row["until_next_level"],
        )
