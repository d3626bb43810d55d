"""Builders shared by the test modules."""

from datetime import datetime

from player_registry_api.app.schemas.player import PlayerCreate, PlayerRead, Profession, Race
from player_registry_api.app.services.player_rules import compute_level, compute_until_next_level


def millis(year: int, month: int = 1, day: int = 1) -> int:
    """Epoch milliseconds of a local calendar date."""
    return int(datetime(year, month, day).timestamp() * 1000)


def make_create(**overrides) -> PlayerCreate:
    data = {
        "name": "Aragorn",
        "title": "King of Gondor",
        "race": Race.HUMAN,
        "profession": Profession.WARRIOR,
        "birthday": millis(2010, 6, 15),
        "experience": 2000,
    }
    data.update(overrides)
    return PlayerCreate(**data)


def make_read(player_id: int, **overrides) -> PlayerRead:
    data = {
        "name": f"Player{player_id}",
        "title": "Wanderer",
        "race": Race.ELF,
        "profession": Profession.ROGUE,
        "birthday": millis(2010),
        "banned": False,
        "experience": 0,
    }
    data.update(overrides)
    level = compute_level(data["experience"])
    return PlayerRead(
        id=player_id,
        level=level,
        until_next_level=compute_until_next_level(level, data["experience"]),
        **data,
    )
