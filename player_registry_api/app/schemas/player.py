"""
Pydantic models for player data.

``PlayerCreate`` and ``PlayerUpdate`` describe request bodies.  Their
fields are all optional at the schema level: required fields and
ranges are checked by the service layer so that a missing or
out-of-range value is reported as a 400 rather than a schema error.
``PlayerRead`` is the response body and ``PlayerFilter`` groups the
listing criteria shared by the list and count endpoints.

Birthdays are epoch milliseconds throughout the API.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Race(str, Enum):
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, Enum):
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class PlayerOrder(str, Enum):
    """Sort keys accepted by the listing endpoint."""

    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"
    LEVEL = "LEVEL"

    @property
    def field_name(self) -> str:
        """Attribute of ``PlayerRead`` this key sorts by."""
        return self.value.lower()


class PlayerCreate(BaseModel):
    """Schema for creating a player.

    ``id``, ``level`` and ``untilNextLevel`` are not accepted; if a
    client sends them they are ignored.
    """

    name: Optional[str] = Field(None, examples=["Ниус"])
    title: Optional[str] = Field(None, examples=["Приходящий Без Шума"])
    race: Optional[Race] = Field(None, examples=["HOBBIT"])
    profession: Optional[Profession] = Field(None, examples=["ROGUE"])
    birthday: Optional[int] = Field(None, examples=[1244497480000])
    banned: Optional[bool] = Field(None, examples=[False])
    experience: Optional[int] = Field(None, examples=[33970])


class PlayerUpdate(BaseModel):
    """Schema for updating a player.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[int] = None
    banned: Optional[bool] = None
    experience: Optional[int] = None


class PlayerRead(BaseModel):
    """Schema for reading a player from the API."""

    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int
    banned: bool
    experience: int
    level: int
    until_next_level: int = Field(..., alias="untilNextLevel")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }


class PlayerFilter(BaseModel):
    """Listing criteria; ``None`` means the criterion is not applied."""

    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[int] = None
    before: Optional[int] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None
