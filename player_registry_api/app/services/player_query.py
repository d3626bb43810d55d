"""
In-memory listing pipeline for players.

``PlayerService`` loads every stored player and hands the list to
these functions: ``filter_players`` applies the criteria of a
``PlayerFilter``, ``sort_players`` orders by a single ``PlayerOrder``
key and ``get_page`` cuts out one page.  The functions never mutate
their input.

Should the table grow large, the same semantics belong in SQL
(``WHERE`` / ``ORDER BY`` / ``LIMIT``); until then this keeps the
rules in one testable place.
"""

from operator import attrgetter
from typing import Iterable, List, Optional

from ..schemas.player import PlayerFilter, PlayerOrder, PlayerRead


def matches(player: PlayerRead, criteria: PlayerFilter) -> bool:
    """Return True if ``player`` satisfies every criterion that is set."""
    if criteria.name is not None and criteria.name not in player.name:
        return False
    if criteria.title is not None and criteria.title not in player.title:
        return False
    if criteria.race is not None and player.race != criteria.race:
        return False
    if criteria.profession is not None and player.profession != criteria.profession:
        return False
    if criteria.after is not None and player.birthday < criteria.after:
        return False
    if criteria.before is not None and player.birthday > criteria.before:
        return False
    if criteria.banned is not None and player.banned != criteria.banned:
        return False
    if criteria.min_experience is not None and player.experience < criteria.min_experience:
        return False
    if criteria.max_experience is not None and player.experience > criteria.max_experience:
        return False
    if criteria.min_level is not None and player.level < criteria.min_level:
        return False
    if criteria.max_level is not None and player.level > criteria.max_level:
        return False
    return True


def filter_players(players: Iterable[PlayerRead], criteria: PlayerFilter) -> List[PlayerRead]:
    return [player for player in players if matches(player, criteria)]


def sort_players(players: List[PlayerRead], order: Optional[PlayerOrder]) -> List[PlayerRead]:
    """Sort ascending by ``order``; without a key the input order is kept.

    ``sorted`` is stable, so players with equal keys keep their scan
    order.
    """
    if order is None:
        return list(players)
    return sorted(players, key=attrgetter(order.field_name))


def get_page(players: List[PlayerRead], page_number: int = 0, page_size: int = 3) -> List[PlayerRead]:
    """Return the ``page_number``-th slice of ``page_size`` players.

    A page that starts past the end of the list is empty.
    """
    start = page_number * page_size
    if start < 0 or page_size <= 0 or start >= len(players):
        return []
    end = min(start + page_size, len(players))
    return players[start:end]
