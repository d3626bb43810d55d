"""
Player endpoints for API v1.

These routes expose CRUD operations for players together with a
filtered, sorted and paginated listing and a matching count.  Query
parameter names follow the public camelCase contract
(``minExperience``, ``pageNumber``...).  Service errors map to HTTP
statuses: invalid input is a 400, an unknown identifier a 404.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from player_registry_api.app.core.exceptions import InvalidPlayerError, PlayerNotFoundError
from player_registry_api.app.schemas.player import (
    PlayerCreate,
    PlayerFilter,
    PlayerOrder,
    PlayerRead,
    PlayerUpdate,
    Profession,
    Race,
)
from player_registry_api.app.services.player_service import PlayerService

router = APIRouter()


def get_player_filter(
    name: Optional[str] = Query(None),
    title: Optional[str] = Query(None),
    race: Optional[Race] = Query(None),
    profession: Optional[Profession] = Query(None),
    after: Optional[int] = Query(None, description="Earliest birthday, epoch milliseconds"),
    before: Optional[int] = Query(None, description="Latest birthday, epoch milliseconds"),
    banned: Optional[bool] = Query(None),
    min_experience: Optional[int] = Query(None, alias="minExperience"),
    max_experience: Optional[int] = Query(None, alias="maxExperience"),
    min_level: Optional[int] = Query(None, alias="minLevel"),
    max_level: Optional[int] = Query(None, alias="maxLevel"),
) -> PlayerFilter:
    """Collect the filter query parameters shared by list and count."""
    return PlayerFilter(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


@router.get("/", response_model=List[PlayerRead])
async def list_players(
    criteria: PlayerFilter = Depends(get_player_filter),
    order: Optional[PlayerOrder] = Query(None),
    page_number: Optional[int] = Query(None, alias="pageNumber", ge=0),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=0),
) -> List[PlayerRead]:
    """Return one page of players matching the filters.

    - **name**, **title** — case‑sensitive substring match.
    - **race**, **profession**, **banned** — exact match.
    - **after**, **before** — inclusive birthday range (epoch ms).
    - **minExperience**/**maxExperience**, **minLevel**/**maxLevel** — inclusive ranges.
    - **order** — `ID`, `NAME`, `EXPERIENCE`, `BIRTHDAY` or `LEVEL`, ascending.
    - **pageNumber** (default 0), **pageSize** (default 3); a page of size 0 is empty.
    """
    return await PlayerService.list_players(
        criteria=criteria,
        order=order,
        page_number=page_number,
        page_size=page_size,
    )


@router.get("/count", response_model=int)
async def count_players(criteria: PlayerFilter = Depends(get_player_filter)) -> int:
    """Return how many players match the filters, ignoring paging."""
    return await PlayerService.count_players(criteria)


@router.get("/{player_id}", response_model=PlayerRead)
async def get_player(player_id: int) -> PlayerRead:
    """Retrieve a single player by ID."""
    try:
        return await PlayerService.get_player(player_id)
    except InvalidPlayerError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=PlayerRead, status_code=status.HTTP_201_CREATED)
async def create_player(player_in: PlayerCreate) -> PlayerRead:
    """Create a new player.

    Level and experience to next level are computed from
    ``experience``; client-supplied values for them are ignored.
    """
    try:
        return await PlayerService.create_player(player_in)
    except InvalidPlayerError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


# Older clients send updates with POST; both methods share one handler.
@router.put("/{player_id}", response_model=PlayerRead)
@router.post("/{player_id}", response_model=PlayerRead)
async def update_player(player_id: int, player_in: PlayerUpdate) -> PlayerRead:
    """Update an existing player.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    try:
        return await PlayerService.update_player(player_id, player_in)
    except InvalidPlayerError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_player(player_id: int) -> None:
    """Delete a player."""
    try:
        await PlayerService.delete_player(player_id)
    except InvalidPlayerError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except PlayerNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return None
