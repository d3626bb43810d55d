"""
Domain exceptions raised by the service layer.

Services raise these for rejected input and unknown identifiers;
endpoints translate them into HTTP status codes (400 and 404).
"""

from typing import Optional


class PlayerRegistryException(Exception):
    """Base class for all player registry errors."""

    def __init__(self, message: str, player_id: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.player_id = player_id

    def __str__(self) -> str:
        return self.message


class InvalidPlayerError(PlayerRegistryException, ValueError):
    """Player data or identifier failed validation."""


class PlayerNotFoundError(PlayerRegistryException, LookupError):
    """No player is stored under the requested identifier."""

    def __init__(self, player_id: int) -> None:
        super().__init__(f"Player {player_id} not found", player_id=player_id)
