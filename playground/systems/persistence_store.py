"""Persistence store - saves and loads the current game through a DefaultsService."""

from __future__ import annotations
import logging
from typing import Optional

from playground.models.game import Game
from .defaults import DefaultsKey, DefaultsService

logger = logging.getLogger(__name__)


class PersistenceStore:
    """Saves and restores the current game.

    Depends only on the DefaultsService interface; which store sits behind
    it is decided by whoever builds this object.
    """

    def __init__(self, store: DefaultsService) -> None:
        self._store = store

    def save(self, game: Game) -> None:
        """Persist game as the current game."""
        self._store.write(game, DefaultsKey.GAME)
        logger.info(f"Saved current game ({len(game.players)} players)")

    def current_game(self) -> Optional[Game]:
        """The saved current game, or None if there is none or it is unreadable."""
        return self._store.read(DefaultsKey.GAME, Game)

    def clear(self) -> None:
        """Forget the current game."""
        self._store.erase(DefaultsKey.GAME)
