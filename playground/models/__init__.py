"""Pydantic data models for the geo-political catalog and the game record."""

from .geo import Continent, Union, Language, Ethnic, EthnicGroup, State, StateKind
from .sovereign import Country, Community, Lingua, Ethnicity, SovereignEntity, Nation, united_kingdom
from .game import Game, Player

__all__ = [
    "Continent",
    "Union",
    "Language",
    "Ethnic",
    "EthnicGroup",
    "State",
    "StateKind",
    "Country",
    "Community",
    "Lingua",
    "Ethnicity",
    "SovereignEntity",
    "Nation",
    "united_kingdom",
    "Game",
    "Player",
]
