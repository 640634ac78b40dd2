"""Sovereign entity schemas - narrow capability interfaces and the Nation that composes them."""

from __future__ import annotations
from typing import Protocol, Sequence, runtime_checkable
from pydantic import BaseModel, Field

from .geo import Continent, Ethnic, Language, State, StateKind, Union, ethnic_breakdown


# ===== Capability Interfaces =====

@runtime_checkable
class Country(Protocol):
    """Something with a name, member states, and a population."""

    @property
    def name(self) -> str: ...

    @property
    def states(self) -> Sequence[State]: ...

    @property
    def population(self) -> float: ...


@runtime_checkable
class Community(Protocol):
    """Membership in a supranational union."""

    @property
    def member(self) -> Union: ...


@runtime_checkable
class Lingua(Protocol):
    """Official and additional recognized languages."""

    @property
    def official_language(self) -> Language: ...

    @property
    def other_languages(self) -> Sequence[Language]: ...


@runtime_checkable
class Ethnicity(Protocol):
    """Ethnic composition, derived rather than stored."""

    @property
    def ethnic_groups(self) -> Sequence[Ethnic]: ...


@runtime_checkable
class SovereignEntity(Country, Community, Lingua, Ethnicity, Protocol):
    """A country exposing every capability above."""

    @classmethod
    def create(
        cls,
        name: str,
        states: Sequence[State],
        population: float,
        official_language: Language,
        member: Union,
    ) -> SovereignEntity: ...


# ===== Nation =====

class Nation(BaseModel):
    """A sovereign nation built from an ordered list of states."""
    name: str
    states: tuple[State, ...] = Field(default_factory=tuple)
    population: float = Field(default=0, ge=0)
    official_language: Language
    member: Union

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        name: str,
        states: Sequence[State],
        population: float,
        official_language: Language,
        member: Union,
    ) -> Nation:
        return cls(
            name=name,
            states=tuple(states),
            population=population,
            official_language=official_language,
            member=member,
        )

    @property
    def other_languages(self) -> list[Language]:
        """Each state's additional languages, in state order, duplicates kept."""
        languages: list[Language] = []
        for state in self.states:
            languages.extend(state.other_languages)
        return languages

    @property
    def ethnic_groups(self) -> list[Ethnic]:
        """Per-state ethnic entries in state order.

        States without data contribute a single no-data marker rather than
        being skipped.
        """
        groups: list[Ethnic] = []
        for state in self.states:
            groups.extend(ethnic_breakdown(state))
        return groups

    @property
    def continents(self) -> list[Continent]:
        """Continents the member states sit on, first appearance first."""
        seen: list[Continent] = []
        for state in self.states:
            if state.continent not in seen:
                seen.append(state.continent)
        return seen

    def summary(self) -> str:
        """Generate a text summary of the nation."""
        lines = [
            f"=== {self.name} ===",
            f"Population: {self.population:,.0f}",
            f"Member of: {self.member.value}",
            f"Official language: {self.official_language.value}",
        ]

        if self.states:
            lines.append("")
            lines.append("--- States ---")
            for s in self.states:
                others = ", ".join(lang.value for lang in s.other_languages) or "none"
                lines.append(f"  {s}: {s.official_language.value} (also {others})")

        other_languages = self.other_languages
        if other_languages:
            lines.append("")
            joined = ", ".join(lang.value for lang in other_languages)
            lines.append(f"Other languages: {joined}")

        return "\n".join(lines)


def united_kingdom() -> Nation:
    """The playground's sample nation."""
    return Nation.create(
        name="United Kingdom",
        states=[
            State.of(StateKind.ENGLAND, Continent.EUROPE),
            State.of(StateKind.SCOTLAND, Continent.EUROPE),
            State.of(StateKind.WALES, Continent.EUROPE),
            State.of(StateKind.NORTHERN_IRELAND, Continent.EUROPE),
        ],
        population=65000000,
        official_language=Language.ENGLISH,
        member=Union.EU,
    )
