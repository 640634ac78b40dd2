"""Geo-political value types - continents, unions, languages, ethnic groups, and states."""

from __future__ import annotations
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Continent(str, Enum):
    """Continents a state can belong to."""
    AFRICA = "africa"
    EUROPE = "europe"
    ASIA = "asia"
    AMERICA = "america"


class Union(str, Enum):
    """Supranational unions a nation can be a member of."""
    EU = "EU"
    AU = "AU"
    CAU = "CAU"
    NAU = "NAU"
    UNASUR = "UNASUR"


class Language(str, Enum):
    """Languages spoken across the catalog."""
    MANDARIN = "mandarin"
    ENGLISH = "english"
    DEUTSCHE = "deutsche"
    ITALIAN = "italian"
    LATIN = "latin"
    SPANISH = "spanish"
    FRENCH = "french"
    PORTUGUESE = "portuguese"
    WELSH = "welsh"
    SCOTS = "scots"
    IRISH = "irish"
    CORNISH = "cornish"


class EthnicGroup(str, Enum):
    """Ethnic group tags. NONE marks a state with no data."""
    CAUCASIAN = "caucasian"
    BLACK = "black"
    ASIAN = "asian"
    MIXED = "mixed"
    OTHERS = "others"
    NONE = "none"


class Ethnic(BaseModel):
    """An ethnic group share, or the no-data marker."""
    group: EthnicGroup
    percentage: Optional[float] = None

    model_config = {"frozen": True}

    @classmethod
    def caucasian(cls, percentage: float) -> Ethnic:
        return cls(group=EthnicGroup.CAUCASIAN, percentage=percentage)

    @classmethod
    def black(cls, percentage: float) -> Ethnic:
        return cls(group=EthnicGroup.BLACK, percentage=percentage)

    @classmethod
    def asian(cls, percentage: float) -> Ethnic:
        return cls(group=EthnicGroup.ASIAN, percentage=percentage)

    @classmethod
    def mixed(cls, percentage: float) -> Ethnic:
        return cls(group=EthnicGroup.MIXED, percentage=percentage)

    @classmethod
    def others(cls, percentage: float) -> Ethnic:
        return cls(group=EthnicGroup.OTHERS, percentage=percentage)

    @classmethod
    def none(cls) -> Ethnic:
        """The no-data marker."""
        return cls(group=EthnicGroup.NONE)

    @property
    def has_data(self) -> bool:
        return self.group is not EthnicGroup.NONE

    def __str__(self) -> str:
        if not self.has_data:
            return "no data"
        return f"{self.group.value} {self.percentage}%"


class StateKind(str, Enum):
    """Named political subdivisions."""
    ITALY = "italy"
    GERMANY = "germany"
    SOUTH_AFRICA = "south_africa"
    NIGERIA = "nigeria"
    CHINA = "china"
    BRAZIL = "brazil"
    USA = "usa"
    SCOTLAND = "scotland"
    ENGLAND = "england"
    WALES = "wales"
    NORTHERN_IRELAND = "northern_ireland"


# ===== Fixed Mappings =====

OFFICIAL_LANGUAGES: dict[StateKind, Language] = {
    StateKind.BRAZIL: Language.PORTUGUESE,
    StateKind.CHINA: Language.MANDARIN,
    StateKind.GERMANY: Language.DEUTSCHE,
    StateKind.ITALY: Language.ITALIAN,
    StateKind.NIGERIA: Language.ENGLISH,
    StateKind.SCOTLAND: Language.ENGLISH,
    StateKind.WALES: Language.ENGLISH,
    StateKind.ENGLAND: Language.ENGLISH,
    StateKind.NORTHERN_IRELAND: Language.ENGLISH,
    StateKind.USA: Language.ENGLISH,
    StateKind.SOUTH_AFRICA: Language.ENGLISH,
}

OTHER_LANGUAGES: dict[StateKind, tuple[Language, ...]] = {
    StateKind.NORTHERN_IRELAND: (Language.IRISH,),
    StateKind.WALES: (Language.WELSH,),
    StateKind.SCOTLAND: (Language.SCOTS,),
    StateKind.ITALY: (Language.LATIN,),
    StateKind.ENGLAND: (Language.CORNISH,),
    StateKind.GERMANY: (),
    StateKind.SOUTH_AFRICA: (),
    StateKind.NIGERIA: (),
    StateKind.CHINA: (),
    StateKind.BRAZIL: (),
    StateKind.USA: (),
}

DEFAULT_CONTINENTS: dict[StateKind, Continent] = {
    StateKind.ITALY: Continent.EUROPE,
    StateKind.GERMANY: Continent.EUROPE,
    StateKind.SOUTH_AFRICA: Continent.AFRICA,
    StateKind.NIGERIA: Continent.AFRICA,
    StateKind.CHINA: Continent.ASIA,
    StateKind.BRAZIL: Continent.AMERICA,
    StateKind.USA: Continent.AMERICA,
    StateKind.SCOTLAND: Continent.EUROPE,
    StateKind.ENGLAND: Continent.EUROPE,
    StateKind.WALES: Continent.EUROPE,
    StateKind.NORTHERN_IRELAND: Continent.EUROPE,
}

BRITISH_ISLES = frozenset({
    StateKind.ENGLAND,
    StateKind.SCOTLAND,
    StateKind.WALES,
    StateKind.NORTHERN_IRELAND,
})


def _require_total(table: dict[StateKind, object], name: str) -> None:
    """Fail at import if a state kind is missing from a mapping table."""
    missing = [kind.value for kind in StateKind if kind not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


_require_total(OFFICIAL_LANGUAGES, "OFFICIAL_LANGUAGES")
_require_total(OTHER_LANGUAGES, "OTHER_LANGUAGES")
_require_total(DEFAULT_CONTINENTS, "DEFAULT_CONTINENTS")


class State(BaseModel):
    """A political subdivision and the continent it sits on.

    A state speaks exactly one official language and zero or more
    recognized regional languages, both looked up from fixed tables.
    """
    kind: StateKind
    continent: Continent

    model_config = {"frozen": True}

    @classmethod
    def of(cls, kind: StateKind, continent: Optional[Continent] = None) -> State:
        """Build a state, defaulting to the continent it usually belongs to."""
        return cls(kind=kind, continent=continent or DEFAULT_CONTINENTS[kind])

    @property
    def official_language(self) -> Language:
        return OFFICIAL_LANGUAGES[self.kind]

    @property
    def other_languages(self) -> list[Language]:
        return list(OTHER_LANGUAGES[self.kind])

    @property
    def is_british_isles(self) -> bool:
        return self.kind in BRITISH_ISLES

    @property
    def display_name(self) -> str:
        if self.kind is StateKind.USA:
            return "USA"
        return self.kind.value.replace("_", " ").title()

    def __str__(self) -> str:
        return f"{self.display_name} ({self.continent.value})"


# Fixed breakdown reported for every British Isles state. Shares are
# illustrative and intentionally do not sum to 100.
BRITISH_ISLES_ETHNICITY: tuple[Ethnic, ...] = (
    Ethnic.caucasian(81.9),
    Ethnic.black(13),
    Ethnic.asian(8.0),
    Ethnic.others(3.0),
)


def ethnic_breakdown(state: State) -> list[Ethnic]:
    """Ethnic entries a single state contributes to its nation."""
    if state.is_british_isles:
        return list(BRITISH_ISLES_ETHNICITY)
    return [Ethnic.none()]
