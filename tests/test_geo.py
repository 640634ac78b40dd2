"""Tests for the geo-political value types and their fixed mappings."""

import pytest
from pydantic import ValidationError

from playground.models.geo import (
    BRITISH_ISLES_ETHNICITY,
    Continent,
    Ethnic,
    EthnicGroup,
    Language,
    State,
    StateKind,
    _require_total,
    ethnic_breakdown,
)


@pytest.mark.parametrize("kind", list(StateKind))
def test_every_state_has_one_official_language(kind):
    state = State.of(kind)
    assert isinstance(state.official_language, Language)


@pytest.mark.parametrize("kind", list(StateKind))
def test_every_state_has_other_languages_list(kind):
    assert isinstance(State.of(kind).other_languages, list)


def test_official_language_mapping():
    expected = {
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
    for kind, language in expected.items():
        assert State.of(kind).official_language is language


def test_other_languages_mapping():
    assert State.of(StateKind.NORTHERN_IRELAND).other_languages == [Language.IRISH]
    assert State.of(StateKind.WALES).other_languages == [Language.WELSH]
    assert State.of(StateKind.SCOTLAND).other_languages == [Language.SCOTS]
    assert State.of(StateKind.ITALY).other_languages == [Language.LATIN]
    assert State.of(StateKind.ENGLAND).other_languages == [Language.CORNISH]
    for kind in (StateKind.GERMANY, StateKind.SOUTH_AFRICA, StateKind.NIGERIA,
                 StateKind.CHINA, StateKind.BRAZIL, StateKind.USA):
        assert State.of(kind).other_languages == []


def test_other_languages_returns_a_fresh_list():
    state = State.of(StateKind.WALES)
    state.other_languages.append(Language.FRENCH)
    assert state.other_languages == [Language.WELSH]


def test_state_default_and_explicit_continent():
    assert State.of(StateKind.BRAZIL).continent is Continent.AMERICA
    assert State.of(StateKind.CHINA).continent is Continent.ASIA
    assert State.of(StateKind.NIGERIA).continent is Continent.AFRICA
    assert State.of(StateKind.ENGLAND).continent is Continent.EUROPE
    assert State.of(StateKind.ENGLAND, Continent.AMERICA).continent is Continent.AMERICA


def test_state_is_immutable_value():
    state = State.of(StateKind.ENGLAND)
    assert state == State(kind=StateKind.ENGLAND, continent=Continent.EUROPE)
    with pytest.raises(ValidationError):
        state.continent = Continent.ASIA


def test_state_display():
    assert State.of(StateKind.NORTHERN_IRELAND).display_name == "Northern Ireland"
    assert State.of(StateKind.USA).display_name == "USA"
    assert str(State.of(StateKind.WALES)) == "Wales (europe)"


def test_british_isles_membership():
    british = {StateKind.ENGLAND, StateKind.SCOTLAND, StateKind.WALES, StateKind.NORTHERN_IRELAND}
    for kind in StateKind:
        assert State.of(kind).is_british_isles is (kind in british)


def test_ethnic_constructors():
    assert Ethnic.caucasian(81.9) == Ethnic(group=EthnicGroup.CAUCASIAN, percentage=81.9)
    assert Ethnic.mixed(1.5).group is EthnicGroup.MIXED
    marker = Ethnic.none()
    assert marker.group is EthnicGroup.NONE
    assert marker.percentage is None
    assert not marker.has_data
    assert str(marker) == "no data"
    assert str(Ethnic.black(13)) == "black 13.0%"


def test_ethnic_breakdown_for_british_isles_state():
    groups = ethnic_breakdown(State.of(StateKind.SCOTLAND))
    assert groups == list(BRITISH_ISLES_ETHNICITY)
    assert [(g.group, g.percentage) for g in groups] == [
        (EthnicGroup.CAUCASIAN, 81.9),
        (EthnicGroup.BLACK, 13),
        (EthnicGroup.ASIAN, 8.0),
        (EthnicGroup.OTHERS, 3.0),
    ]


def test_ethnic_breakdown_without_data():
    assert ethnic_breakdown(State.of(StateKind.BRAZIL)) == [Ethnic.none()]


def test_incomplete_mapping_table_is_rejected():
    kinds = list(StateKind)
    partial = {k: Language.ENGLISH for k in kinds[:-1]}
    with pytest.raises(RuntimeError, match=kinds[-1].value):
        _require_total(partial, "PARTIAL")


def test_complete_mapping_table_is_accepted():
    _require_total({k: Language.ENGLISH for k in StateKind}, "FULL")
