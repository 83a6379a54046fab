"""
Sport adapter: maps (sport, record kind, call parameters) to a fetchable request.

Pure lookup code with no I/O. Invalid parameters raise UnsupportedConfiguration
before anything touches the network.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from src.sdv.loader.extract.base import ExtractionContext, ExtractionSchema, PAGE_SIZE
from src.sdv.loader.extract.schemas import COMMITS, PLAYER_RANKINGS, SCHOOL_RANKINGS
from src.sdv.loader.load import BASE_URL
from src.sdv.models.recruiting import RecordKind


class UnsupportedConfiguration(ValueError):
    pass


class Sport(Enum):

    FOOTBALL = 'cfb'
    MENS_BASKETBALL = 'mbb'
    WOMENS_BASKETBALL = 'wbb'


class InstitutionGroup(Enum):

    HIGH_SCHOOL = 'HighSchool'
    JUNIOR_COLLEGE = 'JuniorCollege'
    PREP_SCHOOL = 'PrepSchool'


class RankingsType(Enum):

    COMPOSITE = 'Composite'
    SITE = '247'


@dataclass(frozen=True)
class SportConfig:
    """Season path segment and per-kind schemas for one sport vertical."""
    sport: Sport
    season_segment: str
    schemas: Mapping[RecordKind, ExtractionSchema]


@dataclass(frozen=True)
class RecruitingRequest:
    url: str
    kind: RecordKind
    schema: ExtractionSchema
    context: ExtractionContext
    params: Dict[str, Any] = field(default_factory=dict)


_SCHEMAS: Mapping[RecordKind, ExtractionSchema] = {
    RecordKind.PLAYER_RANKING: PLAYER_RANKINGS,
    RecordKind.SCHOOL_RANKING: SCHOOL_RANKINGS,
    RecordKind.COMMIT: COMMITS,
}

_SPORTS: Dict[Sport, SportConfig] = {
    Sport.FOOTBALL: SportConfig(Sport.FOOTBALL, 'Football', _SCHEMAS),
    Sport.MENS_BASKETBALL: SportConfig(Sport.MENS_BASKETBALL, 'Basketball', _SCHEMAS),
    Sport.WOMENS_BASKETBALL: SportConfig(Sport.WOMENS_BASKETBALL, 'WomensBasketball', _SCHEMAS),
}

_PLAYER_RANKINGS_PATHS: Dict[RankingsType, str] = {
    RankingsType.COMPOSITE: 'CompositeRecruitRankings',
    RankingsType.SITE: 'recruitrankings',
}


E = TypeVar('E', bound=Enum)


def coerce(enum_cls: Type[E], value: Union[E, str]) -> E:
    """Resolve an enum member from itself, its value or its name."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    if isinstance(value, str) and value.upper() in enum_cls.__members__:
        return enum_cls.__members__[value.upper()]
    choices = ', '.join(repr(member.value) for member in enum_cls)
    raise UnsupportedConfiguration(f"Invalid {enum_cls.__name__} {value!r}; expected one of {choices}")


def get_sport_config(sport: Union[Sport, str]) -> SportConfig:
    return _SPORTS[coerce(Sport, sport)]


def _check_year(year: Any) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise UnsupportedConfiguration(f"year must be an integer (YYYY), got {year!r}")
    return year


def _check_page(page: Any) -> int:
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise UnsupportedConfiguration(f"page must be a positive integer, got {page!r}")
    return page


def school_host(school: str) -> str:
    """Team-site subdomain for a school name, e.g. 'Florida State' -> 'floridastate'."""
    return ''.join(ch for ch in school.lower() if ch.isalnum() or ch == '-')


def season_url(config: SportConfig, year: int, path: str, host: str = BASE_URL) -> str:
    return f"{host}/Season/{year}-{config.season_segment}/{path}"


def build_request(
        sport: Union[Sport, str],
        kind: Union[RecordKind, str],
        *,
        year: int,
        page: int = 1,
        group: Union[InstitutionGroup, str] = InstitutionGroup.HIGH_SCHOOL,
        position: Optional[str] = None,
        state: Optional[str] = None,
        rankings_type: Union[RankingsType, str] = RankingsType.COMPOSITE,
        school: Optional[str] = None,
) -> RecruitingRequest:
    """Build URL, query parameters, schema and context for one recruiting listing."""
    config = get_sport_config(sport)
    kind = coerce(RecordKind, kind)
    year = _check_year(year)
    page = _check_page(page)
    schema = config.schemas[kind]

    if kind is RecordKind.PLAYER_RANKING:
        group = coerce(InstitutionGroup, group)
        rankings_type = coerce(RankingsType, rankings_type)
        return RecruitingRequest(
            url=season_url(config, year, _PLAYER_RANKINGS_PATHS[rankings_type]),
            kind=kind,
            schema=schema,
            context=ExtractionContext(page=page, page_size=PAGE_SIZE),
            params={
                'InstitutionGroup': group.value,
                'Page': page,
                'Position': position,
                'State': state,
            },
        )

    if kind is RecordKind.SCHOOL_RANKING:
        return RecruitingRequest(
            url=season_url(config, year, 'CompositeTeamRankings'),
            kind=kind,
            schema=schema,
            context=ExtractionContext(page=page, page_size=PAGE_SIZE),
            params={'Page': page},
        )

    if not school or not school_host(school):
        raise UnsupportedConfiguration("school is required for commit listings")
    return RecruitingRequest(
        url=season_url(config, year, 'Commits', host=f"https://{school_host(school)}.247sports.com"),
        kind=kind,
        schema=schema,
        context=ExtractionContext(),
    )
