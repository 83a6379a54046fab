"""
Recruiting listings from 247Sports.

Each call is independent: build the request, fetch one page, parse it, extract
rows with the shared engine and convert them into immutable records. Nothing is
cached or persisted between calls, so concurrent calls need no coordination.
"""
import logging
from typing import Any, Dict, List, Optional, Union

import httpx
from httpx import AsyncClient

from src.sdv.loader.convert import rows_to_records
from src.sdv.loader.extract.base import extract, parse_document
from src.sdv.loader.load import DEFAULT_TIMEOUT, fetch_html
from src.sdv.loader.recruiting.adapter import (
    InstitutionGroup,
    RankingsType,
    RecruitingRequest,
    Sport,
    build_request,
)
from src.sdv.models.recruiting import Commit, PlayerRanking, RecordKind, SchoolRanking


async def load_rows(
        client: AsyncClient,
        request: RecruitingRequest,
) -> List[Dict[str, Any]]:
    """Fetch the request's page and return the extracted rows in document order."""
    html = await fetch_html(client, request.url, request.params)
    rows = extract(parse_document(html), request.schema, request.context)
    logging.info("[%s] %s -> %s rows", request.kind.value, request.url, len(rows))
    return rows


async def get_player_rankings(
        client: AsyncClient,
        sport: Union[Sport, str],
        *,
        year: int,
        page: int = 1,
        group: Union[InstitutionGroup, str] = InstitutionGroup.HIGH_SCHOOL,
        position: Optional[str] = None,
        state: Optional[str] = None,
        rankings_type: Union[RankingsType, str] = RankingsType.COMPOSITE,
) -> List[PlayerRanking]:
    """
    Player recruiting rankings for a class year, 50 players per page.

    Args:
        client: Shared HTTP client
        sport: Sport vertical ('cfb', 'mbb', 'wbb' or a Sport member)
        year: Recruiting class year (YYYY)
        page: Listing page, starting at 1
        group: Institution type (HighSchool, JuniorCollege, PrepSchool)
        position: Optional position filter, e.g. 'QB'
        state: Optional state filter, e.g. 'TX'
        rankings_type: 'Composite' or '247'

    Returns:
        PlayerRanking records in listing order; `ranking` continues across pages.

    Example:
        >>> async with httpx.AsyncClient() as client:
        ...     players = await get_player_rankings(client, 'cfb', year=2021, page=2)
    """
    request = build_request(
        sport,
        RecordKind.PLAYER_RANKING,
        year=year,
        page=page,
        group=group,
        position=position,
        state=state,
        rankings_type=rankings_type,
    )
    rows = await load_rows(client, request)
    return rows_to_records(request.kind, rows)


async def get_school_rankings(
        client: AsyncClient,
        sport: Union[Sport, str],
        *,
        year: int,
        page: int = 1,
) -> List[SchoolRanking]:
    """School recruiting-class rankings for a class year."""
    request = build_request(sport, RecordKind.SCHOOL_RANKING, year=year, page=page)
    rows = await load_rows(client, request)
    return rows_to_records(request.kind, rows)


async def get_school_commits(
        client: AsyncClient,
        sport: Union[Sport, str],
        *,
        school: str,
        year: int,
) -> List[Commit]:
    """Committed recruits of one school for a class year; placeholder rows are dropped."""
    request = build_request(sport, RecordKind.COMMIT, year=year, school=school)
    rows = await load_rows(client, request)
    return rows_to_records(request.kind, rows)


class RecruitingClient:
    """Async facade over the recruiting listings for one sport vertical."""

    def __init__(
            self,
            sport: Union[Sport, str],
            client: Optional[AsyncClient] = None,
            timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize the client.

        Args:
            sport: Sport vertical used by every call on this client
            client: Existing HTTP client to reuse; one is created (and closed) otherwise
            timeout: Request timeout in seconds for an owned client
        """
        self.sport = sport
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    async def __aenter__(self):
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def start(self):
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)

    async def close(self):
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> AsyncClient:
        if self._client is None:
            raise RuntimeError("Client not started. Use async context manager or call start() first.")
        return self._client

    async def get_player_rankings(self, *, year: int, page: int = 1, **filters) -> List[PlayerRanking]:
        return await get_player_rankings(self.client, self.sport, year=year, page=page, **filters)

    async def get_school_rankings(self, *, year: int, page: int = 1) -> List[SchoolRanking]:
        return await get_school_rankings(self.client, self.sport, year=year, page=page)

    async def get_school_commits(self, *, school: str, year: int) -> List[Commit]:
        return await get_school_commits(self.client, self.sport, school=school, year=year)
