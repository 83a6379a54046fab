"""
Pytest configuration and shared fixtures.

Fixtures build 247Sports-shaped listing pages so the extraction engine and the
async loaders can be exercised without the network.
"""
import asyncio

import httpx
import pytest


def _stars(count: int, total: int = 5, container: str = 'rankings-page__star-and-score') -> str:
    solid = ''.join('<span class="icon-starsolid yellow"></span>' for _ in range(count))
    empty = ''.join('<span class="icon-starsolid"></span>' for _ in range(total - count))
    return f'<div class="{container}">{solid}{empty}<span class="score"> {{score}} </span></div>'


def _player_item(
        name: str,
        rating: str = '0.9800',
        stars: int = 4,
        college: str | None = 'Texas',
        metrics: str = ' 6-4 / 215 ',
        position: str = 'QB',
) -> str:
    img = f'<a class="img-link" href="#"><img title="{college}" src="logo.png"/></a>' if college else ''
    return (
        '<li class="rankings-page__list-item">'
        '<div class="rank-column"><div class="primary">?</div></div>'
        '<div class="recruit">'
        f'<a class="rankings-page__name-link" href="/Player/x"> {name} </a>'
        '<span class="meta"> Isidore Newman (New Orleans, LA) </span>'
        '</div>'
        f'<div class="position"> {position} </div>'
        f'<div class="metrics">{metrics}</div>'
        + _stars(stars).format(score=rating)
        + f'<div class="status">{img}</div>'
        '</li>'
    )


def _player_page(items: list[str]) -> str:
    header = (
        '<li class="rankings-page__list-item rankings-page__list-item--header">'
        '<div class="position">Pos</div><div class="metrics">Ht / Wt</div>'
        '</li>'
    )
    return (
        '<html><body><section class="rankings-page">'
        f'<ul class="rankings-page__list">{header}{"".join(items)}</ul>'
        '</section></body></html>'
    )


def _commit_item(
        name: str,
        rating: str = '0.9512',
        stars: int = 4,
        national_rank: str = '45',
        metrics: str = '6-1 / 180',
) -> str:
    solid = ''.join('<span class="icon-starsolid yellow"></span>' for _ in range(stars))
    return (
        '<li class="ri-page__list-item">'
        '<div class="recruit">'
        f'<a class="ri-page__name-link" href="/Player/y">{name}</a>'
        '<span class="meta"> IMG Academy (Bradenton, FL) </span>'
        '</div>'
        '<div class="position"> WR </div>'
        f'<div class="metrics">{metrics}</div>'
        '<div class="ri-page__star-and-score">'
        f'<div class="rating">{solid}</div>'
        f'<span class="score"><span class="ri-page__score-label">Rating</span> {rating} </span>'
        '</div>'
        '<div class="rank">'
        f'<a class="natrank"> {national_rank} </a>'
        '<a class="posrank"> 7 </a>'
        '<a class="sttrank"> 3 </a>'
        '</div>'
        '</li>'
    )


def _commit_page(items: list[str], header: bool = True) -> str:
    header = '<li class="ri-page__list-item ri-page__list-item--header"><b>Player</b></li>' if header else ''
    return f'<html><body><ul class="ri-page__list">{header}{"".join(items)}</ul></body></html>'


def _school_item(rank: int, school: str, commits: int = 27, stars=(4, 18, 5)) -> str:
    five, four, three = stars
    return (
        '<li class="rankings-page__list-item">'
        f'<div class="rank-column"><div class="primary"> {rank} </div></div>'
        f'<div class="team"><a class="rankings-page__name-link" href="/college/x"> {school} </a></div>'
        f'<div class="total"><a href="#"> {commits} </a></div>'
        '<ul class="star-commits-list">'
        f'<li><h2>5-Star</h2><div>5: {five}</div></li>'
        f'<li><h2>4-Star</h2><div>4: {four}</div></li>'
        f'<li><h2>3-Star</h2><div>3: {three}</div></li>'
        '</ul>'
        '<div class="avg"> 93.12 </div>'
        '<div class="number"> 327.42 </div>'
        '</li>'
    )


def _school_page(items: list[str]) -> str:
    header = (
        '<li class="rankings-page__list-item rankings-page__list-item--header">'
        '<div class="rank-column"><div class="primary">Rank</div></div>'
        '</li>'
    )
    return f'<html><body><ul class="rankings-page__list">{header}{"".join(items)}</ul></body></html>'


@pytest.fixture
def player_item():
    return _player_item


@pytest.fixture
def player_page():
    return _player_page


@pytest.fixture
def commit_item():
    return _commit_item


@pytest.fixture
def commit_page():
    return _commit_page


@pytest.fixture
def school_item():
    return _school_item


@pytest.fixture
def school_page():
    return _school_page


@pytest.fixture
def run_with_pages():
    """
    Run a coroutine factory against an AsyncClient backed by httpx.MockTransport.

    `responder` maps each request to an httpx.Response; every request is recorded
    in the returned list so tests can inspect URLs, params and headers.
    """
    def _run(responder, make_coro):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return responder(request)

        async def _main():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await make_coro(client)

        return asyncio.run(_main()), seen

    return _run
