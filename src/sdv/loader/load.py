"""
Document fetcher for 247Sports pages.

Responsibilities:
- `fetch_html`: GET a page through a shared `httpx.AsyncClient` and return its body
- `TransportError`: the single failure surfaced for network errors and non-2xx responses

Retries and rate limiting are left to the caller; a failed fetch is terminal for the call.
"""
import logging
from typing import Any, Mapping, Optional

import httpx
from httpx import AsyncClient

BASE_URL = "https://247sports.com"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 30.0


class TransportError(RuntimeError):
    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(f"url={url}: {message}")
        self.url = url
        self.status_code = status_code


def clean_params(params: Optional[Mapping[str, Any]]) -> dict[str, str]:
    """Drop unset query parameters and stringify the rest."""
    if not params:
        return {}
    return {key: str(value) for key, value in params.items() if value is not None}


async def fetch_html(
        client: AsyncClient,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
) -> str:
    """Fetch an HTML page, raising TransportError on network failure or non-2xx status."""
    query = clean_params(params)
    logging.info("Calling %s params=%s", url, query)
    try:
        response = await client.get(
            url,
            params=query,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise TransportError(
            url,
            f"unexpected status {exc.response.status_code}",
            status_code=exc.response.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise TransportError(url, f"{type(exc).__name__}: {exc}") from exc
    logging.debug("Fetched %s status=%s bytes=%s", url, response.status_code, len(response.content))
    return response.text
