"""IKB API client for NBA/NFL game, team and player statistics.

One GET per call to ``{base_url}/{sport}/{date}``; no caching, no retries.
"""

from __future__ import annotations

import httpx
from pydantic import ValidationError as PydanticValidationError

from .config import DEFAULT_BASE_URL
from .exceptions import NetworkError, ResponseParseError, UpstreamApiError
from .logging import logger
from .models import SearchResponse


class IKBClient:
    """Async client for the IKB stats endpoint.

    Owns its ``httpx.AsyncClient`` unless one is passed in.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(timeout=timeout)

    def build_url(self, sport: str, date: str) -> str:
        return f"{self.base_url}/{sport}/{date}"

    async def fetch_games(self, sport: str, date: str) -> SearchResponse:
        """Fetch all game records for a sport on a date.

        Raises:
            UpstreamApiError: non-2xx status
            ResponseParseError: 2xx body that is not the expected JSON shape
            NetworkError: transport failure (timeout, DNS, connection reset)
        """
        url = self.build_url(sport, date)
        logger.info("ikb_fetch", url=url, sport=sport, date=date)

        try:
            response = await self.client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            logger.warning("ikb_fetch_error", sport=sport, date=date, error=str(exc))
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            status_text = response.reason_phrase or str(response.status_code)
            logger.warning(
                "ikb_fetch_failed",
                sport=sport,
                date=date,
                status=response.status_code,
                body=response.text[:200] if response.text else "",
            )
            raise UpstreamApiError(status_text, status_code=response.status_code)

        try:
            payload = SearchResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            logger.warning("ikb_fetch_unparseable", sport=sport, date=date, error=str(exc)[:200])
            raise ResponseParseError("malformed response body", status_code=response.status_code) from exc

        logger.info(
            "ikb_fetch_parsed",
            sport=sport,
            date=date,
            count=len(payload.data),
            reported_count=payload.metadata.count,
        )
        return payload

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
