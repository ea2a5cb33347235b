from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..errors import GameNotFoundError, StatsApiError


log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://statsapi.mlb.com/api"
DEFAULT_USER_AGENT = "pitch-mix/0.1"


def _team_name(game: Dict[str, Any], side: str) -> str:
    team = (((game.get("teams") or {}).get(side) or {}).get("team") or {})
    return str(team.get("name") or "").lower()


def _matches(name: str, wanted: Optional[str]) -> bool:
    return wanted is None or wanted.lower() in name


class StatsApiClient:
    """Thin client for the public MLB Stats API."""

    def __init__(self,
                 base_url: str = DEFAULT_BASE_URL,
                 timeout: float = 30.0,
                 user_agent: str = DEFAULT_USER_AGENT,
                 transport: Optional[httpx.BaseTransport] = None):
        self.base = base_url.rstrip("/")
        self.sess = httpx.Client(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    def __enter__(self) -> "StatsApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.sess.close()

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = self.base + path
        log.debug("GET %s params=%s", url, params)
        try:
            r = self.sess.get(url, params=params)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPStatusError as e:
            raise StatsApiError(f"{url} returned HTTP {e.response.status_code}", status_code=e.response.status_code) from e
        except httpx.RequestError as e:
            raise StatsApiError(f"request to {url} failed: {e}") from e
        except ValueError as e:
            raise StatsApiError(f"{url} did not return JSON") from e
        if not isinstance(data, dict):
            raise StatsApiError(f"{url} returned {type(data).__name__}, expected a JSON object")
        return data

    def schedule(self, date: str) -> Dict[str, Any]:
        return self._get_json("/v1/schedule", params={"sportId": 1, "date": date})

    def find_game_pk(self, date: str, home: Optional[str] = None, away: Optional[str] = None) -> int:
        """Return the gamePk of the first game on `date` matching the team filters.

        Filters are case-insensitive substrings of the full team names.
        """
        data = self.schedule(date)
        for day in data.get("dates") or []:
            for game in day.get("games") or []:
                if not (_matches(_team_name(game, "home"), home) and _matches(_team_name(game, "away"), away)):
                    continue
                pk = game.get("gamePk")
                if isinstance(pk, int):
                    log.info("resolved %s home=%s away=%s to gamePk %d", date, home, away, pk)
                    return pk
        raise GameNotFoundError(date, home, away)

    def game_feed(self, game_pk: int) -> Dict[str, Any]:
        return self._get_json(f"/v1.1/game/{int(game_pk)}/feed/live")
