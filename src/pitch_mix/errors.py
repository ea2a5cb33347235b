from __future__ import annotations

from typing import Optional


class PitchMixError(Exception):
    """Base class for errors raised by pitch_mix."""


class UnknownPitchTypeError(PitchMixError):
    def __init__(self, pitch_type: str):
        super().__init__(f"no category known for pitch type {pitch_type!r}")
        self.pitch_type = pitch_type


class GameNotFoundError(PitchMixError):
    def __init__(self, date: str, home: Optional[str] = None, away: Optional[str] = None):
        super().__init__(f"no matching game found for date {date} and filters home={home!r} away={away!r}")
        self.date = date
        self.home = home
        self.away = away


class StatsApiError(PitchMixError):
    """Network or HTTP status failure talking to the MLB Stats API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class FeedFormatError(PitchMixError):
    """Game feed is missing the structure we read plays from."""
