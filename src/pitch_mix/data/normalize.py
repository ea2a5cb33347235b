from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..errors import FeedFormatError
from ..schemas import PitchEvent


log = logging.getLogger(__name__)

UNKNOWN = "unknown"
UNKNOWN_PITCHER = "Unknown pitcher"

# Statcast pitch codes
_CODE_TO_NAME: Dict[str, str] = {
    "FF": "fastball",
    "FA": "fastball",
    "FT": "fastball",
    "FF/FT": "fastball",
    "SI": "sinker",
    "SL": "slider",
    "CU": "curveball",
    "KC": "curveball",
    "CH": "changeup",
    "FC": "cutter",
    "FS": "splitter",
    "IN": "intentional",
}

# Substring rules for descriptive names, checked in order
_NAME_RULES = [
    ("cutter", "cutter"),
    ("sinker", "sinker"),
    ("fast", "fastball"),
    ("slider", "slider"),
    ("curve", "curveball"),
    ("change", "changeup"),
    ("split", "splitter"),
]


def normalize_pitch_type(raw: Optional[str]) -> str:
    """Map a pitch code or description onto a canonical pitch-type label.

    Unrecognized labels come back trimmed but otherwise unchanged.
    """
    code = (raw or "").strip()
    if not code:
        return UNKNOWN
    up = code.upper()
    if up in _CODE_TO_NAME:
        return _CODE_TO_NAME[up]
    low = code.lower()
    for needle, name in _NAME_RULES:
        if needle in low:
            return name
    return code


def is_pitch_event(ev: Dict[str, Any]) -> bool:
    flag = ev.get("isPitch")
    if isinstance(flag, bool):
        return flag
    return ev.get("pitchData") is not None


def find_pitch_type(ev: Dict[str, Any]) -> str:
    details = ev.get("details") or {}
    ptype = details.get("type") or {}
    if isinstance(ptype, dict):
        for key in ("description", "code"):
            val = ptype.get(key)
            if isinstance(val, str) and val.strip():
                return val
    desc = details.get("description")
    if isinstance(desc, str) and desc.strip():
        return desc
    return UNKNOWN


def _team_names(feed: Dict[str, Any]) -> Dict[str, Optional[str]]:
    teams = (feed.get("gameData") or {}).get("teams") or {}
    return {side: ((teams.get(side) or {}).get("name")) for side in ("home", "away")}


def _pitching_team(play: Dict[str, Any], teams: Dict[str, Optional[str]]) -> Optional[str]:
    # Home team pitches the top half
    half = str((play.get("about") or {}).get("halfInning", "")).lower()
    if half == "top":
        return teams.get("home")
    if half == "bottom":
        return teams.get("away")
    return None


def events_from_feed(feed: Dict[str, Any]) -> List[PitchEvent]:
    """Flatten a live game feed into one PitchEvent per pitch thrown."""
    all_plays = ((feed.get("liveData") or {}).get("plays") or {}).get("allPlays")
    if not isinstance(all_plays, list):
        raise FeedFormatError("game feed has no liveData.plays.allPlays list")

    teams = _team_names(feed)
    out: List[PitchEvent] = []
    for play in all_plays:
        pitcher = ((play.get("matchup") or {}).get("pitcher") or {})
        name = pitcher.get("fullName") or UNKNOWN_PITCHER
        team = _pitching_team(play, teams)
        for ev in play.get("playEvents") or []:
            if not is_pitch_event(ev):
                continue
            out.append(PitchEvent(
                pitcher_name=name,
                pitch_type=normalize_pitch_type(find_pitch_type(ev)),
                team_name=team,
            ))
    log.debug("parsed %d pitch events from %d plays", len(out), len(all_plays))
    return out
