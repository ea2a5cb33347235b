from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from ..errors import UnknownPitchTypeError


HEATER = "heater"
BREAKING_BALL = "breaking ball"
OFFSPEED = "offspeed"

CATEGORIES: Tuple[str, ...] = (HEATER, BREAKING_BALL, OFFSPEED)

_PITCH_TYPES_BY_CATEGORY: Dict[str, Tuple[str, ...]] = {
    HEATER: ("fastball", "cutter", "sinker"),
    BREAKING_BALL: ("slider", "curveball"),
    OFFSPEED: ("splitter", "changeup"),
}

# pitch type -> category, frozen at import
CATEGORY_BY_PITCH_TYPE: Mapping[str, str] = MappingProxyType(
    {pt: cat for cat, types in _PITCH_TYPES_BY_CATEGORY.items() for pt in types}
)


def category_for(pitch_type: str) -> str:
    try:
        return CATEGORY_BY_PITCH_TYPE[pitch_type]
    except KeyError:
        raise UnknownPitchTypeError(pitch_type) from None


def is_known(pitch_type: str) -> bool:
    return pitch_type in CATEGORY_BY_PITCH_TYPE
