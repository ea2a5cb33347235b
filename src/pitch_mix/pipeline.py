from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .data.normalize import events_from_feed
from .data.statsapi import StatsApiClient
from .models.aggregator import aggregate
from .models.categories import is_known
from .schemas import PitchEvent, Report


log = logging.getLogger(__name__)


def drop_unknown(events: Iterable[PitchEvent]) -> List[PitchEvent]:
    kept: List[PitchEvent] = []
    dropped = 0
    for ev in events:
        if is_known(ev.pitch_type):
            kept.append(ev)
        else:
            dropped += 1
            log.warning("skipping %s pitch by %s: no category", ev.pitch_type, ev.pitcher_name)
    if dropped:
        log.info("skipped %d uncategorized pitches", dropped)
    return kept


def summarize_events(events: Iterable[PitchEvent], game_pk: Optional[int] = None, skip_unknown: bool = False) -> Report:
    if skip_unknown:
        events = drop_unknown(events)
    return aggregate(events, game_pk=game_pk)


def report_for_game(client: StatsApiClient, game_pk: int, skip_unknown: bool = False) -> Report:
    feed = client.game_feed(game_pk)
    events = events_from_feed(feed)
    log.info("game %d: %d pitches", game_pk, len(events))
    return summarize_events(events, game_pk=game_pk, skip_unknown=skip_unknown)
