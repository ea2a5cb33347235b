from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..schemas import CategorySummary, PitchEvent, PitcherSummary, Report, TypeSummary
from .categories import category_for


log = logging.getLogger(__name__)


class _PitcherAccumulator:
    """Per-pitcher counts: category -> Counter(pitch_type -> count)."""

    def __init__(self) -> None:
        self.by_category: Dict[str, Counter] = {}
        self.teams: Set[str] = set()

    def add(self, pitch_type: str, category: str, team_name: Optional[str]) -> None:
        self.by_category.setdefault(category, Counter())[pitch_type] += 1
        if team_name:
            self.teams.add(team_name)


def _rank_key(item: Tuple[str, int]) -> Tuple[int, str]:
    # count descending, then name ascending
    name, count = item
    return (-count, name)


def _summarize_category(name: str, counts: Counter) -> CategorySummary:
    types = tuple(TypeSummary(name=t, count=c) for t, c in sorted(counts.items(), key=_rank_key))
    return CategorySummary(name=name, total=sum(t.count for t in types), types=types)


def _summarize_pitcher(name: str, acc: _PitcherAccumulator) -> PitcherSummary:
    cats = [_summarize_category(cat, counts) for cat, counts in acc.by_category.items()]
    cats.sort(key=lambda c: (-c.total, c.name))
    return PitcherSummary(
        name=name,
        team_name=min(acc.teams) if acc.teams else None,
        total=sum(c.total for c in cats),
        categories=tuple(cats),
    )


def aggregate(events: Iterable[PitchEvent], game_pk: Optional[int] = None) -> Report:
    """Group pitch events into a per-pitcher, per-category, per-type report.

    Every level is ordered by count descending, ties by name ascending, so the
    result does not depend on input order. Raises UnknownPitchTypeError for a
    pitch type outside the category table; no partial report is returned.
    """
    pitchers: Dict[str, _PitcherAccumulator] = {}
    n = 0
    for ev in events:
        category = category_for(ev.pitch_type)
        pitchers.setdefault(ev.pitcher_name, _PitcherAccumulator()).add(ev.pitch_type, category, ev.team_name)
        n += 1

    summaries: List[PitcherSummary] = [_summarize_pitcher(name, acc) for name, acc in pitchers.items()]
    summaries.sort(key=lambda p: (-p.total, p.name))
    log.debug("aggregated %d pitches across %d pitchers", n, len(summaries))
    return Report(game_pk=game_pk, pitchers=tuple(summaries))
