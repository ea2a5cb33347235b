from __future__ import annotations

from typing import List

from .schemas import Report


def render_report(report: Report) -> str:
    """Format a report as indented text: pitcher, then category, then pitch type."""
    if not report.pitchers:
        return "No pitches found."
    blocks: List[str] = []
    for p in report.pitchers:
        header = f"{p.name:<20} ({p.total:>3})"
        if p.team_name:
            header += f"  {p.team_name}"
        lines = [header]
        for c in p.categories:
            lines.append(f"  {c.name:<14} {c.total:>3}")
            for t in c.types:
                lines.append(f"    {t.name:<12} {t.count:>3}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
