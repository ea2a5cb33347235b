from __future__ import annotations

import csv
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .schemas import Report


log = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "TRUE", "yes", "YES"}


def maybe_log_report(route: str, report: Report, enabled: bool = False, path: Optional[str] = None) -> None:
    """Append one CSV line per pitcher of a produced report if telemetry is on.

    Enable with PITCH_MIX_LOG_ENABLE=1 or `enabled=True`. PITCH_MIX_LOG_PATH
    overrides `path`; default is artifacts/report_logs.csv under the cwd.
    """
    try:
        if not enabled and os.environ.get("PITCH_MIX_LOG_ENABLE", "0") not in _TRUTHY:
            return
        p = Path(os.environ.get("PITCH_MIX_LOG_PATH") or path or "artifacts/report_logs.csv")
        p.parent.mkdir(parents=True, exist_ok=True)
        fields = ["ts", "route", "game_pk", "pitcher", "total", "mix"]
        ts = datetime.now(timezone.utc).isoformat(timespec="seconds")
        header_written = p.exists()
        with p.open("a", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=fields)
            if not header_written:
                w.writeheader()
            for ps in report.pitchers:
                w.writerow({
                    "ts": ts,
                    "route": route,
                    "game_pk": "" if report.game_pk is None else report.game_pk,
                    "pitcher": ps.name,
                    "total": ps.total,
                    "mix": ";".join(f"{c.name}:{c.total}" for c in ps.categories),
                })
    except Exception:
        # Telemetry is best-effort and never breaks a run
        log.debug("report telemetry write failed", exc_info=True)
