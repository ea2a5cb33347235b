from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_settings
from .data.statsapi import StatsApiClient
from .errors import PitchMixError, UnknownPitchTypeError
from .pipeline import report_for_game
from .render import render_report
from .telemetry import maybe_log_report


log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="pitch-mix", description="Summarize pitch types per pitcher for a single MLB game")
    ap.add_argument("--game-pk", type=int, help="Game primary key (gamePk). If given, date/team args are ignored")
    ap.add_argument("--date", help="Game date YYYY-MM-DD, used to look up the game when --game-pk is not given")
    ap.add_argument("--home", help="Home team name (substring match) for picking the game on --date")
    ap.add_argument("--away", help="Away team name (substring match) for picking the game on --date")
    ap.add_argument("--config", default="config/settings.example.yaml", help="Settings YAML")
    ap.add_argument("--skip-unknown", action="store_true", help="Drop pitches with no category instead of failing")
    ap.add_argument("--json", action="store_true", help="Print the report as JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None, client: Optional[StatsApiClient] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.game_pk is None and not args.date:
        ap.error("--date is required if --game-pk is not supplied (format YYYY-MM-DD)")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings(args.config)
    skip_unknown = args.skip_unknown or settings.skip_unknown
    if client is None:
        client = StatsApiClient(settings.statsapi_base_url, settings.statsapi_timeout_s, settings.user_agent)

    try:
        with client:
            game_pk = args.game_pk
            if game_pk is None:
                game_pk = client.find_game_pk(args.date, args.home, args.away)
            report = report_for_game(client, game_pk, skip_unknown=skip_unknown)
    except UnknownPitchTypeError as e:
        log.error("%s (rerun with --skip-unknown to drop these pitches)", e)
        return 2
    except PitchMixError as e:
        log.error("%s", e)
        return 1

    maybe_log_report("cli", report, enabled=settings.telemetry_enabled, path=settings.telemetry_path)
    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(render_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
