from typing import Iterator

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from ..config import load_settings
from ..data.statsapi import StatsApiClient
from ..errors import FeedFormatError, StatsApiError, UnknownPitchTypeError
from ..pipeline import report_for_game, summarize_events
from ..schemas import AggregateRequest, Report
from ..telemetry import maybe_log_report

app = FastAPI(title="pitch-mix")
_settings = load_settings()


def get_client() -> Iterator[StatsApiClient]:
    client = StatsApiClient(_settings.statsapi_base_url, _settings.statsapi_timeout_s, _settings.user_agent)
    try:
        yield client
    finally:
        client.close()


@app.exception_handler(UnknownPitchTypeError)
def _unknown_pitch_type(request: Request, exc: UnknownPitchTypeError):
    return JSONResponse(status_code=422, content={"detail": str(exc), "pitch_type": exc.pitch_type})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/v1/pitch-mix/aggregate", response_model=Report)
def aggregate_events(req: AggregateRequest, skip_unknown: bool = False):
    report = summarize_events(req.events, skip_unknown=skip_unknown or _settings.skip_unknown)
    maybe_log_report("/v1/pitch-mix/aggregate", report, enabled=_settings.telemetry_enabled, path=_settings.telemetry_path)
    return report


@app.get("/v1/games/{game_pk}/pitch-mix", response_model=Report)
def game_pitch_mix(game_pk: int, skip_unknown: bool = False, client: StatsApiClient = Depends(get_client)):
    try:
        report = report_for_game(client, game_pk, skip_unknown=skip_unknown or _settings.skip_unknown)
    except StatsApiError as e:
        # upstream 404 means no such game
        status = 404 if e.status_code == 404 else 502
        raise HTTPException(status_code=status, detail=str(e))
    except FeedFormatError as e:
        raise HTTPException(status_code=502, detail=str(e))
    maybe_log_report("/v1/games/pitch-mix", report, enabled=_settings.telemetry_enabled, path=_settings.telemetry_path)
    return report
