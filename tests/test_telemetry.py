import csv

from pitch_mix.models.aggregator import aggregate
from pitch_mix.schemas import PitchEvent
from pitch_mix.telemetry import maybe_log_report


def _report():
    events = [PitchEvent(pitcher_name="Blake Snell", pitch_type=pt) for pt in ["fastball", "changeup", "changeup"]]
    return aggregate(events, game_pk=813026)


def test_disabled_by_default(tmp_path, monkeypatch):
    monkeypatch.delenv("PITCH_MIX_LOG_ENABLE", raising=False)
    path = tmp_path / "log.csv"
    maybe_log_report("test", _report(), path=str(path))
    assert not path.exists()


def test_env_enables_and_appends(tmp_path, monkeypatch):
    path = tmp_path / "nested" / "log.csv"
    monkeypatch.setenv("PITCH_MIX_LOG_ENABLE", "1")
    monkeypatch.setenv("PITCH_MIX_LOG_PATH", str(path))
    maybe_log_report("test", _report())
    maybe_log_report("test", _report())
    with path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["pitcher"] == "Blake Snell"
    assert rows[0]["game_pk"] == "813026"
    assert rows[0]["mix"] == "offspeed:2;heater:1"


def test_write_failure_is_swallowed(tmp_path, monkeypatch):
    monkeypatch.delenv("PITCH_MIX_LOG_PATH", raising=False)
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    # parent is a regular file, so mkdir fails
    maybe_log_report("test", _report(), enabled=True, path=str(blocker / "log.csv"))
    assert not (blocker / "log.csv").exists()
    assert blocker.read_text(encoding="utf-8") == "x"
