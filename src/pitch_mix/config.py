from pathlib import Path

from pydantic import BaseModel
import yaml

from .data.statsapi import DEFAULT_BASE_URL, DEFAULT_USER_AGENT

class Settings(BaseModel):
    statsapi_base_url: str = DEFAULT_BASE_URL
    statsapi_timeout_s: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    host: str = "0.0.0.0"
    port: int = 8000
    skip_unknown: bool = False
    telemetry_enabled: bool = False
    telemetry_path: str | None = None

def load_settings(path: str = "config/settings.example.yaml") -> Settings:
    """Read settings from YAML; a missing file yields the defaults."""
    p = Path(path)
    if not p.exists():
        return Settings()
    with p.open("r", encoding="utf-8") as f:
        y = yaml.safe_load(f) or {}
    api = y.get("statsapi", {}) or {}
    s = y.get("service", {}) or {}
    rep = y.get("report", {}) or {}
    tel = y.get("telemetry", {}) or {}
    d = Settings()
    return Settings(
        statsapi_base_url=api.get("base_url", d.statsapi_base_url),
        statsapi_timeout_s=api.get("timeout_s", d.statsapi_timeout_s),
        user_agent=api.get("user_agent", d.user_agent),
        host=s.get("host", d.host),
        port=s.get("port", d.port),
        skip_unknown=rep.get("skip_unknown", d.skip_unknown),
        telemetry_enabled=tel.get("enabled", d.telemetry_enabled),
        telemetry_path=tel.get("path", d.telemetry_path),
    )
