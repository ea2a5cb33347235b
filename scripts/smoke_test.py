from __future__ import annotations

import json
from fastapi.testclient import TestClient
import os, sys

# Ensure 'src' is importable regardless of CWD
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from pitch_mix.serve.api import app


def main() -> int:
    client = TestClient(app)

    # Health
    r = client.get("/health")
    print("/health:", r.status_code, r.json())

    # Inline events, no network
    events = (
        [{"pitcher_name": "Yoshinobu Yamamoto", "pitch_type": "fastball"}] * 4
        + [{"pitcher_name": "Yoshinobu Yamamoto", "pitch_type": "splitter"}] * 3
        + [{"pitcher_name": "Yoshinobu Yamamoto", "pitch_type": "curveball"}] * 2
        + [{"pitcher_name": "Trey Yesavage", "pitch_type": "slider"}] * 2
    )
    r2 = client.post("/v1/pitch-mix/aggregate", json={"events": events})
    print("/v1/pitch-mix/aggregate:", r2.status_code)
    print(json.dumps(r2.json(), indent=2))

    # Uncategorized pitch type
    r3 = client.post("/v1/pitch-mix/aggregate", json={"events": events + [{"pitcher_name": "X", "pitch_type": "knuckleball"}]})
    print("/v1/pitch-mix/aggregate (knuckleball):", r3.status_code, r3.json())

    # Live game, only with --live
    if "--live" in sys.argv:
        r4 = client.get("/v1/games/813026/pitch-mix")
        print("/v1/games/813026/pitch-mix:", r4.status_code)
        print(json.dumps(r4.json(), indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
