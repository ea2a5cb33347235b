from __future__ import annotations

import argparse
import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from pitch_mix.config import load_settings


def main():
    ap = argparse.ArgumentParser(description="Run the pitch-mix HTTP service")
    ap.add_argument("--config", default="config/settings.example.yaml")
    ap.add_argument("--reload", action="store_true")
    args = ap.parse_args()
    settings = load_settings(args.config)

    import uvicorn

    uvicorn.run("pitch_mix.serve.api:app", host=settings.host, port=settings.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
