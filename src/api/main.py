"""Server entrypoint.

Run with:
    python -m src.api.main
or:
    uvicorn src.api.app:app --reload --port 3000
"""

from __future__ import annotations

import argparse

from src.api.api_config import get_api_config


def parse_args() -> argparse.Namespace:
    config = get_api_config()
    parser = argparse.ArgumentParser(description="Run the residential quote API")
    parser.add_argument("--host", default=config.host)
    parser.add_argument("--port", type=int, default=config.port)
    parser.add_argument("--reload", action="store_true")
    return parser.parse_args()


def main() -> None:
    import uvicorn

    args = parse_args()
    uvicorn.run("src.api.app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
