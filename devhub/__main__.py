"""Entry-point for the DevHub dashboard server."""
import argparse

import uvicorn

from .config import settings


def main():
    parser = argparse.ArgumentParser(description="DevHub dashboard server")
    parser.add_argument("--host", default=settings.server_host)
    parser.add_argument("--port", type=int, default=settings.server_port)
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args()

    # Logging itself is configured in the app lifespan.
    settings.log_level = args.log_level

    from .app import app

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
