"""Entry point for running the API key auth service.

Usage:
    python run_server.py --port 9876
"""

import argparse
import os


def main() -> None:
    parser = argparse.ArgumentParser(description="API Key Auth Service")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Interface to bind to")
    parser.add_argument("--port", type=int, required=True, help="Port to bind to")
    parser.add_argument("--log-level", type=str, default="info", help="Log level")
    parser.add_argument("--no-auth", action="store_true", help="Disable the API key middleware")
    args = parser.parse_args()

    os.environ["APIKEY_AUTH_LOG_LEVEL"] = args.log_level
    if args.no_auth:
        os.environ["APIKEY_AUTH_NO_AUTH"] = "true"

    import uvicorn
    from apikey_auth.main import app

    uvicorn.run(
        app,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
