# gwregistry/cli/commands/serve_cmd.py
"""
Serve command - Start the registry HTTP server

- Loads config (YAML optional), CLI flags win
- Builds one Registry for the process lifetime
- Binds an ASGI server (uvicorn)
"""

import argparse
import dataclasses
import logging
import sys

from gwregistry.config import load_config
from gwregistry.config.validator import LOG_LEVELS, MAX_PORT_VALUE


logger = logging.getLogger(__name__)


# ----------------------------
# CLI registration
# ----------------------------

def register_command(subparsers):
    parser = subparsers.add_parser(
        "serve",
        help="Start the registry HTTP server",
        description="Serve the gateway/device registry over HTTP.",
    )

    parser.add_argument(
        "-p", "--port",
        type=port_value,
        help="Listen port, 1-65535 (default: from config, else 8000)",
    )

    parser.add_argument(
        "--host",
        help="Listen host (default: from config, else 127.0.0.1)",
    )

    parser.add_argument(
        "--config",
        help="Path to YAML config (default: $GWREGISTRY_CONFIG or ~/.gwregistry/config.yml)",
    )

    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Log level (default: from config, else info)",
    )

    parser.set_defaults(func=run_serve)
    return parser


# ----------------------------
# Main entry
# ----------------------------

def run_serve(args) -> int:
    config = load_config(args.config)

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        config.server = dataclasses.replace(config.server, **overrides)

    issues = config.validate()
    for issue in issues:
        print(issue, file=sys.stderr)
    if any(issue.level == "error" for issue in issues):
        return 1

    log_level = str(config.server.log_level).lower()
    if log_level not in LOG_LEVELS:
        log_level = "info"
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from gwregistry.web import create_app
    app = create_app(config=config)

    host, port = config.server.host, config.server.port
    print(
        f"[gwregistry] listen={host}:{port} "
        f"capacity={config.binding.max_devices_per_gateway}"
    )

    try:
        import uvicorn
    except ImportError:
        print(
            "ERROR: uvicorn is required. Install with: pip install uvicorn",
            file=sys.stderr,
        )
        return 1

    try:
        uvicorn.run(
            app,
            host=host,
            port=port,
            log_level=log_level,
            access_log=False,
        )
    except KeyboardInterrupt:
        print("\n[gwregistry] stopped")
    return 0


# ----------------------------
# Helpers
# ----------------------------

def port_value(value: str) -> int:
    """argparse type: decimal port in 1..65535"""
    if not (value.isascii() and value.isdigit()):
        raise argparse.ArgumentTypeError(f"Incorrect port's value '{value}'")
    port = int(value)
    if not 0 < port <= MAX_PORT_VALUE:
        raise argparse.ArgumentTypeError(f"Incorrect port's value '{port}'")
    return port


__all__ = ["register_command", "port_value", "run_serve"]
