# gwregistry/cli/commands/config_cmd.py
"""
Config command - Show effective configuration and its issues
"""

import sys

import yaml

from gwregistry.config import load_config


def register_command(subparsers):
    parser = subparsers.add_parser(
        "config",
        help="Show effective configuration",
    )
    parser.add_argument(
        "--config",
        help="Path to YAML config (default: $GWREGISTRY_CONFIG or ~/.gwregistry/config.yml)",
    )
    parser.set_defaults(func=show_config)
    return parser


def show_config(args) -> int:
    config = load_config(args.config)
    print(yaml.safe_dump(config.to_dict(), sort_keys=False), end="")

    issues = config.validate()
    for issue in issues:
        print(issue, file=sys.stderr)
    return 1 if any(issue.level == "error" for issue in issues) else 0


__all__ = ["register_command", "show_config"]
