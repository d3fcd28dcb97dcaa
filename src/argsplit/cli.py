"""Command-line interface for argsplit.

The executable classifies its own argument vector and prints the result.
Program options (those before ``--``) configure the executable itself;
command options and positional arguments are only reported.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any

import yaml

from argsplit.config.defaults import DEFAULT_CONFIG_YAML
from argsplit.config.loader import load_config
from argsplit.core.classifier import ArgumentClassifier, ParsedCommandLine, parse
from argsplit.core.diagnostics import Diagnostics
from argsplit.core.errors import ConfigError, Outcome, UserError
from argsplit.core.style import should_colorize, toggle_colors

__version__ = "0.1.0"

DEBUG_ENV_VAR = "ARGSPLIT_DEBUG"


class ProgramOptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting."""

    def error(self, message: str) -> Any:
        raise UserError(message)


def build_parser() -> ProgramOptionParser:
    parser = ProgramOptionParser(
        prog="argsplit",
        description="Classify a command line into positionals, program and command options",
        epilog="Example: argsplit --format=yaml -- -x build src/",
        add_help=False,
    )

    parser.add_argument(
        "--color",
        choices=("auto", "always", "never"),
        default=None,
        help="When to style diagnostics (default: from config)",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable styles",
    )

    parser.add_argument(
        "--format",
        choices=("text", "yaml"),
        default="text",
        help="Output format",
    )

    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the default configuration and exit",
    )

    parser.add_argument("--version", "-V", action="store_true", help="Print version and exit")
    parser.add_argument("--help", "-h", action="store_true", help="Show this help and exit")

    return parser


def parse_program_options(options: list[str]) -> tuple[argparse.Namespace, list[str]]:
    """Interpret program options, returning (known, unknown)."""
    return build_parser().parse_known_args(options)


def configure_logging() -> None:
    """Enable debug logging on stderr when ARGSPLIT_DEBUG is set."""
    if os.environ.get(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes", "on"):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(levelname)s] %(name)s: %(message)s",
            stream=sys.stderr,
        )


def as_mapping(cli: ParsedCommandLine) -> dict[str, Any]:
    """Convert a classified command line into plain lists."""

    def listed(array: Any) -> list[str]:
        return array.to_list() if array is not None else []

    return {
        "execfile": cli.execfile,
        "args": listed(cli.args),
        "program_options": listed(cli.program_options),
        "cmd_options": listed(cli.cmd_options),
    }


def render(cli: ParsedCommandLine, output_format: str) -> str:
    data = as_mapping(cli)
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip("\n")

    labels = {
        "execfile": "execfile",
        "args": "args",
        "program_options": "program options",
        "cmd_options": "command options",
    }
    lines: list[str] = []
    for key, label in labels.items():
        value = data[key]
        if isinstance(value, list):
            value = " ".join(value)
        lines.append(f"{label}: {value}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Full argument vector including the invocation path
            (defaults to sys.argv)

    Returns:
        Exit code
    """
    argv = list(sys.argv if argv is None else argv)
    configure_logging()

    try:
        config = load_config()
    except ConfigError as e:
        Diagnostics().error("Config error", e.message)
        return int(Outcome.USER)

    diagnostics = Diagnostics.from_config(config)
    result = parse(
        argv,
        classifier=ArgumentClassifier.from_config(config),
        diagnostics=diagnostics,
    )
    if not result.ok or result.cli is None:
        return result.exit_code

    with result.cli as cli:
        program_options = cli.program_options.to_list() if cli.program_options else []
        try:
            options, unknown = parse_program_options(program_options)
        except UserError as e:
            diagnostics.error("CLI error", e.message)
            return int(Outcome.USER)

        color_mode = "never" if options.no_color else (options.color or config.config.color)
        if config.config.styles and should_colorize(color_mode, diagnostics.stream):
            toggle_colors()

        for option in unknown:
            diagnostics.info("Ignored", f"Unknown program option ('{option}').")

        if options.help:
            print(build_parser().format_help(), end="")
        elif options.version:
            print(f"argsplit {__version__}")
        elif options.print_config:
            print(DEFAULT_CONFIG_YAML, end="")
        else:
            print(render(cli, options.format))

    return int(Outcome.OK)


if __name__ == "__main__":
    sys.exit(main())
