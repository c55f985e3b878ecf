"""
Command line entry for the menu page build.

    build-menu [menu-path] [output-path]

Exits 0 after printing ``Generated <output-path>``, or 1 after printing
the diagnostic to stderr when the source is missing, unparseable or invalid.
Nothing is written unless the whole menu validates.
"""
import argparse
import sys
from pathlib import Path

from loguru import logger

from menu_builder.config import get_settings
from menu_builder.errors import MenuError
from menu_builder.loader import load_document
from menu_builder.logging import setup_logging
from menu_builder.renderer import render
from menu_builder.validator import validate
from menu_builder.writer import write_output


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="build-menu",
        description="Render the YAML menu into a static HTML page",
    )
    parser.add_argument("menu_path", nargs="?", type=Path, default=settings.menu_path,
                        help="YAML menu source (default: %(default)s)")
    parser.add_argument("output_path", nargs="?", type=Path, default=settings.output_path,
                        help="HTML file to write (default: %(default)s)")
    return parser


def main(argv=None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    try:
        menu = validate(load_document(args.menu_path))
    except MenuError as exc:
        logger.debug("Menu build stopped: {}", type(exc).__name__)
        print(exc, file=sys.stderr)
        return 1

    output_path = write_output(args.output_path, render(menu))
    print(f"Generated {output_path}")
    return 0
