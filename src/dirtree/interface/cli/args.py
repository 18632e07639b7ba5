from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw argparse
namespace into the immutable TreeOptions consumed by the application.
"""

import argparse

from dirtree.domain.config import TreeOptions
from dirtree.domain.constants import APP_NAME, APP_VERSION
from dirtree.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.path"),
    )

    # --- Listing Options ---
    p.add_argument(
        "-f", "--files",
        dest="show_files",
        action="store_true",
        help=i18n.t("cli.args.files"),
    )
    p.add_argument(
        "-a", "--ascii",
        dest="ascii_only",
        action="store_true",
        help=i18n.t("cli.args.ascii"),
    )
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        metavar="FILE",
        default=None,
        help=i18n.t("cli.args.output"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        metavar="FILE",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    p.add_argument(
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_options(args: argparse.Namespace) -> TreeOptions:
    """
    Translate the argparse Namespace into runtime options.

    Args:
        args: Parsed command-line arguments.

    Returns:
        TreeOptions: Options for the requested listing.
    """
    return TreeOptions(
        path=args.path,
        show_files=bool(args.show_files),
        ascii_only=bool(args.ascii_only),
        output_file=args.output_file or None,
        debug=bool(args.debug),
        log_file=args.log_file or None,
    )
