from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap, root
resolution and tree generation. Maps root resolution failures to a message
on stderr and a non-zero exit status; the core modules never terminate the
process themselves.
"""

import os
import sys
from typing import Dict, List, Optional, Type

from dirtree.core.resolver import resolve_root
from dirtree.core.tree_service import generate_tree
from dirtree.domain.errors import (
    CwdUnavailableError,
    DirtreeError,
    MetadataError,
    NotADirectoryPathError,
    PathResolutionError,
)
from dirtree.domain.glyphs import select_glyphs
from dirtree.infra.logging import LoggingConfig, configure_logging, get_logger
from dirtree.interface.cli import args as cli_args
from dirtree.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

_ERROR_KEYS: Dict[Type[DirtreeError], str] = {
    CwdUnavailableError: "cli.errors.cwd_unavailable",
    PathResolutionError: "cli.errors.path_resolution",
    MetadataError: "cli.errors.metadata",
    NotADirectoryPathError: "cli.errors.not_a_directory",
}

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, 1 for a fatal root error).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    options = cli_args.args_to_options(parser.parse_args(argv))

    # 2. Logging bootstrap (stderr only, stdout carries the tree)
    log_level = "DEBUG" if options.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=options.log_file))

    logger.debug(f"CLI execution initiated with {options}")

    # 3. Root resolution
    try:
        root = resolve_root(options.path)
    except DirtreeError as e:
        msg = describe_error(e)
        logger.debug(f"Root resolution failed: {msg}")
        print(i18n.t("cli.errors.prefix", message=msg), file=sys.stderr)
        return EXIT_FAILURE

    # 4. Tree generation phase
    try:
        generate_tree(
            root,
            show_files=options.show_files,
            glyphs=select_glyphs(options.ascii_only),
            out=sys.stdout,
            save_path=options.output_file,
        )
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except BrokenPipeError:
        # Consumer closed stdout early (e.g. piped into head)
        _silence_stdout()
        return EXIT_FAILURE

    return EXIT_OK

# -----------------------------------------------------------------------------
# ERROR RENDERING
# -----------------------------------------------------------------------------

def describe_error(error: DirtreeError) -> str:
    """
    Build the user-facing description of a root resolution failure.

    Args:
        error: The raised resolution error.

    Returns:
        str: Localized message, without the 'error:' prefix.
    """
    key = _ERROR_KEYS.get(type(error), "cli.errors.unexpected")
    return i18n.t(key, path=error.path or "", reason=error.reason or str(error))

# -----------------------------------------------------------------------------
# STREAM HELPERS
# -----------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point stdout at devnull so the flush at interpreter shutdown cannot fail again."""
    try:
        stdout_fd = sys.stdout.fileno()
        devnull = os.open(os.devnull, os.O_WRONLY)
    except (OSError, ValueError) as e:
        logger.debug(f"Unable to redirect stdout after broken pipe: {e}")
        return
    os.dup2(devnull, stdout_fd)
    os.close(devnull)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
