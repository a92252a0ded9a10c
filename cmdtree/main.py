"""
Main entry point for cmdtree.
"""
import argparse
import logging
import sys
from typing import Iterable, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .builtin import build_default_dispatcher
from .config import ConfigError, ConfigManager, VALID_LOG_LEVELS
from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION, QUIT_COMMAND
from .grammar import Dispatcher
from .shell import CandidateRenderer, PromptInput, strip_line_ending


logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    parser.add_argument(
        "-c", "--command",
        type=str,
        help="Resolve a single input line, print the candidates and exit"
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print candidates as a plain quoted list"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to config file"
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        help="Logging level (overrides config and environment)"
    )

    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def run_lines(dispatcher: Dispatcher, renderer: CandidateRenderer, lines: Iterable[str], plain: bool = False) -> int:
    """
    Resolve each line and print its candidates.

    Returns:
        0 if every line produced candidates, 1 otherwise
    """
    status = 0
    for line in lines:
        candidates = dispatcher.resolve(strip_line_ending(line))
        renderer.print(candidates, plain=plain)
        if not candidates:
            status = 1
    return status


def run_shell(dispatcher: Dispatcher, config: ConfigManager, renderer: CandidateRenderer, plain: bool = False) -> None:
    """Run the interactive read-resolve-print loop until /quit or EOF."""
    prompt_input = PromptInput(dispatcher, config.shell)

    while True:
        line = prompt_input.get_input()
        if line == QUIT_COMMAND:
            break
        if not line.strip():
            continue
        renderer.print(dispatcher.resolve(line), plain=plain)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    console = Console()

    try:
        config = ConfigManager(args.config)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}", highlight=False)
        return 2

    setup_logging(args.log_level or config.log_level)

    dispatcher = build_default_dispatcher()
    logger.debug(f"Loaded {len(dispatcher)} commands")

    renderer = CandidateRenderer(
        console=console,
        max_candidates=config.ui.max_candidates,
        show_empty=config.ui.show_empty,
    )

    if args.command is not None:
        return run_lines(dispatcher, renderer, [args.command], plain=args.plain)

    if not sys.stdin.isatty():
        return run_lines(dispatcher, renderer, sys.stdin, plain=args.plain)

    try:
        run_shell(dispatcher, config, renderer, plain=args.plain)
        return 0
    except KeyboardInterrupt:
        console.print("\nGoodbye!")
        return 0


if __name__ == "__main__":
    sys.exit(main())
