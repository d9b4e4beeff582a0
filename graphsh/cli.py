"""Command-line interface entry point for graphsh."""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from graphsh import __version__
from graphsh.core.debug import SessionDebugLogger, set_debug_logger
from graphsh.core.engine import Engine, load_engine
from graphsh.core.errors import BatchAbort, GraphshError
from graphsh.core.paths import get_paths
from graphsh.core.runtime import ConfigManager
from graphsh.models.config import AppConfig
from graphsh.repl import REPL, LineAccumulator, PromptLineSource, Session, StreamLineSource
from graphsh.repl.timing import format_elapsed
from graphsh.repl.ui.style_tokens import CYAN, ERROR, SUCCESS, WARNING
from graphsh.repl.ui.toolbar import Toolbar


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the graphsh command."""
    parser = argparse.ArgumentParser(
        prog="graphsh",
        description="graphsh - interactive console for graph query statements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graphsh --engine mystore.engine:create_engine     # Start the console
  graphsh run queries.bql                           # Run a statement file and exit
  graphsh config show                               # Show the merged configuration
        """,
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"graphsh {__version__}",
    )
    parser.add_argument(
        "--engine",
        "-e",
        metavar="MODULE:FACTORY",
        help="Factory building the query engine (overrides settings.json)",
    )
    parser.add_argument(
        "--working-dir",
        "-d",
        metavar="PATH",
        help="Set working directory (defaults to current directory)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging",
    )
    parser.add_argument("--channel-size", type=int, metavar="N", help="Planner channel size")
    parser.add_argument("--bulk-size", type=int, metavar="N", help="Bulk size for export and load")
    parser.add_argument("--builder-size", type=int, metavar="N", help="Builder size for load")
    parser.add_argument(
        "--no-history",
        action="store_true",
        help="Do not keep the console input history on disk",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("bql", help="Start the interactive console (default)")

    run_parser = subparsers.add_parser(
        "run", help="Run all the statements in a file and exit"
    )
    run_parser.add_argument("file", help="File with ;-terminated statements")

    subparsers.add_parser("version", help="Print the graphsh version")

    config_parser = subparsers.add_parser("config", help="Inspect graphsh configuration")
    config_subparsers = config_parser.add_subparsers(
        dest="config_command", help="Config operations"
    )
    config_subparsers.add_parser("show", help="Display current configuration")

    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    # prompt_toolkit is chatty at DEBUG
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for graphsh.

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    console = Console()

    if args.command == "version":
        console.print(f"graphsh {__version__}")
        return 0

    configure_logging(args.verbose)

    working_dir = Path(args.working_dir) if args.working_dir else Path.cwd()
    if not working_dir.exists():
        console.print(f"[{ERROR}]Error: Working directory does not exist: {working_dir}[/{ERROR}]")
        return 1

    try:
        config_manager = ConfigManager(working_dir)
        config = config_manager.load_config(
            overrides={
                "engine": args.engine,
                "channel_size": args.channel_size,
                "bulk_size": args.bulk_size,
                "builder_size": args.builder_size,
                "verbose": True if args.verbose else None,
                "history": False if args.no_history else None,
            }
        )

        if args.command == "config":
            return _handle_config_command(args, config_manager, config, console)

        if not config.engine:
            console.print(
                f"[{ERROR}]Error: No engine configured.[/{ERROR}] "
                "Pass --engine MODULE:FACTORY or set \"engine\" in settings.json"
            )
            return 1
        engine = load_engine(config.engine, config)

        if args.command == "run":
            return _run_file(engine, config, console, args.file)
        return _run_console(engine, config, console)

    except KeyboardInterrupt:
        console.print(f"\n[{WARNING}]Interrupted.[/{WARNING}]")
        return 130
    except Exception as e:
        console.print(f"[{ERROR}]Error: {escape(str(e))}[/{ERROR}]")
        if args.verbose:
            import traceback

            console.print(traceback.format_exc(), markup=False)
        return 1
    finally:
        set_debug_logger(None)


def _start_debug_logger(session: Session, config: AppConfig) -> None:
    if config.verbose:
        logger = SessionDebugLogger(get_paths().global_logs_dir, session.id)
        set_debug_logger(logger)
        logging.getLogger(__name__).debug("Debug events written to %s", logger.file_path)


def _run_console(engine: Engine, config: AppConfig, console: Console) -> int:
    """Run the interactive console until quit or end of input."""
    with Session(engine, config, console) as session:
        _start_debug_logger(session, config)
        if sys.stdin.isatty():
            history_file = get_paths().global_history_file if config.history else None
            source = PromptLineSource(history_file, bottom_toolbar=Toolbar(session))
        else:
            source = StreamLineSource(sys.stdin, console)
        accumulator = LineAccumulator(source, config.prompt, config.continuation_prompt)
        return REPL(session, accumulator).run()


def _run_file(engine: Engine, config: AppConfig, console: Console, path: str) -> int:
    """Run a statement file without starting the console."""
    with Session(engine, config, console) as session:
        _start_debug_logger(session, config)
        started = time.perf_counter()
        try:
            result = session.batch_runner.run_file(path)
        except BatchAbort as e:
            console.print(f"[{ERROR}]\\[ERROR][/{ERROR}] {escape(str(e))}")
            console.print(f"{e.completed} statement(s) completed before the failure.")
            return 1
        except GraphshError as e:
            console.print(f"[{ERROR}]\\[{e.marker}][/{ERROR}] {escape(str(e))}")
            return 1
        finally:
            console.print(f"Time spent: {format_elapsed(time.perf_counter() - started)}")

        console.print(
            f"[{SUCCESS}]Loaded {escape(repr(result.path))} and run {result.count} statements successfully[/{SUCCESS}]"
        )
        return 0


def _handle_config_command(
    args, config_manager: ConfigManager, config: AppConfig, console: Console
) -> int:
    """Handle config subcommands.

    Args:
        args: Parsed command-line arguments
    """
    if args.config_command != "show":
        console.print(
            f"[{WARNING}]No config subcommand specified. Use --help for available commands.[/{WARNING}]"
        )
        return 1

    table = Table(title="Current Configuration", show_header=True, header_style=f"bold {CYAN}")
    table.add_column("Setting", style=CYAN)
    table.add_column("Value", style="white")
    for key, value in config.model_dump().items():
        table.add_row(key, "[dim]Not set[/dim]" if value is None else escape(str(value)))

    paths = get_paths(config_manager.working_dir)
    console.print()
    console.print(table)
    console.print()
    console.print(f"[dim]Global settings: {paths.global_settings}[/dim]")
    console.print(f"[dim]Project settings: {paths.project_settings}[/dim]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
