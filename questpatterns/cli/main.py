"""
Main CLI module with argument parsing and demo execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging setup
- Demo routing and execution
"""
import argparse
import os
import sys
from typing import List, Optional

from questpatterns._package import PACKAGE_DESCRIPTION, __version__
from questpatterns.application.demos import DEMOS, run_demo, run_demos
from questpatterns.config.manager import ConfigurationManager
from questpatterns.config.schemas import AppConfig
from questpatterns.domain.base.exceptions import DomainException
from questpatterns.infrastructure.logging.logger import get_logger, setup_logging
from questpatterns.infrastructure.narrative import ConsoleNarrativeSink
from questpatterns.infrastructure.registry import get_reaction_registry


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if argv is None else "questpatterns",
        description=PACKAGE_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s adapter                              # Myrin joins the tournament
  %(prog)s composite                            # Display the inventory tree
  %(prog)s strategy --rescue-reaction flee      # Ernie keeps running
  %(prog)s all                                  # Run every configured demo
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (YAML or JSON)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    parser.add_argument("--log-format", choices=["console", "json"], help="Set log renderer")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="demo", help="Available demos")

    subparsers.add_parser("adapter", help="Adapter pattern: a mage fights with a staff")
    subparsers.add_parser("composite", help="Composite pattern: nested inventory")
    subparsers.add_parser("singleton", help="Singleton pattern: one shared registry")
    strategy_parser = subparsers.add_parser("strategy", help="Strategy pattern: NPC reactions")
    strategy_parser.add_argument(
        "--rescue-reaction",
        help="Reaction Ernie switches to when Lucy is in danger",
    )
    subparsers.add_parser("all", help="Run every configured demo in order")
    subparsers.add_parser("list", help="List available demos and reactions")

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    app_config = ConfigurationManager(args.config).app_config

    logging_updates = {}
    if args.log_level:
        logging_updates["level"] = args.log_level
    if args.log_format:
        logging_updates["format"] = args.log_format
    if logging_updates:
        app_config = app_config.model_copy(
            update={"logging": app_config.logging.model_copy(update=logging_updates)}
        )

    rescue_reaction = getattr(args, "rescue_reaction", None)
    if rescue_reaction:
        app_config = app_config.model_copy(
            update={"strategy": app_config.strategy.model_copy(update={"rescue_reaction": rescue_reaction})}
        )
    return app_config


def list_catalogue() -> None:
    print("Demos:")
    for name in DEMOS:
        print(f"  {name}")
    print("Reactions:")
    for name in get_reaction_registry().list_reactions():
        print(f"  {name}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    try:
        args = parse_args(argv)

        if not args.demo:
            print("Error: No demo specified. Use --help for usage information.", file=sys.stderr)
            return 1

        try:
            config = load_config(args)
            setup_logging(config.logging)
            logger = get_logger(__name__)

            if args.demo == "list":
                list_catalogue()
                return 0

            sink = ConsoleNarrativeSink()
            if args.demo == "all":
                run_demos(config.demos, sink, config)
            else:
                run_demo(args.demo, sink, config)

            logger.debug("Demo finished", demo=args.demo)
            return 0

        except DomainException as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
