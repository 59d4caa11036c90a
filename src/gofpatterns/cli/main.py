"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the demo service
"""
import argparse
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from gofpatterns._version import __version__
from gofpatterns.application.dto import PatternCategory
from gofpatterns.application.service import DemoService
from gofpatterns.cli.formatters import format_output
from gofpatterns.config.manager import ConfigurationManager
from gofpatterns.config.schemas.app_schema import AppConfig
from gofpatterns.config.schemas.logging_schema import LogLevel
from gofpatterns.config.schemas.output_schema import OutputFormat
from gofpatterns.domain.core.exceptions import DomainException, ValidationError
from gofpatterns.infrastructure.logging.logger import get_logger, setup_logging

FORMAT_CHOICES = [f.value for f in OutputFormat]
CATEGORY_CHOICES = [c.value for c in PatternCategory]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "gof-patterns",
        description="gof-patterns - Runnable demonstrations of classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demos list                        # List all demos
  %(prog)s demos list --category structural  # List structural demos
  %(prog)s demos show bridge                 # Show demo details
  %(prog)s demos run strategy                # Run one demo
  %(prog)s --format json demos run --all     # Run every demo, JSON output
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument(
        "--log-level", choices=[level.value for level in LogLevel], help="Set logging level"
    )
    parser.add_argument("--format", choices=FORMAT_CHOICES, help="Output format")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Resource subparsers
    subparsers = parser.add_subparsers(dest="resource", help="Available resources")

    # Demos resource
    demos_parser = subparsers.add_parser("demos", help="Browse and run pattern demos")
    demos_subparsers = demos_parser.add_subparsers(dest="action", help="Demo actions")

    # Demos list
    demos_list = demos_subparsers.add_parser("list", help="List all demos")
    demos_list.add_argument("--category", choices=CATEGORY_CHOICES, help="Filter by pattern category")

    # Demos show
    demos_show = demos_subparsers.add_parser("show", help="Show demo details")
    demos_show.add_argument("name", help="Demo name to show")

    # Demos run
    demos_run = demos_subparsers.add_parser("run", help="Run one or more demos")
    demos_run.add_argument("names", nargs="*", help="Demo names to run")
    demos_run.add_argument("--all", action="store_true", help="Run every demo")
    demos_run.add_argument("--category", choices=CATEGORY_CHOICES, help="With --all, only this category")

    return parser.parse_args(argv)


def _list_demos(args: argparse.Namespace, service: DemoService) -> Dict[str, Any]:
    category = PatternCategory(args.category) if args.category else None
    return {"demos": [info.to_dict() for info in service.list_demos(category)]}


def _show_demo(args: argparse.Namespace, service: DemoService) -> Dict[str, Any]:
    return {"demo": service.get_demo(args.name).to_dict()}


def _run_demos(args: argparse.Namespace, service: DemoService) -> Dict[str, Any]:
    if args.category and not args.all:
        raise ValidationError("--category can only be used together with --all")
    if args.all and args.names:
        raise ValidationError("Specify demo names or --all, not both")

    if args.all:
        category = PatternCategory(args.category) if args.category else None
        results = service.run_all(category)
    elif args.names:
        results = [service.run(name) for name in args.names]
    else:
        raise ValidationError("Specify at least one demo name or --all")
    return {"results": [result.to_dict() for result in results]}


COMMAND_HANDLERS: Dict[tuple, Callable[[argparse.Namespace, DemoService], Dict[str, Any]]] = {
    ("demos", "list"): _list_demos,
    ("demos", "show"): _show_demo,
    ("demos", "run"): _run_demos,
}


def execute_command(args: argparse.Namespace, service: DemoService) -> Dict[str, Any]:
    """Execute the appropriate command handler."""
    handler_key = (args.resource, args.action)
    if handler_key not in COMMAND_HANDLERS:
        raise ValidationError(f"Unknown command: {args.resource} {args.action}")
    return COMMAND_HANDLERS[handler_key](args, service)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    config = ConfigurationManager(config_path=args.config).get_config()
    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": LogLevel(args.log_level)})}
        )
    return config


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        # Validate required arguments
        if not args.resource:
            print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
            sys.exit(1)

        if not args.action:
            print(
                f"Error: No action specified for {args.resource}. Use --help for usage information.",
                file=sys.stderr,
            )
            sys.exit(1)

        try:
            config = load_config(args)
        except DomainException as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        setup_logging(config.logging)
        logger = get_logger(__name__)

        try:
            service = DemoService(config.demos)
            result = execute_command(args, service)

            output_format = args.format or config.output.default_format.value
            print(format_output(result, output_format))

        except DomainException as e:
            logger.error("Domain error", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
