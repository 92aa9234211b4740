#!/usr/bin/env python3

import argparse
import logging
from collections.abc import Sequence

from tagcart.application.checkout import CheckoutRequest, resolve_rules, run_checkout
from tagcart.receipt import format_rule_summary
from tagcart.runtime import get_logger, set_log_level

logger = get_logger(__name__)


def _print_error(error: str) -> None:
    for line in error.splitlines():
        print(line)


def _add_rule_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rules", default=None, help="Rules TOML file (default: config/rules.toml)")
    parser.add_argument(
        "--default-rules",
        action="store_true",
        help="Use the stock rule list instead of a rules file",
    )


def _cmd_checkout(args: argparse.Namespace) -> int:
    result = run_checkout(
        CheckoutRequest(
            products_file=args.products,
            rules_file=args.rules,
            use_default_rules=args.default_rules,
            output_format=args.format,
            currency=args.currency,
        )
    )
    if result.status == "error":
        assert result.error is not None
        _print_error(result.error)
        return 1
    print(result.output, end="" if result.output.endswith("\n") else "\n")
    return 0


def _cmd_rules(args: argparse.Namespace) -> int:
    try:
        rules = resolve_rules(args.rules, args.default_rules)
    except (FileNotFoundError, ValueError) as exc:
        _print_error(str(exc))
        return 1
    print(format_rule_summary(rules))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Tag-based checkout discount calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  checkout [products] [--rules PATH | --default-rules] [--format text|beancount]
                             Apply discount rules to a product list and print the receipt
  rules [--rules PATH | --default-rules]
                             List the configured rules in run order

Notes:
  Rules run in file order; an item claimed by one rule is skipped by later rules.
  -v/--verbose logs each rule's claims; TAGCART_LOG_LEVEL sets the level otherwise.
""",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    checkout_parser = subparsers.add_parser("checkout", help="Run checkout over a product list")
    checkout_parser.add_argument(
        "products",
        nargs="?",
        default=None,
        help="Products JSON file (default: data/products.json)",
    )
    _add_rule_source_arguments(checkout_parser)
    checkout_parser.add_argument(
        "--format",
        choices=["text", "beancount"],
        default="text",
        help="Output format (default: text)",
    )
    checkout_parser.add_argument("--currency", default="CAD", help="Currency code (default: CAD)")

    rules_parser = subparsers.add_parser("rules", help="List configured rules")
    _add_rule_source_arguments(rules_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "checkout":
        return _cmd_checkout(args)
    if args.command == "rules":
        return _cmd_rules(args)

    logger.error("Unknown command: %s", args.command)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
