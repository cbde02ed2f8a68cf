#!/usr/bin/env python3
"""
MeshCore contact cleaner
Suggests which contacts from a MeshCore contacts export to keep or remove
and writes a cleaned export with the contacts you choose to keep
"""

import argparse
import asyncio
import sys


def _print_validation(results) -> bool:
    """Print validation results to stderr. Returns True if any error was found."""
    from contact_cleaner.config_validation import SEVERITY_ERROR, SEVERITY_WARNING

    has_error = False
    for severity, message in results:
        if severity == SEVERITY_ERROR:
            print(f"Error: {message}", file=sys.stderr)
            has_error = True
        elif severity == SEVERITY_WARNING:
            print(f"Warning: {message}", file=sys.stderr)
        else:
            print(f"Info: {message}", file=sys.stderr)
    return has_error


def prompt_disclaimer(text: str) -> bool:
    """Interactive y/N confirmation for the export disclaimer."""
    print(text)
    try:
        answer = input("Export the cleaned contact list? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ('y', 'yes')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MeshCore Contact Cleaner - suggest contacts to remove from a MeshCore contacts export"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Contacts JSON exported from MeshCore",
    )
    parser.add_argument(
        "--config",
        default="config.ini",
        help="Path to configuration file (default: config.ini)",
    )
    parser.add_argument(
        "--output-dir",
        help="Directory for the cleaned export (overrides [Export] output_dir)",
    )
    parser.add_argument(
        "--keep",
        type=int,
        nargs="+",
        default=[],
        metavar="ID",
        help="Contact ids to keep regardless of the suggestion",
    )
    parser.add_argument(
        "--remove",
        type=int,
        nargs="+",
        default=[],
        metavar="ID",
        help="Contact ids to remove regardless of the suggestion",
    )
    bulk = parser.add_mutually_exclusive_group()
    bulk.add_argument("--keep-all", action="store_true", help="Start with every contact selected")
    bulk.add_argument("--remove-all", action="store_true", help="Start with no contact selected")
    parser.add_argument(
        "--accept-disclaimer",
        action="store_true",
        help="Accept the export disclaimer without prompting",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the suggestions without writing an export",
    )
    parser.add_argument(
        "--validate-config",
        action="store_true",
        help="Validate the config file and exit (exit 1 on errors)",
    )
    return parser


async def run(args) -> int:
    from contact_cleaner.core import ContactCleaner
    from contact_cleaner.exceptions import ContactCleanerError
    from contact_cleaner.presenter import format_summary, render_report

    cleaner = ContactCleaner(config_file=args.config)

    if not await cleaner.load_file(args.input):
        print(cleaner.status_message, file=sys.stderr)
        return 1

    if args.keep_all:
        cleaner.set_all(True)
    elif args.remove_all:
        cleaner.set_all(False)
    for contact_id in args.keep:
        cleaner.toggle(contact_id, True)
    for contact_id in args.remove:
        cleaner.toggle(contact_id, False)

    print(render_report(cleaner.contacts, cleaner.summary(), cleaner.timezone, cleaner.status_message))

    if args.dry_run:
        return 0

    confirm = (lambda _text: True) if args.accept_disclaimer else prompt_disclaimer
    try:
        output_path = cleaner.export(confirm, output_dir=args.output_dir)
    except ContactCleanerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output_path is None:
        print("Nothing exported.")
    else:
        print(f"Wrote {output_path} ({format_summary(cleaner.summary())})")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.validate_config:
        from contact_cleaner.config_validation import validate_config
        return 1 if _print_validation(validate_config(args.config)) else 0

    if not args.input:
        parser.error("the following arguments are required: input")

    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        print("\nCancelled.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
