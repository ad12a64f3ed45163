"""Command-line interface for scanning composite GitHub Actions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from stringer.auth import TokenNotFoundError, resolve_github_token
from stringer.parser import parse_composite_actions
from stringer.remote import FetchError, FetchOptions, GithubFetcher
from stringer.store import StoreError, is_cache_valid, save_actions, save_actions_with_hash

DEFAULT_CACHE_PATH = ".stringercache.json"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``stringer`` command."""
    parser = argparse.ArgumentParser(
        prog="stringer",
        description="Discover and catalogue GitHub composite actions.",
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    subcommands = parser.add_subparsers(dest="command")

    scan = subcommands.add_parser("scan", help="scan a directory for Github CompositeActions")
    scan.add_argument("path", help="directory to scan")
    scan.add_argument("-o", "--output", default="", help="Path to write parsed actions to JSON")
    scan.add_argument("--cache", default=DEFAULT_CACHE_PATH, help="Path to store internal action cache")
    scan.add_argument("--force", action="store_true", help="Force cache refresh")
    scan.add_argument("--repo", default="", help="Github repo to scan composite actions from (my-org/my-repo)")
    scan.add_argument("--ref", default="main", help="Git ref to use when scanning a Github repo (e.g. branch, tag)")
    scan.add_argument("--token", default="", help="Github token to use when scanning a Github repo")
    scan.set_defaults(handler=run_scan)
    return parser


def run_scan(args: argparse.Namespace) -> int:
    """Run the ``scan`` command and return its exit status."""
    root = args.path
    if args.repo:
        try:
            user_token = resolve_github_token(args.token)
        except TokenNotFoundError as err:
            print(f"failed to resolve github token: {err}")
            return 1
        options = FetchOptions(repo=args.repo, ref=args.ref)
        try:
            actions = GithubFetcher(user_token).fetch_composite_actions_from_repo(options)
        except FetchError as err:
            print(f"failed to fetch github repo {options.repo} with ref: {options.ref}: {err}")
            return 1
    else:
        try:
            actions = parse_composite_actions(root)
        except OSError as err:
            print("Error: ", err)
            return 1

    if not actions:
        print("No composite actions found")
        return 0

    for action in actions:
        print(f"🔹 {action.name} — {action.description}")
        print(f"   Inputs: {action.inputs or {}}")
        print(f"   Outputs: {action.outputs or {}}\n")

    if args.output:
        try:
            save_actions(actions, args.output)
        except StoreError as err:
            print("Failed to write output JSON:", err)
            return 1
        return 0

    try:
        valid = is_cache_valid(root, args.cache)
    except (StoreError, OSError):
        valid = False
    if not valid or args.force:
        try:
            save_actions_with_hash(actions, root, args.cache)
        except StoreError as err:
            print("failed to write internal cache:", err)
            return 1
        print("Updating internal actions cache")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``stringer`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())