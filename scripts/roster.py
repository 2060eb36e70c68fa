#!/usr/bin/env python3
"""Command line access to the Puppy Bowl roster.

Usage:
    python scripts/roster.py list
    python scripts/roster.py show 42
    python scripts/roster.py add --name Rex --breed Boxer --image-url https://... [--status field] [--team-id 3]
    python scripts/roster.py remove 42
    python scripts/roster.py teams
"""

import argparse
import json
import logging
import os
import sys

# Ensure repository root is on sys.path so `puppybowl` is importable
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from marshmallow import ValidationError  # noqa: E402

from puppybowl import configure_logging  # noqa: E402
from puppybowl.api.client import PuppyBowlClient  # noqa: E402
from puppybowl.config import settings  # noqa: E402
from puppybowl.validation import load_new_player  # noqa: E402



def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage a Puppy Bowl roster")
    parser.add_argument("--cohort", default=settings.COHORT_NAME, help="cohort name path segment")
    parser.add_argument("--api-url", default=settings.PUPPY_BOWL_API_URL, help="roster API base URL")
    parser.add_argument("--json", action="store_true", help="print raw JSON records")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list all players")
    sub.add_parser("teams", help="list teams with their players")

    show = sub.add_parser("show", help="show one player")
    show.add_argument("player_id", type=int)

    add = sub.add_parser("add", help="add a player")
    add.add_argument("--name", required=True)
    add.add_argument("--breed", required=True)
    add.add_argument("--image-url", required=True)
    add.add_argument("--status", default="bench", choices=["bench", "field"])
    add.add_argument("--team-id", default="none", help="team id, or 'none'")

    remove = sub.add_parser("remove", help="remove a player")
    remove.add_argument("player_id", type=int)
    return parser


def _print_player(player, as_json: bool) -> None:
    if as_json:
        print(json.dumps(player.to_api(), indent=2))
        return
    team = player.team.name if player.team else ("Unassigned" if player.team_id is None else f"#{player.team_id}")
    print(f"#{player.id:<6} {player.name:<20} {player.breed:<20} {player.status:<6} team: {team}")


def run(args, client: PuppyBowlClient) -> int:
    if args.command == "list":
        result = client.list_players()
        if result:
            if not result.value:
                print("No players available to display.")
            for player in result.value:
                _print_player(player, args.json)
    elif args.command == "teams":
        result = client.list_teams()
        if result:
            for team in result.value:
                names = ", ".join(team.player_names) or "-"
                print(f"#{team.id:<6} {team.name:<20} players: {names}")
    elif args.command == "show":
        result = client.get_player(args.player_id)
        if result:
            _print_player(result.value, args.json)
    elif args.command == "add":
        try:
            payload = load_new_player({
                "name": args.name,
                "breed": args.breed,
                "imageUrl": args.image_url,
                "status": args.status,
                "teamId": args.team_id,
            })
        except ValidationError as e:
            print(f"Invalid player: {e.messages}", file=sys.stderr)
            return 2
        result = client.create_player(payload)
        if result:
            _print_player(result.value, args.json)
    elif args.command == "remove":
        result = client.delete_player(args.player_id)
        if result:
            print(f"Removed player #{args.player_id}")
    else:
        raise SystemExit(f"Unknown command: {args.command}")

    if not result:
        print(f"Error ({result.error_code}): {result.error}", file=sys.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    client = PuppyBowlClient(args.api_url, args.cohort, timeout=settings.REQUEST_TIMEOUT)
    return run(args, client)


if __name__ == "__main__":
    sys.exit(main())
