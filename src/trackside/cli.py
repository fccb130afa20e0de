#!/usr/bin/env python3
"""Trackside CLI for seeding and browsing races and events."""

import argparse

import questionary
from rich.console import Console
from rich.table import Table

from trackside.config import config, configure_logging
from trackside.db import Database
from trackside.errors import InvalidOrderByError, TracksideError
from trackside.listing import OrderBy, Status
from trackside.racing import RaceFilter, RacesRepository
from trackside.sports import EventFilter, EventsRepository

console = Console()


def get_database() -> Database:
    return Database(config.database_url, default_timeout=config.query_timeout)


def status_markup(status: Status) -> str:
    colour = "green" if status is Status.OPEN else "red"
    return f"[{colour}]{status.value}[/]"


def order_from_args(args) -> OrderBy | None:
    if not args.order_by:
        return None
    return OrderBy(property=args.order_by, asc=not args.desc)


def seed(args):
    """Create and seed the races and events tables."""
    console.print(f"[yellow]Will seed demo races and events into {config.environment}.[/]")

    if not args.yes and not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    database = get_database()
    for repo in (RacesRepository(database), EventsRepository(database)):
        repo.init()
    console.print("[green]Seeded races and events.[/]")


def list_races(args):
    """Print races as a table."""
    repo = RacesRepository(get_database())
    races = repo.list(
        RaceFilter(meeting_ids=args.meeting_id or (), visible_only=args.visible_only),
        order_from_args(args),
    )
    if not races:
        console.print("[red]No races found.[/]")
        return

    table = Table(title=f"Races ({len(races)})")
    for column in ("ID", "Meeting", "Name", "No.", "Visible", "Advertised start", "Status"):
        table.add_column(column)
    for race in races:
        table.add_row(
            str(race.id),
            str(race.meeting_id),
            race.name,
            str(race.number),
            "yes" if race.visible else "no",
            race.advertised_start_time.strftime("%Y-%m-%d %H:%M %Z"),
            status_markup(race.status),
        )
    console.print(table)


def list_events(args):
    """Print sporting events as a table."""
    repo = EventsRepository(get_database())
    events = repo.list(EventFilter(visible_only=args.visible_only), order_from_args(args))
    if not events:
        console.print("[red]No events found.[/]")
        return

    table = Table(title=f"Events ({len(events)})")
    for column in ("ID", "Name", "Address", "Visible", "Advertised start", "Status"):
        table.add_column(column)
    for event in events:
        table.add_row(
            str(event.id),
            event.name,
            event.address,
            "yes" if event.visible else "no",
            event.advertised_start_time.strftime("%Y-%m-%d %H:%M %Z"),
            status_markup(event.status),
        )
    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Trackside CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    seed_parser = subparsers.add_parser("seed", help="Seed demo races and events")
    seed_parser.add_argument("-y", "--yes", action="store_true", help="Skip confirmation")

    races_parser = subparsers.add_parser("races", help="List races")
    races_parser.add_argument("--meeting-id", type=int, action="append", help="Repeatable")

    events_parser = subparsers.add_parser("events", help="List sporting events")

    for sub in (races_parser, events_parser):
        sub.add_argument("--visible-only", action="store_true")
        sub.add_argument("--order-by", default="")
        sub.add_argument("--desc", action="store_true")

    args = parser.parse_args()
    configure_logging()

    commands = {"seed": seed, "races": list_races, "events": list_events}
    try:
        commands[args.command](args)
    except InvalidOrderByError as e:
        console.print(f"[red]{e}[/]")
        raise SystemExit(2)
    except TracksideError as e:
        console.print(f"[red]Could not complete request: {e}[/]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
