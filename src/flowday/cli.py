"""Flowday CLI - daily mood journal."""

import json
import logging
import sys

import click

from .config import load_config
from .core.emoji_stats import PAIR_SEPARATOR
from .core.entry import Entry, entry_to_dict, is_iso_date
from .core.store import EntryStore
from .core.window import is_today, is_yesterday, timeline_days, today_iso
from .workflows import (
    EntryLockedError,
    export_snapshot,
    get_store,
    import_snapshot,
    load_entries,
    month_summary,
    record_entry,
    remove_emoji,
    stats_summary,
    week_summary,
)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Flowday - emojis, a color and a song for every day."""
    config = load_config()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else getattr(logging, config.log_level, logging.WARNING),
    )


def _format_entry(entry: Entry) -> str:
    """One-line display of an entry."""
    emojis = " ".join(entry.emojis) if entry.emojis else "No entry saved"
    hue = f"  hue {entry.hue}" if entry.hue is not None else ""
    song = f"  ♪ {entry.song.format()}" if entry.song else ""
    return f"{entry.date}  {emojis}{hue}{song}"


def _day_label(day: str, today: str) -> str:
    if is_today(day, today):
        return "Today"
    if is_yesterday(day, today):
        return "Yesterday"
    return ""


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to record (YYYY-MM-DD), defaults to today")
@click.option("--emoji", "-e", "emojis", multiple=True, help="Emoji for the day (up to 3)")
@click.option("--hue", type=click.IntRange(0, 359), default=None, help="Aura color angle 0-359")
@click.option("--clear-hue", is_flag=True, help="Remove the aura color")
@click.option("--title", default=None, help="Song title")
@click.option("--artist", default=None, help="Song artist")
@click.option("--clear-song", is_flag=True, help="Remove the song")
def log(target_date, emojis, hue, clear_hue, title, artist, clear_song):
    """Record today's (or yesterday's) entry."""
    config = load_config()
    try:
        entry = record_entry(
            config,
            day=target_date,
            emojis=list(emojis) if emojis else None,
            hue=hue,
            clear_hue=clear_hue,
            title=title,
            artist=artist,
            clear_song=clear_song,
        )
    except (EntryLockedError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if hue is not None and entry.hue is None:
        click.echo("Pick an emoji first - the aura needs at least one.", err=True)
    click.echo(_format_entry(entry))


@main.command()
@click.argument("index", type=int)
@click.option("--date", "-d", "target_date", default=None,
              help="Date to edit (YYYY-MM-DD), defaults to today")
def drop(index: int, target_date: str | None):
    """Remove the emoji in slot INDEX (1-3)."""
    config = load_config()
    try:
        entry = remove_emoji(config, index - 1, day=target_date)
    except (EntryLockedError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(_format_entry(entry))


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              help="Date to view (YYYY-MM-DD), defaults to today")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(target_date: str | None, as_json: bool):
    """Show a single day."""
    config = load_config()
    target = target_date or today_iso()
    entry = EntryStore.from_entries(load_entries(config)).get(target)

    if as_json:
        click.echo(json.dumps(entry_to_dict(entry) if entry else None, ensure_ascii=False, indent=2))
        return

    if entry is None:
        click.echo(f"No entry for {target}.")
        return
    click.echo(_format_entry(entry))


@main.command()
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Weeks back (0 = recent entries)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def week(offset: int, as_json: bool):
    """Show a week of entries."""
    config = load_config()
    entries = week_summary(config, offset)

    if as_json:
        click.echo(json.dumps([entry_to_dict(e) for e in entries], ensure_ascii=False, indent=2))
        return

    if not entries:
        click.echo("No entries yet.")
        return
    for entry in entries:
        click.echo(_format_entry(entry))


@main.command()
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Months back")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def month(offset: int, as_json: bool):
    """Show the month's dominant color families."""
    config = load_config()
    summary = month_summary(config, offset)

    if as_json:
        click.echo(json.dumps(summary, ensure_ascii=False, indent=2))
        return

    if summary["empty"]:
        click.echo(f"No colors recorded in {summary['month']}.")
        return
    families = ", ".join(f"{h:g}°" for h in summary["families"])
    stops = ", ".join(f"{h}°" for h in summary["stops"])
    click.echo(f"### {summary['month']}")
    click.echo(f"  Families: {families}")
    click.echo(f"  Stops:    {stops}")


@main.command()
@click.option("--date", "-d", "active", default=None,
              help="Day to center on (YYYY-MM-DD), defaults to today")
def timeline(active: str | None):
    """Show the two weeks around a day."""
    config = load_config()
    today = today_iso()
    if active is not None and not is_iso_date(active):
        click.echo(f"Error: Invalid date {active!r}, expected YYYY-MM-DD", err=True)
        sys.exit(1)
    for day, entry in timeline_days(load_entries(config), active or today, today):
        label = _day_label(day, today)
        line = _format_entry(entry) if entry else f"{day}  No entry saved"
        click.echo(f"{label:10} {line}")


@main.command()
@click.option("--year-offset", type=click.IntRange(min=0), default=0,
              help="Years back (0 = all time)")
@click.option("--top", type=click.IntRange(min=1), default=10, help="Number of emojis to list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(year_offset: int, top: int, as_json: bool):
    """Emoji usage and pairings."""
    config = load_config()
    result = stats_summary(config, year_offset)

    if as_json:
        click.echo(json.dumps({"freq": result.freq, "pair": result.pair}, ensure_ascii=False, indent=2))
        return

    if not result.freq:
        click.echo("No emojis recorded.")
        return

    click.echo("Most used:")
    for emoji, count in result.top(top):
        click.echo(f"  {emoji}  {count}")

    pairs = sorted(result.pair.items(), key=lambda kv: -kv[1])[:top]
    if pairs:
        click.echo("\nOften together:")
        for key, count in pairs:
            click.echo(f"  {key.replace(PAIR_SEPARATOR, ' + ')}  {count}")


@main.command()
def recents():
    """List recently used emojis."""
    config = load_config()
    items = get_store(config).recents()
    click.echo(" ".join(items) if items else "No recent emojis.")


@main.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def import_cmd(path: str):
    """Merge a snapshot exported from another device."""
    config = load_config()
    changed = import_snapshot(config, path)
    click.echo(f"✓ {changed} entries imported")


@main.command()
def export():
    """Print the journal as JSON."""
    config = load_config()
    click.echo(export_snapshot(config))


if __name__ == "__main__":
    main()
