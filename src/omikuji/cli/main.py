import datetime
import json
import os
import socket
import sys
from typing import Any, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from omikuji import __version__, config
from omikuji.errors import NotJanuaryFirstError
from omikuji.cli.gate import can_execute
from omikuji.fortune import Fortune, frame_art, tell_fortune
from omikuji.lib.log import get_logger, log

logger = get_logger(__name__)

FIELD_LABELS = {
    "lucky_number": "Lucky Number",
    "lucky_hex": "Lucky Hex",
    "lucky_bits": "Lucky Bits",
    "lucky_day": "Lucky Day",
    "lucky_hour": "Lucky Hour",
    "lucky_minute": "Lucky Minute",
    "lucky_power_of_2": "Lucky Power of 2",
    "lucky_ascii": "Lucky ASCII",
    "lucky_logic_gate": "Lucky Logic Gate",
    "entropy_check": "Entropy Check",
    "lucky_emoji": "Lucky Emoji",
    "lucky_direction": "Lucky Direction",
    "lucky_element": "Lucky Element",
    "lucky_percent": "Lucky Percent",
    "lucky_latitude": "Lucky Latitude",
    "lucky_longitude": "Lucky Longitude",
}


def default_user() -> str:
    """User identifier from the environment, falling back to the hostname."""
    for var in (config.USER_ENV_VAR, "USER", "USERNAME"):
        value = os.getenv(var)
        if value:
            return value
    return socket.gethostname()


def format_value(name: str, value: Any) -> str:
    """Human-readable rendering of a decoded field."""
    if name == "lucky_hex":
        return f"0x{value:02X}"
    if name == "lucky_bits":
        return f"0b{value:016b}"
    if name == "entropy_check":
        return f"0x{value:03X}"
    if name == "lucky_day":
        day = datetime.date(2025, 1, 1) + datetime.timedelta(days=value - 1)
        return f"{value} ({day.strftime('%b %d')})"
    if name == "lucky_ascii":
        return f"'{value}' (0x{ord(value):02X})"
    if name == "lucky_emoji":
        return f"{value} (U+{ord(value):X})"
    if name == "lucky_percent":
        return f"{value}%"
    if name in ("lucky_latitude", "lucky_longitude"):
        return f"{value}°"
    if name == "lucky_hour":
        return f"{value:02d}h"
    if name == "lucky_minute":
        return f"{value:02d}m"
    return str(value)


def render_text(
    console: Console, fortune: Fortune, short: bool = False, show_seed: bool = False
) -> None:
    """Print a fortune as rich tables."""
    header = Table.grid(padding=(0, 2))
    header.add_column(style="bold")
    header.add_column()
    header.add_row("Year", str(fortune.year))
    header.add_row("User", Text(fortune.user))
    if show_seed:
        header.add_row("Seed", Text(fortune.seed))
    header.add_row("Hash", fortune.hex)
    console.print(Panel(header, title="SHA-256 Omikuji", expand=False))

    fields = Table(title="Fortune", show_header=True, header_style="bold")
    fields.add_column("Field")
    fields.add_column("Value")
    for name, value in fortune.fields.items():
        if name == "luck_scores":
            continue
        fields.add_row(FIELD_LABELS.get(name, name), Text(format_value(name, value)))
    console.print(fields)

    title = (
        f"Luck Scores (top {config.SHORT_SCORE_COUNT})" if short else "Luck Scores"
    )
    luck = Table(title=title, show_header=True, header_style="bold")
    luck.add_column("Category")
    luck.add_column("Score", justify="right")
    for category, score in fortune.luck(short).items():
        luck.add_row(category.replace("_", " ").title(), str(score))
    console.print(luck)

    console.print(
        f"Omikuji Art: {frame_art(fortune.art)}", markup=False, highlight=False
    )


@click.command("omikuji")
@click.version_option(__version__, prog_name="sha-omikuji")
@click.option(
    "--year",
    type=click.IntRange(min=0),
    default=lambda: datetime.date.today().year,
    show_default="current year",
    help="Target year.",
)
@click.option(
    "--user",
    "-u",
    envvar=config.USER_ENV_VAR,
    help="User identifier. Defaults to $USER, then the hostname.",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--short", is_flag=True, help="Show only the top 5 luck scores.")
@click.option("--seed", "show_seed", is_flag=True, help="Show the raw seed string.")
@click.option(
    "--force",
    is_flag=True,
    help="Force execution even if not January 1st (a warning is shown).",
)
@click.option(
    "--date",
    "date_override",
    help="Override the current date for testing (format: YYYY-MM-DD).",
)
def cli(
    year: int,
    user: Optional[str],
    as_json: bool,
    short: bool,
    show_seed: bool,
    force: bool,
    date_override: Optional[str],
):
    """SHA-256 based deterministic fortune telling.

    A deterministic omikuji (fortune slip) generator. It can only be run on
    January 1st, and the same year and user always draw the same slip.
    """
    try:
        show_warning = can_execute(force, date_override=date_override)
    except NotJanuaryFirstError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    if show_warning:
        click.echo(
            "WARNING: Running outside January 1st with --force flag.", err=True
        )

    if user is None:
        user = default_user()

    fortune = tell_fortune(year, user)
    log(logger, "info", "Fortune drawn", year=year, art=fortune.art)

    if as_json:
        click.echo(
            json.dumps(
                fortune.to_dict(short=short, include_seed=show_seed),
                ensure_ascii=False,
                indent=2,
            )
        )
    else:
        render_text(Console(), fortune, short=short, show_seed=show_seed)


if __name__ == "__main__":
    cli()
