"""marktask CLI - list checklist tasks from Markdown text."""

import logging
import sys
from datetime import date

import click

from .adapters.clock import LocalClock
from .config import load_config
from .core.dates import resolve_date
from .core.filters import build_pipeline
from .core.render import render_json, render_text
from .core.tasks import parse
from .ports.clock import Clock

logger = logging.getLogger(__name__)


def _read_source(source: str) -> str:
    if source == "-":
        return click.get_text_stream("stdin").read()
    with open(source, encoding="utf-8") as f:
        return f.read()


def _resolve_option(value: str | None, fallback: str, option: str, clock: Clock) -> date | None:
    """Resolve a --from/--to value, falling back to the configured default."""
    if value is not None:
        resolved = resolve_date(value, clock)
        if resolved is None:
            raise click.BadParameter(
                f"{value!r} is not a date (YYYY-MM-DD) or offset (+1w, -3d)",
                param_hint=option,
            )
        return resolved

    if not fallback:
        return None
    resolved = resolve_date(fallback, clock)
    if resolved is None:
        logger.warning(f"Ignoring unresolvable configured default for {option}: {fallback!r}")
    return resolved


@click.command()
@click.argument("source", default="-", type=click.Path(dir_okay=False, allow_dash=True))
@click.option(
    "--json/--text",
    "as_json",
    default=None,
    help="Output as JSON or text lines (default: from config, else text)",
)
@click.option(
    "--overdue/--no-overdue",
    "show_overdue",
    default=None,
    help="Include overdue tasks (default: from config, else include)",
)
@click.option("--from", "date_from", default=None, help="Earliest due date, e.g. 2024-01-01 or -1w")
@click.option("--to", "date_to", default=None, help="Latest due date, e.g. 2024-12-31 or +2w")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option()
def main(
    source: str,
    as_json: bool | None,
    show_overdue: bool | None,
    date_from: str | None,
    date_to: str | None,
    debug: bool,
):
    """List tasks from Markdown checklist text in SOURCE (default: stdin)."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )

    config = load_config()
    clock = LocalClock()

    start = _resolve_option(date_from, config.default_from, "--from", clock)
    end = _resolve_option(date_to, config.default_to, "--to", clock)
    if show_overdue is None:
        show_overdue = config.show_overdue
    if as_json is None:
        as_json = config.output == "json"

    try:
        text = _read_source(source)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: failed to read {source}: {e}", err=True)
        sys.exit(1)

    tasks = parse(text, clock)
    pipeline = build_pipeline(show_overdue=show_overdue, date_from=start, date_to=end)
    selected = pipeline.apply(tasks)
    logger.debug(f"Parsed {len(tasks)} tasks, {len(selected)} after {len(pipeline)} filters")

    if as_json:
        click.echo(render_json(selected))
    elif selected:
        click.echo(render_text(selected))
