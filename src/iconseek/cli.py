#!/usr/bin/env python3
"""
iconseek CLI - search saved Iconify catalogs from the terminal
"""

import os
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from iconseek._version import __version__
from iconseek.catalog import load_collection, load_collections
from iconseek.core.exceptions import IconseekError
from iconseek.core.logging import PerformanceLogger, drop_default_sink, logger
from iconseek.core.settings import Settings
from iconseek.search import expand_query, rank_collections, rank_icons
from iconseek.svg import iconify_img_url

perf_logger = PerformanceLogger()


def _resolve_limit(settings: Settings, limit: Optional[int]) -> int:
    """Explicit --limit wins over search.max_results."""
    if limit is not None:
        return limit
    return int(settings.get("search.max_results", 50))


@click.group()
@click.version_option(version=__version__, prog_name="iconseek")
@click.pass_context
def cli(ctx):
    """iconseek - fuzzy search for icon names and icon collections"""
    ctx.obj = Settings()


@cli.command()
@click.argument("catalog", type=click.Path(dir_okay=False))
@click.argument("query", nargs=-1)
@click.option("-n", "--limit", type=click.IntRange(min=1), help="Maximum results to show")
@click.option("--scores", is_flag=True, help="Show the score of each result")
@click.option("--urls", is_flag=True, help="Show the Iconify CDN URL of each result")
@click.pass_obj
def icons(
    settings: Settings,
    catalog: str,
    query: tuple,
    limit: Optional[int],
    scores: bool,
    urls: bool,
):
    """Search icon names in a saved /collection?prefix= response."""
    collection = load_collection(catalog)
    names = collection.all_icon_names()
    text = " ".join(query)

    with perf_logger.measure("search_icons", candidates=len(names)):
        results = rank_icons(names, text)

    shown = results[: _resolve_limit(settings, limit)]
    console = Console()

    if not shown:
        console.print(f"[yellow]No icons match '{escape(text)}'[/yellow]")
        return

    title = escape(collection.title or collection.prefix)
    table = Table(title=f"{title} ({len(results)} matches)")
    table.add_column("Icon", style="cyan")
    if scores:
        table.add_column("Score", justify="right")
    if urls:
        table.add_column("URL", style="dim")

    for result in shown:
        row = [f"{collection.prefix}:{result.candidate}"]
        if scores:
            row.append(str(result.score))
        if urls:
            row.append(iconify_img_url(collection.prefix, result.candidate))
        table.add_row(*row)

    console.print(table)


@cli.command()
@click.argument("catalog", type=click.Path(dir_okay=False))
@click.argument("query", nargs=-1)
@click.option("-n", "--limit", type=click.IntRange(min=1), help="Maximum results to show")
@click.option("--include-hidden", is_flag=True, help="Also search collections flagged as hidden")
@click.option("--scores", is_flag=True, help="Show the score of each result")
@click.pass_obj
def collections(
    settings: Settings,
    catalog: str,
    query: tuple,
    limit: Optional[int],
    include_hidden: bool,
    scores: bool,
):
    """Search icon sets in a saved /collections response."""
    include_hidden = include_hidden or bool(settings.get("search.include_hidden", False))

    infos = load_collections(catalog, include_hidden=include_hidden)
    text = " ".join(query)

    with perf_logger.measure("search_collections", candidates=len(infos)):
        results = rank_collections(infos, text)

    shown = results[: _resolve_limit(settings, limit)]
    console = Console()

    if not shown:
        console.print(f"[yellow]No collections match '{escape(text)}'[/yellow]")
        return

    table = Table(title=f"Collections ({len(results)} matches)")
    table.add_column("Prefix", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Icons", justify="right")
    if scores:
        table.add_column("Score", justify="right")

    for result in shown:
        info = result.candidate
        row = [escape(info.id), escape(info.name), escape(info.category), str(info.total)]
        if scores:
            row.append(str(result.score))
        table.add_row(*row)

    console.print(table)


@cli.command()
@click.argument("query", nargs=-1, required=True)
def aliases(query: tuple):
    """Show the query strings a search tries for QUERY."""
    expansions = expand_query(" ".join(query).strip().lower())
    if not expansions:
        click.echo("Nothing to expand.")
        return

    click.echo(expansions[0])
    for expansion in expansions[1:]:
        click.echo(f"  {expansion}")


def main():
    """Main entry point"""
    drop_default_sink()
    try:
        cli(standalone_mode=False)
    except (KeyboardInterrupt, click.exceptions.Abort):
        click.echo("\nOperation cancelled by user.")
        sys.exit(0)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except IconseekError as e:
        logger.error("Command failed", code=e.code, error_id=e.id)
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        for suggestion in e.suggestions:
            click.echo(f"  Hint: {suggestion}", err=True)
        if os.environ.get("ICONSEEK_DEBUG"):
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
