"""CLI entry point for Podcast Explorer."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from podexplorer.catalog.client import CatalogClient
from podexplorer.catalog.genres import GENRES, find_genre_by_title
from podexplorer.config.logging import setup_logging
from podexplorer.config.manager import ConfigManager
from podexplorer.config.schema import GlobalConfig
from podexplorer.detail.view import DetailView
from podexplorer.listing import ListingView
from podexplorer.query.state import ALL_GENRES, GenreFilter, QueryState, QueryStore, SortOption
from podexplorer.ui import display
from podexplorer.ui.theme import Theme, get_theme, set_theme
from podexplorer.utils.errors import ConfigError, NotFoundError, PodExplorerError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="podexplorer",
    help="Browse the podcast catalog: search, filter, sort and explore seasons",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(None, "--log-file", help="Write logs to file"),
) -> None:
    """Podcast Explorer - browse podcasts from the terminal."""
    # Initialize logging before any command runs; commands re-apply it with
    # the configured level once the config file is loaded
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = {"verbose": verbose, "log_file": log_file}


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podexplorer import __version__

    console.print(f"[bold cyan]Podcast Explorer[/bold cyan] v{__version__}")


def _load_settings(ctx: typer.Context) -> tuple[GlobalConfig, Theme]:
    """Load configuration and activate its theme, exiting on invalid config."""
    try:
        config = ConfigManager().load_config()
    except ConfigError as e:
        console.print(get_theme().mark_error(escape(str(e))))
        if e.suggestion:
            console.print(f"[dim]  {e.suggestion}[/dim]")
        sys.exit(1)

    options = ctx.obj or {}
    setup_logging(
        verbose=options.get("verbose", False),
        log_file=options.get("log_file"),
        level=config.log_level,
    )
    return config, set_theme(config.theme)


def resolve_genre(value: str) -> GenreFilter:
    """Turn a --genre value (id, title or "all") into a genre filter.

    Raises:
        NotFoundError: If the value is neither a number nor a known genre title
    """
    text = value.strip()
    if text.lower() == ALL_GENRES:
        return ALL_GENRES
    if text.isdigit():
        return int(text)

    genre = find_genre_by_title(text)
    if genre is None:
        raise NotFoundError(
            f"Unknown genre '{text}'",
            suggestion="Use podexplorer genres to see available genres",
        )
    return genre.id


def _exit_with_error(message: str, json_output: bool, hint: str | None = None) -> None:
    if json_output:
        print(json.dumps({"error": message}, indent=2))
    else:
        console.print(get_theme().mark_error(escape(message)))
        if hint:
            console.print(f"[dim]  {hint}[/dim]")
    sys.exit(1)


@app.command("browse")
def browse_command(
    ctx: typer.Context,
    search: Annotated[
        str, typer.Option("--search", "-s", help="Only podcasts whose title contains this text")
    ] = "",
    genre: Annotated[
        str, typer.Option("--genre", "-g", help="Genre id or title, or 'all'")
    ] = ALL_GENRES,
    sort: Annotated[
        SortOption | None,
        typer.Option("--sort", help="Sort order (defaults to the configured default_sort)"),
    ] = None,
    page: Annotated[int, typer.Option("--page", "-p", help="Page to show")] = 1,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List podcasts from the catalog, one page at a time.

    Examples:
        podexplorer browse

        podexplorer browse --search history --sort updated-newest

        podexplorer browse --genre Comedy --page 2
    """
    config, theme = _load_settings(ctx)

    try:
        genre_filter = resolve_genre(genre)
    except NotFoundError as e:
        _exit_with_error(str(e), json_output, e.suggestion)
        return

    async def run_browse() -> None:
        query = QueryStore(QueryState(sort_option=config.default_sort))
        view = ListingView(query=query, page_size=config.page_size)

        async with CatalogClient(config.base_url, timeout=config.request_timeout) as client:
            if json_output:
                await view.load(client)
            else:
                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    console=console,
                    transient=True,
                ) as progress:
                    progress.add_task("Loading podcasts...", total=None)
                    await view.load(client)

        if view.error:
            _exit_with_error(
                f"Error occurred while fetching podcasts: {view.error}", json_output
            )

        # Same order the controls apply them; each filter change resets the page
        query.set_search_term(search)
        query.set_genre_filter(genre_filter)
        if sort is not None:
            query.set_sort_option(sort)
        query.set_page(page)

        if page != view.page:
            logger.info(f"Requested page {page} is out of range; showing page {view.page}")

        if json_output:
            print(json.dumps(display.result_to_dict(view.result, query.state), indent=2))
            return

        if view.result.is_empty:
            console.print(f"[{theme.warning}]No podcasts match your filters.[/{theme.warning}]")
            console.print(f"[dim]{escape(display.describe_query(query.state))}[/dim]")
            return

        console.print(display.podcast_table(view.result, view.page_size, theme))
        console.print(f"[dim]{escape(display.describe_query(query.state))}[/dim]")
        console.print(f"\n{display.pager_line(view.result)}")
        if view.page < view.total_pages:
            console.print(f"[dim]Next page: podexplorer browse --page {view.page + 1}[/dim]")
        console.print("[dim]Details: podexplorer show <id>[/dim]")

    asyncio.run(run_browse())


@app.command("show")
def show_command(
    ctx: typer.Context,
    podcast_id: Annotated[str, typer.Argument(help="Podcast id (see the ID column of browse)")],
    season: Annotated[
        int | None, typer.Option("--season", "-s", help="Season number to show")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show a podcast with its seasons and the episodes of one season.

    Examples:
        podexplorer show 10716

        podexplorer show 10716 --season 2
    """
    config, theme = _load_settings(ctx)

    async def run_show() -> None:
        async with CatalogClient(config.base_url, timeout=config.request_timeout) as client:
            view = DetailView(client)
            if json_output:
                await view.open(podcast_id)
            else:
                with Progress(
                    SpinnerColumn(),
                    TextColumn("[progress.description]{task.description}"),
                    console=console,
                    transient=True,
                ) as progress:
                    progress.add_task("Loading podcast details...", total=None)
                    await view.open(podcast_id)

        detail = view.loader.detail
        if view.loader.error or detail is None:
            reason = view.loader.error or "Podcast not found"
            _exit_with_error(
                f"Error loading podcast: {reason}",
                json_output,
                hint="Back to the listing: podexplorer browse",
            )
            return

        if season is not None and not view.select_season(season):
            logger.info(f"Season {season} not found in podcast {podcast_id}")
            if not json_output:
                console.print(
                    f"[{theme.warning}]Season {season} not found; "
                    f"showing Season {view.seasons.selected}.[/{theme.warning}]"
                )

        if json_output:
            print(json.dumps(display.detail_to_dict(detail, view.seasons), indent=2))
            return

        console.print(display.detail_header(detail, theme))
        if not view.seasons.has_seasons:
            return

        console.print("\n[bold]Current Season[/bold]")
        console.print(display.season_bar(view.seasons, theme))
        current = view.seasons.current_season
        if current is not None:
            console.print()
            console.print(display.season_episodes(current, theme))
        if len(view.seasons.season_numbers) > 1:
            console.print(
                f"\n[dim]Other seasons: podexplorer show {escape(podcast_id)} --season <n>[/dim]"
            )

    asyncio.run(run_show())


@app.command("genres")
def genres_command(
    ctx: typer.Context,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List the genres available for --genre."""
    if json_output:
        genres = [{"id": g.id, "title": g.title} for g in GENRES]
        print(json.dumps({"genres": genres, "total": len(genres)}, indent=2))
        return

    _, theme = _load_settings(ctx)
    console.print(display.genre_table(theme))


@app.command("config")
def config_command(
    action: str = typer.Argument(..., help="Action: show or set <key> <value>"),
    key: str | None = typer.Argument(None, help="Config key (for 'set' action)"),
    value: str | None = typer.Argument(None, help="Config value (for 'set' action)"),
) -> None:
    """Manage Podcast Explorer configuration.

    Examples:
        podexplorer config show

        podexplorer config set page_size 12
    """
    theme = get_theme()
    try:
        manager = ConfigManager()

        if action == "show":
            config = manager.load_config()

            console.print("\n[bold]Podcast Explorer Configuration[/bold]\n")

            table = Table(show_header=False, box=None)
            table.add_column("Key", style="cyan")
            table.add_column("Value", style="white")

            table.add_row("Config file", str(manager.config_file))
            table.add_row("", "")
            table.add_row("API base URL", config.base_url)
            table.add_row("Page size", str(config.page_size))
            table.add_row("Request timeout", f"{config.request_timeout}s")
            table.add_row("Default sort", config.default_sort.value)
            table.add_row("Log level", config.log_level)
            table.add_row("Theme", config.theme)

            console.print(table)

        elif action == "set":
            if not key or value is None:
                console.print(theme.mark_error("Usage: podexplorer config set <key> <value>"))
                sys.exit(1)

            try:
                manager.set_value(key, value)
            except KeyError:
                console.print(theme.mark_error(f"Unknown config key: {escape(key)}"))
                console.print("\nAvailable keys:")
                for field_name in GlobalConfig.model_fields:
                    console.print(f"  • {field_name}")
                sys.exit(1)

            shown_key = f"[{theme.accent}]{escape(key)}[/{theme.accent}]"
            console.print(theme.mark_success(f"Set {shown_key} = {escape(value)}"))

        else:
            console.print(theme.mark_error(f"Unknown action: {escape(action)}"))
            console.print("Available actions: show, set")
            sys.exit(1)

    except PodExplorerError as e:
        console.print(theme.mark_error(f"Error: {escape(str(e))}"))
        sys.exit(1)


if __name__ == "__main__":
    app()
