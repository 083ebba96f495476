"""Rich renderables for the listing and detail views."""

from typing import Any

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from podexplorer.catalog.genres import GENRES, genre_title
from podexplorer.catalog.models import PodcastDetail, PodcastSummary, Season
from podexplorer.detail.seasons import SeasonSelector
from podexplorer.query.pipeline import QueryResult
from podexplorer.query.state import ALL_GENRES, QueryState
from podexplorer.ui.theme import Theme
from podexplorer.utils.datetime import format_date


def truncate_text(text: str, max_length: int) -> str:
    """Shorten text to at most ``max_length`` characters, ending with an ellipsis.

    Trailing whitespace before the ellipsis is dropped, so the result can be
    shorter than ``max_length``.
    """
    text = " ".join(text.split())
    if len(text) <= max_length:
        return text
    return text[: max_length - 1].rstrip() + "…"


def plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def podcast_table(result: QueryResult, page_size: int, theme: Theme) -> Table:
    """Build the listing table for one derived page."""
    table = Table(title="[bold]Podcasts[/bold]", header_style=theme.header)
    table.add_column("#", style=theme.muted, justify="right", width=4)
    table.add_column("Title", style=theme.accent, max_width=40)
    table.add_column("Genres", style=theme.genre, max_width=30)
    table.add_column("Seasons", justify="right", style=theme.count)
    table.add_column("Updated", style=theme.date, no_wrap=True)
    table.add_column("ID", style=theme.ident, no_wrap=True)

    offset = (result.page - 1) * page_size
    for index, podcast in enumerate(result.page_items, offset + 1):
        genres = ", ".join(podcast.genre_titles()) or "-"
        table.add_row(
            str(index),
            escape(truncate_text(podcast.title, 40)),
            escape(genres),
            str(podcast.season_count),
            format_date(podcast.updated_at),
            escape(podcast.id),
        )
    return table


def describe_query(state: QueryState) -> str:
    """One-line summary of the active search, genre and sort."""
    parts = []
    if state.search_term.strip():
        parts.append(f'search "{state.search_term.strip()}"')
    if state.genre_filter != ALL_GENRES:
        parts.append(f"genre {genre_title(state.genre_filter)}")
    parts.append(f"sorted by {state.sort_option.label}")
    return ", ".join(parts)


def pager_line(result: QueryResult) -> str:
    return f"Page {result.page} of {result.total_pages} ({plural(result.total_count, 'podcast')})"


def summary_to_dict(podcast: PodcastSummary) -> dict[str, Any]:
    return {
        "id": podcast.id,
        "title": podcast.title,
        "genres": podcast.genre_titles(),
        "genre_ids": list(podcast.genre_ids),
        "seasons": podcast.season_count,
        "updated": podcast.updated_at.isoformat(),
        "image": str(podcast.image),
    }


def result_to_dict(result: QueryResult, state: QueryState) -> dict[str, Any]:
    return {
        "podcasts": [summary_to_dict(p) for p in result.page_items],
        "page": result.page,
        "total_pages": result.total_pages,
        "total": result.total_count,
        "query": {
            "search": state.search_term,
            "genre": state.genre_filter,
            "sort": state.sort_option.value,
        },
    }


def detail_header(detail: PodcastDetail, theme: Theme) -> Panel:
    """Title, description and metadata of a podcast."""
    genres = detail.genre_titles()
    meta = Table(show_header=False, box=None, padding=(0, 2))
    meta.add_column("Key", style=theme.muted)
    meta.add_column("Value")
    meta.add_row(
        "GENRES",
        Text(", ".join(genres), style=theme.genre) if genres else Text("No genres available"),
    )
    meta.add_row("LAST UPDATED", Text(format_date(detail.updated_at), style=theme.date))
    meta.add_row("TOTAL SEASONS", plural(detail.season_count, "Season"))
    meta.add_row("TOTAL EPISODES", plural(detail.episode_count, "Episode"))

    body = Group(Text(detail.description.strip() or "-"), Text(""), meta)
    return Panel(
        body,
        title=f"[{theme.accent}]{escape(detail.title)}[/{theme.accent}]",
        subtitle=f"[{theme.muted}]{escape(detail.id)}[/{theme.muted}]",
        title_align="left",
    )


def season_bar(selector: SeasonSelector, theme: Theme) -> Text:
    """Row of season labels with the selected one highlighted."""
    text = Text()
    for i, number in enumerate(selector.season_numbers):
        if i:
            text.append("  ")
        label = f"Season {number}"
        if number == selector.selected:
            text.append(f"[{label}]", style=theme.selected)
        else:
            text.append(label, style=theme.muted)
    return text


def season_episodes(season: Season, theme: Theme) -> RenderableType:
    """Episode list of a season; episodes without audio still render."""
    heading = Text.assemble(
        (season.title or f"Season {season.number}", "bold"),
        ("  ", ""),
        (plural(season.episode_count, "Episode"), theme.muted),
    )
    if not season.episodes:
        return Group(heading)

    table = Table(show_header=True, header_style=theme.header, show_lines=True)
    table.add_column("#", style=theme.muted, justify="right", width=4)
    table.add_column("Episode")
    for index, episode in enumerate(season.episodes, 1):
        cell = Text.assemble((episode.title, "bold"))
        if episode.description.strip():
            cell.append("\n" + truncate_text(episode.description, 280))
        if episode.audio_file is not None:
            cell.append("\n" + str(episode.audio_file), style=theme.link)
        table.add_row(str(index), cell)
    return Group(heading, table)


def detail_to_dict(detail: PodcastDetail, selector: SeasonSelector) -> dict[str, Any]:
    return {
        "id": detail.id,
        "title": detail.title,
        "description": detail.description,
        "genres": detail.genre_titles(),
        "updated": detail.updated_at.isoformat() if detail.updated_at else None,
        "total_seasons": detail.season_count,
        "total_episodes": detail.episode_count,
        "seasons": [
            {"number": s.number, "title": s.title, "episodes": s.episode_count}
            for s in detail.seasons
        ],
        "selected_season": selector.selected,
        "episodes": [
            {
                "title": e.title,
                "description": e.description,
                "audio": str(e.audio_file) if e.audio_file else None,
            }
            for e in selector.episodes
        ],
    }


def genre_table(theme: Theme) -> Table:
    table = Table(title="[bold]Genres[/bold]", header_style=theme.header)
    table.add_column("ID", justify="right", style=theme.ident)
    table.add_column("Title", style=theme.genre)
    for genre in GENRES:
        table.add_row(str(genre.id), genre.title)
    return table
