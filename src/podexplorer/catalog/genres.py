"""Static genre reference table for the podcast catalog."""

from podexplorer.catalog.models import Genre

UNKNOWN_GENRE = "Unknown"

GENRES: tuple[Genre, ...] = (
    Genre(id=1, title="Personal Growth"),
    Genre(id=2, title="Investigative Journalism"),
    Genre(id=3, title="History"),
    Genre(id=4, title="Comedy"),
    Genre(id=5, title="Entertainment"),
    Genre(id=6, title="Business"),
    Genre(id=7, title="Fiction"),
    Genre(id=8, title="News"),
    Genre(id=9, title="Kids and Family"),
)

_BY_ID = {genre.id: genre for genre in GENRES}


def genre_title(genre_id: int) -> str:
    """Get the display title for a genre id, or the placeholder label."""
    genre = _BY_ID.get(genre_id)
    return genre.title if genre else UNKNOWN_GENRE


def find_genre_by_title(title: str) -> Genre | None:
    """Look up a genre by title, ignoring case and surrounding whitespace."""
    wanted = title.strip().casefold()
    for genre in GENRES:
        if genre.title.casefold() == wanted:
            return genre
    return None
