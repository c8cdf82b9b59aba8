"""
Console presentation - boxed listing output (rich).
Owns every formatting decision; the aggregators only hand over ListingRow values.
"""

from collections.abc import Callable, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from inventory.config import Settings, get_settings
from inventory.schemas.listing import ListingRow

console = Console(legacy_windows=False)


def format_listing_row(row: ListingRow, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    genres = row.genres_csv if row.genres_csv.strip() else settings.no_genres_placeholder
    contributors = (
        row.contributors_csv if row.contributors_csv.strip() else settings.no_contributors_placeholder
    )
    return f"{row.id} - {row.item_name} - {row.category_name} - {row.is_on_sale} - {genres} - {contributors}"


def render_boxed_list(
    rows: Sequence[ListingRow],
    formatter: Callable[[ListingRow], str] = format_listing_row,
    title: str | None = None,
) -> Panel:
    """One line per row inside a single box."""
    body = Text("\n".join(formatter(row) for row in rows))
    return Panel(body, box=box.SQUARE, title=title, expand=False)


def print_listing(rows: Sequence[ListingRow], out: Console | None = None, title: str | None = None) -> None:
    out = out or console
    out.print(render_boxed_list(rows, title=title))
    out.print(f"Number of items: {len(rows)}")
    out.print("Items shown successfully.")
