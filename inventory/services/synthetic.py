"""
Synthetic snapshot generator for seeding and tests.
Produces repeated contributor/genre names, duplicate links and links with no contributor,
so both listing strategies get exercised on their edge cases.
"""

import random

from inventory.schemas.snapshot import (
    CategoryRecord,
    ContributorRecord,
    GenreLinkRecord,
    GenreRecord,
    ItemContributorRecord,
    ItemRecord,
    Snapshot,
)

CATEGORY_NAMES = ["Books", "Games", "Music", "Movies", "Gadgets", "Comics", "Board Games"]

ITEM_NAMES = [
    "Widget", "Space Saga", "Midnight Jazz", "Retro Racer", "The Long Road",
    "Pixel Quest", "Ocean Tales", "Iron Garden", "Silent Orbit", "Paper Moon",
    "Neon Nights", "Desert Run", "Crystal Maze", "Northern Lights", "Hollow Hill",
]

CONTRIBUTOR_NAMES = [
    "Alice", "Bob", "Carol", "Dave", "Erin", "Frank", "Grace", "Heidi",
    "Ivan", "Judy", "Mallory", "Niaj", "Olivia", "Peggy", "Rupert", "Sybil",
]

GENRE_NAMES = [
    "Action", "Adventure", "Drama", "Comedy", "Horror", "Fantasy",
    "Science Fiction", "Mystery", "Romance", "Jazz", "Rock", "Strategy",
]


def generate_snapshot(
    items: int = 100,
    contributors: int = 30,
    genres: int = 12,
    max_fan_out: int = 4,
    null_link_ratio: float = 0.1,
    seed: int | None = None,
) -> Snapshot:
    """
    Random snapshot with ids starting at 1.
    Names cycle through fixed pools, so different contributors/genres can share a name.
    """
    rng = random.Random(seed)

    categories = [
        CategoryRecord(id=i, category_name=name) for i, name in enumerate(CATEGORY_NAMES, start=1)
    ]
    contributor_rows = [
        ContributorRecord(id=i, contributor_name=CONTRIBUTOR_NAMES[(i - 1) % len(CONTRIBUTOR_NAMES)])
        for i in range(1, contributors + 1)
    ]
    genre_rows = [
        GenreRecord(id=i, genre_name=GENRE_NAMES[(i - 1) % len(GENRE_NAMES)])
        for i in range(1, genres + 1)
    ]

    item_rows = []
    links = []
    genre_links = []
    for item_id in range(1, items + 1):
        name = rng.choice(ITEM_NAMES)
        if rng.random() > 0.5:
            name = f"{name} {rng.randint(1, 999)}"
        item_rows.append(
            ItemRecord(
                id=item_id,
                item_name=name,
                is_on_sale=rng.random() < 0.3,
                category_id=rng.choice(categories).id,
            )
        )

        # Duplicate links are allowed on purpose
        for _ in range(rng.randint(0, max_fan_out) if contributor_rows else 0):
            contributor_id = None
            if rng.random() >= null_link_ratio:
                contributor_id = rng.choice(contributor_rows).id
            links.append(ItemContributorRecord(item_id=item_id, contributor_id=contributor_id))

        # Association rows are unique per (item, genre)
        fan_out = min(rng.randint(0, max_fan_out), len(genre_rows))
        for genre in rng.sample(genre_rows, fan_out):
            genre_links.append(GenreLinkRecord(item_id=item_id, genre_id=genre.id))

    return Snapshot(
        items=item_rows,
        categories=categories,
        item_contributors=links,
        contributors=contributor_rows,
        genre_links=genre_links,
        genres=genre_rows,
    )
