"""
In-memory listing aggregator.
Challenge: Same flattened projection as the SQL strategies, computed over a Snapshot.
Design: Pure functions of their input; nothing is created, mutated or cached.
"""

from collections import defaultdict
from collections.abc import Callable

from inventory.core.errors import MissingReferenceError
from inventory.schemas.listing import ListingRow, ListingStrategy, join_csv
from inventory.schemas.snapshot import Snapshot


def _index(records) -> dict:
    return {r.id: r for r in records}


def _lookup(index: dict, key, entity: str, referrer: str):
    try:
        return index[key]
    except KeyError:
        raise MissingReferenceError(entity, key, referrer) from None


def _base_row(item, categories: dict) -> dict:
    category = _lookup(categories, item.category_id, "category", f"item {item.id}")
    return {
        "id": item.id,
        "item_name": item.item_name,
        "category_name": category.category_name,
        "is_on_sale": item.is_on_sale,
    }


def _per_item_correlated(snapshot: Snapshot) -> list[ListingRow]:
    """For each item, look up its own links (like a correlated subquery per row)."""
    categories = _index(snapshot.categories)
    contributors = _index(snapshot.contributors)
    genres = _index(snapshot.genres)

    rows = []
    for item in snapshot.items:
        contributor_names = [
            _lookup(contributors, link.contributor_id, "contributor", f"item {item.id}").contributor_name
            for link in snapshot.item_contributors
            if link.item_id == item.id and link.contributor_id is not None
        ]
        genre_names = [
            _lookup(genres, link.genre_id, "genre", f"item {item.id}").genre_name
            for link in snapshot.genre_links
            if link.item_id == item.id
        ]
        rows.append(
            ListingRow(
                **_base_row(item, categories),
                contributors_csv=join_csv(contributor_names),
                genres_csv=join_csv(genre_names),
            )
        )
    return rows


def _group_csv(pairs) -> dict[int, str]:
    """(item_id, name) pairs -> {item_id: csv}, deduplicating pairs first."""
    grouped: dict[int, list[str]] = defaultdict(list)
    for item_id, name in dict.fromkeys(pairs):
        grouped[item_id].append(name)
    return {item_id: join_csv(names) for item_id, names in grouped.items()}


def _pre_aggregated_join(snapshot: Snapshot) -> list[ListingRow]:
    """Aggregate every link once, then left-outer-join the aggregates onto items."""
    categories = _index(snapshot.categories)
    contributors = _index(snapshot.contributors)
    genres = _index(snapshot.genres)
    # Links to unknown items could never join; they are skipped, not looked up
    item_ids = {item.id for item in snapshot.items}

    contributor_agg = _group_csv(
        (
            link.item_id,
            _lookup(contributors, link.contributor_id, "contributor", f"item {link.item_id}").contributor_name,
        )
        for link in snapshot.item_contributors
        if link.item_id in item_ids and link.contributor_id is not None
    )
    genre_agg = _group_csv(
        (link.item_id, _lookup(genres, link.genre_id, "genre", f"item {link.item_id}").genre_name)
        for link in snapshot.genre_links
        if link.item_id in item_ids
    )

    return [
        ListingRow(
            **_base_row(item, categories),
            contributors_csv=contributor_agg.get(item.id, ""),
            genres_csv=genre_agg.get(item.id, ""),
        )
        for item in snapshot.items
    ]


_STRATEGIES: dict[ListingStrategy, Callable[[Snapshot], list[ListingRow]]] = {
    ListingStrategy.PER_ITEM_CORRELATED: _per_item_correlated,
    ListingStrategy.PRE_AGGREGATED_JOIN: _pre_aggregated_join,
}


def produce_listing(snapshot: Snapshot, strategy: ListingStrategy) -> list[ListingRow]:
    """One ListingRow per item in the snapshot. Row order follows snapshot.items."""
    try:
        run = _STRATEGIES[ListingStrategy(strategy)]
    except (KeyError, ValueError):
        raise ValueError(f"unknown listing strategy: {strategy!r}") from None
    return run(snapshot)
