"""
In-memory aggregator tests - both strategies over the same snapshots.
"""

import pytest

from inventory.core.errors import MissingReferenceError
from inventory.schemas.listing import ListingRow, ListingStrategy, csv_tokens
from inventory.schemas.snapshot import (
    CategoryRecord,
    ContributorRecord,
    GenreLinkRecord,
    ItemContributorRecord,
    ItemRecord,
    Snapshot,
)
from inventory.services.aggregator import produce_listing
from inventory.services.compare import diff_listings
from inventory.services.synthetic import generate_snapshot

STRATEGIES = list(ListingStrategy)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_widget_scenario(widget_snapshot, strategy):
    rows = produce_listing(widget_snapshot, strategy)
    assert rows == [
        ListingRow(
            id=1,
            item_name="Widget",
            category_name="Gadgets",
            is_on_sale=True,
            contributors_csv="Alice",
            genres_csv="Action",
        )
    ]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_names_are_deduplicated_and_absent_contributors_skipped(mixed_snapshot, strategy):
    rows = {row.id: row for row in produce_listing(mixed_snapshot, strategy)}

    assert csv_tokens(rows[1].contributors_csv) == {"Alice", "Bob"}
    assert rows[1].contributors_csv.count("Alice") == 1
    assert csv_tokens(rows[1].genres_csv) == {"Drama", "Action"}
    assert rows[1].genres_csv.count("Drama") == 1


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_empty_fan_out_yields_empty_strings(mixed_snapshot, strategy):
    rows = {row.id: row for row in produce_listing(mixed_snapshot, strategy)}

    # Item 2 has only a link with no contributor; item 3 has nothing
    for item_id in (2, 3):
        assert rows[item_id].contributors_csv == ""
        assert rows[item_id].genres_csv == ""


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_every_item_appears_exactly_once(mixed_snapshot, strategy):
    rows = produce_listing(mixed_snapshot, strategy)
    assert sorted(row.id for row in rows) == [1, 2, 3]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_empty_snapshot_is_not_an_error(strategy):
    assert produce_listing(Snapshot(), strategy) == []


@pytest.mark.parametrize("seed", range(20))
def test_strategies_agree_on_random_snapshots(seed):
    snapshot = generate_snapshot(items=60, contributors=20, genres=15, max_fan_out=6, seed=seed)

    correlated = produce_listing(snapshot, ListingStrategy.PER_ITEM_CORRELATED)
    pre_aggregated = produce_listing(snapshot, ListingStrategy.PRE_AGGREGATED_JOIN)

    assert len(correlated) == len(snapshot.items)
    assert diff_listings(correlated, pre_aggregated) == []


def test_high_fan_out_snapshot_agrees():
    snapshot = generate_snapshot(items=25, contributors=40, genres=12, max_fan_out=30, seed=7)
    assert diff_listings(
        produce_listing(snapshot, ListingStrategy.PER_ITEM_CORRELATED),
        produce_listing(snapshot, ListingStrategy.PRE_AGGREGATED_JOIN),
    ) == []


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_missing_category_is_a_data_error(strategy):
    snapshot = Snapshot(
        items=[ItemRecord(id=7, item_name="Orphan", category_id=99)],
        categories=[CategoryRecord(id=1, category_name="Books")],
    )
    with pytest.raises(MissingReferenceError, match="no category found for item 7") as info:
        produce_listing(snapshot, strategy)
    assert isinstance(info.value, LookupError)
    assert info.value.key == 99


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_missing_contributor_is_a_data_error(strategy):
    snapshot = Snapshot(
        items=[ItemRecord(id=1, item_name="Widget", category_id=1)],
        categories=[CategoryRecord(id=1, category_name="Books")],
        item_contributors=[ItemContributorRecord(item_id=1, contributor_id=42)],
    )
    with pytest.raises(MissingReferenceError) as info:
        produce_listing(snapshot, strategy)
    assert info.value.entity == "contributor"


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_missing_genre_is_a_data_error(strategy):
    snapshot = Snapshot(
        items=[ItemRecord(id=1, item_name="Widget", category_id=1)],
        categories=[CategoryRecord(id=1, category_name="Books")],
        genre_links=[GenreLinkRecord(item_id=1, genre_id=42)],
    )
    with pytest.raises(MissingReferenceError, match="no genre found for item 1") as info:
        produce_listing(snapshot, strategy)
    assert info.value.entity == "genre"
    assert info.value.key == 42


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_links_to_unknown_items_are_ignored(strategy):
    snapshot = Snapshot(
        items=[ItemRecord(id=1, item_name="Widget", category_id=1)],
        categories=[CategoryRecord(id=1, category_name="Books")],
        contributors=[ContributorRecord(id=3, contributor_name="Alice")],
        item_contributors=[
            ItemContributorRecord(item_id=1, contributor_id=3),
            ItemContributorRecord(item_id=99, contributor_id=5),
        ],
        genre_links=[GenreLinkRecord(item_id=99, genre_id=8)],
    )

    rows = produce_listing(snapshot, strategy)

    assert rows == [
        ListingRow(
            id=1,
            item_name="Widget",
            category_name="Books",
            is_on_sale=False,
            contributors_csv="Alice",
            genres_csv="",
        )
    ]


def test_strategy_accepts_its_string_value(widget_snapshot):
    rows = produce_listing(widget_snapshot, "pre-aggregated-join")
    assert rows[0].contributors_csv == "Alice"


def test_unknown_strategy_is_rejected(widget_snapshot):
    with pytest.raises(ValueError, match="unknown listing strategy"):
        produce_listing(widget_snapshot, "nested-loops")
