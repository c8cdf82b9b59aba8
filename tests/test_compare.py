"""Listing comparison tests."""

from inventory.schemas.listing import ListingRow
from inventory.services.compare import diff_listings, listings_equivalent


def _row(id=1, **overrides) -> ListingRow:
    data = {
        "id": id,
        "item_name": "Widget",
        "category_name": "Gadgets",
        "is_on_sale": True,
        "contributors_csv": "Alice, Bob",
        "genres_csv": "Action",
    }
    data.update(overrides)
    return ListingRow(**data)


def test_token_order_does_not_matter():
    assert listings_equivalent([_row()], [_row(contributors_csv="Bob, Alice")])


def test_row_order_does_not_matter():
    assert listings_equivalent([_row(1), _row(2)], [_row(2), _row(1)])


def test_missing_token_is_reported():
    problems = diff_listings([_row()], [_row(contributors_csv="Alice")])
    assert len(problems) == 1
    assert problems[0].startswith("item 1 differs")


def test_missing_and_extra_rows_are_reported():
    problems = diff_listings([_row(1), _row(2)], [_row(1), _row(3)])
    assert "item 2 only on the left" in problems
    assert "item 3 only on the right" in problems


def test_count_mismatch_is_reported():
    problems = diff_listings([_row(1)], [])
    assert problems[0] == "row count differs: 1 != 0"
