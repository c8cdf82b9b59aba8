"""
Listing comparison - checks that two listings are the same logical rowset.
CSV fields are compared as sets of names (token order is not part of the contract).
"""

from inventory.schemas.listing import ListingRow, csv_tokens


def _key(row: ListingRow) -> tuple:
    return (
        row.item_name,
        row.category_name,
        row.is_on_sale,
        csv_tokens(row.contributors_csv),
        csv_tokens(row.genres_csv),
    )


def diff_listings(left: list[ListingRow], right: list[ListingRow]) -> list[str]:
    """Human-readable differences between two listings; empty when equivalent."""
    problems = []
    if len(left) != len(right):
        problems.append(f"row count differs: {len(left)} != {len(right)}")

    left_by_id = {row.id: row for row in left}
    right_by_id = {row.id: row for row in right}
    for item_id in sorted(left_by_id.keys() - right_by_id.keys()):
        problems.append(f"item {item_id} only on the left")
    for item_id in sorted(right_by_id.keys() - left_by_id.keys()):
        problems.append(f"item {item_id} only on the right")
    for item_id in sorted(left_by_id.keys() & right_by_id.keys()):
        if _key(left_by_id[item_id]) != _key(right_by_id[item_id]):
            problems.append(
                f"item {item_id} differs: {left_by_id[item_id].model_dump()} != "
                f"{right_by_id[item_id].model_dump()}"
            )
    return problems


def listings_equivalent(left: list[ListingRow], right: list[ListingRow]) -> bool:
    return not diff_listings(left, right)
