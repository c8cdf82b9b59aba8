"""
Listing repository - the two listing strategies expressed as SQL.
Challenge: Flatten one-to-many relations (contributors, genres) into CSV text per item
without N+1 queries, and pick the query shape by data size / fan-out.
Design: build_* methods only compose a Select; fetch() is the single execution point.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from inventory.core.errors import MissingReferenceError
from inventory.db.models import Category, Contributor, Genre, Item, ItemContributor, item_genres
from inventory.schemas.listing import CSV_SEPARATOR, ListingRow, ListingStrategy


def _item_columns():
    return (
        Item.id,
        Item.item_name,
        Item.category_id,
        Category.category_name,
        Item.is_on_sale,
    )


def _correlated_contributors_csv():
    """Scalar subquery: distinct contributor names of the outer Item, joined."""
    link = aliased(ItemContributor, name="ic")
    contributor = aliased(Contributor, name="c")
    prev_link = aliased(ItemContributor, name="ic_prev")
    prev_contributor = aliased(Contributor, name="c_prev")

    # A name is kept only on its first link row for this item
    seen_earlier = (
        select(prev_link.id)
        .join(prev_contributor, prev_contributor.id == prev_link.contributor_id)
        .where(
            prev_link.item_id == link.item_id,
            prev_contributor.contributor_name == contributor.contributor_name,
            prev_link.id < link.id,
        )
    )
    return (
        select(func.aggregate_strings(contributor.contributor_name, CSV_SEPARATOR))
        .select_from(link)
        .join(contributor, contributor.id == link.contributor_id)
        .where(link.item_id == Item.id, ~seen_earlier.exists())
        .scalar_subquery()
    )


def _correlated_genres_csv():
    """Scalar subquery: distinct genre names of the outer Item, joined."""
    link = item_genres.alias("ig")
    genre = aliased(Genre, name="g")
    prev_link = item_genres.alias("ig_prev")
    prev_genre = aliased(Genre, name="g_prev")

    seen_earlier = (
        select(prev_link.c.genre_id)
        .join(prev_genre, prev_genre.id == prev_link.c.genre_id)
        .where(
            prev_link.c.item_id == link.c.item_id,
            prev_genre.genre_name == genre.genre_name,
            prev_genre.id < genre.id,
        )
    )
    return (
        select(func.aggregate_strings(genre.genre_name, CSV_SEPARATOR))
        .select_from(link)
        .join(genre, genre.id == link.c.genre_id)
        .where(link.c.item_id == Item.id, ~seen_earlier.exists())
        .scalar_subquery()
    )


def _correlated_missing_contributor_id():
    """Scalar subquery: lowest contributor_id of the outer Item that matches no contributor row."""
    link = aliased(ItemContributor, name="ic_dangling")
    contributor = aliased(Contributor, name="c_dangling")
    return (
        select(func.min(link.contributor_id))
        .select_from(link)
        .outerjoin(contributor, contributor.id == link.contributor_id)
        .where(link.item_id == Item.id, link.contributor_id.is_not(None), contributor.id.is_(None))
        .scalar_subquery()
    )


def _correlated_missing_genre_id():
    """Scalar subquery: lowest genre_id linked to the outer Item that matches no genre row."""
    link = item_genres.alias("ig_dangling")
    genre = aliased(Genre, name="g_dangling")
    return (
        select(func.min(link.c.genre_id))
        .select_from(link)
        .outerjoin(genre, genre.id == link.c.genre_id)
        .where(link.c.item_id == Item.id, genre.id.is_(None))
        .scalar_subquery()
    )


class ListingRepository:
    """Builds and runs listing queries. Read-only."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def build_per_item_correlated(self) -> Select:
        """
        One correlated aggregate per item per relation (nested-loop friendly).
        Use for small-to-medium item counts with low fan-out.
        """
        return (
            select(
                *_item_columns(),
                func.coalesce(_correlated_contributors_csv(), "").label("contributors_csv"),
                func.coalesce(_correlated_genres_csv(), "").label("genres_csv"),
                _correlated_missing_contributor_id().label("missing_contributor_id"),
                _correlated_missing_genre_id().label("missing_genre_id"),
            )
            .select_from(Item)
            .outerjoin(Category, Category.id == Item.category_id)
            .order_by(Item.id)
        )

    def build_pre_aggregated_join(self) -> Select:
        """
        Dedupe + group all links once, then left-outer-join the aggregates onto items.
        Fixed overhead, amortized across items; use for large sets or high fan-out.
        """
        contributor_pairs = (
            select(ItemContributor.item_id, Contributor.contributor_name)
            .join(Contributor, Contributor.id == ItemContributor.contributor_id)
            .distinct()
            .subquery("contributor_pairs")
        )
        contributor_agg = (
            select(
                contributor_pairs.c.item_id,
                func.aggregate_strings(contributor_pairs.c.contributor_name, CSV_SEPARATOR).label(
                    "contributors_csv"
                ),
            )
            .group_by(contributor_pairs.c.item_id)
            .subquery("contributor_agg")
        )

        genre_pairs = (
            select(item_genres.c.item_id, Genre.genre_name)
            .join(Genre, Genre.id == item_genres.c.genre_id)
            .distinct()
            .subquery("genre_pairs")
        )
        genre_agg = (
            select(
                genre_pairs.c.item_id,
                func.aggregate_strings(genre_pairs.c.genre_name, CSV_SEPARATOR).label("genres_csv"),
            )
            .group_by(genre_pairs.c.item_id)
            .subquery("genre_agg")
        )

        # Links whose target row is gone; the lowest offending id per item is reported
        missing_contributors = (
            select(
                ItemContributor.item_id,
                func.min(ItemContributor.contributor_id).label("missing_contributor_id"),
            )
            .outerjoin(Contributor, Contributor.id == ItemContributor.contributor_id)
            .where(ItemContributor.contributor_id.is_not(None), Contributor.id.is_(None))
            .group_by(ItemContributor.item_id)
            .subquery("missing_contributors")
        )
        missing_genres = (
            select(item_genres.c.item_id, func.min(item_genres.c.genre_id).label("missing_genre_id"))
            .outerjoin(Genre, Genre.id == item_genres.c.genre_id)
            .where(Genre.id.is_(None))
            .group_by(item_genres.c.item_id)
            .subquery("missing_genres")
        )

        return (
            select(
                *_item_columns(),
                func.coalesce(contributor_agg.c.contributors_csv, "").label("contributors_csv"),
                func.coalesce(genre_agg.c.genres_csv, "").label("genres_csv"),
                missing_contributors.c.missing_contributor_id,
                missing_genres.c.missing_genre_id,
            )
            .select_from(Item)
            .outerjoin(Category, Category.id == Item.category_id)
            .outerjoin(contributor_agg, contributor_agg.c.item_id == Item.id)
            .outerjoin(genre_agg, genre_agg.c.item_id == Item.id)
            .outerjoin(missing_contributors, missing_contributors.c.item_id == Item.id)
            .outerjoin(missing_genres, missing_genres.c.item_id == Item.id)
            .order_by(Item.id)
        )

    def build(self, strategy: ListingStrategy) -> Select:
        strategy = ListingStrategy(strategy)
        if strategy is ListingStrategy.PER_ITEM_CORRELATED:
            return self.build_per_item_correlated()
        if strategy is ListingStrategy.PRE_AGGREGATED_JOIN:
            return self.build_pre_aggregated_join()
        raise ValueError(f"unknown listing strategy: {strategy!r}")

    async def fetch(self, strategy: ListingStrategy) -> list[ListingRow]:
        """Execute the strategy's statement once and validate every row."""
        result = await self.session.execute(self.build(strategy))
        rows = []
        for row in result.all():
            if row.category_name is None:
                raise MissingReferenceError("category", row.category_id, f"item {row.id}")
            if row.missing_contributor_id is not None:
                raise MissingReferenceError("contributor", row.missing_contributor_id, f"item {row.id}")
            if row.missing_genre_id is not None:
                raise MissingReferenceError("genre", row.missing_genre_id, f"item {row.id}")
            rows.append(ListingRow.model_validate(row))
        return rows
