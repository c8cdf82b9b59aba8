from inventory.db.models.category import Category
from inventory.db.models.contributor import Contributor, ItemContributor
from inventory.db.models.genre import Genre, item_genres
from inventory.db.models.item import Item

__all__ = ["Category", "Contributor", "Genre", "Item", "ItemContributor", "item_genres"]
