"""
Domain errors.
Backing-store failures are not wrapped here: SQLAlchemy errors propagate as-is.
"""


class InventoryError(Exception):
    """Base class for errors raised by this package."""


class MissingReferenceError(InventoryError, LookupError):
    """A row points at an entity that is not in the snapshot (data error, fatal to the run)."""

    def __init__(self, entity: str, key: object, referrer: str):
        self.entity = entity
        self.key = key
        self.referrer = referrer
        super().__init__(f"no {entity} found for {referrer}")
