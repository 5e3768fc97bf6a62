from __future__ import annotations

"""
Listing Error Hierarchy.

Exceptions raised by the listing core. Interface layers catch the base
class to map failures into exit codes and user-facing messages.
"""


class ListingError(Exception):
    """Base class for all listing failures."""


class ListingFetchError(ListingError):
    """
    The storage listing could not be retrieved completely.

    Raised on transport errors, non-success HTTP statuses and unparseable
    listing documents. Partial results are never returned alongside it.
    """
