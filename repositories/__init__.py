"""
Repositories layer - Data access patterns.

Repositories load the bundled catalog data and answer read-only queries.
"""

from .json_repository import JSONRepository
from .lego_set_repository import LegoSetRepository

__all__ = [
    'JSONRepository',
    'LegoSetRepository',
]
