"""
Repository pattern implementation for data access.

Repositories encapsulate database operations and provide
a clean interface for data manipulation.
"""

from .base import BaseRepository
from .key_value_repository import KeyValueRepository

__all__ = ['BaseRepository', 'KeyValueRepository']
