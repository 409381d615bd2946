"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

FIPE payloads (months, brands, models, years, quotes) are passed through
as plain JSON and have no entity of their own.
"""

from .cache_entry import CacheEntryEntity
from .resolution import Resolution
from .vehicle_type import VEHICLE_TYPES, VehicleTypeEntity

__all__ = ["CacheEntryEntity", "Resolution", "VehicleTypeEntity", "VEHICLE_TYPES"]
