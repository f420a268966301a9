"""Services layer - Application orchestration.

Available services:
- CitySearchService: One query session over a built city graph
"""

from .city_search import CitySearchService

__all__ = ["CitySearchService"]
