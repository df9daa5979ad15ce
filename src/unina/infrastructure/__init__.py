"""Infrastructure layer: the lookup engine over loaded name ranges."""

from unina.infrastructure.name_range_store import NameRangeStore

__all__ = ["NameRangeStore"]
