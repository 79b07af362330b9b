"""Books feature - bestseller listing and cache commands."""

from .commands import bestsellers, clear_cache
from .params import BestsellerListParams
from .service import BestsellerListService

__all__ = [
    "bestsellers",
    "clear_cache",
    "BestsellerListParams",
    "BestsellerListService",
]
