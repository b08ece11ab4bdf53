"""
Workplace ranking domain: shift counting and the top workplaces leaderboard.
"""

from .models import RankedWorkplace, Shift, Workplace
from .service import (
    DEFAULT_LIMIT,
    CollectionFetcher,
    TopWorkplacesResult,
    TopWorkplacesService,
    count_shifts,
    rank_workplaces,
)

__all__ = [
    "DEFAULT_LIMIT",
    "CollectionFetcher",
    "RankedWorkplace",
    "Shift",
    "TopWorkplacesResult",
    "TopWorkplacesService",
    "Workplace",
    "count_shifts",
    "rank_workplaces",
]
