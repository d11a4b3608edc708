from .get_stats_service import GetStatsService

__all__ = [
    "GetStatsService"
]
