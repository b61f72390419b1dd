"""
Business services for the location aggregator.

- aggregation.py: concurrent details/photos/reviews fetch and merge
"""

from core.services.aggregation import aggregate_location

__all__ = ["aggregate_location"]
