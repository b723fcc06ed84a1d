"""Temporal contact networks for event-driven epidemic simulation."""

__version__ = "0.1.0"
__all__ = ["events", "indexedset", "networks", "empirical", "sirx", "erdos_reyni", "activity_driven"]