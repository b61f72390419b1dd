"""
Core business logic package for the location aggregator.

All business logic, configuration and content API access live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
