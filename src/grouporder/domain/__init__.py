"""Domain layer — kinds, orderings, contracts, and sorting.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
