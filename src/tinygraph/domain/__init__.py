"""Domain layer — node and link records.

This layer depends only on stdlib and pydantic.
It must never import from graph, algo, services, or config.
"""
