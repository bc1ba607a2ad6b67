"""Domain layer: route types, hostname rules, and errors.

This layer depends only on stdlib and pydantic.
It must never import from routing, services, commands, or config.
"""
