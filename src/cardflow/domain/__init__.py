"""Domain layer: column kinds, card snapshots, and workflow rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
