"""Infrastructure layer: database engine, schema, store, repositories.

This layer depends on stdlib and third-party libs (SQLAlchemy, pydantic).
It may import domain value types but never services, commands, or output.
"""
