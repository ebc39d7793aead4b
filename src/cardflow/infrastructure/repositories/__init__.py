"""Repositories encapsulating SQL for cards, blocks, and boards."""
