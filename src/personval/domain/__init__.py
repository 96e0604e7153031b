"""Domain layer — error tags, rules, and the Person model.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
