"""Service layer — the Validator entry points.

Services may import from the domain layer.
They must never import from commands, output, or config.
"""
