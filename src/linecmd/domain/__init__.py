"""Domain layer — command types and the line parser.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
