"""Domain layer — headings, commands, positions, and the interpreter.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
