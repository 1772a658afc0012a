"""Domain layer — date/time engine, file URL conversion, error taxonomy.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
