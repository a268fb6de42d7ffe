"""Domain layer: typed payloads returned by the node binaries.

This layer depends only on stdlib and pydantic.
It must never import from services, clients, commands, or config.
"""
