"""Service layer: result contract, lazy resolver, lifecycle orchestration.

Services may import from domain, clients and config.
They must never import from commands or output.
"""
