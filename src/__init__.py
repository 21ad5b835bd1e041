"""Opponent Predictor Backend - match log and next-opponent API.

This package wraps the ``predictor`` core in a hexagonal layout.

Layers:
- application: Use cases and port interfaces
- infrastructure: Adapters for the record store
- api: REST endpoints
"""

__version__ = "1.0.0"
