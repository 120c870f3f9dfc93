"""Adapter implementations for the hexagonal ports.

Mocks serve tests and offline runs; REST adapters talk to the Arkad API
through :mod:`arkad.adapters.http_client`.
"""
