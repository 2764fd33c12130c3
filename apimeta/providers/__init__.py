"""Metadata providers.

Currently only Spotify is implemented. Providers contribute handlers to the
registry in :mod:`apimeta.handlers.registry`.
"""
