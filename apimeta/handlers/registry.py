"""Handler factory registry.

Handlers are constructed on demand with the broadcaster of the caller, so the
registry stores creators rather than instances:

    register_handler('spotify.tracks', lambda bcaster: SpotifyTrackHandler(bcaster, client))
    handler = create_handler('spotify.tracks', LoggingBroadcaster())
"""
from __future__ import annotations
from typing import Any, Callable, Dict

from .base import Broadcaster, MetadataHandler

HandlerCreator = Callable[[Broadcaster], MetadataHandler[Any]]

_handler_creators: Dict[str, HandlerCreator] = {}


def register_handler(name: str, creator: HandlerCreator) -> None:
    """Register (or replace) a handler creator under ``name``."""
    _handler_creators[name] = creator


def create_handler(name: str, bcaster: Broadcaster) -> MetadataHandler[Any]:
    """Create a registered handler wired to the given broadcaster.

    Args:
        name: Registered handler name (e.g. 'spotify.tracks')
        bcaster: Sink the handler reports to

    Returns:
        New handler instance

    Raises:
        KeyError: If no handler is registered under ``name``
    """
    try:
        creator = _handler_creators[name]
    except KeyError:
        raise KeyError(
            f"Unknown handler: {name}. Available: {', '.join(available_handlers()) or 'none'}"
        ) from None
    return creator(bcaster)


def available_handlers() -> list[str]:
    """Get sorted list of registered handler names."""
    return sorted(_handler_creators.keys())


def clear_handlers() -> None:
    _handler_creators.clear()


__all__ = ["HandlerCreator", "register_handler", "create_handler", "available_handlers", "clear_handlers"]
