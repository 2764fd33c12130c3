"""Broadcaster implementations for handler diagnostics.

Handlers report through an injected broadcaster (see
:class:`apimeta.handlers.base.Broadcaster`); these are the stock sinks.
"""

from __future__ import annotations
import logging
import click

logger = logging.getLogger(__name__)


class LoggingBroadcaster:
    """Forward handler messages to a :mod:`logging` logger.

    Errors reported by handlers are per-entry omissions, so they are logged
    as warnings rather than errors.
    """

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def info(self, message: str) -> None:
        self.log.info(message)

    def error(self, err: BaseException) -> None:
        self.log.warning(f"{click.style('✗', fg='red')} {err}")


class NullBroadcaster:
    """Discard all messages."""

    def info(self, message: str) -> None:
        pass

    def error(self, err: BaseException) -> None:
        pass


__all__ = ["LoggingBroadcaster", "NullBroadcaster"]
