"""Metadata handler public API."""

from .base import (
    IdentifierBearer,
    MetadataReceiver,
    MetadataRecordable,
    Broadcaster,
    MetadataNotFoundError,
    MetadataHandler,
    ApiMetadataHandler,
)
from .chunking import split_into_chunks
from .registry import (
    HandlerCreator,
    register_handler,
    create_handler,
    available_handlers,
    clear_handlers,
)

__all__ = [
    "IdentifierBearer",
    "MetadataReceiver",
    "MetadataRecordable",
    "Broadcaster",
    "MetadataNotFoundError",
    "MetadataHandler",
    "ApiMetadataHandler",
    "split_into_chunks",
    "HandlerCreator",
    "register_handler",
    "create_handler",
    "available_handlers",
    "clear_handlers",
]
