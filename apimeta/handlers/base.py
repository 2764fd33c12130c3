"""Metadata handler abstraction layer.

This module defines the capability contracts an entry must implement to take
part in matching, and the generic handler that enriches those entries with
metadata fetched in bulk from an external API.

Key abstractions:
- IdentifierBearer / MetadataReceiver: entry capabilities
- MetadataRecordable: both capabilities combined (what handlers select on)
- Broadcaster: sink for informational messages and non-fatal errors
- MetadataHandler: outward interface (match_entries)
- ApiMetadataHandler: the matching engine; concrete handlers only supply
  get_metadatas() and convert()
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import (
    Any,
    ClassVar,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Protocol,
    Tuple,
    Type,
    TypeVar,
)

from .chunking import split_into_chunks

TImplementer = TypeVar("TImplementer", bound="MetadataRecordable[Any, Any]")
TIdentifier = TypeVar("TIdentifier", bound=Hashable)
TMetadata = TypeVar("TMetadata")
TCast = TypeVar("TCast")
T = TypeVar("T")

# ---------------- Entry capabilities -----------------


class IdentifierBearer(ABC, Generic[TIdentifier]):
    """Entry that can expose the identifier used to look up its metadata."""

    @abstractmethod
    def get_identifier(self) -> Optional[TIdentifier]:
        """Return the entry's identifier, or None if it has none."""

    def try_get_identifier(self) -> Tuple[Optional[TIdentifier], bool]:
        """Return ``(identifier, found)``; found is False when absent."""
        identifier = self.get_identifier()
        return identifier, identifier is not None


class MetadataReceiver(ABC, Generic[TMetadata]):
    """Entry that can accept a resolved metadata value."""

    @abstractmethod
    def set_metadata(self, metadata: TMetadata) -> None:
        """Attach resolved metadata to the entry."""


class MetadataRecordable(IdentifierBearer[TIdentifier], MetadataReceiver[TMetadata], ABC):
    """Entry capability required by :class:`ApiMetadataHandler`."""


# ---------------- Sink -----------------


class Broadcaster(Protocol):
    """Sink for handler diagnostics.

    Fire-and-forget: handlers never inspect the outcome of a call.
    """

    def info(self, message: str) -> None:
        ...  # pragma: no cover

    def error(self, err: BaseException) -> None:
        ...  # pragma: no cover


class MetadataNotFoundError(LookupError):
    """Reported (not raised) when the API returned nothing for an entry's identifier."""

    def __init__(self, entry: Any, identifier: Any):
        super().__init__(f"[API] No metadata found for {entry} ({identifier})")
        self.entry = entry
        self.identifier = identifier


# ---------------- Handlers -----------------


class MetadataHandler(ABC, Generic[TCast]):
    """Interface for matching entries with their API metadata."""

    @abstractmethod
    def match_entries(self, all_entries: Iterable[TCast]) -> List[TCast]:
        """Match entries to API metadata using the underlying handler.

        Args:
            all_entries: Candidate entries; only those the handler supports take part

        Returns:
            Converted entries carrying their metadata, in input order
        """


class ApiMetadataHandler(MetadataHandler[TCast], Generic[TImplementer, TIdentifier, TMetadata, TCast]):
    """Match entries by identifier with metadata retrieved from an API.

    Subclasses declare ``entry_type`` (the capability class selected from the
    candidate list) and implement :meth:`get_metadatas` and :meth:`convert`.
    The remaining hooks have permissive defaults and may be overridden:

    - custom_modifier: rewrite/normalise a raw identifier, or map it to None
    - custom_filter: predicate a non-None identifier must satisfy
    - identifier_key: equivalence used for deduplication and lookups
    - entity_name: noun used in diagnostic messages

    Example:
        handler = SpotifyTrackHandler(bcaster, client)
        enriched = handler.match_entries(entries)
    """

    entry_type: ClassVar[Type[MetadataRecordable[Any, Any]]]
    entity_name: ClassVar[str] = "entity"

    def __init__(self, bcaster: Broadcaster):
        self.bcaster = bcaster

    @abstractmethod
    def get_metadatas(self, identifiers: List[TIdentifier]) -> Mapping[TIdentifier, TMetadata]:
        """Fetch metadata for the given distinct identifiers.

        Any subset of the requested identifiers may be missing from the
        result. Failures of the underlying call should be raised; they abort
        the whole match_entries() invocation.

        Args:
            identifiers: Distinct identifiers, in first-seen order

        Returns:
            Mapping of identifier to metadata for those that could be resolved
        """

    @abstractmethod
    def convert(self, entry: TImplementer) -> TCast:
        """Convert a (possibly enriched) entry into the output type."""

    def custom_filter(self, identifier: TIdentifier) -> bool:
        return True

    def custom_modifier(self, identifier: Optional[TIdentifier]) -> Optional[TIdentifier]:
        return identifier

    def identifier_key(self, identifier: TIdentifier) -> Hashable:
        return identifier

    def get_entries(self, all_entries: Iterable[Any]) -> List[TImplementer]:
        """Select the entries this handler supports, preserving order."""
        return [entry for entry in all_entries if isinstance(entry, self.entry_type)]  # type: ignore[misc]

    def extract_identifier(self, entry: TImplementer) -> Optional[TIdentifier]:
        """Extract, modify and filter an entry's identifier (None if unusable)."""
        raw, found = entry.try_get_identifier()
        identifier = self.custom_modifier(raw if found else None)
        if identifier is None or not self.custom_filter(identifier):
            return None
        return identifier

    def match_entries(self, all_entries: Iterable[Any]) -> List[TCast]:
        entries = self.get_entries(all_entries)
        # Extracted once; the merge below reuses the same identifiers
        identifiers = [self.extract_identifier(entry) for entry in entries]
        valid_ids = [i for i in identifiers if i is not None]

        distinct_ids: List[TIdentifier] = []
        seen = set()
        for identifier in valid_ids:
            key = self.identifier_key(identifier)
            if key not in seen:
                seen.add(key)
                distinct_ids.append(identifier)
        name = self.entity_name
        self.bcaster.info(f"Filtered {len(distinct_ids)} unique {name} IDs from {len(valid_ids)} total {name} IDs")

        metadatas: Dict[Hashable, TMetadata] = {
            self.identifier_key(identifier): metadata
            for identifier, metadata in self.get_metadatas(distinct_ids).items()
        }
        resolved = sum(1 for key in seen if key in metadatas)
        self.bcaster.info(f"Retrieved {resolved}/{len(distinct_ids)} {name} metadata entries from API.")

        for entry, identifier in zip(entries, identifiers):
            if identifier is None:
                continue
            key = self.identifier_key(identifier)
            if key in metadatas:
                entry.set_metadata(metadatas[key])
            else:
                self.bcaster.error(MetadataNotFoundError(entry, identifier))

        return [self.convert(entry) for entry in entries]

    @staticmethod
    def split_into_chunks(source: Iterable[T], chunk_size: int) -> Iterator[List[T]]:
        """Split identifiers into provider-sized batches (see :mod:`.chunking`)."""
        return split_into_chunks(source, chunk_size)


__all__ = [
    "IdentifierBearer", "MetadataReceiver", "MetadataRecordable",
    "Broadcaster", "MetadataNotFoundError",
    "MetadataHandler", "ApiMetadataHandler",
]
