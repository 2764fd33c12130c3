"""Typed configuration dataclasses for api-metadata-matcher.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict, replace
from typing import Dict, Any

REDACTED = "*** redacted ***"


@dataclass
class SpotifyConfig:
    """Spotify Web API configuration."""
    access_token: str | None = None
    api_base: str = "https://api.spotify.com/v1"
    timeout_seconds: float = 30.0
    market: str | None = None
    track_batch_size: int = 50
    album_batch_size: int = 20
    artist_batch_size: int = 50

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class ProvidersConfig:
    """Configuration for all providers."""
    spotify: SpotifyConfig = field(default_factory=SpotifyConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"spotify": self.spotify.to_dict()}


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    provider: str = "spotify"
    providers: ProvidersConfig = field(default_factory=ProvidersConfig)

    def redacted(self) -> AppConfig:
        """Return a copy with secrets masked, for display."""
        spotify = self.providers.spotify
        if spotify.access_token:
            spotify = replace(spotify, access_token=REDACTED)
        return replace(self, providers=replace(self.providers, spotify=spotify))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "provider": self.provider,
            "providers": self.providers.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        providers_data = data.get("providers", {})
        return cls(
            log_level=data.get("log_level", "INFO"),
            provider=data.get("provider", "spotify"),
            providers=ProvidersConfig(spotify=SpotifyConfig(**providers_data.get("spotify", {}))),
        )
