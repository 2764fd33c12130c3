from __future__ import annotations
import click

from ..config import load_typed_config, validate_spotify_config
from ..config_types import AppConfig
from ..handlers.registry import available_handlers
from ..providers.spotify import SpotifyAPIClient, register_spotify_handlers
from ..version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="api-metadata-matcher")
@click.pass_context
def cli(ctx: click.Context):
    """Enrich playlists with metadata from streaming provider APIs.

    \b
    Configuration is read from .env and APIMETA__* environment variables:
      APIMETA__PROVIDERS__SPOTIFY__ACCESS_TOKEN=...   # required for enrich
      APIMETA__LOG_LEVEL=DEBUG

    \b
    Examples:
      apimeta enrich playlist.txt                  # print enriched M3U
      apimeta enrich playlist.m3u --out out.m3u    # write to file
      apimeta handlers                             # list available handlers
    """
    if not isinstance(ctx.obj, dict):
        ctx.obj = load_typed_config().to_dict()


def build_client(cfg: dict, require_token: bool = True) -> SpotifyAPIClient:
    """Build a Spotify API client from config and register its handlers.

    Args:
        cfg: Full configuration dict
        require_token: Fail if no access token is configured

    Returns:
        SpotifyAPIClient instance

    Raises:
        click.UsageError: If configuration is invalid or the token is missing
    """
    spotify_cfg = AppConfig.from_dict(cfg).providers.spotify
    try:
        validate_spotify_config(spotify_cfg)
    except ValueError as e:
        raise click.UsageError(str(e))
    if require_token and not spotify_cfg.access_token:
        raise click.UsageError('providers.spotify.access_token not configured (set APIMETA__PROVIDERS__SPOTIFY__ACCESS_TOKEN)')
    client = SpotifyAPIClient(
        spotify_cfg.access_token or '',
        api_base=spotify_cfg.api_base,
        timeout=spotify_cfg.timeout_seconds,
        market=spotify_cfg.market,
    )
    register_spotify_handlers(client, spotify_cfg)
    return client


@cli.command(name="handlers")
@click.pass_context
def list_handlers(ctx: click.Context):
    """List available metadata handlers."""
    build_client(ctx.obj, require_token=False)
    for name in available_handlers():
        click.echo(name)


__all__ = ["cli", "build_client"]
