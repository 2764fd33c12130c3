"""Playlist enrichment command."""

from __future__ import annotations
import logging
from pathlib import Path

import click
import requests

from .helpers import cli, build_client
from ..export.playlists import export_m3u, render_m3u
from ..handlers.registry import available_handlers, create_handler
from ..ingest.playlist import read_playlist
from ..services.enrich_service import enrich_entries
from ..utils.broadcasting import LoggingBroadcaster
from ..utils.logging_helpers import format_summary

logger = logging.getLogger(__name__)


@cli.command()
@click.argument("playlist", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--out", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write the enriched M3U here instead of stdout")
@click.option("--handler", "handler_names", multiple=True,
              help="Handler to apply (repeatable). Default: all available handlers")
@click.pass_context
def enrich(ctx: click.Context, playlist: Path, out: Path | None, handler_names: tuple[str, ...]):
    """Enrich PLAYLIST entries with provider metadata and emit extended M3U.

    PLAYLIST holds one entry per line: Spotify URIs, open.spotify.com links
    or bare track ids are resolved; other lines (local files) pass through.
    """
    build_client(ctx.obj)
    bcaster = LoggingBroadcaster(logger)
    names = list(handler_names) or available_handlers()
    try:
        handlers = [create_handler(name, bcaster) for name in names]
    except KeyError as e:
        raise click.UsageError(e.args[0])

    entries = read_playlist(playlist)
    try:
        result = enrich_entries(entries, handlers)
    except requests.RequestException as e:
        raise click.ClickException(f"Metadata request failed: {e}")

    if out is not None:
        export_m3u(result.entries, out)
        click.echo(f"Wrote {len(result.entries)} entries to {out}", err=True)
    else:
        click.echo(render_m3u(result.entries), nl=False)
    click.echo(
        format_summary(result.enriched, result.missing, result.total - result.claimed, result.duration_seconds),
        err=True,
    )


__all__ = ["enrich"]
