"""Configuration display commands."""

from __future__ import annotations
import click
import json as _json

from .helpers import cli
from ..config_types import AppConfig


@cli.command(name="config")
@click.option("--section", "-s", help="Only show one top-level section (log_level, provider or providers).")
@click.option("--redact", is_flag=True, help="Mask the Spotify access token.")
@click.pass_context
def show_config(ctx: click.Context, section: str | None, redact: bool):
    """Show the effective configuration as JSON."""
    typed = AppConfig.from_dict(ctx.obj)
    if redact:
        typed = typed.redacted()
    data = typed.to_dict()
    if section:
        key = section.lower()
        if key not in data:
            raise click.UsageError(f"Unknown section '{section}'. Available: {', '.join(sorted(data))}")
        data = {key: data[key]}
    click.echo(_json.dumps(data, indent=2, sort_keys=True))


__all__ = ["show_config"]
