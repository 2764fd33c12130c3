"""Logging helper utilities for consistent summary reporting."""

import click


def format_summary(
    enriched: int,
    missing: int,
    passthrough: int,
    duration_seconds: float = 0.0,
    item_name: str = "Entries",
) -> str:
    """Format a summary line with colored counts.

    Args:
        enriched: Count of entries that received metadata
        missing: Count of entries whose identifier resolved to nothing
        passthrough: Count of entries no handler applied to
        duration_seconds: Total duration in seconds
        item_name: Name of items (e.g., "Entries", "Tracks")

    Returns:
        Formatted summary string with colors
    """
    parts = [
        click.style('✓', fg='green'),
        f"{item_name}:",
        click.style(f'{enriched} enriched', fg='green'),
        click.style(f'{missing} missing', fg='red' if missing else 'yellow'),
        click.style(f'{passthrough} unchanged', fg='yellow'),
    ]

    if duration_seconds > 0:
        parts.append(f"in {duration_seconds:.2f}s")

    return " ".join(parts)


__all__ = ["format_summary"]
