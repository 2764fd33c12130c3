"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands.
"""
from apimeta.cli.helpers import cli  # root group
from apimeta.cli import config_cmds  # noqa: F401
from apimeta.cli import enrich_cmds  # noqa: F401

__all__ = ["cli"]
