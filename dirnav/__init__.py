"""Public package surface for dirnav.

Exports ``main`` for programmatic CLI invocation.
The navigation engine lives in ``dirnav.fs_model`` and ``dirnav.navigation``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
