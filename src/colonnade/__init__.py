"""Colonnade: block layout and citation engine for magazine-style articles.

The package turns an ordered list of article blocks into two-column rows or
sections, and scans inline markup for numbered citations. It does not fetch,
store, or render anything; the CLI and HTTP API are thin adapters around
the pure functions in :mod:`colonnade.core`.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.3.0"
