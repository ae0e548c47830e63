"""Pipeline entry points for Colonnade.

Currently exposed:

- :func:`run_layout_pass` : one full layout pass over an article document,
  implemented in ``article_layout.py``.
"""

from __future__ import annotations

from .article_layout import LayoutPassResult, run_layout_pass

__all__ = ["LayoutPassResult", "run_layout_pass"]
