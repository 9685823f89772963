# backend/diagkit/__init__.py
from __future__ import annotations

"""
Marks `diagkit` as a Python package.

Configuration lives in diagkit.config, payload transformers and the
release classifier in diagkit.services.
"""

__version__ = "0.1.0"
