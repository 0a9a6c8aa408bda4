"""tripweek Python package.

Week scoring and conflict analysis for planning discretionary trips
around fixed unavailability windows.

Public API:
  - import from `tripweek.api` (preferred) or `import tripweek` (re-export)
"""

from __future__ import annotations

from .api import *  # noqa: F401,F403
from . import api as _api

__all__ = list(_api.__all__)

__version__ = "1.0.0"
