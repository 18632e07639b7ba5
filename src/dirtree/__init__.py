from __future__ import annotations

from dirtree.domain.constants import APP_VERSION

__version__ = APP_VERSION
