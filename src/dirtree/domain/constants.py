from __future__ import annotations

"""
Domain Constants.

Centralizes application identity and versioning shared by the CLI
surface, the logging bootstrap and the packaging metadata.
"""

APP_NAME = "dirtree"
APP_VERSION = "1.0.0"
