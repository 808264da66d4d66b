# src/wpstarter/core/config/defaults.py
"""
Defaults fixos da configuração de setup.

Os defaults formam a base sobre a qual a configuração validada do usuário
é aplicada. Cada `Config` recebe sua própria cópia (ver `fresh_defaults`).
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

WP_VERSION_KEY = "wp-version"
WP_VERSION_FALLBACK = "0.0.0"

DEFAULTS: Dict[str, Any] = {
    "gitignore": True,
    "env-example": True,
    "env-file": ".env",
    "move-content": False,
    "content-dev-op": "symlink",
    "content-dev-dir": "content-dev",
    "register-theme-folder": True,
    "prevent-overwrite": [".gitignore"],
    "dropins": [],
    "unknown-dropins": "ask",
}


def fresh_defaults() -> Dict[str, Any]:
    return deepcopy(DEFAULTS)
