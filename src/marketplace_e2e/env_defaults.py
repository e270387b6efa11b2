"""Read harness defaults from ``.env.defaults``.

The file lives at the repository root and holds the values a developer
checkout runs with (local site URL, test credentials, tier flags). The
process environment always wins over it; see ``config.py``.

``MARKETPLACE_E2E_ENV_DEFAULTS`` points at a different file, which CI uses
to select a deployment without exporting every variable.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

QUOTES = ('"', "'")


def defaults_path() -> Path:
    explicit = os.environ.get("MARKETPLACE_E2E_ENV_DEFAULTS")
    if explicit:
        return Path(explicit)
    return Path(__file__).resolve().parents[2] / ".env.defaults"


def parse_env_file(text: str) -> Dict[str, str]:
    """``KEY=value`` lines; comments, blanks and lines without ``=`` are skipped.

    An optional ``export`` prefix is accepted and one level of matching
    quotes around the value is removed.
    """
    entries: Dict[str, str] = {}
    for line in map(str.strip, text.splitlines()):
        if line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.removeprefix("export ").strip()
        value = value.strip()
        if len(value) > 1 and value[0] in QUOTES and value[-1] == value[0]:
            value = value[1:-1]
        entries[key] = value
    return entries


@lru_cache(maxsize=4)
def _defaults_from(path: Path) -> Dict[str, str]:
    if not path.is_file():
        return {}
    return parse_env_file(path.read_text(encoding="utf-8"))


def get_setting(key: str, fallback: str | None = None) -> str | None:
    """Environment value, else ``.env.defaults`` value, else ``fallback``.

    An exported but empty variable counts as unset.
    """
    value = os.environ.get(key)
    if value:
        return value
    return _defaults_from(defaults_path()).get(key, fallback)


def clear_cache() -> None:
    _defaults_from.cache_clear()
