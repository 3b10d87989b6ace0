"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
"""
from __future__ import annotations
import logging
import os, sys
from pathlib import Path
from typing import List, Mapping, Optional
from dotenv import dotenv_values

logger = logging.getLogger(__name__)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI escape sequence."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def normalize_hex(value: Optional[str]) -> Optional[str]:
    """Return '#rrggbb' for a valid 6-digit hex value (with or without '#'), else None."""
    if not value:
        return None
    h = value.strip().lstrip('#')
    if len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h):
        return '#' + h
    return None

def resolve_hex(key: str, default: str, env: Mapping[str, Optional[str]],
                dotenv: Mapping[str, Optional[str]], problems: Optional[List[str]] = None) -> str:
    """Pick a palette color. Priority: real env var > .env override > default.

    Invalid values are skipped; they are logged, or appended to ``problems``
    when given so they can be logged later.
    """
    for source, raw in (('environment', env.get(key)), ('.env', dotenv.get(key))):
        if raw is None:
            continue
        hex_code = normalize_hex(raw)
        if hex_code:
            return hex_code
        msg = f"Ignoring invalid {source} color {key}={raw!r}."
        if problems is None:
            logger.warning("%s", msg)
        else:
            problems.append(msg)
    return default

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

# Default palette
HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#48B3AF'
HEX_DONE_DEFAULT = '#A7E399'

_env_path = Path(__file__).resolve().parent.parent / '.env'
_DOTENV: dict[str, Optional[str]] = dict(dotenv_values(_env_path)) if _env_path.exists() else {}

# The palette resolves at import, before logging is configured; see report_config_warnings().
_CONFIG_WARNINGS: List[str] = []

HEX_PRIMARY = resolve_hex('TODO_PRIMARY', HEX_PRIMARY_DEFAULT, os.environ, _DOTENV, _CONFIG_WARNINGS)
HEX_PENDING = resolve_hex('TODO_PENDING', HEX_PENDING_DEFAULT, os.environ, _DOTENV, _CONFIG_WARNINGS)
HEX_DONE = resolve_hex('TODO_DONE', HEX_DONE_DEFAULT, os.environ, _DOTENV, _CONFIG_WARNINGS)

# Generate ANSI sequences
PRIMARY = _from_hex(HEX_PRIMARY)
C_PENDING = _from_hex(HEX_PENDING)
C_DONE = _from_hex(HEX_DONE)

STATUS_COLOR = {
    True: C_PENDING,
    False: C_DONE,
}

HEADER_COLOR = PRIMARY
ROW_COLOR = PRIMARY + BOLD  # emphasize row numbers with bold primary
EMPTY_COLOR = DIM + PRIMARY

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

def dotenv_setting(key: str) -> Optional[str]:
    """Look up a non-palette setting: real env var first, then the project .env."""
    value = os.environ.get(key)
    if value is not None:
        return value
    return _DOTENV.get(key)

def report_config_warnings() -> int:
    """Log the invalid overrides found at import; returns how many were reported."""
    count = len(_CONFIG_WARNINGS)
    for msg in _CONFIG_WARNINGS:
        logger.warning("%s", msg)
    _CONFIG_WARNINGS.clear()
    return count

__all__ = [
    'color','dotenv_setting','normalize_hex','resolve_hex','report_config_warnings',
    'RESET','BOLD','DIM','STATUS_COLOR','HEADER_COLOR','ROW_COLOR','EMPTY_COLOR',
    'HEX_PRIMARY','HEX_PENDING','HEX_DONE',
]
