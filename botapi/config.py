"""Binding configuration: environment variables and derived constants.

Loads ``BOT_API_URL``, ``BOT_API_LOG_LEVEL`` and ``BOT_API_LOG_FILE`` from the
environment via ``python-dotenv``.  All values are resolved at import time
so other modules can ``from botapi.config import …`` without repeated lookups.
The bot token is never read here; callers pass it to
:meth:`botapi.request.Request.prepare` explicitly.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

DEFAULT_API_URL = "https://api.telegram.org"


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_log_level(raw: str | None) -> int:
    """Map a level name such as ``"DEBUG"`` to its :mod:`logging` constant.

    Unknown or empty names fall back to ``logging.INFO``.
    """
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _resolve_api_url(raw: str | None) -> str:
    """Return the Bot API server root without a trailing slash."""
    url = (raw or "").strip() or DEFAULT_API_URL
    return url.rstrip("/")


# ── Public constants ─────────────────────────────────────────────────────────

API_URL: str = _resolve_api_url(os.environ.get("BOT_API_URL"))
LOG_LEVEL: int = _parse_log_level(os.environ.get("BOT_API_LOG_LEVEL"))
LOG_FILE: str | None = os.environ.get("BOT_API_LOG_FILE") or None
# JSON output is opt-in; otherwise records only reach the host application.
LOG_OUTPUT: bool = bool((os.environ.get("BOT_API_LOG_LEVEL") or "").strip() or LOG_FILE)


# ── Startup diagnostics ─────────────────────────────────────────────────────

from botapi.logger import BotApiLogger  # noqa: E402

logger = BotApiLogger.get_logger(LOG_LEVEL if LOG_OUTPUT else None, LOG_FILE)

if API_URL != DEFAULT_API_URL:
    logger.info("Config loaded: custom Bot API server", extra={"api_url": API_URL})
else:
    logger.debug("Config loaded: default Bot API server", extra={"api_url": API_URL})
