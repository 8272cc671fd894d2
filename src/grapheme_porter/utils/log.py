"""
log.py.

Does: Topic-filtered trace printer for the text layer, switched on per topic with
      PORTER_DEBUG_TOPICS ("token,settings" or "all"). Silent when the variable is unset.
Returns: Timestamped "[ts] [topic] msg" lines on stderr.
Used by: token.stem_text (per-token stems), token.settings (which files were read), demo CLI.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["ENV_VAR", "TOPICS", "debug", "reload_topics", "topic_enabled"]

ENV_VAR = "PORTER_DEBUG_TOPICS"

# token: one line per stemmed or kept token
# settings: effective StemmerSettings after load
# cli: porter-demo input/output sizes
TOPICS = frozenset({"token", "settings", "cli"})


def _load_topics() -> frozenset[str]:
    raw = os.getenv(ENV_VAR, "")
    wanted = {t.strip().lower() for t in raw.split(",") if t.strip()}
    return TOPICS if "all" in wanted else frozenset(wanted & TOPICS)


_enabled = _load_topics()


def reload_topics() -> None:
    """Does: Re-read PORTER_DEBUG_TOPICS (tests and long-lived processes)."""
    global _enabled
    _enabled = _load_topics()


def topic_enabled(topic: str) -> bool:
    return topic in _enabled


def debug(msg: str, topic: str = "token", *, stream: TextIO | None = None) -> None:
    """Does: Print `msg` under `topic` when that topic is switched on.

    Raises:
        ValueError: `topic` is not one of TOPICS (catches typos at the call site).
    """
    if topic not in TOPICS:
        raise ValueError(f"unknown debug topic {topic!r}; expected one of {sorted(TOPICS)}")
    if topic not in _enabled:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic}] {msg}", file=stream or sys.stderr)
