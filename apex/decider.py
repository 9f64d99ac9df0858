# apex/decider.py
"""
Apex → www redirect rule.

Pure functions only: the environment tag is passed in by the caller, so the
same inputs always produce the same decision.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

DEFAULT_PREFIX = "www."
INITIALS_SEPARATOR = "-"
INITIALS_LENGTH = 2
STATUS_MOVED_PERMANENTLY = 301

# "www." or "www-xx." where xx are two ascii letters (host is lower-cased first)
_exempt_host = re.compile(r"^(www|www-[a-z]{2})\.")


@dataclass(frozen=True)
class PassThrough:
    """Keep the downstream response."""


@dataclass(frozen=True)
class Redirect:
    location: str
    status_code: int = STATUS_MOVED_PERMANENTLY


RedirectDecision = Union[PassThrough, Redirect]

PASS_THROUGH = PassThrough()


def is_exempt_host(host: str) -> bool:
    return _exempt_host.match((host or "").lower()) is not None


def select_prefix(app_env: Optional[str]) -> str:
    """
    "staging-pl" -> "www-pl.", anything else -> "www.".

    The tag must hold exactly one dash and the part after it must be exactly
    two characters long. Its case is kept as given.
    """
    app_env = (app_env or "").strip()
    if not app_env or app_env.count(INITIALS_SEPARATOR) != 1:
        return DEFAULT_PREFIX

    initials = app_env.split(INITIALS_SEPARATOR)[-1]
    if len(initials) != INITIALS_LENGTH:
        return DEFAULT_PREFIX
    return f"www-{initials}."


def build_location(scheme: str, prefix: str, host: str, path: str, query: str) -> str:
    location = f"{scheme}://{prefix}{host}{path}"
    if query:
        location += f"?{query}"
    return location


def decide(scheme: str, host: str, path: str, query: str, app_env: Optional[str] = "") -> RedirectDecision:
    if is_exempt_host(host):
        return PASS_THROUGH

    location = build_location(scheme, select_prefix(app_env), host, path, query)
    return Redirect(location=location)
