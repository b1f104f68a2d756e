from __future__ import annotations

import platform
import re

from .version import client_version

_USER_AGENT_ID_RE = re.compile(r":A=([^:]+):")


def user_agent_id(token: str | None) -> str:
    m = _USER_AGENT_ID_RE.search(token or "")
    return m.group(1) if m else ""


def additional_headers(token: str | None) -> dict[str, str]:
    return {
        "User-Agent": f"{user_agent_id(token)}/{client_version()}; Python / {platform.python_version()}",
    }
