from __future__ import annotations

import re

_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"

EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@" + _LABEL + r"(?:\." + _LABEL + r")*"
)


def is_valid_email(value: str | None) -> bool:
    """Syntax check only; no DNS or mailbox lookup."""
    if not value:
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None
