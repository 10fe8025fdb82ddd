"""Email address format check.

Purchases only require a non-blank address; this check is available to
callers that want a stricter policy but is not applied by the Inventory.
"""

from __future__ import annotations

import re

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_valid_email(email: str | None) -> bool:
    if email is None or not email.strip():
        return False
    return _EMAIL_PATTERN.fullmatch(email) is not None
