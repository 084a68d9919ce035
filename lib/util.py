# Licensed under GPL 3: https://www.gnu.org/licenses/gpl-3.0.html
"""Utility functions for VISM components."""

import base64
from urllib.parse import urlparse


def b64u_decode(data: str) -> bytes:
    """Decode base64url encoded data."""
    if data is None:
        return b""

    if isinstance(data, bytes):
        data = data.decode("ascii")

    data = data.strip()
    if data == "":
        return b""

    rem = len(data) % 4
    if rem:
        data += "=" * (4 - rem)

    return base64.urlsafe_b64decode(data)


def is_http_url(url: str) -> bool:
    """Check if a string is an absolute http or https URL."""
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def mask_token(token: str, keep: int = 6) -> str:
    """Shorten an opaque token for log output."""
    if not token or len(token) <= keep:
        return token
    return f"{token[:keep]}..."

