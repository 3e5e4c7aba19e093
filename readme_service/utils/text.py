# /readme_service/utils/text.py
# Helpers for decoding GitHub content payloads and clipping text for the prompt.
import base64
import binascii


def safe_b64decode(s: str) -> bytes:
    return base64.b64decode(s.encode("utf-8"), validate=False)


def decode_content(payload: dict) -> str | None:
    """Decode a GitHub contents envelope; None unless it is base64 encoded."""
    if payload.get("encoding") != "base64" or not payload.get("content"):
        return None
    try:
        return safe_b64decode(payload["content"]).decode("utf-8", errors="replace")
    except (binascii.Error, ValueError):
        return None


def clip(text: str, max_chars: int) -> str:
    # no marker; callers add their own ellipsis
    return text[:max_chars]
