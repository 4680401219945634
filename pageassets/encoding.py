"""Data URI encoding for inline media and fonts."""

from __future__ import annotations

import base64

from .mime import mime_from_extension
from .paths import extension_of


def content_bytes(content: str | bytes) -> bytes:
    """Return the raw payload, encoding text as UTF-8."""
    if isinstance(content, bytes):
        return content
    return content.encode("utf-8")


def content_text(content: str | bytes) -> str:
    """Return the payload as text, decoding bytes as UTF-8 with replacement."""
    if isinstance(content, str):
        return content
    return content.decode("utf-8", errors="replace")


def data_uri(filename: str, content: str | bytes) -> str:
    """Format ``content`` as ``data:<mime>;base64,<payload>``.

    The MIME type is derived from the extension of ``filename``; unknown
    extensions use the generic binary type.
    """
    mime = mime_from_extension(extension_of(filename))
    payload = base64.b64encode(content_bytes(content)).decode("ascii")
    return f"data:{mime};base64,{payload}"


__all__ = ["content_bytes", "content_text", "data_uri"]
