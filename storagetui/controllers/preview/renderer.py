"""Canned blob previews.

The catalog does not download blob bodies, so previews are deterministic
samples chosen by content type and name.
"""

from __future__ import annotations

from storagetui.models.tree import BlobRef
from storagetui.utils.formatting import format_bytes

TEXT_CONTENT_TYPES = frozenset({"text/plain"})
HTML_CONTENT_TYPES = frozenset({"text/html"})
IMAGE_CONTENT_TYPES = frozenset(
    {"image/jpeg", "image/png", "image/gif", "image/webp", "image/svg+xml"}
)

SEARCHABLE_CONTENT_TYPES = TEXT_CONTENT_TYPES | HTML_CONTENT_TYPES

LOG_SAMPLE = (
    '2024-05-11T03:12:00Z INFO job=ingest msg="started"\n'
    '2024-05-11T03:12:02Z INFO job=ingest msg="completed"\n'
)
ROBOTS_SAMPLE = "User-agent: *\nDisallow: /private\n"
INDEX_HTML_SAMPLE = (
    "<!doctype html>\n"
    "<html>\n"
    "  <head>\n"
    "    <title>Storage Preview</title>\n"
    "  </head>\n"
    "  <body>\n"
    "    <h1>Hello from storagetui</h1>\n"
    "    <p>This is mock HTML content.</p>\n"
    "  </body>\n"
    "</html>\n"
)
GENERIC_HTML_SAMPLE = (
    "<!doctype html>\n"
    "<html>\n"
    "  <body>\n"
    "    <p>Mock HTML preview.</p>\n"
    "  </body>\n"
    "</html>\n"
)
BINARY_MESSAGE = "Binary content preview not available."
UNSUPPORTED_MESSAGE = "Preview not available for this content type."


def preview_header(blob: BlobRef) -> str:
    """Header block; the blank line ending it separates it from the body."""
    return (
        f"File: {blob.name}\n"
        f"Content-Type: {blob.content_type}\n"
        f"Size: {format_bytes(blob.size_bytes)}\n"
        "\n"
    )


def text_sample(name: str) -> str:
    if name.endswith(".log"):
        return LOG_SAMPLE
    if name == "robots.txt":
        return ROBOTS_SAMPLE
    return f"Preview placeholder for {name}.\n"


def html_sample(name: str) -> str:
    if name == "index.html":
        return INDEX_HTML_SAMPLE
    return GENERIC_HTML_SAMPLE


def render_blob_preview(blob: BlobRef) -> tuple[str, bool]:
    """Return ``(text, searchable)`` for a blob."""
    content_type = blob.content_type
    if content_type in TEXT_CONTENT_TYPES:
        body = text_sample(blob.name)
    elif content_type in HTML_CONTENT_TYPES:
        body = html_sample(blob.name)
    elif content_type in IMAGE_CONTENT_TYPES:
        body = BINARY_MESSAGE
    else:
        body = UNSUPPORTED_MESSAGE
    return preview_header(blob) + body, content_type in SEARCHABLE_CONTENT_TYPES


__all__ = [
    "BINARY_MESSAGE",
    "IMAGE_CONTENT_TYPES",
    "LOG_SAMPLE",
    "ROBOTS_SAMPLE",
    "SEARCHABLE_CONTENT_TYPES",
    "UNSUPPORTED_MESSAGE",
    "preview_header",
    "render_blob_preview",
]
