"""Name sanitization and upload allow-set checks."""

import os
import re

from src.codewave.core.exceptions import ValidationError

_PROJECT_UNSAFE = re.compile(r"[^a-z0-9-]")
_FILENAME_UNSAFE = re.compile(r"[^A-Za-z0-9.\-_]")
_PROJECT_SLUG = re.compile(r"[a-z0-9-]+")

ALLOWED_EXTENSIONS = frozenset(
    {
        "html",
        "css",
        "js",
        "txt",
        "json",
        "png",
        "jpg",
        "jpeg",
        "gif",
        "svg",
        "ico",
        "webp",
        "woff",
        "woff2",
        "ttf",
        "eot",
    }
)

# Declared MIME types accepted for the extensions above
ALLOWED_CONTENT_TYPES = frozenset(
    {
        "text/html",
        "text/css",
        "text/javascript",
        "application/javascript",
        "application/x-javascript",
        "text/plain",
        "application/json",
        "image/png",
        "image/jpeg",
        "image/jpg",
        "image/gif",
        "image/svg+xml",
        "image/x-icon",
        "image/vnd.microsoft.icon",
        "image/webp",
        "font/woff",
        "font/woff2",
        "application/font-woff",
        "application/font-woff2",
        "font/ttf",
        "font/sfnt",
        "application/x-font-ttf",
        "application/vnd.ms-fontobject",
    }
)

# First path segments owned by the service itself
RESERVED_PROJECT_NAMES = frozenset(
    {"api", "upload", "health", "metrics", "docs", "redoc", "verify-recaptcha"}
)


def sanitize_project_name(raw: str | None) -> str:
    """Normalize a user-supplied project name into a slug.

    Lower-cases and replaces every character outside ``[a-z0-9-]`` with ``-``.
    Separators are neither collapsed nor trimmed, and the result has the
    same length as the input.

    Raises:
        ValidationError: If the name is missing or empty.
    """
    if not raw:
        raise ValidationError("missing project")
    # Per-character lower() keeps the length stable ("İ".lower() is two chars)
    lowered = "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in raw)
    return _PROJECT_UNSAFE.sub("-", lowered)


def sanitize_filename(raw: str) -> str:
    """Replace every character outside ``[A-Za-z0-9._-]`` with ``_``."""
    return _FILENAME_UNSAFE.sub("_", raw)


def is_project_slug(name: str) -> bool:
    """Return True if name can address a project directory."""
    return _PROJECT_SLUG.fullmatch(name) is not None


def file_extension(filename: str) -> str:
    """Lower-cased extension without the dot, or an empty string."""
    return os.path.splitext(filename)[1].lstrip(".").lower()


def normalize_content_type(content_type: str | None) -> str:
    """Strip parameters and case from a declared content type."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def is_allowed_upload(filename: str, content_type: str | None) -> bool:
    """Both the extension and the declared content type must be allowed."""
    return (
        file_extension(filename) in ALLOWED_EXTENSIONS
        and normalize_content_type(content_type) in ALLOWED_CONTENT_TYPES
    )
