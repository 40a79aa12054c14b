"""Test helper functions for common upload patterns."""

from src.codewave.services import IncomingFile

HTML_TYPE = "text/html"
CSS_TYPE = "text/css"


def html_file(name: str = "index.html", size: int = 500) -> IncomingFile:
    """An HTML file of exactly size bytes."""
    return IncomingFile(filename=name, content_type=HTML_TYPE, data=_payload(b"<p>hi</p>", size))


def css_file(name: str = "style.css", size: int = 200) -> IncomingFile:
    """A CSS file of exactly size bytes."""
    return IncomingFile(filename=name, content_type=CSS_TYPE, data=_payload(b"p{}", size))


def _payload(seed: bytes, size: int) -> bytes:
    return (seed * (size // len(seed) + 1))[:size]


def multipart_files(*files: IncomingFile) -> list[tuple[str, tuple[str, bytes, str | None]]]:
    """Build httpx multipart ``files`` entries under the ``files`` field."""
    return [("files", (f.filename, f.data, f.content_type)) for f in files]
