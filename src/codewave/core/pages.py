"""Human-facing HTML pages: landing, upload confirmation and diagnostics."""

import html

# Shared page styles
_BODY_STYLE = (
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; "
    "line-height: 1.6; color: #333; max-width: 640px; margin: 40px auto; padding: 20px;"
)
_LINK_STYLE = "color: #2563eb; word-break: break-all;"
_MUTED_STYLE = "color: #666; font-size: 14px;"
_CODE_STYLE = "background: #f3f4f6; padding: 2px 6px; border-radius: 4px;"


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{html.escape(title)}</title>\n"
        "</head>\n"
        f'<body style="{_BODY_STYLE}">\n'
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def render_landing(app_name: str) -> str:
    """Informational page served at the root path."""
    safe_name = html.escape(app_name)
    return _page(
        app_name,
        f"""<h1>{safe_name}</h1>
<p>Upload a bundle of static files with <code style="{_CODE_STYLE}">POST /upload</code>
and it is served back under <code style="{_CODE_STYLE}">/&lt;project&gt;/</code>.</p>
<p style="{_MUTED_STYLE}">Project metadata is available at
<a href="/api/projects" style="{_LINK_STYLE}">/api/projects</a>.</p>""",
    )


def render_upload_success(project: str, file_count: int, url: str) -> str:
    """Confirmation page returned after a successful upload."""
    safe_project = html.escape(project)
    safe_url = html.escape(url, quote=True)
    noun = "file" if file_count == 1 else "files"
    return _page(
        f"Uploaded {project}",
        f"""<h1>Upload complete</h1>
<p>Project <strong>{safe_project}</strong> now hosts {file_count} {noun}.</p>
<p>Visit it at <a href="{safe_url}" style="{_LINK_STYLE}">{safe_url}</a></p>""",
    )


def render_site_error(title: str, project: str, message: str) -> str:
    """Diagnostic page for a hosted-site path that cannot be served."""
    safe_title = html.escape(title)
    return _page(
        title,
        f"""<h1>{safe_title}</h1>
<p>{html.escape(message)}</p>
<p style="{_MUTED_STYLE}">Project: <code style="{_CODE_STYLE}">{html.escape(project)}</code></p>
<p style="{_MUTED_STYLE}"><a href="/" style="{_LINK_STYLE}">Back to home</a></p>""",
    )
