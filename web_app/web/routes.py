"""Web interface routes implementation."""

import os
from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "..", "ux", "web")

FALLBACK_HOMEPAGE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>URL Shortener</title></head>
<body>
<h1>URL Shortener</h1>
<p>POST <code>{"originalUrl": "..."}</code> to <code>/api/shorten</code>.</p>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the homepage form."""
    html_file = os.path.join(template_dir, "index.html")

    if os.path.exists(html_file):
        with open(html_file, "r", encoding="utf-8") as f:
            content = f.read()
        return HTMLResponse(content=content)

    return HTMLResponse(content=FALLBACK_HOMEPAGE, status_code=200)


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    registry = request.app.state.registry

    # Counts the click; unknown codes raise NotFoundError -> 404 JSON
    target_url = registry.resolve(short_code)

    # 302 (temporary) so every visit reaches us and gets counted
    return RedirectResponse(url=target_url, status_code=status.HTTP_302_FOUND)
