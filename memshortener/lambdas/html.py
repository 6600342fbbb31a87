"""HTML pages served by the form-based handlers.

Every value interpolated into a page is HTML-escaped.
"""

from html import escape


_STYLE = """
        body { font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; }
        h1 { color: #333; }
        form { display: flex; flex-direction: column; gap: 10px; }
        input { padding: 8px; font-size: 16px; }
        button { padding: 10px; background: #0066cc; color: white; border: none; cursor: pointer; }
        .result { margin-top: 20px; padding: 20px; background: #f0f0f0; }
        a { color: #0066cc; word-break: break-all; }
"""

HOME_PAGE = f"""<!DOCTYPE html>
<html>
<head>
    <title>URL Shortener</title>
    <style>{_STYLE}    </style>
</head>
<body>
    <h1>URL Shortener</h1>
    <form action="/shorten-form" method="post">
        <input type="url" name="url" placeholder="Enter URL to shorten" required>
        <button type="submit">Shorten URL</button>
    </form>
</body>
</html>
"""

_RESULT_PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>URL Shortened</title>
    <style>{style}    </style>
</head>
<body>
    <h1>URL Shortened</h1>
    <div class="result">
        <p><strong>Original URL:</strong><br>{target}</p>
        <p><strong>Short URL:</strong><br><a href="{short_url}">{short_url}</a></p>
    </div>
    <p><a href="/">Shorten another URL</a></p>
</body>
</html>
"""


def render_result_page(target: str, short_url: str) -> str:
    """Render the page shown after a successful form submission."""
    return _RESULT_PAGE.format(style=_STYLE, target=escape(target), short_url=escape(short_url))
