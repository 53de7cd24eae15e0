"""Shared page shell (head, styles, API-key helper) for the dashboard pages."""

from html import escape

_FONTS_CSS_URL = (
    "https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;600"
    "&family=JetBrains+Mono:wght@400;500&display=swap"
)

_STYLES = """
        * { box-sizing: border-box; }
        body {
            font-family: 'DM Sans', system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #f5f7fa;
            color: #333;
            padding: 2rem 1rem;
        }
        .wrap { max-width: 900px; margin: 0 auto; }
        .top { display: flex; justify-content: space-between; align-items: center; margin-bottom: 2rem; }
        h1 { margin: 0; font-size: 1.75rem; font-weight: 600; }
        .card {
            background: #fff;
            border-radius: 12px;
            padding: 1.5rem 1.75rem;
            box-shadow: 0 2px 8px rgba(0, 0, 0, 0.08);
            margin-bottom: 1.25rem;
        }
        a.btn, button.btn {
            display: inline-block;
            padding: 0.6rem 1.2rem;
            background: #fff;
            color: #667eea;
            border: 2px solid #667eea;
            border-radius: 8px;
            font-weight: 600;
            font-size: 0.9rem;
            text-decoration: none;
            cursor: pointer;
        }
        a.btn.primary, button.btn.primary { background: #667eea; color: #fff; }
        button.btn:disabled { background: #ccc; border-color: #ccc; cursor: not-allowed; }
        table { width: 100%; border-collapse: collapse; }
        th, td { text-align: left; padding: 0.75rem; border-bottom: 1px solid #eee; }
        th { font-size: 0.75rem; text-transform: uppercase; letter-spacing: 0.06em; color: #888; }
        code, .mono { font-family: 'JetBrains Mono', monospace; font-size: 0.85rem; }
        label { display: block; margin-bottom: 1rem; font-weight: 500; }
        input, select {
            display: block; width: 100%; margin-top: 0.4rem; padding: 0.6rem;
            border: 1px solid #ddd; border-radius: 6px; font-size: 1rem;
        }
        .msg { padding: 0.75rem 1rem; border-radius: 8px; margin-top: 1rem; }
        .msg.ok { background: #e6f7ee; color: #1b7a43; }
        .msg.err { background: #fdecec; color: #b42318; }
        .empty { text-align: center; padding: 2rem; font-size: 1.1rem; }
        .hidden { display: none; }
"""

# Bearer key for the JSON API, kept in localStorage when API_KEY is enforced.
_API_HELPER_JS = """
        function taskdeskHeaders(extra) {
            var headers = Object.assign({}, extra || {});
            var key = window.localStorage.getItem('taskdesk_api_key');
            if (key) headers['Authorization'] = 'Bearer ' + key;
            return headers;
        }
        function escapeHtml(value) {
            var div = document.createElement('div');
            div.textContent = value == null ? '' : String(value);
            return div.innerHTML;
        }
"""


def render_page(title: str, body: str, script: str = "") -> str:
    """Wrap body HTML and an optional inline script in the shared page shell."""
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link href="{_FONTS_CSS_URL}" rel="stylesheet">
    <style>{_STYLES}</style>
</head>
<body>
    <div class="wrap">
{body}
    </div>
    <script>{_API_HELPER_JS}{script}
    </script>
</body>
</html>
""".strip()
