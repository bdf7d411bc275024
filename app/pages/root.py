"""Root landing page for the references service with API links."""

from html import escape


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            background: #fafafa;
            color: #222;
            padding: 2rem 1rem;
        }}
        .wrap {{
            max-width: 600px;
            margin: 0 auto;
        }}
        h1 {{
            font-size: 2rem;
            font-weight: 600;
            margin: 0 0 0.5rem 0;
        }}
        .tagline {{
            color: #666;
            margin: 0 0 2rem 0;
        }}
        .card {{
            background: #fff;
            border: 1px solid #e2e2e2;
            padding: 1.25rem 1.5rem;
            margin-bottom: 1rem;
        }}
        .card h2 {{
            font-size: 0.75rem;
            text-transform: uppercase;
            letter-spacing: 0.08em;
            color: #888;
            margin: 0 0 0.75rem 0;
        }}
        code {{
            font-family: ui-monospace, monospace;
            font-size: 0.875rem;
            background: #f2f2f2;
            padding: 0.1rem 0.3rem;
        }}
        ul {{ padding-left: 1.25rem; margin: 0; }}
        li {{ margin: 0.35rem 0; }}
        a.btn {{
            display: inline-block;
            margin-right: 0.5rem;
            padding: 0.5rem 1rem;
            border: 1px solid #222;
            color: #222;
            text-decoration: none;
        }}
        a.btn.primary {{ background: #222; color: #fff; }}
    </style>
</head>
<body>
    <div class="wrap">
        <h1>{name}</h1>
        <p class="tagline">Typed references between content records.</p>

        <section class="card">
            <h2>Endpoints</h2>
            <ul>
                <li><code>/api/v1/references/definitions</code> relation definitions</li>
                <li><code>/api/v1/records/{{id}}/references</code> attached ids per key</li>
                <li><code>/api/v1/records/{{id}}/referenced-by</code> reverse lookup</li>
                <li><code>/api/v1/render/content</code> expand <code>[ref]</code> tags</li>
                <li><code>/api/v1/admin/references</code> settings screen</li>
            </ul>
        </section>

        <section class="card">
            <h2>Docs</h2>
            <a href="/docs" class="btn primary">Swagger</a>
            <a href="/redoc" class="btn">ReDoc</a>
        </section>
    </div>
</body>
</html>
""".strip()
