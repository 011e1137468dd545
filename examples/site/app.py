"""Small site — files, a template, and functions from one route table.

Demonstrates:
- routed HTML files and a kida template with data
- a function route returning its body, and one writing through the sink
- fallback static files limited to ``/assets``
- custom 404 page

Run:
    python app.py
"""

import json
from pathlib import Path

from wren import App, AppConfig

SITE_DIR = Path(__file__).parent

app = App(
    AppConfig(
        routes={
            "/": str(SITE_DIR / "pages" / "index.html"),
            "/hello": (str(SITE_DIR / "pages" / "hello.tpl"), {"name": "World"}),
            404: str(SITE_DIR / "pages" / "404.html"),
        },
        safe_directories={"/assets": True},
        static_root=SITE_DIR,
    )
)


@app.route("/time")
def time(request, response):
    return "<p>It is always tea time.</p>"


@app.route("/api/status")
async def status(request, response):
    body = json.dumps({"status": "ok", "routes": len(app.routes)})
    await response.send(200, {"Content-Type": "application/json"}, body)


if __name__ == "__main__":
    app.run()
