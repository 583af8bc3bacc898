"""Flask web application."""

from __future__ import annotations

import threading
from typing import Optional

from flask import Flask, Response, jsonify, render_template_string, request

from . import icons
from .session import ERROR, READY, Session

TEMPLATE = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>{{ title }}</title>
  <script src="https://cdn.tailwindcss.com"></script>
  <link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.5.1/css/all.min.css" />
  <style>
    :root {
      --bg-primary: #0a0a0a;
      --bg-card: linear-gradient(135deg, #1a1a1a 0%, #0f0f0f 100%);
      --border-primary: #2a2a2a;
      --accent-green: #10b981;
      --accent-red: #ef4444;
    }

    .ticker-wrap {
      overflow: hidden;
      white-space: nowrap;
      border-bottom: 1px solid var(--border-primary);
    }

    .ticker {
      display: inline-block;
      padding-left: 100%;
      animation: ticker-scroll 40s linear infinite;
    }

    .ticker__item {
      display: inline-block;
      padding: 0 2rem;
      font-family: ui-monospace, SFMono-Regular, Menlo, monospace;
    }

    .price-up { color: var(--accent-green); }
    .price-down { color: var(--accent-red); }

    @keyframes ticker-scroll {
      0% { transform: translateX(0); }
      100% { transform: translateX(-100%); }
    }

    .article-image {
      height: 180px;
      background-size: cover;
      background-position: center;
      border-radius: 12px 12px 0 0;
    }

    .modern-card {
      background: var(--bg-card);
      border: 1px solid var(--border-primary);
      border-radius: 12px;
    }
  </style>
</head>
<body class="bg-slate-950 text-slate-100">
  <div class="ticker-wrap bg-slate-900 py-2">
    <div class="ticker" id="ticker">
      {% for t in ticker %}
        <span class="ticker__item {{ t.direction }}">{{ t.text }}</span>
      {% endfor %}
    </div>
  </div>

  <div class="max-w-6xl mx-auto p-4 md:p-8">
    <h1 class="text-2xl md:text-3xl font-semibold mb-6">{{ title }}</h1>

    <nav id="categories" class="flex flex-wrap gap-2 mb-6">
      {% for c in nav %}
        <a href="{{ url_for('index', category=c.category) }}" data-category="{{ c.category }}"
           class="px-3 py-1 rounded-xl {% if c.category == selected %}bg-indigo-600{% else %}bg-slate-800 hover:bg-slate-700{% endif %}">
          <i class="{{ c.icon }}"></i> {{ c.label }}
        </a>
      {% endfor %}
    </nav>

    {% if loading %}
      <div id="loading" class="text-slate-300">Loading news...</div>
    {% endif %}

    {% if error_message %}
      <div id="error" class="bg-red-900 border border-red-700 rounded-xl p-4 mb-6 text-red-200">{{ error_message }}</div>
    {% endif %}

    <div id="news-container" class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-6">
      {% for a in cards %}
        <article class="modern-card">
          <div class="article-image" style="background-image: url('{{ a.image_url }}')"></div>
          <div class="article-content p-4">
            <h2 class="text-lg font-medium mb-2">{{ a.title }}</h2>
            <p class="text-sm text-slate-300 mb-3">{{ a.excerpt }}</p>
            <div class="article-meta text-xs text-slate-400 flex flex-wrap gap-3 mb-3">
              <span class="article-author"><i class="fas fa-user"></i> {{ a.source }}</span>
              <span class="article-date"><i class="far fa-clock"></i> {{ a.published }}</span>
            </div>
            <div class="article-tags flex flex-wrap gap-1 mb-3">
              {% for tag in a.tags %}
                <span class="tag px-2 py-1 rounded-lg bg-slate-800 text-xs">{{ tag }}</span>
              {% endfor %}
            </div>
            <a href="{{ a.url }}" target="_blank" rel="noopener" class="read-more text-indigo-300 hover:text-indigo-200">Read more</a>
          </div>
        </article>
      {% endfor %}
    </div>
  </div>

{% if ready %}
<script>
  const refreshMs = {{ refresh_seconds }} * 1000;

  async function refreshTicker() {
    const response = await fetch("{{ url_for('ticker') }}");
    if (!response.ok) {
      return;
    }
    const data = await response.json();
    const ticker = document.getElementById("ticker");
    ticker.replaceChildren(...data.items.map(item => {
      const span = document.createElement("span");
      span.className = `ticker__item ${item.direction}`;
      span.textContent = item.text;
      return span;
    }));
  }

  setInterval(() => refreshTicker().catch(err => console.error("Ticker refresh failed:", err)), refreshMs);
</script>
{% elif loading %}
<script>
  setTimeout(() => window.location.reload(), 2000);
</script>
{% endif %}
</body>
</html>
"""


def create_app(app_title: str, price_refresh_seconds: int, session: Optional[Session] = None,
               start_worker: bool = True) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    dash = session or Session(refresh_seconds=price_refresh_seconds)
    app.extensions["crypto_session"] = dash
    _stop_event = threading.Event()
    _worker_thread: Optional[threading.Thread] = None

    @app.route("/")
    def index() -> str:
        category = request.args.get("category") or icons.ALL_CATEGORY
        ready = dash.state == READY
        return render_template_string(
            TEMPLATE,
            title=app_title,
            loading=dash.loading,
            ready=ready,
            error_message=dash.error_message if dash.state == ERROR else None,
            nav=dash.nav if ready else [],
            cards=dash.cards(category) if ready else [],
            ticker=dash.ticker if ready else [],
            selected=category,
            refresh_seconds=price_refresh_seconds,
        )

    @app.route("/ticker")
    def ticker() -> Response:
        return jsonify(
            items=[t.to_dict() for t in dash.ticker],
            updated=dash.ticker_updated.isoformat() if dash.ticker_updated else None,
            refresh_seconds=price_refresh_seconds,
        )

    @app.route("/healthz")
    def healthz() -> Response:
        """Health check endpoint. Returns 200 once news has loaded, else 503."""
        if dash.state == READY:
            return Response("OK", status=200, mimetype="text/plain")
        detail = dash.error_message or "News has not loaded yet"
        return Response(f"Unhealthy ({dash.state}): {detail}", status=503, mimetype="text/plain")

    def start_worker_if_needed() -> None:
        nonlocal _worker_thread
        if _worker_thread and _worker_thread.is_alive():
            return
        _worker_thread = threading.Thread(
            target=dash.run,
            args=(_stop_event,),
            daemon=True,
        )
        _worker_thread.start()

    if start_worker:
        start_worker_if_needed()
    return app
