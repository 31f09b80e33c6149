"""ASGI app scoring products from the Supabase ``products`` table.

Serve with any ASGI server, e.g. ``uvicorn product_health_score.api.asgi:app``.
"""

from product_health_score.api.app import create_app
from product_health_score.containers import build_container

app = create_app(build_container())
