"""Serverless function entrypoint.

Exposes the FastAPI `app` for the Python runtime (ASGI). `vercel.json`
rewrites every /api/* path here; the app strips the /api prefix itself.
"""

from certtrack.main import app as certtrack_app

app = certtrack_app
