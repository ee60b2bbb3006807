"""
WSGI entry point for production deployment.

Usage:
    gunicorn wsgi:app -c gunicorn.conf.py
"""

from habitlists.app import create_app

# Opens (and on first deploy creates and seeds) the database
app = create_app()
