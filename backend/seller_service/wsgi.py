"""WSGI entry point (``gunicorn seller_service.wsgi:app``)."""

from seller_service import create_app

app = create_app()
