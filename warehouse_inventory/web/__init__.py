"""Web interface for the warehouse inventory."""

from .app import WebSettings, create_app

__all__ = ["WebSettings", "create_app"]
