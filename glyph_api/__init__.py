from glyph_api.app import APP_SECRET_KEY, App, ListeningServer, get_app_secret, get_default_app

__all__ = [
    "APP_SECRET_KEY",
    "App",
    "ListeningServer",
    "get_app_secret",
    "get_default_app",
]
