"""
Application package initializer.

The project is organised into small layers: ``core`` holds settings,
logging and the in‑memory movie store, ``schemas`` the request and
response models, ``services`` the business logic and ``api`` the
HTTP routes.  Importing this package builds the default application.
"""

from .main import app  # noqa: F401
