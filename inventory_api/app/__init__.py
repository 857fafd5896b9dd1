"""
Application package initializer.

The application is organised in layers: ``schemas`` describes the
customer records, ``repositories`` persists them, ``services`` holds
the business rules and ``api`` exposes them over HTTP.  Each layer
only talks to the one directly below it.
"""

from .main import app  # noqa: F401
