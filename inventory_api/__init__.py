"""
Top‑level package for the Inventory API.

This file makes ``inventory_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``inventory_api.app.main``.  The tests import the application this
way from the repository root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
