"""
Top‑level package for the Village Promotion API.

This file makes ``village_promo_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``village_promo_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
