"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (categories, UMKM businesses, the village
profile) has its own schemas, a service class and a router defined in
``api/endpoints``.  Services never talk to a database directly; they
go through the storage backend selected in ``core.config`` so the
in‑memory store and the SQLite store are interchangeable.
"""

from .main import app  # noqa: F401
