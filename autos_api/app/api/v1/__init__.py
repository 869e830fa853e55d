"""
Version 1 of the Autos API.

Routers for each domain live in ``endpoints`` and are aggregated in
``router.py``.
"""
