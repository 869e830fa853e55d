"""
API dependencies.

Endpoints receive their service through ``Depends(get_auto_service)``
rather than importing it directly, so tests can swap in a fake via
``app.dependency_overrides``.
"""

from autos_api.app.services.auto_service import AutoService


def get_auto_service() -> AutoService:
    """Return the service used by the autos endpoints."""
    return AutoService()
