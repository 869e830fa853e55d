"""
Auto endpoints for API v1.

These routes expose CRUD operations for autos keyed by VIN.  Empty
results are reported as ``204 No Content`` rather than ``404``:

* ``GET /autos`` lists autos, optionally filtered by ``color`` and/or
  ``make``; an empty list yields 204.
* ``POST /autos`` creates an auto; invalid data yields 400.
* ``GET /autos/{vin}`` returns one auto or 204.
* ``PATCH /autos/{vin}`` changes colour and/or owner; an invalid body
  yields 400 and an unknown VIN 204.
* ``DELETE /autos/{vin}`` answers 202, or 204 for an unknown VIN.
"""

from typing import Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from autos_api.app.api.deps import get_auto_service
from autos_api.app.core.exceptions import (
    AutoNotFoundException,
    InvalidAutoException,
    InvalidUpdateAutoException,
)
from autos_api.app.schemas.auto import Auto, AutosList, UpdateAuto
from autos_api.app.services.auto_service import AutoService

router = APIRouter()


@router.get(
    "",
    response_model=AutosList,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No autos matched"}},
)
async def get_autos(
    color: Optional[str] = Query(None),
    make: Optional[str] = Query(None),
    service: AutoService = Depends(get_auto_service),
) -> Union[AutosList, Response]:
    """List autos.

    - **color** and **make** together return autos matching both.
    - **color** alone or **make** alone filter on that field.
    - Without parameters every auto is returned.
    """
    if color is not None and make is not None:
        autos = await service.get_all_autos(color, make)
    elif color is not None:
        autos = await service.get_all_autos_by_color(color)
    elif make is not None:
        autos = await service.get_all_autos_by_make(make)
    else:
        autos = await service.get_all_autos()
    if autos is None or autos.is_empty():
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return autos


@router.post("", response_model=Auto)
async def add_auto(
    auto: Auto,
    service: AutoService = Depends(get_auto_service),
) -> Auto:
    """Create a new auto and echo the stored record."""
    try:
        return await service.add_auto(auto)
    except InvalidAutoException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get(
    "/{vin}",
    response_model=Auto,
    responses={status.HTTP_204_NO_CONTENT: {"description": "Auto not found"}},
)
async def get_auto(
    vin: str,
    service: AutoService = Depends(get_auto_service),
) -> Union[Auto, Response]:
    """Retrieve a single auto by VIN."""
    auto = await service.get_auto(vin)
    if auto is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return auto


@router.patch(
    "/{vin}",
    response_model=Auto,
    responses={status.HTTP_204_NO_CONTENT: {"description": "Auto not found"}},
)
async def update_auto(
    vin: str,
    update: UpdateAuto,
    service: AutoService = Depends(get_auto_service),
) -> Union[Auto, Response]:
    """Change the colour and/or owner of an auto."""
    try:
        auto = await service.update_auto(vin, update.color, update.owner)
    except InvalidUpdateAutoException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if auto is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return auto


@router.delete(
    "/{vin}",
    status_code=status.HTTP_202_ACCEPTED,
    responses={status.HTTP_204_NO_CONTENT: {"description": "Auto not found"}},
)
async def delete_auto(
    vin: str,
    service: AutoService = Depends(get_auto_service),
) -> Response:
    """Delete an auto by VIN."""
    try:
        await service.delete_auto(vin)
    except AutoNotFoundException:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return Response(status_code=status.HTTP_202_ACCEPTED)
