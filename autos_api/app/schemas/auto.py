"""
Pydantic models for auto (vehicle) data.

``Auto`` is the full record exchanged on create and read, ``UpdateAuto``
is the partial body accepted by PATCH and ``AutosList`` is the
envelope returned by the list endpoint.  The envelope serialises its
items under the ``autosList`` key.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class Auto(BaseModel):
    """A single vehicle identified by its VIN."""

    color: str = Field(..., examples=["red"])
    make: str = Field(..., examples=["Honda"])
    model: str = Field(..., examples=["Civic"])
    year: int = Field(..., examples=[2000])
    vin: str = Field(..., examples=["XX89DM"])
    owner: Optional[str] = Field(None, examples=["David"])

    model_config = {
        "from_attributes": True,
    }


class UpdateAuto(BaseModel):
    """Schema for updating an auto.

    Only ``color`` and ``owner`` may change; omitted fields keep their
    current values.
    """

    color: Optional[str] = Field(None, examples=["blue"])
    owner: Optional[str] = Field(None, examples=["David"])


class AutosList(BaseModel):
    """Ordered collection of autos used as the list response body."""

    autos_list: List[Auto] = Field(default_factory=list, alias="autosList")

    model_config = {
        "populate_by_name": True,
    }

    def __len__(self) -> int:
        return len(self.autos_list)

    def is_empty(self) -> bool:
        return not self.autos_list
