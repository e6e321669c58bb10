"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class ProductCreate(BaseModel):
    """Schema for creating a new product."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Widget"])
    description: str = Field("", examples=["A small mechanical part."])
    barcode: str = Field(..., min_length=1, max_length=64, examples=["4006381333931"])
    rate: float = Field(..., ge=0, examples=[9.99])


class ProductUpdate(BaseModel):
    """Schema for updating an existing product — all fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    barcode: str | None = Field(None, min_length=1, max_length=64)
    rate: float | None = Field(None, ge=0)

    @field_validator("name", "description", "barcode", "rate", mode="before")
    @classmethod
    def reject_null(cls, value):
        """Omit a field to leave it unchanged; an explicit null is an error."""
        if value is None:
            raise ValueError("must not be null")
        return value


class ProductResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    description: str
    barcode: str
    rate: float
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
