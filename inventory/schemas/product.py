"""Product request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ProductBase(BaseModel):
    """Fields shared by every product payload."""

    name: str = Field(description="Product name")
    type: str = Field(description="Manufacturing type, e.g. Handmade or Machine-made")
    status: str = Field(description="Stock status, e.g. Available or Defective")


class ProductCreate(ProductBase):
    """Body of POST /products.

    An ``id`` sent by the client is ignored; the database assigns it.
    """

    model_config = ConfigDict(extra="ignore")


class ProductUpdate(ProductBase):
    """Body of PUT /products/{id}. ``id`` must match the path.

    A body without ``id`` reads as id 0, which no stored product has.
    """

    id: int = Field(default=0, description="Product identifier")

    model_config = ConfigDict(extra="ignore")


class ProductRead(ProductBase):
    """Product as returned by the API."""

    id: int = Field(description="Product identifier")

    model_config = ConfigDict(from_attributes=True)


class ProductStats(BaseModel):
    """Aggregate counts by stock status.

    Field names are capitalized to match what the dashboard reads. Unknown
    keys are dropped so clients keep working if the server adds counts.
    """

    Total: int = Field(default=0, ge=0, description="Number of products")
    Defective: int = Field(default=0, ge=0, description="Products with status Defective")
    Available: int = Field(default=0, ge=0, description="Products with status Available")

    model_config = ConfigDict(extra="ignore")
