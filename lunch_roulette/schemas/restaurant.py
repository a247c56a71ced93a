from pydantic import BaseModel, field_validator


class RestaurantSearchQuery(BaseModel):
    """Inbound search parameters, forwarded to Azure Maps as given."""
    latitude: str
    longitude: str
    categories: list[str] | None = None
    price: str | None = None
    distance: str | None = None

    @field_validator("categories", mode="before")
    @classmethod
    def split_categories(cls, v):
        if isinstance(v, str):
            return v.split(",")
        return v


class Restaurant(BaseModel):
    name: str | None = None
    phone: str | None = None
    url: str | None = None
    address: str | None = None
