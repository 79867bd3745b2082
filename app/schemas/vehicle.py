from pydantic import BaseModel


class VehiclePayload(BaseModel):
    name: str | None = None
    brand: str | None = None
    model: str | None = None
    year: int | None = None
    color: str | None = None
    photo: str | None = None


class VehicleResponse(BaseModel):
    id: int
    name: str | None = None
    brand: str | None = None
    model: str | None = None
    year: int | None = None
    color: str | None = None
    photo: str | None = None

    model_config = {"from_attributes": True}
