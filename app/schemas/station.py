from pydantic import BaseModel


class StationPayload(BaseModel):
    name: str | None = None
    logo_url: str | None = None


class StationResponse(BaseModel):
    id: int
    name: str
    logo_url: str | None = None

    model_config = {"from_attributes": True}
