import datetime

from pydantic import BaseModel


class FuelLogPayload(BaseModel):
    date: datetime.date | None = None
    company: str | None = None
    fuel_type: str | None = None
    price_per_liter: float | None = None
    liters: float | None = None
    total_value: float | None = None


class FuelLogResponse(BaseModel):
    id: int
    date: datetime.date
    company: str | None = None
    fuel_type: str | None = None
    price_per_liter: float | None = None
    liters: float | None = None
    total_value: float | None = None

    model_config = {"from_attributes": True}
