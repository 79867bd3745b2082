from fastapi import APIRouter, Depends, Response
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.station import Station
from app.schemas.station import StationPayload, StationResponse

router = APIRouter(prefix="/stations", tags=["stations"])


@router.get("")
async def list_stations(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Station).order_by(Station.name))
    return [StationResponse.model_validate(s).model_dump() for s in result.scalars().all()]


@router.post("", status_code=201)
async def create_station(
    payload: StationPayload = StationPayload(), db: AsyncSession = Depends(get_db)
):
    station = Station(**payload.model_dump())
    db.add(station)
    await db.commit()
    await db.refresh(station)
    return StationResponse.model_validate(station).model_dump()


@router.put("/{station_id}")
async def update_station(
    station_id: int, payload: StationPayload = StationPayload(), db: AsyncSession = Depends(get_db)
):
    station = await db.get(Station, station_id)
    if station is None:
        return None

    for field, value in payload.model_dump().items():
        setattr(station, field, value)
    await db.commit()
    await db.refresh(station)
    return StationResponse.model_validate(station).model_dump()


@router.delete("/{station_id}", status_code=204)
async def delete_station(station_id: int, db: AsyncSession = Depends(get_db)):
    await db.execute(delete(Station).where(Station.id == station_id))
    await db.commit()
    return Response(status_code=204)
