import logging

from fastapi import APIRouter, Depends
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehiclePayload, VehicleResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vehicle", tags=["vehicle"])


@router.get("")
async def get_vehicle(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Vehicle).limit(1))
    vehicle = result.scalars().first()
    if vehicle is None:
        return None
    return VehicleResponse.model_validate(vehicle).model_dump()


@router.post("", status_code=201)
async def replace_vehicle(
    payload: VehiclePayload = VehiclePayload(), db: AsyncSession = Depends(get_db)
):
    """Store ``payload`` as the only vehicle, dropping any previous one.

    The delete and the insert share one transaction, so a failed insert
    leaves the previous vehicle in place.
    """
    removed = await db.execute(delete(Vehicle))
    vehicle = Vehicle(**payload.model_dump())
    db.add(vehicle)
    await db.commit()
    await db.refresh(vehicle)

    logger.info("Vehicle replaced (%d previous row(s) removed)", removed.rowcount)
    return VehicleResponse.model_validate(vehicle).model_dump()
