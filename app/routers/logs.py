from fastapi import APIRouter, Depends, Response
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.fuel_log import FuelLog
from app.schemas.fuel_log import FuelLogPayload, FuelLogResponse

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("")
async def list_logs(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(FuelLog).order_by(FuelLog.date.desc()))
    return [FuelLogResponse.model_validate(log).model_dump() for log in result.scalars().all()]


@router.post("", status_code=201)
async def create_log(
    payload: FuelLogPayload = FuelLogPayload(), db: AsyncSession = Depends(get_db)
):
    log = FuelLog(**payload.model_dump())
    db.add(log)
    await db.commit()
    await db.refresh(log)
    return FuelLogResponse.model_validate(log).model_dump()


@router.put("/{log_id}")
async def update_log(
    log_id: int, payload: FuelLogPayload = FuelLogPayload(), db: AsyncSession = Depends(get_db)
):
    log = await db.get(FuelLog, log_id)
    if log is None:
        return None

    for field, value in payload.model_dump().items():
        setattr(log, field, value)
    await db.commit()
    await db.refresh(log)
    return FuelLogResponse.model_validate(log).model_dump()


@router.delete("/{log_id}", status_code=204)
async def delete_log(log_id: int, db: AsyncSession = Depends(get_db)):
    await db.execute(delete(FuelLog).where(FuelLog.id == log_id))
    await db.commit()
    return Response(status_code=204)
