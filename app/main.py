from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import create_tables
from app.routers.vehicle import router as vehicle_router
from app.routers.stations import router as stations_router
from app.routers.logs import router as logs_router
from app.utils.exceptions import register_exception_handlers

GREETING = "Bem-vindo à API do FuelControl!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    yield


app = FastAPI(
    title="FuelControl API",
    description="Backend API para controlo de abastecimentos",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

api_router = APIRouter(prefix="/api")


@api_router.get("")
async def welcome():
    return {"message": GREETING}


api_router.include_router(vehicle_router)
api_router.include_router(stations_router)
api_router.include_router(logs_router)

app.include_router(api_router)
