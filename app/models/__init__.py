from app.models.vehicle import Vehicle
from app.models.station import Station
from app.models.fuel_log import FuelLog

__all__ = ["Vehicle", "Station", "FuelLog"]
