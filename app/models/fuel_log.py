from sqlalchemy import Column, Date, Integer, Numeric, String

from app.database import Base


class FuelLog(Base):
    __tablename__ = "fuel_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False)
    company = Column(String, nullable=True)
    fuel_type = Column(String, nullable=True)
    price_per_liter = Column(Numeric(10, 3, asdecimal=False), nullable=True)
    liters = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    total_value = Column(Numeric(10, 2, asdecimal=False), nullable=True)
