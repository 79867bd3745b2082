from sqlalchemy import Column, Integer, String, Text

from app.database import Base


class Station(Base):
    __tablename__ = "stations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    logo_url = Column(Text, nullable=True)
