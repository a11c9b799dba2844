# tracker/models.py
from sqlalchemy import Column, Integer, String

from .db import Base


# one row per shipment; created_at is an RFC3339 string written once on insert
class Parcel(Base):
    __tablename__ = "parcel"
    number = Column(Integer, primary_key=True, autoincrement=True)
    client = Column(Integer, index=True, nullable=False)
    status = Column(String, nullable=False)
    address = Column(String, nullable=False)
    created_at = Column(String, nullable=False)
