from sqlalchemy import Column, Integer, String, Float, DateTime, Text, JSON
from datetime import datetime
from .database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    address = Column(Text)
    email = Column(String)
    phone = Column(String)
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)


class RatePreset(Base):
    """Named rate sheets — e.g. 'Domestic', 'Commercial'."""
    __tablename__ = "rate_presets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    rates_json = Column(JSON, nullable=False)  # RateSheet snapshot
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class SavedQuote(Base):
    """
    Frozen copy of a job at save time. The result is never stored as the
    source of truth; it is recomputed from the snapshot on load.
    """
    __tablename__ = "saved_quotes"

    id = Column(Integer, primary_key=True, index=True)
    saved_at = Column(String, nullable=False)  # display label, dd/mm/YYYY HH:MM
    customer_name = Column(String, nullable=True)
    customer_json = Column(JSON, default=dict)
    rooms_json = Column(JSON, default=list)
    rates_json = Column(JSON, default=dict)
    grout_json = Column(JSON, default=dict)
    grand_total = Column(Float, default=0.0)  # at save time, for the list view
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
