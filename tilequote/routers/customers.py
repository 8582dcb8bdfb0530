"""
Customer records — name, address and contact details reused across quotes.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])


def _get_or_404(customer_id: int, db: Session) -> models.Customer:
    customer = db.query(models.Customer).filter(models.Customer.id == customer_id).first()
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.post("/", response_model=schemas.Customer)
def create_customer(customer: schemas.CustomerCreate, db: Session = Depends(get_db)):
    record = models.Customer(**customer.model_dump())
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Created customer %d (%s)", record.id, record.name)
    return record


@router.get("/", response_model=List[schemas.Customer])
def list_customers(q: Optional[str] = None, skip: int = 0, limit: int = 100,
                   db: Session = Depends(get_db)):
    """Alphabetical. `q` filters by a case-insensitive name match."""
    query = db.query(models.Customer)
    if q:
        query = query.filter(models.Customer.name.ilike(f"%{q}%"))
    return query.order_by(models.Customer.name).offset(skip).limit(limit).all()


@router.get("/{customer_id}", response_model=schemas.Customer)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    return _get_or_404(customer_id, db)


@router.patch("/{customer_id}", response_model=schemas.Customer)
def update_customer(customer_id: int, update: schemas.CustomerUpdate, db: Session = Depends(get_db)):
    customer = _get_or_404(customer_id, db)
    for field, value in update.model_dump(exclude_unset=True).items():
        setattr(customer, field, value)
    db.commit()
    db.refresh(customer)
    return customer


@router.delete("/{customer_id}")
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    customer = _get_or_404(customer_id, db)
    db.delete(customer)
    db.commit()
    logger.info("Deleted customer %d", customer_id)
    return {"ok": True}
