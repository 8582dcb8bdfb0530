"""
Saved quote snapshots.

A saved quote is a frozen copy of customer + rooms + rates + grout spec.
Results are always recomputed from the snapshot, never read back from storage.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..database import get_db
from ..pricing_engine import compute_quote

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/saved-quotes", tags=["saved-quotes"])


def _snapshot(saved: models.SavedQuote) -> schemas.SavedQuoteCreate:
    return schemas.SavedQuoteCreate(
        customer=saved.customer_json or {},
        rooms=saved.rooms_json or [],
        rates=saved.rates_json or {},
        grout=saved.grout_json or {},
    )


def _saved_to_schema(saved: models.SavedQuote) -> schemas.SavedQuote:
    snapshot = _snapshot(saved)
    return schemas.SavedQuote(
        id=saved.id,
        saved_at=saved.saved_at,
        created_at=saved.created_at,
        grand_total=saved.grand_total or 0.0,
        **snapshot.model_dump(),
    )


def _get_or_404(quote_id: int, db: Session) -> models.SavedQuote:
    saved = db.query(models.SavedQuote).filter(models.SavedQuote.id == quote_id).first()
    if not saved:
        raise HTTPException(status_code=404, detail="Saved quote not found")
    return saved


@router.post("/", response_model=schemas.SavedQuote)
def save_quote(snapshot: schemas.SavedQuoteCreate, db: Session = Depends(get_db)):
    now = datetime.now()
    result = compute_quote(snapshot.rooms, snapshot.rates, snapshot.grout)
    saved = models.SavedQuote(
        saved_at=now.strftime("%d/%m/%Y %H:%M"),
        customer_name=snapshot.customer.name or None,
        customer_json=snapshot.customer.model_dump(mode="json"),
        rooms_json=[room.model_dump(mode="json") for room in snapshot.rooms],
        rates_json=snapshot.rates.model_dump(mode="json"),
        grout_json=snapshot.grout.model_dump(mode="json"),
        grand_total=round(result.grand_total, 2),
        created_at=now,
    )
    db.add(saved)
    db.commit()
    db.refresh(saved)
    logger.info("Saved quote %d for %s", saved.id, snapshot.customer.name or "this job")
    return _saved_to_schema(saved)


@router.get("/", response_model=List[schemas.SavedQuote])
def list_saved_quotes(skip: int = 0, limit: int = 50, db: Session = Depends(get_db)):
    """Newest first."""
    saved = db.query(models.SavedQuote).order_by(
        models.SavedQuote.created_at.desc(), models.SavedQuote.id.desc(),
    ).offset(skip).limit(limit).all()
    return [_saved_to_schema(s) for s in saved]


@router.get("/{quote_id}", response_model=schemas.SavedQuote)
def get_saved_quote(quote_id: int, db: Session = Depends(get_db)):
    return _saved_to_schema(_get_or_404(quote_id, db))


@router.get("/{quote_id}/result", response_model=schemas.QuoteResult)
def recompute_saved_quote(quote_id: int, db: Session = Depends(get_db)):
    snapshot = _snapshot(_get_or_404(quote_id, db))
    return compute_quote(snapshot.rooms, snapshot.rates, snapshot.grout)


@router.delete("/{quote_id}")
def delete_saved_quote(quote_id: int, db: Session = Depends(get_db)):
    saved = _get_or_404(quote_id, db)
    db.delete(saved)
    db.commit()
    logger.info("Deleted saved quote %d", quote_id)
    return {"ok": True}
