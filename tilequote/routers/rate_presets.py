"""
Named rate presets — save the current rate sheet under a name, load it later.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rate-presets", tags=["rate-presets"])


def _preset_to_schema(preset: models.RatePreset) -> schemas.RatePreset:
    return schemas.RatePreset(
        name=preset.name,
        rates=preset.rates_json or {},
        updated_at=preset.updated_at,
    )


def _get_or_404(name: str, db: Session) -> models.RatePreset:
    preset = db.query(models.RatePreset).filter(models.RatePreset.name == name).first()
    if not preset:
        raise HTTPException(status_code=404, detail="Rate preset not found")
    return preset


@router.get("/", response_model=List[schemas.RatePreset])
def list_rate_presets(db: Session = Depends(get_db)):
    presets = db.query(models.RatePreset).order_by(models.RatePreset.name).all()
    return [_preset_to_schema(p) for p in presets]


@router.get("/{name}", response_model=schemas.RatePreset)
def get_rate_preset(name: str, db: Session = Depends(get_db)):
    return _preset_to_schema(_get_or_404(name, db))


@router.put("/{name}", response_model=schemas.RatePreset)
def save_rate_preset(name: str, rates: schemas.RateSheet, db: Session = Depends(get_db)):
    """Create or overwrite a preset. Blank names are rejected."""
    name = name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Preset name is required")
    preset = db.query(models.RatePreset).filter(models.RatePreset.name == name).first()
    if preset:
        preset.rates_json = rates.model_dump(mode="json")
    else:
        preset = models.RatePreset(name=name, rates_json=rates.model_dump(mode="json"))
        db.add(preset)
    db.commit()
    db.refresh(preset)
    logger.info("Saved rate preset %r", name)
    return _preset_to_schema(preset)


@router.delete("/{name}")
def delete_rate_preset(name: str, db: Session = Depends(get_db)):
    preset = _get_or_404(name, db)
    db.delete(preset)
    db.commit()
    return {"ok": True}
