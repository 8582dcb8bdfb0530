from fastapi import APIRouter
from typing import List
from .. import schemas
from ..rooms import new_room
from ..tile_catalog import list_presets

router = APIRouter(tags=["catalog"])


@router.get("/tile-presets", response_model=List[schemas.TilePreset])
def tile_presets():
    return list_presets()


@router.get("/defaults", response_model=schemas.DefaultsResponse)
def defaults():
    """Default rate sheet, grout spec and a blank room for a new job."""
    return schemas.DefaultsResponse(
        rates=schemas.RateSheet(),
        grout=schemas.GroutSpec(),
        room=new_room([]),
    )
