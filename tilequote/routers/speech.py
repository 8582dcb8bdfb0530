from fastapi import APIRouter
from .. import schemas
from ..speech import parse_spoken_value

router = APIRouter(prefix="/speech", tags=["speech"])


@router.post("/parse", response_model=schemas.SpeechResponse)
def parse_transcript(request: schemas.SpeechRequest):
    """value is null when a numeric transcript doesn't parse — the caller ignores it."""
    return schemas.SpeechResponse(value=parse_spoken_value(request.transcript, request.numeric))
