from __future__ import annotations

import logging
import os

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .models import (
    HomeworkParseRequest,
    HomeworkParseResponse,
    ScheduleParseRequest,
    ScheduleParseResponse,
)
from . import __version__
from .parsers import parse_homework_text, parse_schedule_text

logger = logging.getLogger(__name__)

NO_HOMEWORK_MESSAGE = "Geen huiswerk herkend. Controleer het formaat."
NO_LESSONS_MESSAGE = "Geen lessen gevonden. Controleer het formaat."

CORS_ORIGINS_ENV_VAR = "HUISWERK_CORS_ORIGINS"


def cors_origins() -> list[str]:
    """Komma-gescheiden origins; standaard alles, een lege waarde zet CORS uit."""

    raw = os.getenv(CORS_ORIGINS_ENV_VAR, "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app = FastAPI(title="Huiswerkplanner API", version=__version__)

# CORS voor local dev (pas aan via HUISWERK_CORS_ORIGINS)
allowed_origins = cors_origins()
if allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.post("/api/homework/parse", response_model=HomeworkParseResponse)
def parse_homework(payload: HomeworkParseRequest = Body(...)) -> HomeworkParseResponse:
    if not payload.text.strip():
        raise HTTPException(400, "Tekst is verplicht")

    items = parse_homework_text(payload.text, payload.reference_date)
    if not items:
        logger.info("Geen huiswerk herkend in tekst van %d tekens", len(payload.text))
        return HomeworkParseResponse(success=False, count=0, items=[], message=NO_HOMEWORK_MESSAGE)
    return HomeworkParseResponse(success=True, count=len(items), items=items)


@app.post("/api/schedule/parse", response_model=ScheduleParseResponse)
def parse_schedule(payload: ScheduleParseRequest = Body(...)) -> ScheduleParseResponse:
    if not payload.text.strip():
        raise HTTPException(400, "Voer rooster tekst in")

    items = parse_schedule_text(payload.text)
    if not items:
        logger.info("Geen lessen herkend in roostertekst van %d tekens", len(payload.text))
        return ScheduleParseResponse(success=False, count=0, items=[], message=NO_LESSONS_MESSAGE)
    return ScheduleParseResponse(success=True, count=len(items), items=items)


@app.get("/api/system/version")
def api_get_version() -> dict[str, str]:
    return {"version": __version__}
