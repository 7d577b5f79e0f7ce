from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..xLogService import get_memory_handler

router = APIRouter(prefix="/logs", tags=["logs"])


class LevelChange(BaseModel):
    logger: str
    level: str


def _level(name: str) -> int:
    value = logging.getLevelName(name.upper())
    if not isinstance(value, int):
        raise HTTPException(status_code=400, detail=f"unknown level {name}")
    return value


@router.get("/")
def list_logs(n: int = 200, level: str = "DEBUG") -> Dict[str, Any]:
    handler = get_memory_handler()
    items = handler.tail(n, _level(level)) if handler else []
    return {"count": len(items), "items": items}


@router.post("/level")
def set_level(payload: LevelChange) -> Dict[str, str]:
    logging.getLogger(payload.logger).setLevel(_level(payload.level))
    return {"status": "ok"}
