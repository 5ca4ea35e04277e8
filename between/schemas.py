from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None


class Health(BaseModel):
    status: str = "ok"


class Version(BaseModel):
    version: str = "1.0.0"


class AlphabetOut(BaseModel):
    symbols: List[str]
    low: str
    high: str


class BetweenIn(BaseModel):
    this: str = Field(default="", max_length=1024)
    that: str = Field(min_length=1, max_length=1024)


class KeyIn(BaseModel):
    key: str = Field(default="", max_length=1024)


class KeyOut(BaseModel):
    key: Optional[str] = None


class ValidOut(BaseModel):
    valid: bool
