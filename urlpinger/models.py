from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Mode(str, Enum):
    SYNC = "sync"
    ASYNC = "async"
    MULTI = "multi"


class PingConfig(BaseModel):
    mode: Mode = Mode.ASYNC
    timeout_s: float = Field(default=10.0, gt=0)
    max_concurrency: int = Field(default=64, ge=1)


class TargetsFile(BaseModel):
    urls: List[str] = Field(default_factory=list)
