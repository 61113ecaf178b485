"""
Data models for the entry catalog server
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional, Union


class ScoreRecord(BaseModel):
    """One record of the catalog's scores collection"""
    model_config = ConfigDict(extra="allow")

    points: Optional[Union[int, float]] = None  # extra keys are kept and serialized back out


class Catalog(BaseModel):
    """
    In-memory dataset loaded once at startup

    Read-only for the lifetime of the process: handlers receive it through
    a dependency and never mutate it.
    """
    model_config = ConfigDict(frozen=True)

    entries: List[Any] = []  # opaque JSON values
    scores: List[ScoreRecord] = []


class Settings(BaseModel):
    """Server configuration, see config/server.yaml"""
    title: str = "Entry Catalog Server"
    version: str = "1.0.0"
    data_path: str = "data/db.json"
    views_dir: str = "views"
    static_dir: str = "public"
    sample_size: int = Field(5, ge=0)  # max entries returned by /random-entries
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = ["*"]
