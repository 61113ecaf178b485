"""
Catalog query endpoints
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends

from app.catalog import aggregate_scores, sample_entries
from app.dependencies import get_catalog, get_settings
from app.models import Catalog, ScoreRecord, Settings


logger = logging.getLogger(__name__)

router = APIRouter(tags=["entries"])


@router.get("/random-entries")
async def random_entries(
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings)
) -> List[Any]:
    """Random sample of distinct catalog entries"""
    sample = sample_entries(catalog.entries, settings.sample_size)
    logger.debug(f"Sampled {len(sample)} of {len(catalog.entries)} entries")
    return sample


@router.get("/scores")
async def scores(catalog: Catalog = Depends(get_catalog)) -> List[ScoreRecord]:
    """Score aggregate (empty, see app.catalog.aggregate_scores)"""
    return aggregate_scores(catalog.scores)
