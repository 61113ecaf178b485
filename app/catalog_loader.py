"""
Catalog loader from JSON
"""
import json
import logging
from numbers import Number
from pathlib import Path

from app.models import Catalog, ScoreRecord


logger = logging.getLogger(__name__)


def load_catalog(json_path: str) -> Catalog:
    """
    Load the catalog from a JSON file

    JSON format:
        {
            "entries": ["a", {"name": "b"}, ...],
            "scores": [{"points": 12, "name": "x"}, ...]
        }

    Missing "entries" or "scores" keys mean empty collections.

    Args:
        json_path: Path to JSON file

    Returns:
        Catalog loaded from the file

    Raises:
        FileNotFoundError: If JSON file not found
        ValueError: If the document is malformed
    """
    path = Path(json_path)

    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {json_path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Catalog file {json_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Catalog file {json_path} must contain a JSON object")

    entries = data.get('entries', [])
    raw_scores = data.get('scores', [])

    for field, value in (('entries', entries), ('scores', raw_scores)):
        if not isinstance(value, list):
            raise ValueError(f"Catalog file {json_path}: '{field}' must be an array")

    scores = []
    for idx, record in enumerate(raw_scores):
        if not isinstance(record, dict):
            raise ValueError(f"Catalog file {json_path}: score {idx} must be an object")

        points = record.get('points')
        # bool is a Number subclass but never a valid point value
        if points is not None and (isinstance(points, bool) or not isinstance(points, Number)):
            raise ValueError(
                f"Catalog file {json_path}: score {idx} has non-numeric points {points!r}"
            )

        scores.append(ScoreRecord.model_validate(record))

    catalog = Catalog(entries=entries, scores=scores)

    logger.info(
        f"Loaded {len(catalog.entries)} entries and {len(catalog.scores)} scores from {json_path}"
    )

    return catalog
