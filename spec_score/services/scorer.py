"""
Scoring orchestration.
Runs each rubric evaluator over a document and hands the collected results to the aggregator.

Sample input: source="tests/fixtures/good-openapi.yaml"
Expected output: ScoringResult(total_score=..., grade=Grade.A, criteria=[...7 results])
"""

import logging
from typing import Optional

import httpx

from ..models.document import OpenAPIDocument
from ..models.scoring import ScoringResult
from .aggregator import aggregate
from .config_manager import _progress_pause
from .evaluators import CRITERIA_EVALUATORS
from .spec_loader import load_document

logger = logging.getLogger(__name__)


def score_document(document: OpenAPIDocument) -> ScoringResult:
    """Score an in-memory document against every rubric criterion."""
    criteria = []
    for evaluator in CRITERIA_EVALUATORS:
        criterion = evaluator(document)
        logger.info(
            f"{criterion.name} analysis completed: "
            f"{criterion.score}/{criterion.max_score} ({criterion.percentage}%)"
        )
        criteria.append(criterion)

    result = aggregate(criteria, document)
    logger.debug(f"Scoring summary: {result.get_summary()}")
    return result


async def score_source(
    source: str, transport: Optional[httpx.AsyncBaseTransport] = None
) -> ScoringResult:
    """Load a specification from a file path or URL and score it.

    Args:
        source: File path or http(s) URL
        transport: Optional httpx transport, used to stub the network in tests

    Returns:
        ScoringResult for the loaded document

    Raises:
        SpecScoreError: If the specification cannot be loaded or decoded
    """
    logger.info("Parsing OpenAPI document...")
    await _progress_pause()
    document = await load_document(source, transport=transport)
    logger.info("Document parsed successfully")

    logger.info("Evaluating rubric criteria...")
    await _progress_pause()
    return score_document(document)
