"""
Benchmarks API

Endpoints:
- Calculate benchmarks, exact targets and the averaging report from the
  five scraped competitor pages
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from src.benchmarks import BenchmarkAggregator, ValidationError
from src.utils.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/benchmarks", tags=["Benchmarks"])


# =============================================================================
# REQUEST/RESPONSE MODELS
# =============================================================================

class BenchmarkRequest(BaseModel):
    """Five competitor records, camelCase or snake_case keys."""
    keyword: Optional[str] = Field(default=None, description="Primary keyword, for logging")
    competitors: List[Dict[str, Any]] = Field(
        ...,
        description="Exactly 5 competitor records (url, wordCount, keywordDensity, ...)",
    )


class BenchmarkResponse(BaseModel):
    """Benchmarks, targets and precision report."""
    keyword: Optional[str] = None
    benchmarks: Dict[str, Any]
    targets: Dict[str, Any]
    report: Dict[str, Any]


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/calculate", response_model=BenchmarkResponse)
def calculate_benchmarks(
    payload: BenchmarkRequest,
    lsi_zero_fill: Optional[bool] = Query(
        default=None,
        description="Average LSI keywords over all 5 competitors (defaults to BENCHMARK_LSI_ZERO_FILL)",
    ),
):
    """
    Average five competitors into precise benchmarks and exact targets.

    Returns 422 with an actionable message when the sample is not exactly
    five valid records.
    """
    if lsi_zero_fill is None:
        lsi_zero_fill = get_settings().BENCHMARK_LSI_ZERO_FILL

    logger.info(
        f"[api.benchmarks] keyword={payload.keyword} competitors={len(payload.competitors)} "
        f"lsi_zero_fill={lsi_zero_fill}"
    )

    aggregator = BenchmarkAggregator(lsi_zero_fill=lsi_zero_fill)
    try:
        benchmarks, targets = aggregator.calculate_all(payload.competitors)
    except ValidationError as e:
        logger.warning(f"[api.benchmarks] Validation failed: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    report = aggregator.build_report(payload.competitors, targets)

    return BenchmarkResponse(
        keyword=payload.keyword,
        benchmarks=benchmarks.to_dict(),
        targets=targets.to_dict(),
        report=report.to_dict(),
    )
