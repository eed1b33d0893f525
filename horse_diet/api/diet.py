"""Diet evaluation API endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from horse_diet.api.feeds import get_feed_catalog
from horse_diet.core.calculations import FeedEntry, InvalidWeightError, evaluate_diet
from horse_diet.core.catalog import FeedCatalog
from horse_diet.core.units import WeightUnit, to_lbs
from horse_diet.schemas.schemas import (
    DietEvaluateRequest,
    DietEvaluateResponse,
    NutrientStatusResponse,
    NutrientValuesResponse,
)

router = APIRouter(prefix="/diet", tags=["diet"])

NO_VALID_FEED_MESSAGE = "Please enter at least one valid feed and amount."


def _rounded_values(values) -> NutrientValuesResponse:
    return NutrientValuesResponse(**{k: round(v, 2) for k, v in asdict(values).items()})


@router.post("/evaluate", response_model=DietEvaluateResponse)
def evaluate(
    request: DietEvaluateRequest,
    catalog: FeedCatalog = Depends(get_feed_catalog),
):
    """
    Evaluate a horse's daily diet.

    Returns:
    - Daily requirements for the horse's weight
    - Nutrient totals from all valid feed entries
    - Percent of requirement met and a status per nutrient
    - A message instead of a table when no entry is valid
    """
    weight_lbs = to_lbs(request.weight, WeightUnit(request.weight_unit.value))
    entries = [FeedEntry(feed_id=e.feed_id, amount=e.amount) for e in request.entries]

    try:
        result = evaluate_diet(weight_lbs, entries, catalog)
    except InvalidWeightError as e:
        raise HTTPException(status_code=422, detail=str(e))

    response = DietEvaluateResponse(
        weight_lbs=result.weight_lbs,
        has_valid_feed=result.has_valid_feed,
        valid_entries=result.valid_entries,
        skipped_entries=result.skipped_entries,
        requirements=_rounded_values(result.requirements),
    )

    if not result.has_valid_feed:
        response.message = NO_VALID_FEED_MESSAGE
        return response

    response.totals = _rounded_values(result.totals)
    response.nutrients = [
        NutrientStatusResponse(
            nutrient=n.nutrient,
            label=n.label,
            required=round(n.required, 2),
            intake=round(n.intake, 2),
            percent_met=n.percent_met,
            status=n.status,
        )
        for n in result.nutrients
    ]
    return response
