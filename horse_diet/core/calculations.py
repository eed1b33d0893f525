"""
Core math engine for horse diet evaluation.

Intake per feed: amount_lbs × nutrient_per_lb (protein: amount × CP% / 100 × 1000 g)
Requirement: weight_lbs × daily coefficient per pound of body weight
Status: lacking below 95% of requirement, overfed above 105%, sufficient between
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


NUTRIENTS = ("energy", "protein", "calcium", "phosphorus", "vitamin_e")

NUTRIENT_LABELS = {
    "energy": "Digestible Energy (Mcal)",
    "protein": "Crude Protein (g)",
    "calcium": "Calcium (g)",
    "phosphorus": "Phosphorus (g)",
    "vitamin_e": "Vitamin E (IU)",
}

# Daily requirement per lb of body weight
REQUIREMENT_COEFFICIENTS = {
    "energy": 0.03,            # Mcal digestible energy
    "protein": 0.036 * 1000,   # g crude protein
    "calcium": 0.04,           # g
    "phosphorus": 0.028,       # g
    "vitamin_e": 1.0,          # IU
}

LACKING_RATIO = 0.95
OVERFED_RATIO = 1.05

# crude protein fraction × lbs fed, reported in grams
PROTEIN_GRAMS_FACTOR = 1000


class InvalidWeightError(ValueError):
    """Body weight is not a positive, finite number."""


class Status(str, Enum):
    LACKING = "lacking"
    SUFFICIENT = "sufficient"
    OVERFED = "overfed"


@dataclass(frozen=True)
class FeedRecord:
    """Nutrient profile of one feed, per lb as fed."""
    feed_id: str
    digestible_energy: float  # Mcal/lb
    crude_protein: float      # % of feed
    calcium: float            # g/lb
    phosphorus: float         # g/lb
    vitamin_e: float          # IU/lb
    name: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.feed_id


@dataclass(frozen=True)
class FeedEntry:
    """One diet row as entered: a feed identifier and a raw daily amount in lbs."""
    feed_id: Any
    amount: Any


@dataclass
class NutrientTotals:
    """Accumulated daily intake for a diet."""
    energy: float = 0
    protein: float = 0
    calcium: float = 0
    phosphorus: float = 0
    vitamin_e: float = 0


@dataclass(frozen=True)
class NutrientRequirements:
    """Daily nutrient targets for a horse of a given weight."""
    energy: float
    protein: float
    calcium: float
    phosphorus: float
    vitamin_e: float


@dataclass
class DietTotals:
    totals: NutrientTotals
    valid_entries: int = 0
    skipped_entries: int = 0

    @property
    def has_valid_feed(self) -> bool:
        return self.valid_entries > 0


@dataclass(frozen=True)
class NutrientEvaluation:
    nutrient: str
    label: str
    required: float
    intake: float
    percent_met: Optional[float]
    status: Status


@dataclass
class DietEvaluation:
    weight_lbs: float
    requirements: NutrientRequirements
    valid_entries: int
    skipped_entries: int
    totals: Optional[NutrientTotals] = None
    nutrients: list[NutrientEvaluation] = field(default_factory=list)

    @property
    def has_valid_feed(self) -> bool:
        return self.totals is not None


def validate_weight(weight: float) -> float:
    """
    Check a body weight before any calculation.

    Args:
        weight: Horse's weight in lbs

    Returns:
        The weight as a float

    Raises:
        InvalidWeightError: weight is not a positive finite number
    """
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidWeightError(f"Weight must be a number, got {weight!r}")
    if not math.isfinite(weight) or weight <= 0:
        raise InvalidWeightError("Weight must be positive")
    return float(weight)


def parse_amount(value: Any) -> Optional[float]:
    """
    Interpret a user-entered feed amount.

    Args:
        value: Raw amount (number, numeric string, or anything else)

    Returns:
        The amount as a float, or None when it is not a finite number
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


def calculate_requirements(weight_lbs: float) -> NutrientRequirements:
    """
    Calculate daily nutrient requirements from body weight.

    Formula: requirement = weight_lbs × coefficient

    Args:
        weight_lbs: Horse's weight in pounds

    Returns:
        NutrientRequirements for energy, protein, calcium, phosphorus, vitamin E
    """
    weight_lbs = validate_weight(weight_lbs)
    return NutrientRequirements(
        **{name: weight_lbs * REQUIREMENT_COEFFICIENTS[name] for name in NUTRIENTS}
    )


def add_feed(totals: NutrientTotals, feed: FeedRecord, amount_lbs: float) -> None:
    """Add the contribution of amount_lbs of a feed to running totals."""
    totals.energy += amount_lbs * feed.digestible_energy
    totals.protein += amount_lbs * (feed.crude_protein / 100) * PROTEIN_GRAMS_FACTOR
    totals.calcium += amount_lbs * feed.calcium
    totals.phosphorus += amount_lbs * feed.phosphorus
    totals.vitamin_e += amount_lbs * feed.vitamin_e


def aggregate_diet(
    entries: Iterable[FeedEntry],
    catalog: Mapping[str, FeedRecord],
) -> DietTotals:
    """
    Sum nutrient intake across diet entries.

    Entries with a blank or unknown feed, or with an amount that is not a
    positive number, are skipped and counted rather than rejected.

    Args:
        entries: Diet rows in entry order
        catalog: Feed identifier to FeedRecord lookup

    Returns:
        DietTotals with summed nutrients and valid/skipped counts
    """
    result = DietTotals(totals=NutrientTotals())

    for index, entry in enumerate(entries):
        amount = parse_amount(entry.amount)
        feed_id = entry.feed_id if isinstance(entry.feed_id, str) else None
        if not feed_id or amount is None or amount <= 0:
            logger.debug("Skipping entry %d: feed=%r amount=%r", index, entry.feed_id, entry.amount)
            result.skipped_entries += 1
            continue

        feed = catalog.get(feed_id)
        if feed is None:
            logger.debug("Skipping entry %d: unknown feed %r", index, entry.feed_id)
            result.skipped_entries += 1
            continue

        add_feed(result.totals, feed, amount)
        result.valid_entries += 1

    return result


def classify_adequacy(actual: float, required: float) -> Status:
    """
    Classify intake against a requirement.

    Both boundary ratios (95% and 105%) count as sufficient. A requirement of
    zero or less is only met by zero intake; anything more is overfed.

    Args:
        actual: Daily intake
        required: Daily requirement

    Returns:
        Status for the nutrient
    """
    if required <= 0:
        return Status.SUFFICIENT if actual == 0 else Status.OVERFED
    if actual < required * LACKING_RATIO:
        return Status.LACKING
    if actual > required * OVERFED_RATIO:
        return Status.OVERFED
    return Status.SUFFICIENT


def percent_met(actual: float, required: float) -> Optional[float]:
    """
    Percentage of the requirement covered by intake, to one decimal.

    Returns None when the requirement is zero or negative.
    """
    if required <= 0:
        return None
    return round((actual / required) * 100, 1)


def evaluate_diet(
    weight_lbs: float,
    entries: Iterable[FeedEntry],
    catalog: Mapping[str, FeedRecord],
) -> DietEvaluation:
    """
    Evaluate a full diet for a horse.

    Args:
        weight_lbs: Horse's weight in pounds
        entries: Diet rows in entry order
        catalog: Loaded feed catalog

    Returns:
        DietEvaluation; totals is None and nutrients is empty when no entry
        was valid

    Raises:
        InvalidWeightError: weight is not a positive finite number
    """
    requirements = calculate_requirements(weight_lbs)
    diet = aggregate_diet(entries, catalog)

    evaluation = DietEvaluation(
        weight_lbs=float(weight_lbs),
        requirements=requirements,
        valid_entries=diet.valid_entries,
        skipped_entries=diet.skipped_entries,
    )

    if not diet.has_valid_feed:
        logger.info("No valid feed entries (%d skipped)", diet.skipped_entries)
        return evaluation

    evaluation.totals = diet.totals
    for nutrient in NUTRIENTS:
        required = getattr(requirements, nutrient)
        intake = getattr(diet.totals, nutrient)
        evaluation.nutrients.append(NutrientEvaluation(
            nutrient=nutrient,
            label=NUTRIENT_LABELS[nutrient],
            required=required,
            intake=intake,
            percent_met=percent_met(intake, required),
            status=classify_adequacy(intake, required),
        ))

    logger.info(
        "Evaluated diet for %.1f lbs: %d valid, %d skipped entries",
        weight_lbs, diet.valid_entries, diet.skipped_entries,
    )
    return evaluation
