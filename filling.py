"""Filling chemistry: sweetness, water activity, stability and scaling.

Filling recipes map ingredient keys to either a mass in grams or a mapping
with an ``amount`` field (preset entries carry extra metadata). Every read
goes through `amount_of`. Unknown keys are accepted and contribute nothing
to any lookup.

Exports
-------
amount_of
get_sugar_type
get_sweetness_level
get_sweetness_color
calculate_sweetness_index
get_moisture_transfer_rate
get_maturation_time
get_stability_from_aw
get_microbial_safety
calculate_water_activity
calculate_stability
scale_with_sweetness_adjustment
"""

import logging
from collections.abc import (
    Mapping,
)

from constants import (
    DEFAULT_SUGAR_TYPE,
    DESTABILIZERS,
    HIGH_SUGAR_INGREDIENTS,
    INGREDIENT_VARIANTS,
    MAX_WATER_ACTIVITY,
    MIN_AUTO_SWEETNESS_FACTOR,
    SOLUTE_FRACTION,
    SOLUTE_WATER_FACTOR,
    STABILITY_BASE_SCORE,
    STABILIZERS,
    SUGAR_CONTENT,
    SUGAR_TYPE,
    SWEET_INGREDIENTS,
    SWEET_SUBSTITUTIONS,
    SWEETNESS_POWER,
    WATER_CONTENT,
)
from models.filling import (
    FillingScaleResult,
    StabilityContribution,
    StabilityReport,
    SweetnessIndex,
    WaterActivity,
)

logger = logging.getLogger(__name__)

NOT_COMPUTED = "غير محسوب"


def amount_of(
    entry,
) -> float:
    """Mass in grams of a filling entry (a number or ``{'amount': ...}``)."""
    if isinstance(entry, Mapping):
        return entry.get("amount") or 0
    return entry


def _amounts(recipe) -> dict[str, float]:
    return {ingredient: amount_of(entry) for ingredient, entry in recipe.items()}


# --- Sweetness ------------------------------------------------------------------


def get_sugar_type(
    ingredient: str,
) -> str:
    """Sugar family of an ingredient; unrecognised names count as sucrose."""
    return SUGAR_TYPE.get(ingredient, DEFAULT_SUGAR_TYPE)


def get_sweetness_level(index: float) -> str:
    if index < 10:
        return "غير محلى"
    if index < 20:
        return "قليل الحلاوة"
    if index < 35:
        return "متوازن"
    if index < 50:
        return "حلو"
    if index < 65:
        return "حلو جداً"
    return "مفرط الحلاوة"


def get_sweetness_color(index: float) -> str:
    if index < 20:
        return "#4CAF50"
    if index < 35:
        return "#8BC34A"
    if index < 50:
        return "#FFC107"
    if index < 65:
        return "#FF9800"
    return "#F44336"


def calculate_sweetness_index(
    recipe,
) -> SweetnessIndex:
    """Perceived sweetness relative to sucrose.

    ``index = Σ(mass · sugar_fraction · power) / Σ(mass)``, where the sugar
    fraction comes from the ingredient and the power from its sugar family.

    Parameters
    ----------
    recipe : Mapping[str, float | Mapping]
        Filling (or dough) ingredients.

    Returns
    -------
    SweetnessIndex
        Index 0 with level ``'غير محلى'`` and percentage ``'0'`` for an
        empty or zero-mass recipe.
    """
    total_sweetness = 0.0
    total_sugar = 0.0
    total_weight = 0.0
    breakdown: dict[str, float] = {}

    for ingredient, weight in _amounts(recipe).items():
        sugar = weight * SUGAR_CONTENT.get(ingredient, 0)
        sugar_type = get_sugar_type(ingredient)
        points = sugar * SWEETNESS_POWER.get(sugar_type, 0)
        total_sweetness += points
        total_sugar += sugar
        total_weight += weight
        if points:
            breakdown[sugar_type] = breakdown.get(sugar_type, 0) + points

    if total_weight == 0:
        return SweetnessIndex(
            index=0,
            level="غير محلى",
            percentage="0",
            color="#4CAF50",
        )

    index = total_sweetness / total_weight
    return SweetnessIndex(
        index=index,
        level=get_sweetness_level(index),
        percentage=f"{index:.1f}",
        color=get_sweetness_color(index),
        total_sugar=total_sugar,
        total_weight=total_weight,
        breakdown=breakdown,
    )


# --- Water activity -------------------------------------------------------------


def get_moisture_transfer_rate(aw: float) -> str:
    if aw > 0.95:
        return "سريع جداً (2-3 مم/ساعة) - ترطيب سريع"
    if aw > 0.90:
        return "سريع (1-2 مم/ساعة) - ترطيب جيد"
    if aw > 0.85:
        return "متوسط (0.5-1 مم/ساعة) - ترطيب تدريجي"
    return "بطيء (<0.5 مم/ساعة) - ترطيب بطيء جداً"


def get_maturation_time(aw: float) -> str:
    """Resting time before the assembled cake is ready."""
    if aw > 0.95:
        return "12-24 ساعة"
    if aw > 0.90:
        return "18-30 ساعة"
    if aw > 0.85:
        return "24-36 ساعة"
    return "36-48 ساعة"


def get_stability_from_aw(aw: float) -> str:
    if aw > 0.95:
        return "منخفض - قد ينفصل"
    if aw > 0.90:
        return "متوسط"
    if aw > 0.85:
        return "جيد"
    return "ممتاز - استقرار عالي"


def get_microbial_safety(aw: float) -> str:
    if aw > 0.95:
        return "خطر متوسط - استخدم خلال 48 ساعة"
    if aw > 0.90:
        return "آمن - حتى 72 ساعة"
    if aw > 0.85:
        return "آمن جداً - حتى 5 أيام"
    return "آمن للغاية - حتى أسبوع"


def calculate_water_activity(
    recipe,
) -> WaterActivity:
    """Estimate water activity with a simplified Raoult's-law model.

    ``aw = min(0.99, 0.99 · W / (W + 0.003 · S))`` where ``W`` is total water
    and ``S`` is 60 % of the mass of high-sugar ingredients.
    """
    total_water = 0.0
    total_solutes = 0.0
    total_weight = 0.0
    for ingredient, weight in _amounts(recipe).items():
        total_water += weight * WATER_CONTENT.get(ingredient, 0)
        if ingredient in HIGH_SUGAR_INGREDIENTS:
            total_solutes += weight * SOLUTE_FRACTION
        total_weight += weight

    denominator = total_water + total_solutes * SOLUTE_WATER_FACTOR
    if total_weight == 0 or denominator == 0:
        return WaterActivity(
            value=0,
            moisture_transfer_rate=NOT_COMPUTED,
            maturation_time=NOT_COMPUTED,
            stability=NOT_COMPUTED,
            microbial_safety=NOT_COMPUTED,
        )

    water_fraction = total_water / denominator
    aw = min(MAX_WATER_ACTIVITY, water_fraction * 0.99)
    logger.debug("aw=%.4f (water=%.1f g, solutes=%.1f g)", aw, total_water, total_solutes)
    return WaterActivity(
        value=round(aw, 3),
        moisture_transfer_rate=get_moisture_transfer_rate(aw),
        maturation_time=get_maturation_time(aw),
        stability=get_stability_from_aw(aw),
        microbial_safety=get_microbial_safety(aw),
        total_water=total_water,
        total_solutes=total_solutes,
    )


# --- Stability --------------------------------------------------------------------


def _stability_level(score: float) -> tuple[str, str]:
    if score >= 80:
        return "ممتاز", "ثبات استثنائي - مناسب للطقس الدافئ"
    if score >= 60:
        return "جيد", "ثبات جيد - مناسب لمعظم الظروف"
    if score >= 40:
        return "متوسط", "ثبات مقبول - استخدم بسرعة"
    return "ضعيف", "ثبات ضعيف - قد ينفصل بسرعة"


def calculate_stability(
    recipe,
) -> StabilityReport:
    """Score how well a filling holds between layers (0..100).

    Starts at 50; each stabilizing or destabilizing ingredient adds
    ``share_pct · power / 100``. Contributions of magnitude 1 or less count
    toward the score but are left out of ``details``.

    Parameters
    ----------
    recipe : Mapping[str, float | Mapping]
        Filling ingredients.

    Returns
    -------
    StabilityReport
        Score 0 with level ``'غير محسوب'`` for a zero-mass recipe.
    """
    amounts = _amounts(recipe)
    total_weight = sum(amounts.values())
    if total_weight == 0:
        return StabilityReport(score=0, level=NOT_COMPUTED, recommendation="")

    score = STABILITY_BASE_SCORE
    details: list[StabilityContribution] = []
    for ingredient, weight in amounts.items():
        percentage = weight / total_weight * 100
        for table in (STABILIZERS, DESTABILIZERS):
            effect = table.get(ingredient)
            if effect is None:
                continue
            power, reason = effect
            contribution = percentage * power / 100
            score += contribution
            if abs(contribution) > 1:
                details.append(
                    StabilityContribution(
                        ingredient=ingredient,
                        contribution=round(contribution, 1),
                        reason=reason,
                    )
                )

    score = max(0, min(100, score))
    level, recommendation = _stability_level(score)
    return StabilityReport(
        score=round(score),
        level=level,
        recommendation=recommendation,
        details=tuple(details),
    )


# --- Scaling with sweetness reduction -----------------------------------------------


def _compensation_target(
    target: str,
    recipe,
) -> str:
    """Use an existing variant of ``target`` (e.g. ``unsalted-butter``) if present."""
    for variant in INGREDIENT_VARIANTS.get(target, (target,)):
        if variant in recipe:
            return variant
    return target


def scale_with_sweetness_adjustment(
    base_recipe,
    target_weight: float,
    sweetness_reduction: float = 0,
) -> FillingScaleResult | None:
    """Scale a filling to ``target_weight`` and optionally make it less sweet.

    Parameters
    ----------
    base_recipe : Mapping[str, float | Mapping]
        Filling to scale.
    target_weight : float
        Desired total mass, g.
    sweetness_reduction : float, optional
        Percent (0..100) to take off the sweet ingredients.

    Returns
    -------
    FillingScaleResult | None
        ``None`` when the base recipe has no mass.

    Notes
    -----
    Scaling up also reduces sugar automatically by ``5 %`` per unit of scale
    above 1, never below a 0.75 multiplier. Mass removed from a sweet
    ingredient is redistributed into non-sweet ones (e.g. condensed milk →
    70 % sour cream + 30 % butter); honey is not compensated.

    Sweet ingredients are recognised under every catalog spelling
    (``sweetened-condensed-milk`` counts as condensed milk). Compensation
    lands on a variant the recipe already has, so ``heavy-cream-35`` grows
    instead of a new ``whipping-cream`` entry appearing.
    """
    amounts = _amounts(base_recipe)
    base_total = sum(amounts.values())
    if base_total == 0:
        return None

    scale_factor = target_weight / base_total
    sugar_reduction = 1 - sweetness_reduction / 100
    if scale_factor > 1:
        sugar_reduction *= max(MIN_AUTO_SWEETNESS_FACTOR, 1 - (scale_factor - 1) * 0.05)

    scaled: dict[str, float] = {}
    removed: list[tuple[str, float]] = []
    for ingredient, amount in amounts.items():
        kind = SWEET_INGREDIENTS.get(ingredient)
        if kind is None:
            scaled[ingredient] = amount * scale_factor
            continue
        scaled[ingredient] = amount * scale_factor * sugar_reduction
        removed.append((kind, amount * scale_factor * (1 - sugar_reduction)))

    # compensation after scaling so a later key cannot overwrite it
    for kind, mass in removed:
        for target, share in SWEET_SUBSTITUTIONS[kind].items():
            key = _compensation_target(target, scaled)
            scaled[key] = scaled.get(key, 0) + mass * share

    logger.debug(
        "Scaled filling x%.3f with sugar factor %.3f", scale_factor, sugar_reduction
    )
    return FillingScaleResult(
        recipe=scaled,
        original_sweetness=calculate_sweetness_index(amounts),
        new_sweetness=calculate_sweetness_index(scaled),
        reduction_applied=(1 - sugar_reduction) * 100,
    )
