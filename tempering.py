"""Egg tempering: progressive mixing of hot liquid into eggs.

Each batch of hot liquid is blended into the accumulated egg mixture with a
single energy balance::

    T_new = (m·C_egg·T + m_b·C_liq·T_liq) / (m·C_egg + m_b·C_liq)

The accumulated mixture keeps the egg specific heat throughout.

Exports
-------
get_batch_distribution
get_liquid_cp
calculate_optimal_batches
max_hot_mass_for_target
max_hot_temp_for_target
needed_egg_increase
"""

import logging
import math

from constants import (
    BATCH_DISTRIBUTIONS,
    DEFAULT_BATCH_COUNT,
    SPECIFIC_HEAT,
    TEMPER_DANGER_TEMP,
    TEMPER_WARNING_TEMP,
)
from models.tempering import (
    TemperingBatch,
    TemperingFailure,
    TemperingResult,
)
from validation import (
    validate_tempering_inputs,
)

logger = logging.getLogger(__name__)

_LIQUID_COMPONENTS = ("butter", "sugar", "honey", "soda")


def get_batch_distribution(
    count: int,
) -> tuple[int, ...]:
    """Percent of hot liquid per batch; unknown counts use the 5-batch split."""
    return BATCH_DISTRIBUTIONS.get(count, BATCH_DISTRIBUTIONS[DEFAULT_BATCH_COUNT])


def get_liquid_cp(
    masses,
) -> float:
    """Mass-weighted specific heat of the hot liquid.

    Parameters
    ----------
    masses : Mapping[str, float]
        Grams of butter, sugar, honey and soda in the hot mixture; missing
        keys count as 0.

    Returns
    -------
    float
        kJ/kg·K; the generic liquid value when the total mass is not positive.
    """
    total = sum(masses.get(key, 0) for key in _LIQUID_COMPONENTS)
    if total <= 0:
        return SPECIFIC_HEAT["liquid"]
    weighted = sum(
        masses.get(key, 0) * SPECIFIC_HEAT[key] for key in _LIQUID_COMPONENTS
    )
    return weighted / total


def _sensory_note(temp: float) -> str:
    if temp > 65:
        return "⚠️ خطر تخثر - اخفق بسرعة"
    if temp > 60:
        return "انتبه - قرب منطقة الخطر"
    if temp > 50:
        return "آمن - استمر بالخفق المعتدل"
    return "ممتاز - خفق عادي"


def _safety(max_temp: float) -> tuple[str, str]:
    if max_temp > TEMPER_DANGER_TEMP:
        return "danger", "خطر! توقع تخثر جزئي للبيض"
    if max_temp > TEMPER_WARNING_TEMP:
        return "warning", "حذر - على حافة التخثر"
    return "safe", "آمن تماماً - لا خطر تخثر"


def calculate_optimal_batches(
    egg_mass: float,
    egg_temp: float,
    liquid_mass: float,
    liquid_temp: float,
    batch_count: int = DEFAULT_BATCH_COUNT,
    liquid_breakdown=None,
) -> TemperingResult | TemperingFailure:
    """Simulate pouring hot liquid into eggs in batches.

    Parameters
    ----------
    egg_mass : float
        Eggs, g.
    egg_temp : float
        Egg temperature, °C.
    liquid_mass : float
        Hot mixture, g.
    liquid_temp : float
        Hot mixture temperature, °C.
    batch_count : int, optional
        Number of pours; 3–6 have their own split, others use the 5-batch
        split.
    liquid_breakdown : Mapping[str, float] | None, optional
        Composition of the hot mixture for a weighted specific heat.

    Returns
    -------
    TemperingResult | TemperingFailure
        Failure when any input is outside its kitchen range.
    """
    validation = validate_tempering_inputs(
        egg_mass, egg_temp, liquid_mass, liquid_temp, batch_count
    )
    if not validation.valid:
        logger.warning("Tempering inputs rejected: %s", ", ".join(validation.errors))
        return TemperingFailure(error=", ".join(validation.errors))

    c_egg = SPECIFIC_HEAT["egg"]
    c_liquid = (
        get_liquid_cp(liquid_breakdown) if liquid_breakdown else SPECIFIC_HEAT["liquid"]
    )

    batches: list[TemperingBatch] = []
    current_mass = egg_mass
    current_temp = egg_temp
    max_temp = egg_temp
    critical_batch = None

    for index, percentage in enumerate(get_batch_distribution(batch_count)):
        batch_mass = percentage / 100 * liquid_mass
        energy = current_mass * c_egg * current_temp + batch_mass * c_liquid * liquid_temp
        heat_capacity = current_mass * c_egg + batch_mass * c_liquid
        new_temp = energy / heat_capacity

        batches.append(
            TemperingBatch(
                batch_number=index + 1,
                percentage=percentage,
                temp_before=round(current_temp, 1),
                temp_after=round(new_temp, 1),
                sensory_note=_sensory_note(new_temp),
                technique="خيط رفيع + خفق سريع" if index == 0 else "صب معتدل + خفق مستمر",
            )
        )
        logger.debug("Batch %d: %.2f -> %.2f °C", index + 1, current_temp, new_temp)

        if new_temp > max_temp:
            max_temp = new_temp
            critical_batch = index + 1

        current_mass += batch_mass
        current_temp = new_temp

    safety_status, recommendation = _safety(max_temp)
    return TemperingResult(
        batches=tuple(batches),
        final_temp=batches[-1].temp_after,
        max_batch_temp=round(max_temp, 1),
        critical_batch=critical_batch,
        safety_status=safety_status,
        recommendation=recommendation,
        liquid_cp=round(c_liquid, 2),
    )


def max_hot_mass_for_target(
    egg_mass: float,
    egg_temp: float,
    hot_temp: float,
    target_temp: float,
    liquid_cp: float | None = None,
) -> float:
    """Largest mass of hot liquid that keeps a single blend at ``target_temp``.

    Returns ``math.inf`` when the liquid is not hotter than the target and
    0 when the target is not above the egg temperature.
    """
    c_egg = SPECIFIC_HEAT["egg"]
    c_hot = liquid_cp if liquid_cp is not None else SPECIFIC_HEAT["liquid"]
    if hot_temp <= target_temp:
        return math.inf
    if target_temp <= egg_temp:
        return 0.0
    return egg_mass * c_egg * (target_temp - egg_temp) / (c_hot * (hot_temp - target_temp))


def max_hot_temp_for_target(
    egg_mass: float,
    egg_temp: float,
    hot_mass: float,
    target_temp: float,
    liquid_cp: float | None = None,
) -> float:
    """Hottest liquid temperature that blends to ``target_temp``; never below ``egg_temp``.

    Returns ``math.inf`` for a non-positive ``hot_mass``.
    """
    c_egg = SPECIFIC_HEAT["egg"]
    c_hot = liquid_cp if liquid_cp is not None else SPECIFIC_HEAT["liquid"]
    if hot_mass <= 0:
        return math.inf
    egg_capacity = egg_mass * c_egg
    result = (
        target_temp * (egg_capacity + hot_mass * c_hot) - egg_capacity * egg_temp
    ) / (hot_mass * c_hot)
    return max(egg_temp, result)


def needed_egg_increase(
    egg_mass: float,
    egg_temp: float,
    liquid_mass: float,
    liquid_temp: float,
    target_temp: float,
    liquid_cp: float | None = None,
) -> float:
    """Extra egg mass so that one full blend lands at ``target_temp``.

    Returns 0 when the target is unreachable (not above the egg temperature
    or not below the liquid temperature) or the eggs already suffice.
    """
    c_egg = SPECIFIC_HEAT["egg"]
    c_liquid = liquid_cp if liquid_cp is not None else SPECIFIC_HEAT["liquid"]
    if target_temp <= egg_temp or liquid_temp <= target_temp:
        return 0.0
    needed_total = liquid_mass * c_liquid * (liquid_temp - target_temp) / (
        c_egg * (target_temp - egg_temp)
    )
    return max(0.0, needed_total - egg_mass)
