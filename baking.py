"""Layer baking predictions: browning, moisture loss, texture and timing.

Exports
-------
simulate_baking
get_baking_schedule

Notes
-----
Browning follows a Maillard-like first-order model; moisture loss is scaled
by hydration, butter protection and layer thickness. Both return ``None``
for an unusable analysis.
"""

import logging
import math

from analysis import (
    is_usable,
)
from constants import (
    DEFAULT_BAKING_TEMP,
    DEFAULT_LAYER_THICKNESS_MM,
    MIN_BAKING_TIME,
)
from models.recipe import (
    BakingResult,
    BakingSchedule,
    RecipeAnalysis,
)

logger = logging.getLogger(__name__)

# (upper bound exclusive, color, recommendation); last row catches the rest
_COLOR_BANDS = (
    (60, "باهت جداً", "ارفع الحرارة 10°C أو زد الوقت دقيقة"),
    (90, "ذهبي فاتح", "مناسب للطبقات الداخلية"),
    (110, "ذهبي مثالي", "مثالي!"),
    (130, "بني ذهبي", "مناسب للطبقة العلوية"),
    (math.inf, "داكن/محروق", "قلل الحرارة أو الوقت"),
)

# (lower bound exclusive, texture)
_TEXTURE_BANDS = (
    (85, "طري وهش"),
    (70, "مقرمش متوازن"),
    (55, "مقرمش وجاف قليلاً"),
)
_HARD_TEXTURE = "قاسي وجاف"
_HARD_TEXTURE_ADVICE = "قلل الوقت أو الحرارة"

_SODA_EFFECT = {"high": 1.15, "low": 0.85}


def _sensory_predictions(
    browning_index: float,
    texture_score: float,
) -> dict:
    if browning_index > 110:
        top = "بقع بنية"
    elif browning_index > 90:
        top = "لون متجانس"
    else:
        top = "مركز شاحب"
    edges = "حواف بنية واضحة" if browning_index > 100 else "حواف ذهبية خفيفة"

    if browning_index > 120:
        aroma = ["كراميل قوي", "محمص"]
    elif browning_index > 80:
        aroma = ["عسل محمص", "زبدة دافئة"]
    else:
        aroma = ["عجين خام", "دقيق"]

    if texture_score > 80:
        bite = "ذوبان في الفم"
    elif texture_score > 60:
        bite = "مقرمش لطيف"
    else:
        bite = "يحتاج مضغ"

    return {
        "visual": {"top": top, "edges": edges},
        "aroma": {"expected": aroma},
        "texture": {"bite": bite},
    }


def simulate_baking(
    analysis: RecipeAnalysis | None,
    temp: float,
    time: float,
    thickness_mm: float | None = None,
) -> BakingResult | None:
    """Predict colour, texture and moisture loss for one baked layer.

    Parameters
    ----------
    analysis : RecipeAnalysis | None
        Output of `analysis.analyze_recipe`.
    temp : float
        Oven temperature, °C.
    time : float
        Bake time, minutes.
    thickness_mm : float | None, optional
        Rolled layer thickness; falsy values fall back to 3 mm.

    Returns
    -------
    BakingResult | None
        ``None`` when ``analysis`` is missing or a failure.
    """
    if not is_usable(analysis):
        return None

    recipe = analysis.recipe
    thickness = thickness_mm or DEFAULT_LAYER_THICKNESS_MM

    honey = recipe.get("honey", 0)
    honey_share = honey / max(1, honey + recipe.get("sugar", 0))
    butter_ratio = analysis.percentages["butter"] / 100

    maillard_rate = 0.005 * math.exp((temp - 150) / 20)
    sugar_effect = 1 + 0.4 * honey_share
    soda_effect = _SODA_EFFECT.get(analysis.checks["soda"], 1.0)
    thickness_effect = math.sqrt(3 / max(1, thickness))
    browning_index = 100 * (
        1
        - math.exp(
            -maillard_rate * time * sugar_effect * soda_effect * thickness_effect
        )
    )

    moisture_rate = 0.01 * math.exp((temp - 100) / 30)
    butter_protection = 1 - butter_ratio * 0.5
    thickness_dryness = thickness / 3
    moisture_loss = (
        analysis.hydration
        * (1 - math.exp(-moisture_rate * time))
        * 0.3
        * butter_protection
        / thickness_dryness
    )

    recommendations: list[str] = []
    for upper, color, advice in _COLOR_BANDS:
        if browning_index < upper:
            recommendations.append(advice)
            break

    texture_score = 100 - moisture_loss * 2 - max(0, (temp - 190) * 0.5)
    for lower, label in _TEXTURE_BANDS:
        if texture_score > lower:
            texture = label
            break
    else:
        texture = _HARD_TEXTURE
        recommendations.append(_HARD_TEXTURE_ADVICE)

    logger.debug(
        "Baked at %.0f°C/%.1f min: browning=%.1f moisture=%.2f texture=%.1f",
        temp,
        time,
        browning_index,
        moisture_loss,
        texture_score,
    )
    return BakingResult(
        color=color,
        texture=texture,
        browning_index=round(browning_index),
        moisture_loss=round(moisture_loss, 1),
        texture_score=round(texture_score),
        recommendations=tuple(recommendations),
        sensory_predictions=_sensory_predictions(browning_index, texture_score),
        parameters={
            "thickness_mm": thickness,
            "honey_share_pct": round(honey_share * 100),
            "butter_protection_pct": round((1 - butter_protection) * 100),
        },
    )


def get_baking_schedule(
    analysis: RecipeAnalysis | None,
    temp: float | None = None,
    thickness_mm: float | None = None,
) -> BakingSchedule | None:
    """Recommend a bake time window for the recipe at ``temp``.

    The base time comes from the oven band (≤160: 10, ≤180: 7, ≤200: 5,
    hotter: 4 minutes) and is scaled by layer thickness, honey share and
    a high-soda factor. The result is never below 4 minutes.
    """
    if not is_usable(analysis):
        return None

    temp = temp or DEFAULT_BAKING_TEMP
    thickness = thickness_mm or DEFAULT_LAYER_THICKNESS_MM

    thickness_factor = (thickness / 3) ** 0.8
    honey_pct = analysis.percentages.get("honey", 0)
    honey_factor = 1 - honey_pct / 100 * 0.15
    soda_factor = 0.9 if analysis.percentages.get("soda", 0) > 0.6 else 1.0

    if temp <= 160:
        base_time = 10
    elif temp <= 180:
        base_time = 7
    elif temp <= 200:
        base_time = 5
    else:
        base_time = 4

    recommended = round(base_time * thickness_factor * honey_factor * soda_factor)
    cues = (
        "راقب اللون بعناية - العسل يحترق سريعاً"
        if honey_pct > 15
        else "الحواف ذهبية فاتحة",
        "المركز لا يهتز عند لمسه",
        "اختبر بعود خشبي في المركز" if thickness > 4 else "رائحة عسل خفيفة",
    )
    return BakingSchedule(
        temp=temp,
        thickness_mm=thickness,
        recommended_time=max(MIN_BAKING_TIME, recommended),
        min_time=max(MIN_BAKING_TIME, recommended - 2),
        max_time=recommended + 2,
        cues=cues,
    )
