"""Rough chemistry estimates for dough and filling, and their compatibility.

All values are heuristic approximations meant to guide a home baker, not
lab measurements. Recipes may use either dough keys (``flour``, ``honey``,
...) or filling keys, with filling entries as grams or ``{'amount': g}``.

Exports
-------
estimate_brix
estimate_ph
estimate_viscosity
compute_baking_effects
assess_dough_workability
estimate_cake_chemistry
estimate_filling_chemistry
build_compatibility_report
compare_to_preset_targets
"""

import logging
import math
from collections.abc import (
    Mapping,
)

from constants import (
    BASE_VISCOSITY,
    DEFAULT_BAKING_TEMP,
    DEFAULT_BAKING_TIME,
    DEFAULT_VISCOSITY,
    DOUGH_BASE_PH,
    DOUGH_VISCOSITY_TEMP,
    FILLING_BASE_PH,
    FILLING_VISCOSITY_TEMP,
    PH_CONTRIBUTIONS,
    SUGAR_CONTENT,
    VISCOSITY_TEMP_COEFF,
)
from filling import (
    amount_of,
    calculate_stability,
    calculate_sweetness_index,
    calculate_water_activity,
    get_maturation_time,
)
from models.chemistry import (
    BakingEffects,
    BrixEstimate,
    CakeChemistry,
    CompatibilityReport,
    FillingChemistry,
    PhEstimate,
    ViscosityEstimate,
    Workability,
)
from models.filling import (
    FillingPreset,
)
from models.recipe import (
    BakingParams,
)

logger = logging.getLogger(__name__)

# (upper bound exclusive, level, description); last row catches the rest
_DOUGH_BRIX_BANDS = (
    (25, "منخفض", "لون باهت - يحتاج سكريات أكثر"),
    (35, "مثالي", "لون ذهبي مثالي"),
    (45, "مرتفع", "لون بني سريع - خطر الاحتراق"),
    (math.inf, "عالي جداً", "سيحترق بسرعة"),
)
_FILLING_BRIX_BANDS = (
    (20, "غير محلى", "مناسب للحمية"),
    (30, "قليل الحلاوة", "متوازن - يناسب معظم الأذواق"),
    (40, "حلو", "حلو بشكل معتدل"),
    (50, "حلو جداً", "حلو - قد يكون مفرطاً للبعض"),
    (math.inf, "مفرط الحلاوة", "حلاوة عالية - غير موصى بها"),
)

_PH_BANDS = (
    (4.0, "حامضي جداً", "طعم لاذع - قد يؤثر على القوام", "warning"),
    (4.6, "حامضي", "آمن ميكروبياً - مثالي للحشوات", "safe"),
    (5.2, "شبه حامضي", "جيد - مقبول لمعظم الاستخدامات", "safe"),
    (6.0, "شبه محايد", "مقبول - قد يحتاج تعديلاً", "warning"),
    (7.5, "محايد", "مثالي للعجين", "safe"),
    (math.inf, "قلوي", "طعم صابوني - خطر", "danger"),
)
_PH_MIN = 3.0
_PH_MAX = 9.0

_DOUGH_VISCOSITY_BANDS = (
    (50000, "سائل", "لزج - صعب الفرد", "poor"),
    (100000, "مثالي", "سهل الفرد والتشكيل", "excellent"),
    (200000, "قاس", "يحتاج مجهود أكبر في الفرد", "fair"),
    (math.inf, "قاس جداً", "صعب الفرد - قد يتشقق", "poor"),
)
_FILLING_VISCOSITY_BANDS = (
    (10000, "سائلة", "ستسيل بين الطبقات", "poor"),
    (18000, "متوسطة", "جيدة - سهلة الفرد", "good"),
    (25000, "مثالية", "مثالية للفرد والثبات", "excellent"),
    (35000, "كثيفة", "جيدة ولكن تحتاج مجهود", "fair"),
    (math.inf, "كثيفة جداً", "صعبة الفرد - قد تلتصق", "poor"),
)

# (minimum score, rating, color, summary)
_COMPATIBILITY_RATINGS = (
    (90, "ممتاز", "#4CAF50", "توافق ممتاز - النتيجة شبه مثالية"),
    (75, "جيد جداً", "#8BC34A", "توافق جيد - طفيف التعديل يحسن النتيجة"),
    (60, "مقبول", "#FFC107", "توافق مقبول - بعض التعديلات مطلوبة"),
    (40, "ضعيف", "#FF9800", "توافق ضعيف - تعديلات كبيرة مطلوبة"),
    (-math.inf, "غير متوافق", "#F44336", "غير متوافق - إعادة تصميم شبه مطلوبة"),
)

BRIX_GAP_LIMIT = 5
WATER_ACTIVITY_GAP_LIMIT = 0.1
WEAK_STABILITY_SCORE = 40
WATER_ACTIVITY_TOLERANCE = 0.05


def _band(value: float, bands: tuple) -> tuple:
    for row in bands:
        if value < row[0]:
            return row[1:]
    return bands[-1][1:]


def _amounts(recipe) -> dict[str, float]:
    return {ingredient: amount_of(entry) for ingredient, entry in recipe.items()}


def estimate_brix(
    recipe,
    is_dough: bool,
) -> BrixEstimate:
    """Sugar concentration in °Brix (grams of sugar per 100 g of mix)."""
    amounts = _amounts(recipe)
    total_weight = sum(amounts.values())
    if total_weight == 0:
        return BrixEstimate(value=0, level="غير معروف", description="لا توجد مكونات")

    total_sugar = sum(
        weight * SUGAR_CONTENT.get(ingredient, 0)
        for ingredient, weight in amounts.items()
    )
    brix = total_sugar / total_weight * 100
    level, description = _band(
        brix, _DOUGH_BRIX_BANDS if is_dough else _FILLING_BRIX_BANDS
    )
    return BrixEstimate(value=round(brix, 1), level=level, description=description)


def estimate_ph(
    recipe,
    is_dough: bool,
) -> PhEstimate:
    """Mass-weighted pH shift from a neutral base, clamped to 3..9."""
    amounts = _amounts(recipe)
    total_weight = sum(amounts.values())
    if total_weight == 0:
        return PhEstimate(
            value=DOUGH_BASE_PH,
            level="محايد",
            description="لا توجد مكونات",
            safety="safe",
        )

    ph = DOUGH_BASE_PH if is_dough else FILLING_BASE_PH
    for ingredient, weight in amounts.items():
        ph += PH_CONTRIBUTIONS.get(ingredient, 0) * weight / total_weight
    ph = max(_PH_MIN, min(_PH_MAX, ph))

    level, description, safety = _band(ph, _PH_BANDS)
    return PhEstimate(
        value=round(ph, 2),
        level=level,
        description=description,
        safety=safety,
    )


def estimate_viscosity(
    recipe,
    temperature: float,
    is_dough: bool,
) -> ViscosityEstimate:
    """Apparent viscosity (cP) at ``temperature`` °C.

    Parameters
    ----------
    recipe : Mapping[str, float | Mapping]
        Ingredient masses.
    temperature : float
        Working temperature, °C. Viscosity drops 3 % per degree above 10 °C.
    is_dough : bool
        Selects the dough or filling workability bands.

    Returns
    -------
    ViscosityEstimate
        Value 0 tagged ``poor`` for an empty recipe.
    """
    amounts = _amounts(recipe)
    total_weight = sum(amounts.values())
    if total_weight == 0:
        return ViscosityEstimate(
            value=0,
            level="غير محسوب",
            description="لا توجد مكونات",
            workability="poor",
            temperature=temperature,
        )

    weighted = sum(
        BASE_VISCOSITY.get(ingredient, DEFAULT_VISCOSITY) * weight / total_weight
        for ingredient, weight in amounts.items()
    )
    viscosity = weighted * math.exp(-VISCOSITY_TEMP_COEFF * (temperature - 10))
    level, description, workability = _band(
        viscosity, _DOUGH_VISCOSITY_BANDS if is_dough else _FILLING_VISCOSITY_BANDS
    )
    return ViscosityEstimate(
        value=round(viscosity),
        level=level,
        description=description,
        workability=workability,
        temperature=temperature,
    )


def compute_baking_effects(
    brix: BrixEstimate,
    ph: PhEstimate,
    temp: float | None = None,
    time: float | None = None,
) -> BakingEffects:
    """How baking concentrates sugar, lowers pH and dries the layer.

    Moisture loss is ``min(15, (T - 150) · t · 0.05)`` percent; Brix rises
    in proportion to it and water activity falls from 0.85 (floor 0.3).
    Falsy ``temp``/``time`` fall back to 180 °C and 7 minutes.
    """
    temp = temp or DEFAULT_BAKING_TEMP
    time = time or DEFAULT_BAKING_TIME

    moisture_loss = min(15, (temp - 150) * time * 0.05)
    brix_increase = brix.value * moisture_loss / 100
    ph_change = -0.1 * (temp - 160) * 0.01 * time
    water_activity = max(0.3, 0.85 - moisture_loss / 100)

    return BakingEffects(
        temp=temp,
        time=time,
        brix_before=brix.value,
        brix_after=round(brix.value + brix_increase, 1),
        brix_change=round(brix_increase, 1),
        ph_before=ph.value,
        ph_after=round(ph.value + ph_change, 2),
        ph_change=round(ph_change, 2),
        water_activity=round(water_activity, 2),
        moisture_loss=round(moisture_loss, 1),
        maturation_time=get_maturation_time(water_activity),
    )


def assess_dough_workability(
    viscosity: ViscosityEstimate,
    ph: PhEstimate,
) -> Workability:
    if viscosity.workability == "excellent" and 6.0 <= ph.value <= 7.5:
        return Workability(True, "✓ جاهز للفرد - قوام مثالي", "#4CAF50")
    if viscosity.workability == "good":
        return Workability(True, "✓ جاهز للفرد - جيد", "#8BC34A")
    if viscosity.workability == "fair":
        return Workability(True, "⚠ قابل للفرد - يحتاج مجهود", "#FFC107")
    return Workability(False, "✗ غير جاهز - يحتاج تعديل", "#F44336")


def estimate_cake_chemistry(
    recipe,
    baking_params: BakingParams | None = None,
) -> CakeChemistry:
    """Dough chemistry at 40 °C, plus baking effects when params are given."""
    brix = estimate_brix(recipe, is_dough=True)
    ph = estimate_ph(recipe, is_dough=True)
    viscosity = estimate_viscosity(recipe, DOUGH_VISCOSITY_TEMP, is_dough=True)

    baking_effects = None
    if baking_params is not None:
        baking_effects = compute_baking_effects(
            brix, ph, baking_params.temp, baking_params.time
        )

    return CakeChemistry(
        brix=brix,
        ph=ph,
        viscosity=viscosity,
        workability=assess_dough_workability(viscosity, ph),
        sweetness_index=calculate_sweetness_index(recipe),
        baking_effects=baking_effects,
    )


def estimate_filling_chemistry(
    recipe,
) -> FillingChemistry:
    """Filling chemistry at fridge temperature (10 °C)."""
    return FillingChemistry(
        brix=estimate_brix(recipe, is_dough=False),
        ph=estimate_ph(recipe, is_dough=False),
        viscosity=estimate_viscosity(recipe, FILLING_VISCOSITY_TEMP, is_dough=False),
        water_activity=calculate_water_activity(recipe),
        stability=calculate_stability(recipe),
        sweetness_index=calculate_sweetness_index(recipe),
    )


def build_compatibility_report(
    cake: CakeChemistry | None,
    filling: FillingChemistry | None,
) -> CompatibilityReport | None:
    """Score how well a cake and a filling pair up.

    Starts at 100 and deducts 20 for a Brix gap above 5°, 15 for a water
    activity gap above 0.1, 10 for a stability score under 40 and 25 for a
    dangerous filling pH.

    Parameters
    ----------
    cake : CakeChemistry | None
        Dough chemistry. When it carries baking effects the baked Brix and
        water activity are compared; otherwise the raw dough Brix is used and
        the water activity check is skipped.
    filling : FillingChemistry | None
        Filling chemistry.

    Returns
    -------
    CompatibilityReport | None
        ``None`` when either side is missing.
    """
    if cake is None or filling is None:
        return None

    score = 100
    issues: list[str] = []
    recommendations: list[str] = []

    effects = cake.baking_effects
    cake_brix = effects.brix_after if effects is not None else cake.brix.value

    brix_gap = abs(cake_brix - filling.brix.value)
    if brix_gap > BRIX_GAP_LIMIT:
        score -= 20
        issues.append(f"فرق Brix كبير: {brix_gap:.1f}°")
        if cake_brix > filling.brix.value:
            recommendations.append("الحشوة أقل حلاوة من الكيك - فكر في زيادة سكر الحشوة")
        else:
            recommendations.append("الكيك أقل حلاوة من الحشوة - فكر في تقليل سكر الحشوة")

    if effects is not None:
        aw_gap = abs(effects.water_activity - filling.water_activity.value)
        if aw_gap > WATER_ACTIVITY_GAP_LIMIT:
            score -= 15
            issues.append(f"فرق نشاط مائي: {aw_gap:.2f}")
            recommendations.append(
                "اختلاف في محتوى الرطوبة قد يؤثر على نقل الرطوبة بين الطبقات"
            )

    if filling.stability.score < WEAK_STABILITY_SCORE:
        score -= 10
        issues.append("ثبات الحشوة ضعيف")
        recommendations.append("الحشوة قد لا تثبت جيداً - استخدم مكونات مثبتة أكثر")

    if filling.ph.safety == "danger":
        score -= 25
        issues.append("درجة حموضة الحشوة خطيرة")
        recommendations.append("pH الحشوة مرتفع جداً - خطر النشاط الميكروبي")

    score = max(0, min(100, score))
    for minimum, rating, color, summary in _COMPATIBILITY_RATINGS:
        if score >= minimum:
            break

    logger.debug("Compatibility %d (%s) with %d issue(s)", score, rating, len(issues))
    return CompatibilityReport(
        score=score,
        rating=rating,
        rating_color=color,
        issues=tuple(issues),
        recommendations=tuple(recommendations),
        estimated_maturation=filling.water_activity.maturation_time,
        summary=summary,
    )


def _within(value: float, target) -> bool:
    if isinstance(target, Mapping):
        return target["min"] <= value <= target["max"]
    return abs(value - target) <= WATER_ACTIVITY_TOLERANCE


def compare_to_preset_targets(
    chemistry: FillingChemistry,
    preset: FillingPreset,
) -> dict[str, dict]:
    """Check estimated filling values against a preset's target ranges.

    Returns
    -------
    dict[str, dict]
        ``{property: {"value", "target", "within"}}`` for Brix, pH,
        viscosity and water activity. Ranges are inclusive; the single water
        activity target allows ±0.05.
    """
    targets = preset.target_properties
    estimates = {
        "brix": chemistry.brix.value,
        "pH": chemistry.ph.value,
        "viscosity": chemistry.viscosity.value,
        "waterActivity": chemistry.water_activity.value,
    }
    comparison = {}
    for name, value in estimates.items():
        target = targets.get(name)
        if target is None:
            continue
        comparison[name] = {
            "value": value,
            "target": dict(target) if isinstance(target, Mapping) else target,
            "within": _within(value, target),
        }
    return comparison
