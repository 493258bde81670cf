"""Dough analysis: composition, hydration, texture and improvement advice.

Exports
-------
analyze_recipe
is_usable
predict_dough_texture
get_advisor_report
compute_recipe_adjustment

Notes
-----
All functions are side-effect free. Expected domain conditions are returned
as sentinels, never raised: an `AnalysisFailure` for a recipe that fails
validation and ``None`` for a zero-mass recipe.
"""

import logging
from types import (
    MappingProxyType,
)

from constants import (
    HYDRATION,
    SCIENTIFIC_RANGES,
)
from models.recipe import (
    AdviceCard,
    AnalysisFailure,
    DoughTexture,
    RecipeAnalysis,
)
from validation import (
    validate_recipe,
)

logger = logging.getLogger(__name__)

QUALITY_PENALTY = 20

_PERCENTAGE_KEYS = ("flour", "butter", "sugar", "honey", "eggs", "soda")

_COMPONENT_NAMES = MappingProxyType(
    {
        "flour": "الدقيق",
        "butter": "الزبدة",
        "sugars": "السكريات",
        "eggs": "البيض",
        "soda": "صودا الخبز",
    }
)

# (component, status) -> (impact, solution, science)
_ADVICE = MappingProxyType(
    {
        ("flour", "low"): (
            "عجينة لزجة وضعيفة البنية",
            "زيادة الدقيق بمقدار 10-15%",
            "الدقيق يوفر البنية من خلال بروتينات الجلوتين والنشا",
        ),
        ("flour", "high"): (
            "عجينة قاسية وجافة",
            "تقليل الدقيق أو زيادة السوائل",
            "زيادة الدقيق تمتص السوائل وتجعل العجينة متماسكة أكثر من اللازم",
        ),
        ("butter", "low"): (
            "فقدان الطراوة والنعومة",
            "زيادة الزبدة 15-20 جرام",
            "الدهون تقطع شبكة الجلوتين وتمنح الهشاشة",
        ),
        ("butter", "high"): (
            "عجينة دهنية ورخوة",
            "تقليل الزبدة أو زيادة الدقيق قليلاً",
            "الدهون الزائدة تمنع تماسك العجينة",
        ),
        ("sugars", "low"): (
            "لون باهت ونقص في الرطوبة",
            "زيادة السكر أو العسل 20-30 جرام",
            "السكريات ضرورية لتفاعل ميلارد (اللون الذهبي) والاحتفاظ بالرطوبة",
        ),
        ("sugars", "high"): (
            "لزوجة زائدة ولون داكن سريع",
            "تقليل السكر/العسل أو خفض حرارة الخبز",
            "السكريات الزائدة تسرع الكرملة وتزيد اللزوجة",
        ),
        ("eggs", "low"): (
            "بنية ضعيفة وعجينة متفتتة",
            "زيادة بيضة واحدة (50-55 جرام)",
            "البيض يعمل كرابط ومستحلب ويوفر الرطوبة",
        ),
        ("eggs", "high"): (
            "قوام مطاطي وكثيف",
            "تقليل البيض أو زيادة الدهون",
            "البروتين الزائد يجعل القوام مطاطي",
        ),
        ("soda", "low"): (
            "لون باهت وبنية كثيفة",
            "زيادة الصودا 0.5-1 جرام",
            "الصودا ترفع pH مما يسرع تفاعل ميلارد ويحسن اللون",
        ),
        ("soda", "high"): (
            "طعم قلوي (صابوني) مر",
            "تقليل الصودا 25-30%",
            "الصودا غير المتفاعلة تترك طعماً قلوياً",
        ),
    }
)

# Hydration bands, checked top to bottom: (lower bound, inclusive, profile).
# Profiles hold DoughTexture fields; every call builds its own record.
_TEXTURE_BANDS = (
    (
        32.0,
        False,
        dict(
            band="critical",
            texture="لزج جداً وشبيه بخليط الكيك",
            sensory={
                "touch": "سيلتصق بالأصابع بقوة، لا يمكن تشكيله ككرة",
                "appearance": "لامع وسائل تقريباً، يسيل ببطء",
                "sound": "صوت 'سكويش' عند الضغط",
                "aroma": "رائحة خام قوية للبيض والعسل",
            },
            techniques={
                "immediate": "برّد فوراً 30 دقيقة",
                "working": "طاولة مرشوشة بكثافة + أدوات مبردة",
                "correction": "أضف 50-75جم دقيق تدريجياً",
            },
            visual_indicator="🔴 حرج - تصحيح فوري",
            troubleshooting="زيادة شديدة في السوائل أو نقص في الدقيق",
        ),
    ),
    (
        26.0,
        False,
        dict(
            band="soft",
            texture="طري ويميل للالتصاق",
            sensory={
                "touch": "يلتصق قليلاً، يترك أثراً على الأصابع",
                "appearance": "سطح رطب قليلاً، مرن ولامع خفيف",
                "sound": "صوت خفيف عند الفصل عن السطح",
                "aroma": "رائحة متوازنة للعسل والزبدة",
            },
            techniques={
                "immediate": "راحة 15-20 دقيقة بالثلاجة",
                "working": "رش خفيف بالدقيق، عمل سريع",
                "correction": "ممكن إضافة 20-30جم دقيق",
            },
            visual_indicator="🟡 مقبول - يحتاج عناية",
            troubleshooting="قد يحتاج تعديل طفيف",
        ),
    ),
    (
        20.0,
        True,
        dict(
            band="ideal",
            texture="متماسك ومثالي للميدوفيك",
            sensory={
                "touch": "ناعم، مرن، بالكاد يلتصق",
                "appearance": "سطح أملس مات، متجانس",
                "sound": "صوت 'بوب' خفيف عند الضغط",
                "aroma": "رائحة عسل وزبدة متوازنة",
            },
            techniques={
                "immediate": "راحة 10 دقائق بحرارة الغرفة",
                "working": "فرد مباشر بأقل دقيق ممكن",
                "tip": "نافذة العمل: 5-10 دقائق",
            },
            visual_indicator="🟢 مثالي",
            troubleshooting="لا يحتاج تعديل",
        ),
    ),
)

_DRY_PROFILE = dict(
    band="dry",
    texture="جاف ومتفتت",
    sensory={
        "touch": "خشن، يتفتت عند الضغط",
        "appearance": "سطح مشقق، باهت",
        "sound": "صوت تكسر عند الطي",
        "aroma": "رائحة دقيق غالبة",
    },
    techniques={
        "immediate": "أضف 1-2 ملعقة سائل دافئ",
        "working": "عجن لطيف بعد الإضافة",
        "correction": "عسل أو زبدة ذائبة للمرونة",
    },
    visual_indicator="🔴 يحتاج إصلاح",
    troubleshooting="نقص حاد في السوائل/الدهون",
)


def is_usable(
    analysis,
) -> bool:
    """True if ``analysis`` carries numeric results (not ``None``, not a failure)."""
    return isinstance(analysis, RecipeAnalysis)


def _classify(
    percentage: float,
    bounds,
) -> str:
    if percentage < bounds["min"]:
        return "low"
    if percentage > bounds["max"]:
        return "high"
    return "optimal"


def analyze_recipe(
    recipe,
) -> RecipeAnalysis | AnalysisFailure | None:
    """Analyse a dough recipe against the ideal composition ranges.

    Parameters
    ----------
    recipe : Mapping[str, float]
        Ingredient masses in grams for flour, butter, sugar, honey, eggs
        and soda.

    Returns
    -------
    RecipeAnalysis | AnalysisFailure | None
        ``AnalysisFailure`` with the validation messages joined by newlines
        when validation fails; ``None`` when the total mass is 0.
    """
    validation = validate_recipe(recipe)
    if not validation.valid:
        logger.warning("Recipe failed validation: %s", "; ".join(validation.errors))
        return AnalysisFailure(error="\n".join(validation.errors))

    total_weight = sum(recipe.values())
    if total_weight == 0:
        logger.debug("Recipe has zero total mass; nothing to analyse")
        return None

    percentages: dict[str, float] = {}
    for key in _PERCENTAGE_KEYS:
        percentages[key] = recipe.get(key, 0) / total_weight * 100
        if key == "honey":
            percentages["sugars"] = percentages["sugar"] + percentages["honey"]

    liquid_weight = sum(
        recipe.get(key, 0) * fraction for key, fraction in HYDRATION.items()
    )
    flour = recipe.get("flour", 0)
    hydration = liquid_weight / flour * 100 if flour > 0 else 0.0

    checks: dict[str, str] = {}
    score = 100
    for component, bounds in SCIENTIFIC_RANGES.items():
        status = _classify(percentages[component], bounds)
        checks[component] = status
        if status != "optimal":
            score -= QUALITY_PENALTY

    analysis = RecipeAnalysis(
        recipe=dict(recipe),
        total_weight=total_weight,
        percentages=percentages,
        checks=checks,
        quality_score=max(0, score),
        hydration=hydration,
        liquid_weight=liquid_weight,
    )
    logger.debug(
        "Analysed %.1f g recipe: score=%d hydration=%.2f%%",
        total_weight,
        analysis.quality_score,
        hydration,
    )
    return analysis


def predict_dough_texture(
    analysis,
) -> DoughTexture | None:
    """Map the analysis' hydration onto one of four texture bands.

    Bands: ``> 32`` critical, ``> 26`` soft, ``>= 20`` ideal, otherwise dry.
    Returns ``None`` for an unusable analysis.
    """
    if not is_usable(analysis):
        return None
    hydration = analysis.hydration
    profile = _DRY_PROFILE
    for lower, inclusive, band_profile in _TEXTURE_BANDS:
        if hydration > lower or (inclusive and hydration == lower):
            profile = band_profile
            break
    return DoughTexture(
        band=profile["band"],
        hydration=hydration,
        texture=profile["texture"],
        sensory=dict(profile["sensory"]),
        techniques=dict(profile["techniques"]),
        visual_indicator=profile["visual_indicator"],
        troubleshooting=profile["troubleshooting"],
    )


def get_advisor_report(
    analysis,
) -> list[AdviceCard] | None:
    """Build one advice card per non-optimal component.

    Cards follow the order of ``analysis.checks``. An empty list means the
    recipe is fully optimal; ``None`` means the analysis is unusable.
    """
    if not is_usable(analysis):
        return None

    report: list[AdviceCard] = []
    for component, status in analysis.checks.items():
        if status == "optimal":
            continue
        impact, solution, science = _ADVICE[(component, status)]
        bounds = SCIENTIFIC_RANGES[component]
        report.append(
            AdviceCard(
                component=component,
                component_name=_COMPONENT_NAMES[component],
                status=status,
                current_value=f"{analysis.percentages[component]:.1f}%",
                ideal_range=f"{bounds['min']:g}-{bounds['max']:g}%",
                impact=impact,
                solution=solution,
                science=science,
            )
        )
    return report


def compute_recipe_adjustment(
    analysis,
) -> dict[str, int]:
    """Gram changes that bring each out-of-range component to its nearest bound.

    Sugars above range are taken from sugar first, then honey; low sugars
    get no suggestion. Soda is only ever reduced. Deltas are whole grams;
    zero deltas are omitted.

    Parameters
    ----------
    analysis : RecipeAnalysis
        Output of `analyze_recipe`.

    Returns
    -------
    dict[str, int]
        Ingredient → signed delta in grams. Empty for an unusable analysis
        or an already optimal recipe.
    """
    if not is_usable(analysis):
        return {}

    total = analysis.total_weight
    recipe = analysis.recipe
    checks = analysis.checks
    adjustments: dict[str, int] = {}

    def _target(component: str, bound: str) -> float:
        return total * SCIENTIFIC_RANGES[component][bound] / 100

    for component in ("flour", "butter", "eggs"):
        current = recipe.get(component, 0)
        if checks[component] == "low":
            adjustments[component] = round(_target(component, "min") - current)
        elif checks[component] == "high":
            adjustments[component] = -round(current - _target(component, "max"))

    if checks["sugars"] == "high":
        sugars = recipe.get("sugar", 0) + recipe.get("honey", 0)
        excess = max(0, round(sugars - _target("sugars", "max")))
        from_sugar = min(excess, recipe.get("sugar", 0))
        adjustments["sugar"] = -round(from_sugar)
        if excess > from_sugar:
            adjustments["honey"] = -round(excess - from_sugar)

    if checks["soda"] == "high":
        adjustments["soda"] = -round(recipe.get("soda", 0) - _target("soda", "max"))

    return {key: delta for key, delta in adjustments.items() if delta != 0}
