"""Catalog of named filling presets (read-only reference data).

Target properties are static per preset and only used to compare against
estimated chemistry; they are never recomputed from the ingredients.

Exports
-------
FILLING_PRESETS
get_preset
list_presets
"""

from types import (
    MappingProxyType,
)
from typing import (
    Final,
    Mapping,
)

from models.filling import (
    CriticalControlPoint as CCP,
    FailureIndicator as Failure,
    FillingPreset,
)


def _targets(
    density: float,
    viscosity: tuple[float, float],
    ph: tuple[float, float],
    brix: tuple[float, float],
    water_activity: float,
    **extra,
) -> dict:
    props = {
        "density": density,
        "viscosity": {"min": viscosity[0], "max": viscosity[1]},
        "pH": {"min": ph[0], "max": ph[1]},
        "brix": {"min": brix[0], "max": brix[1]},
        "waterActivity": water_activity,
    }
    props.update(extra)
    return props


_PRESETS: Final[tuple[FillingPreset, ...]] = (
    FillingPreset(
        key="classic-sour-cream",
        name="كريمة حامضة كلاسيكية (Classic Sour Cream)",
        name_en="Classic Sour Cream Filling",
        base_recipe={
            "sour-cream-30": 800,
            "heavy-cream-35": 400,
            "powdered-sugar-fine": 120,
            "vanilla-extract": 5,
        },
        target_properties=_targets(
            1.05,
            (18000, 22000),
            (4.3, 4.5),
            (28, 30),
            0.96,
            fatContent={"min": 28, "max": 30},
            totalSolids={"min": 42, "max": 45},
            stability="medium",
            shelfLife=72,
            maturationTime={"min": 12, "max": 24},
        ),
        sensory_targets={
            "visual": "حريري لامع، أبيض كريمي ناصع",
            "sweetness": "متوازن - ليس مفرط الحلاوة (7/10)",
            "aroma": "كريمة طازجة مخمرة",
        },
        required_equipment=(
            "خلاط كهربائي بقاعدة (Stand Mixer)",
            "وعاء خلط معدني (ستانلس ستيل)",
            "ميزان حرارة رقمي",
            "قماش موسلين أو شاش طبي",
            "مصفاة شبكية ناعمة",
            "سباتولا سيليكون",
        ),
        critical_control_points=(
            CCP(
                "تصفية السور كريم",
                "عدم التصفية الكافية → انفصال بعد ساعات",
                "إذا كانت سائلة: صفِّ 2-3 ساعات إضافية",
            ),
            CCP(
                "درجة حرارة المكونات",
                "حرارة >10°C → انفصال الدهون عن الماء",
                "برّد الوعاء في الفريزر 10 دقائق إضافية",
            ),
            CCP(
                "الخفق - نقطة التوقف",
                "Over-whipping → تحبب وتحول لزبدة",
                "إذا تحببت: أضف 50-75مل كريمة سائلة باردة واخفق 20 ثانية",
            ),
            CCP(
                "درجة الحرارة أثناء الخفق",
                "ارتفاع حرارة المزيج >12°C → فقدان الثبات",
                "ضع الوعاء في حمام ثلجي 2-3 دقائق",
            ),
        ),
        failure_indicators={
            "separation": Failure(
                "ظهور ماء في القاع",
                "سور كريم غير مصفى كفاية",
                "صفِّ المزيج عبر قماش موسلين 1-2 ساعة",
            ),
            "curdling": Failure(
                "حبيبات صغيرة + سطح مطفي",
                "خفق زائد",
                "أضف 50مل كريمة باردة + اخفق 20 ثانية برفق",
            ),
            "too-soft": Failure(
                "سائل جداً، لا يمسك شكله",
                "نقص خفق أو سور كريم رقيق",
                "اخفق 1-2 دقيقة إضافية أو أضف 100جم سور كريم مصفى",
            ),
            "too-stiff": Failure(
                "صلب جداً، صعب الفرد",
                "خفق زائد أو سور كريم كثيف جداً",
                "أضف 2-3 ملاعق كريمة سائلة واطوِ بملعقة",
            ),
        },
        default_thickness=5,
        needs_cooking=False,
        difficulty_level=3,
        yield_amount=1100,
    ),
    FillingPreset(
        key="dulce-caramel",
        name="كراميل دولسي دي ليتشي (Dulce de Leche)",
        name_en="Dulce de Leche Caramel Filling",
        base_recipe={
            "sour-cream-30": 600,
            "dulce-de-leche-authentic": 360,
            "sea-salt-fine": 2,
            "lemon-juice-fresh": 5,
        },
        target_properties=_targets(
            1.14,
            (25000, 30000),
            (4.5, 4.7),
            (32, 35),
            0.80,
            stability="high",
            shelfLife=120,
            maturationTime={"min": 36, "max": 48},
        ),
        sensory_targets={
            "visual": "كريمي سميك، بيج كراميلي موحد",
            "sweetness": "حلو جداً مع عمق كراميل (8/10)",
            "aroma": "كراميل حليب محمص",
        },
        required_equipment=(
            "Stand Mixer",
            "وعاء ستانلس 2 لتر",
            "ميزان حرارة",
            "سباتولا قوية",
        ),
        critical_control_points=(
            CCP(
                "تجهيز الدولسي",
                "دولسي بارد → كتل صلبة لا تذوب",
                "سخّن في حمام مائي 40°C مع التحريك",
            ),
            CCP(
                "الدمج مع السور كريم",
                "إضافة سور كريم بارد جداً → صلابة",
                "اخفق لمدة أطول حتى التجانس",
            ),
            CCP(
                "الخفق النهائي",
                "خفق زائد → انفصال الدولسي",
                "لا يوجد - الوقاية فقط",
            ),
        ),
        failure_indicators={
            "dulce-lumps": Failure(
                "كتل دولسي صلبة",
                "دولسي بارد أو لم يُخفق كفاية",
                "صفِّ المزيج، سخّن الكتل في حمام مائي، أعد الدمج",
            ),
            "separation": Failure(
                "انفصال طبقة سائلة",
                "سور كريم غير مصفى",
                "صفِّ وأعد الخفق مع 50جم سور كريم كثيف",
            ),
        },
        default_thickness=4,
        needs_cooking=False,
        difficulty_level=5,
        yield_amount=920,
    ),
    FillingPreset(
        key="cream-cheese-honey",
        name="جبن كريمي بالعسل والجيلاتين",
        name_en="Cream Cheese Honey with Gelatin",
        base_recipe={
            "cream-cheese-full-fat": 400,
            "mascarpone": 200,
            "heavy-cream-35": 300,
            "honey-raw": 80,
            "powdered-sugar-fine": 60,
            "gelatin-sheets": 4,
            "water-gelatin": 20,
        },
        target_properties=_targets(
            1.12,
            (35000, 42000),
            (4.6, 4.8),
            (30, 32),
            0.90,
            stability="very-high",
            shelfLife=168,
            maturationTime={"min": 12, "max": 16},
        ),
        sensory_targets={
            "visual": "موس كثيف، كريمي ذهبي فاتح",
            "sweetness": "متوازن مع عمق عسل (7/10)",
            "aroma": "جبن كريمي طازج",
        },
        required_equipment=(
            "Stand Mixer",
            "وعاءين منفصلين",
            "قدر صغير",
            "ميزان حرارة دقيق",
            "سباتولا سيليكون كبيرة",
        ),
        critical_control_points=(
            CCP(
                "نقع الجيلاتين",
                "ماء دافئ → ذوبان مبكر غير متحكم فيه",
                "إذا ذاب جزئياً: تخلص منه واستخدم جديد",
            ),
            CCP(
                "إذابة الجيلاتين",
                ">60°C → فقدان 30-50% من القوة",
                "إذا تجاوز 60°C: أضف 2 ورقة جيلاتين إضافية",
            ),
            CCP(
                "تبريد الجيلاتين",
                "ساخن → يطبخ الأجبان | بارد → يتصلب قبل الدمج",
                "إذا تصلب: سخّن مرة أخرى لـ50°C",
            ),
            CCP(
                "دمج الجيلاتين مع الأجبان",
                "أجبان باردة → تصلب فوري للجيلاتين (كتل)",
                "إذا ظهرت كتل: صفِّ فوراً وأعد الخفق",
            ),
            CCP(
                "دمج الكريمة المخفوقة",
                "خفق → فقدان الهواء (قوام كثيف ثقيل)",
                "لا يمكن الإصلاح - الوقاية فقط",
            ),
        ),
        failure_indicators={
            "gelatin-lumps": Failure(
                "كتل جيلاتين مطاطية",
                "دمج مع أجبان باردة",
                "صفِّ وأعد تسخين الجيلاتين",
            ),
            "too-firm": Failure(
                "صلب كالجبن",
                "جيلاتين زائد",
                "اخلط مع 100جم ماسكربوني طري",
            ),
            "too-soft": Failure(
                "لا يتماسك بعد 4 ساعات",
                "جيلاتين تالف أو محموم",
                "أضف 2-3 ورقات جيلاتين مذابة عند 35°C",
            ),
        },
        default_thickness=5,
        needs_cooking=True,
        difficulty_level=7,
        yield_amount=1020,
    ),
    FillingPreset(
        key="custard-butter",
        name="كاسترد بالزبدة (Pastry Cream)",
        name_en="Custard Butter Cream",
        base_recipe={
            "whole-milk": 450,
            "egg-yolks-large": 150,
            "granulated-sugar": 120,
            "cornstarch": 50,
            "unsalted-butter": 180,
            "vanilla-bean-pod": 1,
        },
        target_properties=_targets(
            1.04,
            (15000, 20000),
            (6.2, 6.5),
            (26, 28),
            0.92,
            stability="high",
            shelfLife=72,
            maturationTime={"min": 24, "max": 24},
        ),
        sensory_targets={
            "visual": "كريمي أصفر فاتح، أملس تماماً",
            "sweetness": "متوازن، ليس مفرط (6/10)",
            "aroma": "فانيليا طبيعية قوية",
        },
        required_equipment=(
            "قدر ستانلس متوسط (2 لتر)",
            "خفاقة سلكية يدوية",
            "ميزان حرارة طبخ",
            "مصفاة شبكية ناعمة (Fine Mesh)",
            "وعاءين - واحد للخفق + واحد للتبريد",
            "غلاف بلاستيكي ملامس",
            "حمام ثلجي",
        ),
        critical_control_points=(
            CCP(
                "خلط الصفار والسكر",
                'ترك الصفار مع السكر بدون خفق → "حرق" الصفار',
                "إذا تكتل: تخلص منه وابدأ من جديد",
            ),
            CCP(
                "تسخين الحليب",
                "غليان الحليب → طعم محروق + تبخر زائد",
                "إذا غلى: أزل فوراً وبرّد لـ80°C",
            ),
            CCP(
                "التمبرنج (Tempering)",
                "إضافة حليب ساخن للصفار مباشرة → تخثر فوري",
                "إذا تخثر: صفِّ فوراً عبر مصفاة ناعمة",
            ),
            CCP(
                "الطبخ النهائي",
                "تجاوز 85°C → تخثر كامل | عدم الوصول لـ82°C → لا يثخن",
                "تخثر: صفِّ واخفق في الخلاط | لم يثخن: أعد التسخين لـ82°C",
            ),
            CCP(
                "إضافة الزبدة",
                "زبدة باردة → لا تذوب | كاسترد بارد → تصلب الزبدة",
                "زبدة لم تذب: سخّن قليلاً (لا تغلي)",
            ),
            CCP(
                "التبريد",
                "تبريد بطيء → نمو بكتيري | تكون قشرة → جفاف",
                "قشرة تكونت: أزلها وغطِّ مرة أخرى",
            ),
        ),
        failure_indicators={
            "scrambled-eggs": Failure(
                "حبيبات صفراء صغيرة (بيض مخفوق)",
                "حرارة زائدة (>90°C) أو تمبرنج سريع",
                "صفِّ عبر مصفاة ناعمة + اخفق في الخلاط 1 دقيقة",
            ),
            "too-thin": Failure(
                "سائل بعد التبريد",
                "عدم الوصول لـ82°C أو نشا قليل",
                "أعد التسخين لـ82°C أو أضف 1 ملعقة نشا مذابة",
            ),
            "lumpy": Failure(
                "كتل نشا",
                "نشا غير مذاب أو خفق غير كافٍ",
                "صفِّ + اخفق في الخلاط",
            ),
            "skin-formed": Failure(
                "قشرة جافة على السطح",
                "عدم تغطية بغلاف ملامس",
                "أزل القشرة + غطِّ مباشرة",
            ),
        },
        default_thickness=5,
        needs_cooking=True,
        difficulty_level=7,
        yield_amount=950,
    ),
    FillingPreset(
        key="ahmed-shawky-caramel",
        name="أحمد شوقي 1: كريمة كراميل بالزبدة",
        name_en="Ahmed Shawky Caramel Butter Cream",
        base_recipe={
            "heavy-cream-35": 250,
            "sour-cream-30": 100,
            "homemade-caramel": 250,
            "unsalted-butter": 75,
            "sea-salt-flakes": 1,
        },
        target_properties=_targets(
            1.10,
            (28000, 33000),
            (5.8, 6.2),
            (30, 33),
            0.88,
            stability="very-high",
            shelfLife=120,
            maturationTime={"min": 24, "max": 30},
        ),
        sensory_targets={
            "visual": "كريمي بيج كراميلي، لمعان قوي",
            "sweetness": "حلو مع عمق كراميل (7/10)",
            "aroma": "كراميل محمص",
        },
        required_equipment=(
            "Stand Mixer",
            "وعاء خلط 3 لتر",
            "سباتولا سيليكون قوية",
            "ميزان حرارة",
        ),
        critical_control_points=(
            CCP(
                "تحضير الكراميل المسبق",
                "كراميل ساخن → يذيب الكريمة | بارد → صلب",
                "ساخن: برّد حتى 25°C | صلب: دفّئ في حمام مائي",
            ),
            CCP(
                "خفق الزبدة",
                "زبدة باردة → كتل | دافئة جداً → دهنية",
                "باردة: اترك 10 دقائق | دافئة: برّد 5 دقائق",
            ),
            CCP(
                "دمج الكراميل",
                "إضافة دفعة واحدة → انفصال",
                "انفصل: أضف 1 ملعقة كريمة سائلة باردة",
            ),
            CCP(
                "دمج الكريمة المخفوقة",
                "خفق → فقدان الهواء",
                "لا يمكن - الوقاية فقط",
            ),
        ),
        failure_indicators={
            "separated": Failure(
                "طبقتين: كراميل أسفل + كريمة أعلى",
                "كراميل بارد أو إضافة سريعة",
                "اخفق بقوة 2-3 دقائق + أضف 1 ملعقة كريمة دافئة",
            ),
            "too-sweet": Failure(
                "حلاوة مفرطة",
                "كراميل كثير",
                "أضف 50-75جم سور كريم إضافية",
            ),
        },
        default_thickness=4,
        needs_cooking=False,
        difficulty_level=5,
        yield_amount=675,
    ),
    FillingPreset(
        key="ahmed-shawky-sugar",
        name="أحمد شوقي 2: كريمة سكر خفيفة",
        name_en="Ahmed Shawky Light Sugar Cream",
        base_recipe={
            "heavy-cream-35": 250,
            "powdered-sugar-fine": 150,
            "sour-cream-30": 500,
            "vanilla-extract": 7,
        },
        target_properties=_targets(
            1.08,
            (16000, 20000),
            (4.4, 4.6),
            (28, 30),
            0.94,
            stability="medium",
            shelfLife=72,
            maturationTime={"min": 18, "max": 24},
        ),
        sensory_targets={
            "visual": "أبيض ناصع، خفيف وجيد التهوية",
            "sweetness": "حلو متوازن (6/10)",
            "aroma": "كريمة طازجة",
        },
        required_equipment=(
            "Stand Mixer",
            "وعاء مبرد",
            "سباتولا سيليكون",
        ),
        critical_control_points=(
            CCP("خفق الكريمة", "خفق زائد → تحبب", "أضف 50مل كريمة باردة"),
            CCP(
                "إضافة السور كريم",
                "خفق بالخلاط → فقدان الهواء",
                "لا يمكن - وقاية فقط",
            ),
        ),
        failure_indicators={
            "too-soft": Failure("سائل جداً", "نقص خفق", "اخفق 1-2 دقيقة إضافية"),
            "curdled": Failure("حبيبات", "خفق زائد", "أضف 50مل كريمة باردة"),
        },
        default_thickness=5,
        needs_cooking=False,
        difficulty_level=3,
        yield_amount=900,
    ),
    FillingPreset(
        key="ahmed-shawky-condensed",
        name="أحمد شوقي 3: حليب مكثف غني",
        name_en="Ahmed Shawky Condensed Milk Cream",
        base_recipe={
            "sweetened-condensed-milk": 400,
            "unsalted-butter": 100,
            "cream-cheese-full-fat": 120,
            "lemon-juice-fresh": 10,
        },
        target_properties=_targets(
            1.12,
            (30000, 38000),
            (6.0, 6.3),
            (35, 38),
            0.85,
            stability="very-high",
            shelfLife=120,
            maturationTime={"min": 30, "max": 36},
        ),
        sensory_targets={
            "visual": "كريمي أبيض مصفر، كثيف",
            "sweetness": "حلو جداً (8/10)",
            "aroma": "حليب مكثف حلو",
        },
        required_equipment=(
            "Stand Mixer",
            "سباتولا قوية",
        ),
        critical_control_points=(
            CCP("خفق الزبدة والجبن", "مكونات باردة → كتل", "دفّئ قليلاً"),
            CCP(
                "إضافة الحليب المكثف",
                "إضافة دفعة واحدة → ثقيل جداً",
                "كثيف جداً: أضف 1-2 ملعقة حليب",
            ),
        ),
        failure_indicators={
            "too-stiff": Failure(
                "صلب كالزبدة",
                "خفق زائد أو بارد",
                "اترك 10 دقائق حرارة الغرفة",
            ),
            "lumps": Failure("كتل جبن أو زبدة", "مكونات باردة", "دفّئ قليلاً واخفق"),
        },
        default_thickness=4,
        needs_cooking=False,
        difficulty_level=4,
        yield_amount=620,
    ),
    FillingPreset(
        key="ahmed-abdelsalam",
        name="أحمد عبد السلام: الثلاثي الغني",
        name_en="Ahmed Abdelsalam Triple Richness",
        base_recipe={
            "unsalted-butter": 200,
            "cream-cheese-full-fat": 200,
            "dulce-de-leche-authentic": 200,
            "vanilla-extract": 5,
            "sea-salt-fine": 1,
        },
        target_properties=_targets(
            1.13,
            (32000, 40000),
            (5.5, 5.8),
            (30, 34),
            0.82,
            stability="excellent",
            shelfLife=144,
            maturationTime={"min": 36, "max": 48},
        ),
        sensory_targets={
            "visual": "كريمي بيج فاتح، كثيف جداً",
            "sweetness": "حلو غني (7/10)",
            "aroma": "زبدة كراميل",
        },
        required_equipment=(
            "Stand Mixer قوي",
            "ميزان حرارة",
            "سباتولا قوية جداً",
        ),
        critical_control_points=(
            CCP(
                "تساوي درجة حرارة المكونات",
                "اختلاف حرارة → انفصال وتكتل",
                "دفّئ البارد أو برّد الدافئ",
            ),
            CCP("خفق الزبدة", "نقص خفق → كثيفة جداً", "اخفق 30-60 ثانية إضافية"),
            CCP(
                "دمج الجبن الكريمي",
                "دمج سريع → كتل",
                "كتل: اخفق أطول أو دفّئ قليلاً",
            ),
            CCP(
                "دمج الدولسي",
                "دولسي بارد → كتل | خفق زائد → سيولة",
                "كتل: دفّئ لـ25°C | سيولة: برّد 30 دقيقة",
            ),
        ),
        failure_indicators={
            "separated": Failure(
                "طبقتين منفصلتين",
                "اختلاف حرارة المكونات",
                "دفّئ قليلاً (25°C) واخفق بقوة 3-4 دقائق",
            ),
            "grainy": Failure("حبيبات سكر", "دولسي بارد جداً", "دفّئ لـ25°C واخفق"),
            "too-soft": Failure("طري جداً", "خفق زائد أو حرارة عالية", "برّد 30 دقيقة"),
            "butter-lumps": Failure(
                "كتل زبدة صفراء",
                "زبدة باردة",
                "اترك 10 دقائق واخفق مرة أخرى",
            ),
        },
        default_thickness=3.5,
        needs_cooking=False,
        difficulty_level=6,
        yield_amount=600,
    ),
)

FILLING_PRESETS: Final[Mapping[str, FillingPreset]] = MappingProxyType(
    {preset.key: preset for preset in _PRESETS}
)


def get_preset(
    key: str,
) -> FillingPreset | None:
    """Look up a preset by key; ``None`` if it doesn't exist."""
    return FILLING_PRESETS.get(key)


def list_presets() -> list[str]:
    """Preset keys in catalog order."""
    return list(FILLING_PRESETS)
