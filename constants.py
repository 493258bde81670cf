"""Reference tables for dough analysis, baking, tempering and fillings.

Conventions
-----------
- Masses are in **grams**; percentages are **percent of total mass**.
- Temperatures are in **°C**, times in **minutes**, thickness in **mm**
  unless noted (pan dimensions are in cm).
- Specific heats are in kJ/kg·K, densities in g/cm³.

Notes
-----
Every table is exposed as a read-only mapping (via `MappingProxyType`) over
a private source dict. Edit values in the private dicts only. Filling
ingredient keys are open-ended; a key missing from a filling table simply
contributes nothing.
"""

# Read-only mapping wrapper + explicit "constant" typing
from types import (
    MappingProxyType,
)
from typing import (
    Final,
    Mapping,
)

# --- Dough composition -------------------------------------------------------

DOUGH_KEYS: Final[tuple[str, ...]] = (
    "flour",
    "butter",
    "sugar",
    "honey",
    "eggs",
    "soda",
)

# Starting recipe offered by the CLI, g
_DEFAULT_DOUGH_DICT: Final[dict[str, float]] = {
    "flour": 500,
    "butter": 120,
    "sugar": 200,
    "honey": 100,
    "eggs": 95,
    "soda": 5.5,
}
DEFAULT_DOUGH: Final[Mapping[str, float]] = MappingProxyType(_DEFAULT_DOUGH_DICT)

# Iteration order here is the order of analysis checks and advice cards
_SCIENTIFIC_RANGES_DICT: Final[dict[str, Mapping[str, float]]] = {
    "flour": MappingProxyType({"min": 48.0, "max": 52.0, "ideal": 50.0}),
    "butter": MappingProxyType({"min": 10.0, "max": 14.0, "ideal": 12.0}),
    "sugars": MappingProxyType({"min": 28.0, "max": 33.0, "ideal": 30.5}),
    "eggs": MappingProxyType({"min": 8.0, "max": 11.0, "ideal": 9.5}),
    "soda": MappingProxyType({"min": 0.4, "max": 0.8, "ideal": 0.55}),
}

# Water fraction of each liquid-bearing dough ingredient
_HYDRATION_DICT: Final[dict[str, float]] = {
    "eggs": 0.75,
    "honey": 0.18,
    "butter": 0.16,
}

SCIENTIFIC_RANGES: Final[Mapping[str, Mapping[str, float]]] = MappingProxyType(
    _SCIENTIFIC_RANGES_DICT
)
HYDRATION: Final[Mapping[str, float]] = MappingProxyType(_HYDRATION_DICT)

# --- Validation bounds ----------------------------------------------------------

# (min g, max g, display name)
_DOUGH_BOUNDS_DICT: Final[dict[str, tuple[float, float, str]]] = {
    "flour": (0, 10000, "دقيق"),
    "butter": (0, 5000, "زبدة"),
    "sugar": (0, 5000, "سكر"),
    "honey": (0, 5000, "عسل"),
    "eggs": (0, 5000, "بيض"),
    "soda": (0, 100, "صودا الخبز"),
}
DOUGH_BOUNDS: Final[Mapping[str, tuple[float, float, str]]] = MappingProxyType(
    _DOUGH_BOUNDS_DICT
)

# Soda above this share of flour (pp) is reported
SODA_FLOUR_WARNING_PCT: Final[float] = 2.0

PAN_DIMENSION_MIN_CM: Final[float] = 10.0
PAN_DIMENSION_MAX_CM: Final[float] = 100.0

# --- Thermal properties ---------------------------------------------------------

_SPECIFIC_HEAT_DICT: Final[dict[str, float]] = {
    "egg": 3.3,
    "butter": 2.1,
    "sugar": 1.25,
    "honey": 3.35,
    "soda": 0.9,
    "liquid": 2.4,  # fallback for the hot mixture
}
SPECIFIC_HEAT: Final[Mapping[str, float]] = MappingProxyType(_SPECIFIC_HEAT_DICT)

# Percent of hot liquid poured per batch
_BATCH_DISTRIBUTIONS_DICT: Final[dict[int, tuple[int, ...]]] = {
    3: (25, 35, 40),
    4: (20, 25, 25, 30),
    5: (15, 20, 20, 20, 25),
    6: (12, 15, 18, 18, 18, 19),
}
BATCH_DISTRIBUTIONS: Final[Mapping[int, tuple[int, ...]]] = MappingProxyType(
    _BATCH_DISTRIBUTIONS_DICT
)
DEFAULT_BATCH_COUNT: Final[int] = 5

# Max blended temperature bands for egg tempering
TEMPER_DANGER_TEMP: Final[float] = 68.0
TEMPER_WARNING_TEMP: Final[float] = 65.0
DEFAULT_TEMPER_TARGET: Final[float] = 60.0

# --- Densities / geometry -------------------------------------------------------

_DENSITIES_DICT: Final[dict[str, float]] = {
    "flour": 0.593,
    "butter": 0.911,
    "sugar": 0.845,
    "honey": 1.420,
    "eggs": 1.031,
    "soda": 2.159,
}
DENSITIES: Final[Mapping[str, float]] = MappingProxyType(_DENSITIES_DICT)

AVERAGE_DOUGH_DENSITY: Final[float] = 1.25
DEFAULT_AIR_FACTOR: Final[float] = 0.03
FILLING_DENSITY: Final[float] = 1.1
DEFAULT_LAYER_THICKNESS_MM: Final[float] = 3.0
DEFAULT_FILLING_THICKNESS_MM: Final[float] = 5.0

# --- Baking ---------------------------------------------------------------------

DEFAULT_BAKING_TEMP: Final[float] = 180.0
DEFAULT_BAKING_TIME: Final[float] = 7.0
MAILLARD_START_TEMP: Final[float] = 140.0
IDEAL_COLOR_INDEX: Final[float] = 100.0
MIN_BAKING_TIME: Final[int] = 4

# --- Filling: sweetness ---------------------------------------------------------

# Relative sweetening power, sucrose = 100
_SWEETNESS_POWER_DICT: Final[dict[str, float]] = {
    "sucrose": 100,
    "fructose": 173,
    "glucose": 74,
    "lactose": 16,
    "honey": 110,
    "condensed-milk": 65,
    "dulce-de-leche": 78,
    "caramel": 140,
}

# Fraction of an ingredient's mass that is sugar
_SUGAR_CONTENT_DICT: Final[dict[str, float]] = {
    "powdered-sugar": 1.0,
    "powdered-sugar-fine": 1.0,
    "sugar": 1.0,
    "granulated-sugar": 1.0,
    "condensed-milk": 0.55,
    "sweetened-condensed-milk": 0.55,
    "dulce-de-leche": 0.55,
    "dulce-de-leche-authentic": 0.55,
    "caramel": 0.70,
    "homemade-caramel": 0.70,
    "honey": 0.82,
    "honey-raw": 0.82,
    "sour-cream": 0.04,
    "sour-cream-30": 0.04,
    "whipping-cream": 0.03,
    "heavy-cream-35": 0.03,
    "cream-cheese": 0.03,
    "cream-cheese-full-fat": 0.03,
    "mascarpone": 0.03,
    "butter": 0.001,
    "unsalted-butter": 0.001,
    "milk": 0.05,
    "whole-milk": 0.05,
    "egg-yolks": 0.01,
    "egg-yolks-large": 0.01,
    "vanilla-extract": 0.0,
    "vanilla-bean-pod": 0.0,
    "cornstarch": 0.0,
    "gelatin-sheets": 0.0,
    "water-gelatin": 0.0,
    "sea-salt-fine": 0.0,
    "sea-salt-flakes": 0.0,
    "lemon-juice-fresh": 0.0,
    "orange-zest": 0.0,
    # dough ingredients, so the same index works on a dough map
    "flour": 0.01,
    "eggs": 0.01,
    "soda": 0.0,
}

_SUGAR_TYPE_DICT: Final[dict[str, str]] = {
    "powdered-sugar": "sucrose",
    "powdered-sugar-fine": "sucrose",
    "sugar": "sucrose",
    "granulated-sugar": "sucrose",
    "honey": "honey",
    "honey-raw": "honey",
    "condensed-milk": "condensed-milk",
    "sweetened-condensed-milk": "condensed-milk",
    "dulce-de-leche": "dulce-de-leche",
    "dulce-de-leche-authentic": "dulce-de-leche",
    "caramel": "caramel",
    "homemade-caramel": "caramel",
    "sour-cream": "lactose",
    "sour-cream-30": "lactose",
    "whipping-cream": "lactose",
    "heavy-cream-35": "lactose",
    "cream-cheese": "lactose",
    "cream-cheese-full-fat": "lactose",
    "mascarpone": "lactose",
    "milk": "lactose",
    "whole-milk": "lactose",
    "flour": "natural",
    "eggs": "natural",
}
DEFAULT_SUGAR_TYPE: Final[str] = "sucrose"

SWEETNESS_POWER: Final[Mapping[str, float]] = MappingProxyType(
    _SWEETNESS_POWER_DICT
)
SUGAR_CONTENT: Final[Mapping[str, float]] = MappingProxyType(_SUGAR_CONTENT_DICT)
SUGAR_TYPE: Final[Mapping[str, str]] = MappingProxyType(_SUGAR_TYPE_DICT)

# --- Filling: water activity ----------------------------------------------------

_WATER_CONTENT_DICT: Final[dict[str, float]] = {
    "whipping-cream": 0.60,
    "heavy-cream-35": 0.60,
    "sour-cream": 0.72,
    "sour-cream-30": 0.72,
    "cream-cheese": 0.55,
    "cream-cheese-full-fat": 0.55,
    "butter": 0.16,
    "unsalted-butter": 0.16,
    "condensed-milk": 0.27,
    "sweetened-condensed-milk": 0.27,
    "dulce-de-leche": 0.20,
    "dulce-de-leche-authentic": 0.20,
    "caramel": 0.15,
    "homemade-caramel": 0.15,
    "powdered-sugar": 0.005,
    "powdered-sugar-fine": 0.005,
    "sugar": 0.005,
    "granulated-sugar": 0.005,
    "milk": 0.87,
    "whole-milk": 0.87,
    "egg-yolks": 0.50,
    "egg-yolks-large": 0.50,
    "honey": 0.18,
    "honey-raw": 0.18,
    "mascarpone": 0.50,
    "cornstarch": 0.12,
    "gelatin-sheets": 0.10,
    "vanilla-extract": 0.40,
    "lemon-juice-fresh": 0.90,
    "flour": 0.12,
    "eggs": 0.75,
}
WATER_CONTENT: Final[Mapping[str, float]] = MappingProxyType(_WATER_CONTENT_DICT)

# Ingredients whose mass counts as dissolved solute (60 % of mass)
HIGH_SUGAR_INGREDIENTS: Final[frozenset[str]] = frozenset(
    {
        "condensed-milk",
        "sweetened-condensed-milk",
        "dulce-de-leche",
        "dulce-de-leche-authentic",
        "caramel",
        "homemade-caramel",
        "powdered-sugar",
        "powdered-sugar-fine",
        "sugar",
        "granulated-sugar",
        "honey",
        "honey-raw",
    }
)
SOLUTE_FRACTION: Final[float] = 0.6
SOLUTE_WATER_FACTOR: Final[float] = 0.003
MAX_WATER_ACTIVITY: Final[float] = 0.99

# --- Filling: stability ---------------------------------------------------------

# (power, reason)
_STABILIZERS_DICT: Final[dict[str, tuple[float, str]]] = {
    "butter": (15, "دهون صلبة"),
    "unsalted-butter": (15, "دهون صلبة"),
    "cream-cheese": (20, "بروتينات مستحلبة"),
    "cream-cheese-full-fat": (20, "بروتينات مستحلبة"),
    "condensed-milk": (10, "سكريات عالية"),
    "sweetened-condensed-milk": (10, "سكريات عالية"),
    "dulce-de-leche": (12, "سكريات + مايلارد"),
    "dulce-de-leche-authentic": (12, "سكريات + مايلارد"),
    "caramel": (10, "سكريات مكرملة"),
    "homemade-caramel": (10, "سكريات مكرملة"),
    "cornstarch": (25, "جيلاتنة النشا"),
    "gelatin-sheets": (35, "شبكة جيلاتين"),
    "egg-yolks": (8, "ليسيثين مستحلب"),
    "egg-yolks-large": (8, "ليسيثين مستحلب"),
    "mascarpone": (15, "دهون ثقيلة"),
}
_DESTABILIZERS_DICT: Final[dict[str, tuple[float, str]]] = {
    "milk": (-10, "ماء زائد"),
    "whole-milk": (-10, "ماء زائد"),
    "whipping-cream": (-5, "دهون سائلة جزئياً"),
    "heavy-cream-35": (-5, "دهون سائلة جزئياً"),
}
STABILIZERS: Final[Mapping[str, tuple[float, str]]] = MappingProxyType(
    _STABILIZERS_DICT
)
DESTABILIZERS: Final[Mapping[str, tuple[float, str]]] = MappingProxyType(
    _DESTABILIZERS_DICT
)
STABILITY_BASE_SCORE: Final[float] = 50.0

# --- Filling: sweetness reduction -------------------------------------------------

# Sweet ingredient -> its canonical kind in SWEET_SUBSTITUTIONS
_SWEET_INGREDIENTS_DICT: Final[dict[str, str]] = {
    "powdered-sugar": "powdered-sugar",
    "powdered-sugar-fine": "powdered-sugar",
    "sugar": "sugar",
    "granulated-sugar": "sugar",
    "condensed-milk": "condensed-milk",
    "sweetened-condensed-milk": "condensed-milk",
    "dulce-de-leche": "dulce-de-leche",
    "dulce-de-leche-authentic": "dulce-de-leche",
    "honey": "honey",
    "honey-raw": "honey",
    "caramel": "caramel",
    "homemade-caramel": "caramel",
}

# Removed sweet mass is redistributed as {target: share}
_SWEET_SUBSTITUTIONS_DICT: Final[dict[str, Mapping[str, float]]] = {
    "condensed-milk": MappingProxyType({"sour-cream": 0.7, "butter": 0.3}),
    "dulce-de-leche": MappingProxyType({"cream-cheese": 0.6, "butter": 0.4}),
    "caramel": MappingProxyType({"cream-cheese": 0.6, "butter": 0.4}),
    "powdered-sugar": MappingProxyType({"whipping-cream": 1.0}),
    "sugar": MappingProxyType({"whipping-cream": 1.0}),
    "honey": MappingProxyType({}),
}
# Compensation lands on an existing variant of the target when present
_INGREDIENT_VARIANTS_DICT: Final[dict[str, tuple[str, ...]]] = {
    "sour-cream": ("sour-cream", "sour-cream-30"),
    "butter": ("butter", "unsalted-butter"),
    "cream-cheese": ("cream-cheese", "cream-cheese-full-fat"),
    "whipping-cream": ("whipping-cream", "heavy-cream-35"),
}
INGREDIENT_VARIANTS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    _INGREDIENT_VARIANTS_DICT
)

SWEET_INGREDIENTS: Final[Mapping[str, str]] = MappingProxyType(
    _SWEET_INGREDIENTS_DICT
)
SWEET_SUBSTITUTIONS: Final[Mapping[str, Mapping[str, float]]] = MappingProxyType(
    _SWEET_SUBSTITUTIONS_DICT
)
# Floor for the automatic extra reduction applied when scaling up
MIN_AUTO_SWEETNESS_FACTOR: Final[float] = 0.75

# --- Chemistry estimates ----------------------------------------------------------

# pH shift per unit mass fraction
_PH_CONTRIBUTIONS_DICT: Final[dict[str, float]] = {
    "honey": -0.3,
    "honey-raw": -0.3,
    "sour-cream": -0.4,
    "sour-cream-30": -0.4,
    "cream-cheese": -0.2,
    "cream-cheese-full-fat": -0.2,
    "lemon-juice": -2.0,
    "lemon-juice-fresh": -2.0,
    "soda": 2.5,
    "baking-powder": 1.8,
}
PH_CONTRIBUTIONS: Final[Mapping[str, float]] = MappingProxyType(
    _PH_CONTRIBUTIONS_DICT
)
DOUGH_BASE_PH: Final[float] = 7.0
FILLING_BASE_PH: Final[float] = 6.8

# Viscosity at 10 °C, centipoise
_BASE_VISCOSITY_DICT: Final[dict[str, float]] = {
    "sour-cream": 15000,
    "sour-cream-30": 15000,
    "whipping-cream": 8000,
    "heavy-cream-35": 8000,
    "cream-cheese": 25000,
    "cream-cheese-full-fat": 25000,
    "condensed-milk": 5000,
    "sweetened-condensed-milk": 5000,
    "dulce-de-leche": 15000,
    "dulce-de-leche-authentic": 15000,
    "caramel": 20000,
    "homemade-caramel": 20000,
    "butter": 50000,
    "unsalted-butter": 50000,
    "powdered-sugar": 1000,
    "powdered-sugar-fine": 1000,
    "honey": 12000,
    "honey-raw": 12000,
    "milk": 2000,
    "whole-milk": 2000,
    "egg-yolks": 6000,
    "egg-yolks-large": 6000,
}
BASE_VISCOSITY: Final[Mapping[str, float]] = MappingProxyType(
    _BASE_VISCOSITY_DICT
)
DEFAULT_VISCOSITY: Final[float] = 5000.0
VISCOSITY_TEMP_COEFF: Final[float] = 0.03
DOUGH_VISCOSITY_TEMP: Final[float] = 40.0
FILLING_VISCOSITY_TEMP: Final[float] = 10.0
