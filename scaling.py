"""Pan geometry and recipe scaling.

Converts between total recipe weight, per-layer weight and layer count for
a given pan, in four modes:

- forward (``calculate_normal``): recipe → how many layers it yields;
- target-driven (``calculate_advanced``): layer weight × count → recipe;
- reverse (``calculate_reverse``): pan → ideal-ratio recipe;
- filling (``calculate_filling``): pan → filling mass between layers.

Exports
-------
get_pan_area
calculate_effective_density
calculate_normal
calculate_advanced
calculate_reverse
calculate_filling

Notes
-----
Every mode returns ``None`` for a zero pan area or a zero base weight.
Inputs are not range-checked here; callers use `validation` first.
"""

import logging
import math

from analysis import (
    is_usable,
)
from constants import (
    AVERAGE_DOUGH_DENSITY,
    DEFAULT_AIR_FACTOR,
    DENSITIES,
    FILLING_DENSITY,
    SCIENTIFIC_RANGES,
)
from filling import (
    amount_of,
)
from models.recipe import (
    PanGeometry,
    RecipeAnalysis,
)
from models.scaling import (
    FillingRequirement,
    LayerPlan,
    ScaledRecipe,
)

logger = logging.getLogger(__name__)


def get_pan_area(
    shape: str,
    dim1: float,
    dim2: float | None = None,
) -> float:
    """Pan base area in cm² (0 for an unknown shape or a rectangle without width)."""
    return PanGeometry(shape, dim1, dim2).area


def calculate_effective_density(
    recipe,
    air_factor: float | None = None,
) -> float:
    """Dough density from ingredient volumes, corrected for trapped air.

    Only the six dough ingredients carry a density; any other key adds mass
    without volume.

    Parameters
    ----------
    recipe : Mapping[str, float]
        Ingredient masses, g.
    air_factor : float | None, optional
        Air fraction of the dough volume; defaults to 0.03.

    Returns
    -------
    float
        g/cm³. The average dough density when there is no mass or no
        ingredient with a known density.
    """
    total_mass = sum(recipe.values())
    if total_mass == 0:
        return AVERAGE_DOUGH_DENSITY

    solid_volume = 0.0
    for component, mass in recipe.items():
        density = DENSITIES.get(component.lower())
        if density:
            solid_volume += mass / density
    if solid_volume == 0:
        return AVERAGE_DOUGH_DENSITY

    air = air_factor if air_factor is not None else DEFAULT_AIR_FACTOR
    return total_mass / (solid_volume / (1 - air))


def calculate_normal(
    analysis: RecipeAnalysis | None,
    shape: str,
    dim1: float,
    dim2: float | None,
    thickness: float,
    air_factor: float | None = None,
) -> LayerPlan | None:
    """How many layers of ``thickness`` mm the analysed recipe fills.

    ``None`` when the analysis is unusable or a layer would weigh nothing
    (zero pan area or zero thickness).
    """
    if not is_usable(analysis):
        return None
    area = get_pan_area(shape, dim1, dim2)
    if area == 0:
        return None

    density = calculate_effective_density(analysis.recipe, air_factor)
    single_layer_weight = area * (thickness / 10) * density
    if single_layer_weight <= 0:
        return None
    num_layers = math.floor(analysis.total_weight / single_layer_weight)
    coverage = num_layers * single_layer_weight
    logger.debug(
        "%.1f g/layer at %.3f g/cm³ -> %d layers", single_layer_weight, density, num_layers
    )
    return LayerPlan(
        single_layer_weight=single_layer_weight,
        num_layers=num_layers,
        density=density,
        total_coverage=coverage,
        remainder=analysis.total_weight - coverage,
    )


def calculate_advanced(
    analysis: RecipeAnalysis | None,
    target_weight: float,
    target_count: int,
    extra: float = 0,
) -> ScaledRecipe | None:
    """Scale the recipe uniformly to ``target_count`` layers of ``target_weight`` g.

    ``extra`` is a safety margin in percent added on top of the total.
    """
    if not is_usable(analysis) or analysis.total_weight == 0:
        return None
    total_weight = target_weight * target_count * (1 + extra / 100)
    scaling_factor = total_weight / analysis.total_weight
    return ScaledRecipe(
        new_recipe={
            component: mass * scaling_factor
            for component, mass in analysis.recipe.items()
        },
        total_weight=total_weight,
        per_layer_weight=target_weight,
        scaling_factor=scaling_factor,
    )


def calculate_reverse(
    shape: str,
    dim1: float,
    dim2: float | None,
    target_count: int,
    thickness: float,
) -> ScaledRecipe | None:
    """Synthesize an ideal-ratio recipe that fills ``target_count`` layers.

    Components get their ideal share of the total; the combined sugars share
    is split evenly between sugar and honey.
    """
    area = get_pan_area(shape, dim1, dim2)
    if area == 0:
        return None

    single_layer_weight = area * (thickness / 10) * AVERAGE_DOUGH_DENSITY
    total_weight = single_layer_weight * target_count
    base_total = sum(bounds["ideal"] for bounds in SCIENTIFIC_RANGES.values())
    factor = total_weight / base_total

    sugars_weight = SCIENTIFIC_RANGES["sugars"]["ideal"] * factor
    ideal_recipe = {
        "flour": SCIENTIFIC_RANGES["flour"]["ideal"] * factor,
        "butter": SCIENTIFIC_RANGES["butter"]["ideal"] * factor,
        "sugar": sugars_weight * 0.5,
        "honey": sugars_weight * 0.5,
        "eggs": SCIENTIFIC_RANGES["eggs"]["ideal"] * factor,
        "soda": SCIENTIFIC_RANGES["soda"]["ideal"] * factor,
    }
    return ScaledRecipe(
        new_recipe=ideal_recipe,
        total_weight=sum(ideal_recipe.values()),
        per_layer_weight=single_layer_weight,
    )


def calculate_filling(
    base_filling,
    shape: str,
    dim1: float,
    dim2: float | None,
    layer_count: int,
    thickness: float,
) -> FillingRequirement | None:
    """Scale a base filling to cover the gaps between ``layer_count`` layers.

    A cake of N layers has ``max(1, N - 1)`` filling layers of ``thickness``
    mm at the filling density.
    """
    area = get_pan_area(shape, dim1, dim2)
    if area == 0:
        return None

    filling_layers = max(1, layer_count - 1)
    required_weight = area * (thickness / 10) * filling_layers * FILLING_DENSITY
    amounts = {key: amount_of(entry) for key, entry in base_filling.items()}
    base_total = sum(amounts.values())
    if base_total == 0:
        return None

    scaling_factor = required_weight / base_total
    return FillingRequirement(
        required_weight=required_weight,
        scaled_recipe={key: amount * scaling_factor for key, amount in amounts.items()},
        per_layer_amount=required_weight / filling_layers,
        filling_layers=filling_layers,
    )
