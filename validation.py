"""Input bounds checks for dough recipes, pans, fillings and tempering.

All validators collect every violation instead of stopping at the first
one and report them as human-readable messages. They never raise for bad
input.

Exports
-------
is_positive_number
validate_recipe
validate_pan_dimensions
validate_filling_recipe
validate_tempering_inputs
"""

import logging
import math

from constants import (
    DOUGH_BOUNDS,
    PAN_DIMENSION_MAX_CM,
    PAN_DIMENSION_MIN_CM,
    SODA_FLOUR_WARNING_PCT,
)
from filling import (
    amount_of,
)
from models.recipe import (
    ValidationResult,
)

logger = logging.getLogger(__name__)

# (key, min, max, message)
_TEMPERING_BOUNDS = (
    ("egg_mass", 1, 1000, "كتلة البيض غير صالحة"),
    ("egg_temp", 0, 30, "حرارة البيض غير صالحة"),
    ("liquid_mass", 1, 5000, "كتلة الخليط الساخن غير صالحة"),
    ("liquid_temp", 60, 120, "حرارة الخليط الساخن غير صالحة"),
    ("batch_count", 2, 10, "عدد الدفعات غير صالح"),
)


def _as_number(value) -> float | None:
    """Coerce ``value`` to a finite float, or ``None`` if it isn't one."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def is_positive_number(
    value,
    minimum: float = 0,
    maximum: float = math.inf,
) -> bool:
    """Return True if ``value`` is a finite number within ``[minimum, maximum]``."""
    number = _as_number(value)
    return number is not None and minimum <= number <= maximum


def validate_recipe(
    recipe,
) -> ValidationResult:
    """Bounds-check a dough recipe.

    Parameters
    ----------
    recipe : Mapping[str, float]
        Ingredient masses. Only keys in the dough bounds table are checked;
        others pass through untouched.

    Returns
    -------
    ValidationResult
        ``valid`` is False whenever any message was produced, including the
        soda-to-flour ratio warning.
    """
    errors: list[str] = []

    for key, value in recipe.items():
        bounds = DOUGH_BOUNDS.get(key)
        if bounds is None:
            continue
        minimum, maximum, name = bounds
        if not is_positive_number(value, minimum, maximum):
            errors.append(f"{name}: قيمة غير صالحة ({value})")

    flour = _as_number(recipe.get("flour", 0))
    soda = _as_number(recipe.get("soda", 0))
    if flour is not None and soda is not None and flour > 0 and soda > 0:
        ratio = soda / flour * 100
        if ratio > SODA_FLOUR_WARNING_PCT:
            # Reported in the same list, so it blocks validity too
            errors.append(
                f"تحذير: نسبة الصودا عالية جداً ({ratio:.1f}% من الدقيق) "
                "- قد تسبب طعماً قلوياً."
            )

    if errors:
        logger.debug("Recipe rejected with %d issue(s)", len(errors))
    return ValidationResult(valid=not errors, errors=tuple(errors))


def validate_pan_dimensions(
    shape: str,
    dim1,
    dim2=None,
) -> list[str]:
    """Check pan dimensions (cm); returns a list of messages, empty if fine."""
    errors: list[str] = []
    if not is_positive_number(dim1, PAN_DIMENSION_MIN_CM, PAN_DIMENSION_MAX_CM):
        errors.append("البعد الأول غير صالح")
    if shape == "rectangle" and not is_positive_number(
        dim2, PAN_DIMENSION_MIN_CM, PAN_DIMENSION_MAX_CM
    ):
        errors.append("البعد الثاني غير صالح")
    return errors


def validate_filling_recipe(
    recipe,
) -> ValidationResult:
    """Reject a filling with no mass or with negative amounts."""
    errors: list[str] = []
    amounts = [amount_of(entry) for entry in recipe.values()]
    if sum(amounts) == 0:
        errors.append("وزن الحشو الإجمالي صفر")
    if any(amount < 0 for amount in amounts):
        errors.append("يوجد قيم سالبة في مقادير الحشو")
    return ValidationResult(valid=not errors, errors=tuple(errors))


def validate_tempering_inputs(
    egg_mass,
    egg_temp,
    liquid_mass,
    liquid_temp,
    batch_count,
) -> ValidationResult:
    """Check tempering inputs against realistic kitchen ranges."""
    values = {
        "egg_mass": egg_mass,
        "egg_temp": egg_temp,
        "liquid_mass": liquid_mass,
        "liquid_temp": liquid_temp,
        "batch_count": batch_count,
    }
    errors = [
        message
        for key, minimum, maximum, message in _TEMPERING_BOUNDS
        if not is_positive_number(values[key], minimum, maximum)
    ]
    return ValidationResult(valid=not errors, errors=tuple(errors))
