"""Command-line interface for the honey-cake calculator.

Parses a subcommand, runs the matching engine and prints the result.
Engines never print; their ``None`` / failure results are turned into
error messages and a non-zero exit status here.

Exports
-------
cmd_analyze
cmd_bake
cmd_temper
cmd_scale
cmd_filling
cmd_presets
cmd_save
cmd_saved
cmd_delete
main

Notes
-----
Use `python main.py analyze --flour 500 ...` (or the ``medovik`` script)
to run from the shell.
"""

# Early config path detection - must happen before loading any settings
import sys


def _detect_config_path() -> str | None:
    """Extract --config or -c from sys.argv before full parsing."""
    args = sys.argv[1:]
    for i, arg in enumerate(args):
        if arg in ("--config", "-c") and i + 1 < len(args):
            return args[i + 1]
        if arg.startswith("--config="):
            return arg.split("=", 1)[1]
    return None


_early_config = _detect_config_path()
if _early_config:
    from config import set_config_path

    set_config_path(_early_config)


import logging

from analysis import (
    analyze_recipe,
    compute_recipe_adjustment,
    get_advisor_report,
    is_usable,
    predict_dough_texture,
)
from baking import (
    get_baking_schedule,
    simulate_baking,
)
from chemistry import (
    build_compatibility_report,
    compare_to_preset_targets,
    estimate_cake_chemistry,
    estimate_filling_chemistry,
)
from config import (
    get_cached_config,
)
from filling import (
    amount_of,
    scale_with_sweetness_adjustment,
)
from interface.cli import (
    build_parser,
    dough_from_args,
)
from interface.persistence import (
    add_comparison,
    add_saved_recipe,
    delete_comparison,
    delete_saved_recipe,
    load_comparisons,
    load_saved_recipes,
)
from interface.render import (
    display_adjustment,
    display_advice,
    display_analysis,
    display_baking,
    display_cake_chemistry,
    display_comparisons,
    display_compatibility,
    display_errors,
    display_filling_chemistry,
    display_filling_requirement,
    display_filling_scale,
    display_layer_plan,
    display_preparation_protocol,
    display_preset,
    display_preset_comparison,
    display_preset_list,
    display_saved_recipes,
    display_scaled_recipe,
    display_tempering,
    display_tempering_limits,
)
from logs.logging_utils import (
    setup_logging,
)
from models.recipe import (
    AnalysisFailure,
    BakingParams,
)
from models.tempering import (
    TemperingFailure,
)
from presets import (
    FILLING_PRESETS,
    get_preset,
)
from protocols import (
    get_preparation_protocol,
)
from scaling import (
    calculate_advanced,
    calculate_filling,
    calculate_normal,
    calculate_reverse,
)
from tempering import (
    calculate_optimal_batches,
    max_hot_mass_for_target,
    max_hot_temp_for_target,
    needed_egg_increase,
)
from validation import (
    is_positive_number,
    validate_filling_recipe,
    validate_pan_dimensions,
)

logger = logging.getLogger(__name__)

# (attribute, min, max, label) caller-side ranges for scaling inputs
_ADVANCED_RANGES = (
    ("layer_weight", 50, 300, "layer weight (50-300 g)"),
    ("layers", 1, 20, "layer count (1-20)"),
    ("extra", 0, 30, "extra margin (0-30 %)"),
)


def _analyze_or_report(
    recipe,
):
    """Analyse ``recipe``; print why when the analysis is not usable."""
    analysis = analyze_recipe(recipe)
    if isinstance(analysis, AnalysisFailure):
        display_errors(analysis.error.split("\n"))
    elif analysis is None:
        display_errors(["recipe is empty"])
    return analysis if is_usable(analysis) else None


def _pan_from_args(
    args,
) -> tuple[str, float, float | None]:
    dim1 = args.dim1
    if dim1 is None:
        dim1 = get_cached_config().scaling.default_pan_diameter_cm
    return args.shape, dim1, args.dim2


def _range_errors(
    args,
    ranges,
) -> list[str]:
    return [
        f"invalid {label}"
        for attribute, minimum, maximum, label in ranges
        if not is_positive_number(getattr(args, attribute), minimum, maximum)
    ]


def _baking_params(
    args,
) -> BakingParams:
    baking = get_cached_config().baking
    return BakingParams(
        temp=args.temp or baking.temp,
        time=args.time or baking.time,
        thickness_mm=getattr(args, "thickness", None) or baking.thickness_mm,
    )


def cmd_analyze(
    args,
) -> int:
    """Execute the ``analyze`` subcommand.

    Prints the composition analysis and dough texture, plus advice cards and
    a gram adjustment when requested.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed CLI arguments.
    """
    analysis = _analyze_or_report(dough_from_args(args))
    if analysis is None:
        return 1

    display_analysis(analysis, predict_dough_texture(analysis))
    if args.advice:
        display_advice(get_advisor_report(analysis))
    if args.adjust:
        display_adjustment(compute_recipe_adjustment(analysis))
    return 0


def cmd_bake(
    args,
) -> int:
    """Execute the ``bake`` subcommand.

    Oven temperature, time and thickness fall back to the ``baking`` config
    section.
    """
    recipe = dough_from_args(args)
    analysis = _analyze_or_report(recipe)
    if analysis is None:
        return 1

    params = _baking_params(args)
    result = simulate_baking(analysis, params.temp, params.time, params.thickness_mm)
    schedule = get_baking_schedule(analysis, params.temp, params.thickness_mm)
    display_baking(result, schedule)
    if args.chemistry:
        display_cake_chemistry(estimate_cake_chemistry(recipe, params))
    return 0


def cmd_temper(
    args,
) -> int:
    """Execute the ``temper`` subcommand.

    When the blend gets too hot, also prints how to keep a single pour under
    the configured target temperature.
    """
    settings = get_cached_config().tempering
    batch_count = args.batches or settings.batch_count
    breakdown = {
        "butter": args.hot_butter,
        "sugar": args.hot_sugar,
        "honey": args.hot_honey,
        "soda": args.hot_soda,
    }
    result = calculate_optimal_batches(
        args.egg_mass,
        args.egg_temp,
        args.liquid_mass,
        args.liquid_temp,
        batch_count,
        breakdown if any(breakdown.values()) else None,
    )
    if isinstance(result, TemperingFailure):
        display_errors(result.error.split(", "))
        return 1

    display_tempering(result)
    if result.safety_status != "safe":
        target = settings.target_temp
        display_tempering_limits(
            target,
            max_hot_mass_for_target(
                args.egg_mass, args.egg_temp, args.liquid_temp, target, result.liquid_cp
            ),
            max_hot_temp_for_target(
                args.egg_mass, args.egg_temp, args.liquid_mass, target, result.liquid_cp
            ),
            needed_egg_increase(
                args.egg_mass,
                args.egg_temp,
                args.liquid_mass,
                args.liquid_temp,
                target,
                result.liquid_cp,
            ),
        )
    return 0


def cmd_scale(
    args,
) -> int:
    """Execute the ``scale`` subcommand in ``normal``, ``advanced`` or ``reverse`` mode."""
    scaling = get_cached_config().scaling

    if args.mode == "advanced":
        errors = _range_errors(args, _ADVANCED_RANGES)
        if errors:
            display_errors(errors)
            return 1
        analysis = _analyze_or_report(dough_from_args(args))
        if analysis is None:
            return 1
        display_scaled_recipe(
            calculate_advanced(analysis, args.layer_weight, args.layers, args.extra)
        )
        return 0

    shape, dim1, dim2 = _pan_from_args(args)
    errors = validate_pan_dimensions(shape, dim1, dim2)
    thickness = args.thickness or scaling.layer_thickness_mm

    if args.mode == "reverse":
        if not is_positive_number(args.layers, 1, 20):
            errors.append("invalid layer count (1-20)")
        if not is_positive_number(thickness, 1, 5):
            errors.append("invalid layer thickness (1-5 mm)")
        if errors:
            display_errors(errors)
            return 1
        display_scaled_recipe(calculate_reverse(shape, dim1, dim2, args.layers, thickness))
        return 0

    if errors:
        display_errors(errors)
        return 1
    analysis = _analyze_or_report(dough_from_args(args))
    if analysis is None:
        return 1
    plan = calculate_normal(analysis, shape, dim1, dim2, thickness, scaling.air_factor)
    if plan is None:
        display_errors(["pan area and layer thickness must be positive"])
        return 1
    display_layer_plan(plan)
    return 0


def cmd_filling(
    args,
) -> int:
    """Execute the ``filling`` subcommand.

    Takes a preset or explicit ingredients, optionally scales it (with
    sweetness reduction), sizes it for a pan, prints its chemistry and,
    with ``--compare``/``--save``, scores it against the dough.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed CLI arguments.
    """
    config = get_cached_config()

    preset = None
    if args.preset:
        preset = get_preset(args.preset)
        if preset is None:
            display_errors([f"unknown preset {args.preset!r}"])
            return 1
        recipe = {key: amount_of(entry) for key, entry in preset.base_recipe.items()}
    else:
        recipe = dict(args.ingredient)

    validation = validate_filling_recipe(recipe)
    if not validation.valid:
        display_errors(validation.errors)
        return 1

    if args.target_weight or args.reduce_sweetness:
        if not is_positive_number(args.reduce_sweetness, 0, 100):
            display_errors(["invalid sweetness reduction (0-100 %)"])
            return 1
        target_weight = args.target_weight or sum(recipe.values())
        scaled = scale_with_sweetness_adjustment(
            recipe, target_weight, args.reduce_sweetness
        )
        display_filling_scale(scaled)
        recipe = scaled.recipe

    if args.layers is not None:
        shape, dim1, dim2 = _pan_from_args(args)
        thickness = args.thickness or config.scaling.filling_thickness_mm
        errors = validate_pan_dimensions(shape, dim1, dim2)
        if not is_positive_number(args.layers, 1, 20):
            errors.append("invalid layer count (1-20)")
        if not is_positive_number(thickness, 2, 10):
            errors.append("invalid filling thickness (2-10 mm)")
        if errors:
            display_errors(errors)
            return 1
        display_filling_requirement(
            calculate_filling(recipe, shape, dim1, dim2, args.layers, thickness)
        )

    chemistry = estimate_filling_chemistry(recipe)
    display_filling_chemistry(chemistry)
    if preset is not None:
        display_preset_comparison(compare_to_preset_targets(chemistry, preset))

    if not (args.compare or args.save):
        return 0

    dough = dough_from_args(args)
    if _analyze_or_report(dough) is None:
        return 1
    params = BakingParams(
        temp=args.temp or config.baking.temp,
        time=args.time or config.baking.time,
        thickness_mm=config.baking.thickness_mm,
    )
    cake = estimate_cake_chemistry(dough, params)
    report = build_compatibility_report(cake, chemistry)
    display_cake_chemistry(cake)
    display_compatibility(report)

    if args.save:
        record = add_comparison(
            recipe=dough,
            baking_params=params.to_dict(),
            dough_chemistry=cake.to_dict(),
            filling_chemistry=chemistry.to_dict(),
            compatibility=report.to_dict(),
            notes=args.notes,
        )
        print(f"Comparison saved (id {record['id']}).")
    return 0


def cmd_presets(
    args,
) -> int:
    """Execute the ``presets`` subcommand (list all, or show one by key with its method)."""
    if args.key is None:
        display_preset_list(list(FILLING_PRESETS.values()))
        return 0
    preset = get_preset(args.key)
    if preset is None:
        display_errors([f"unknown preset {args.key!r}"])
        return 1
    display_preset(preset)
    protocol = get_preparation_protocol(preset.key)
    if protocol is not None:
        display_preparation_protocol(protocol)
    return 0


def cmd_save(
    args,
) -> int:
    """Execute the ``save`` subcommand; only usable analyses are stored."""
    analysis = _analyze_or_report(dough_from_args(args))
    if analysis is None:
        return 1
    record = add_saved_recipe(args.name, analysis.to_dict())
    print(f"Recipe '{args.name}' saved (id {record['id']}).")
    return 0


def cmd_saved(
    args,
) -> int:
    if args.comparisons:
        display_comparisons(load_comparisons())
    else:
        display_saved_recipes(load_saved_recipes())
    return 0


def cmd_delete(
    args,
) -> int:
    deleted = (
        delete_comparison(args.id) if args.comparison else delete_saved_recipe(args.id)
    )
    if not deleted:
        display_errors([f"no record with id {args.id}"])
        return 1
    print("Deleted.")
    return 0


def main(
    argv: list[str] | None = None,
) -> int:
    """CLI entry point.

    Parses args, configures logging, and dispatches to the selected subcommand.
    Returns the process exit status.
    """

    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # --config was already applied early when running from the shell;
    # apply it here too for programmatic calls with an explicit argv.
    if argv is not None and args.config:
        from config import set_config_path

        set_config_path(args.config)

    if args.cmd is None:
        parser.print_help()
        return 0
    logger.debug("Running %s", args.cmd)
    command = args.cmd
    if command == "analyze":
        return cmd_analyze(args)
    elif command == "bake":
        return cmd_bake(args)
    elif command == "temper":
        return cmd_temper(args)
    elif command == "scale":
        return cmd_scale(args)
    elif command == "filling":
        return cmd_filling(args)
    elif command == "presets":
        return cmd_presets(args)
    elif command == "save":
        return cmd_save(args)
    elif command == "saved":
        return cmd_saved(args)
    elif command == "delete":
        return cmd_delete(args)
    parser.error(f"Unknown command: {command}")


if __name__ == "__main__":
    sys.exit(main())
