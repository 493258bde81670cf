"""Command-line argument builder (parser only)."""

import argparse

from constants import (
    DEFAULT_DOUGH,
    DOUGH_KEYS,
)


def parse_ingredient(
    text: str,
) -> tuple[str, float]:
    """Parse ``KEY=GRAMS`` (e.g. ``sour-cream=400``) for ``--ingredient``."""
    key, sep, grams = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected KEY=GRAMS, got {text!r}")
    try:
        return key.strip(), float(grams)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {grams!r}") from None


def _dough_parent() -> argparse.ArgumentParser:
    """Shared ``--flour ... --soda`` options, defaulting to the starter recipe."""
    parent = argparse.ArgumentParser(add_help=False)
    group = parent.add_argument_group("dough (grams)")
    for key in DOUGH_KEYS:
        group.add_argument(
            f"--{key}",
            type=float,
            default=DEFAULT_DOUGH[key],
            help=f"default {DEFAULT_DOUGH[key]:g}",
        )
    return parent


def _pan_parent() -> argparse.ArgumentParser:
    """Shared pan geometry options; ``--dim1`` falls back to the config diameter."""
    parent = argparse.ArgumentParser(add_help=False)
    group = parent.add_argument_group("pan (cm)")
    group.add_argument(
        "--shape",
        choices=("round", "rectangle"),
        default="round",
    )
    group.add_argument(
        "--dim1",
        type=float,
        default=None,
        help="Diameter, or length for a rectangle",
    )
    group.add_argument(
        "--dim2",
        type=float,
        default=None,
        help="Width (rectangle only)",
    )
    return parent


def _oven_options(
    parser: argparse.ArgumentParser,
) -> None:
    parser.add_argument(
        "--temp",
        type=float,
        default=None,
        help="Oven temperature °C (config default)",
    )
    parser.add_argument(
        "--time",
        type=float,
        default=None,
        help="Bake time per layer, minutes (config default)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with subcommands (``analyze``, ``bake``,
        ``temper``, ``scale``, ``filling``, ``presets``, ``save``,
        ``saved``, ``delete``) and global options.
    """
    parser = argparse.ArgumentParser(
        prog="medovik",
        description="Medovik honey-cake calculator",
    )
    # `required=False`: no subcommand prints help
    subparsers = parser.add_subparsers(
        dest="cmd",
        required=False,
    )

    # Global -v/--verbose for all commands (counting flag)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="-v for INFO, -vv for DEBUG",
    )
    # Already consumed before parsing (see main); kept so argparse accepts it
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="YAML config file",
    )

    dough = _dough_parent()
    pan = _pan_parent()

    # Subcommand: composition analysis, texture and advice
    analyze_parser = subparsers.add_parser(
        "analyze",
        parents=[dough],
        help="Analyse a dough recipe",
    )
    analyze_parser.add_argument(
        "--advice",
        action="store_true",
        help="Show a card for every out-of-range component",
    )
    analyze_parser.add_argument(
        "--adjust",
        action="store_true",
        help="Suggest gram changes toward the ideal ranges",
    )

    # Subcommand: baking prediction
    bake_parser = subparsers.add_parser(
        "bake",
        parents=[dough],
        help="Predict colour and texture of a baked layer",
    )
    _oven_options(bake_parser)
    bake_parser.add_argument(
        "--thickness",
        type=float,
        default=None,
        help="Layer thickness, mm (config default)",
    )
    bake_parser.add_argument(
        "--chemistry",
        action="store_true",
        help="Also estimate dough chemistry and baking effects",
    )

    # Subcommand: egg tempering
    temper_parser = subparsers.add_parser(
        "temper",
        help="Plan hot-liquid batches for tempering eggs",
    )
    temper_parser.add_argument("--egg-mass", type=float, required=True)
    temper_parser.add_argument("--egg-temp", type=float, default=20.0)
    temper_parser.add_argument("--liquid-mass", type=float, required=True)
    temper_parser.add_argument("--liquid-temp", type=float, required=True)
    temper_parser.add_argument(
        "--batches",
        type=int,
        default=None,
        help="Number of pours (config default)",
    )
    liquid_group = temper_parser.add_argument_group(
        "hot mixture composition (grams, optional)"
    )
    for key in ("butter", "sugar", "honey", "soda"):
        liquid_group.add_argument(
            f"--hot-{key}",
            type=float,
            default=0.0,
        )

    # Subcommand: scaling, one nested subcommand per mode
    scale_parser = subparsers.add_parser(
        "scale",
        help="Scale a recipe to a pan",
    )
    modes = scale_parser.add_subparsers(
        dest="mode",
        required=True,
    )
    normal_parser = modes.add_parser(
        "normal",
        parents=[dough, pan],
        help="How many layers does this recipe make?",
    )
    normal_parser.add_argument("--thickness", type=float, default=None)
    advanced_parser = modes.add_parser(
        "advanced",
        parents=[dough],
        help="Scale the recipe to N layers of a given weight",
    )
    advanced_parser.add_argument("--layer-weight", type=float, required=True)
    advanced_parser.add_argument("--layers", type=int, required=True)
    advanced_parser.add_argument(
        "--extra",
        type=float,
        default=0.0,
        help="Safety margin, percent",
    )
    reverse_parser = modes.add_parser(
        "reverse",
        parents=[pan],
        help="Ideal recipe for a pan and layer count",
    )
    reverse_parser.add_argument("--layers", type=int, required=True)
    reverse_parser.add_argument("--thickness", type=float, default=None)

    # Subcommand: filling tools
    filling_parser = subparsers.add_parser(
        "filling",
        parents=[dough, pan],
        help="Analyse, scale and pair a filling",
    )
    source = filling_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--preset",
        help="Preset key (see `presets`)",
    )
    source.add_argument(
        "--ingredient",
        type=parse_ingredient,
        action="append",
        metavar="KEY=GRAMS",
        help="Ingredient amount; repeat for each ingredient",
    )
    filling_parser.add_argument(
        "--target-weight",
        type=float,
        default=None,
        help="Scale the filling to this total weight, g",
    )
    filling_parser.add_argument(
        "--reduce-sweetness",
        type=float,
        default=0.0,
        help="Percent to take off the sweet ingredients",
    )
    filling_parser.add_argument(
        "--layers",
        type=int,
        default=None,
        help="Cake layers; computes the filling needed for the pan",
    )
    filling_parser.add_argument(
        "--thickness",
        type=float,
        default=None,
        help="Filling layer thickness, mm (config default)",
    )
    filling_parser.add_argument(
        "--compare",
        action="store_true",
        help="Score compatibility with the dough",
    )
    _oven_options(filling_parser)
    filling_parser.add_argument(
        "--save",
        action="store_true",
        help="Store the comparison (implies --compare)",
    )
    filling_parser.add_argument("--notes", default="")

    # Subcommand: preset catalog
    presets_parser = subparsers.add_parser(
        "presets",
        help="List filling presets or show one with its preparation method",
    )
    presets_parser.add_argument("key", nargs="?")

    # Subcommand: save the analysed dough under a name
    save_parser = subparsers.add_parser(
        "save",
        parents=[dough],
        help="Save an analysed recipe",
    )
    save_parser.add_argument("--name", required=True)

    # Subcommand: list stored records
    saved_parser = subparsers.add_parser(
        "saved",
        help="List saved recipes",
    )
    saved_parser.add_argument(
        "--comparisons",
        action="store_true",
        help="List saved comparisons instead",
    )

    # Subcommand: delete a stored record by id
    delete_parser = subparsers.add_parser(
        "delete",
        help="Delete a saved recipe",
    )
    delete_parser.add_argument("id", type=int)
    delete_parser.add_argument(
        "--comparison",
        action="store_true",
        help="Delete a saved comparison instead",
    )

    return parser


def dough_from_args(
    args,
) -> dict[str, float]:
    """Collect the dough options of a parsed namespace into a recipe."""
    return {key: getattr(args, key) for key in DOUGH_KEYS}
