from dataclasses import (
    dataclass,
)

from models.base import (
    SnapshotMixin,
)


@dataclass(frozen=True)
class LayerPlan(SnapshotMixin):
    """How many layers a recipe yields in a pan (forward scaling)."""

    single_layer_weight: float
    num_layers: int
    density: float
    total_coverage: float
    remainder: float


@dataclass(frozen=True)
class ScaledRecipe(SnapshotMixin):
    """A recipe sized for a target; ``scaling_factor`` is ``None`` for reverse mode."""

    new_recipe: dict[str, float]
    total_weight: float
    per_layer_weight: float
    scaling_factor: float | None = None


@dataclass(frozen=True)
class FillingRequirement(SnapshotMixin):
    """Filling mass needed between the layers of a pan."""

    required_weight: float
    scaled_recipe: dict[str, float]
    per_layer_amount: float
    filling_layers: int
