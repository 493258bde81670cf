from dataclasses import (
    dataclass,
)

from models.base import (
    SnapshotMixin,
)


@dataclass(frozen=True)
class TemperingFailure(SnapshotMixin):
    """Simulation refused because the inputs are out of range."""

    error: str


@dataclass(frozen=True)
class TemperingBatch(SnapshotMixin):
    """One pour of hot liquid into the eggs.

    Attributes
    ----------
    batch_number : int
        1-based pour index.
    percentage : int
        Share of the hot liquid poured in this batch.
    temp_before : float
        Blend temperature before the pour, one decimal.
    temp_after : float
        Blend temperature after the pour, one decimal.
    sensory_note : str
        Risk note for ``temp_after``.
    technique : str
        How to pour and whisk.
    """

    batch_number: int
    percentage: int
    temp_before: float
    temp_after: float
    sensory_note: str
    technique: str


@dataclass(frozen=True)
class TemperingResult(SnapshotMixin):
    """Summary of a full tempering simulation.

    Attributes
    ----------
    batches : tuple[TemperingBatch, ...]
        Per-pour states in order.
    final_temp : float
        Temperature after the last pour, one decimal.
    max_batch_temp : float
        Highest blend temperature reached, one decimal.
    critical_batch : int | None
        Batch that reached ``max_batch_temp``; ``None`` if no pour raised
        the blend above the egg temperature.
    safety_status : str
        ``'danger'``, ``'warning'`` or ``'safe'``.
    recommendation : str
        Fixed message for the status.
    liquid_cp : float
        Specific heat used for the hot liquid, two decimals.
    """

    batches: tuple[TemperingBatch, ...]
    final_temp: float
    max_batch_temp: float
    critical_batch: int | None
    safety_status: str
    recommendation: str
    liquid_cp: float
