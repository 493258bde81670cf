"""Preparation protocol records: timed steps, checkpoints and rescues.

Exports
-------
ProtocolAction
ProtocolStep
PrePreparation
Troubleshooting
PreparationProtocol
"""

from dataclasses import (
    dataclass,
)

from models.base import (
    SnapshotMixin,
)


@dataclass(frozen=True)
class ProtocolAction(SnapshotMixin):
    """One thing the cook does inside a step.

    Attributes
    ----------
    action : str
        Short title.
    time : str
        Clock mark within the step (``'2:00'``, ``'0:30 - 2:00'``); empty
        when the order is all that matters.
    detail : tuple[str, ...]
        Ordered instructions.
    temperature : str
        Required temperature, if any.
    duration : str
        How long the action takes, if stated.
    rpm : int | None
        Mixer speed; ``0`` means the mixer is stopped, ``None`` not stated.
    checkpoint : str
        What to check before moving on.
    warnings : tuple[str, ...]
        Hazards for this action.
    """

    action: str
    time: str = ""
    detail: tuple[str, ...] = ()
    temperature: str = ""
    duration: str = ""
    rpm: int | None = None
    checkpoint: str = ""
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProtocolStep(SnapshotMixin):
    """A numbered stage of the protocol."""

    number: int
    name: str
    actions: tuple[ProtocolAction, ...]
    duration: str = ""
    temperature: str = ""
    note: str = ""


@dataclass(frozen=True)
class PrePreparation(SnapshotMixin):
    """Work that must be done before the first step (straining, tempering)."""

    title: str
    duration: str
    tasks: tuple[ProtocolAction, ...]
    critical: bool = False


@dataclass(frozen=True)
class Troubleshooting(SnapshotMixin):
    problem: str
    causes: tuple[str, ...]
    solutions: tuple[str, ...]


@dataclass(frozen=True)
class PreparationProtocol(SnapshotMixin):
    """Step-by-step method for one filling preset.

    Attributes
    ----------
    key : str
        Preset key the protocol belongs to.
    name : str
        Display name.
    total_time : str
        Overall time, including waiting.
    difficulty : str
        ``'سهل'``, ``'متوسط'`` or ``'متقدم'``.
    yield_text : str
        Expected yield; empty where none is given.
    steps : tuple[ProtocolStep, ...]
        Numbered stages in order.
    pre_preparation : PrePreparation | None
        Mandatory work before step 1.
    troubleshooting : tuple[Troubleshooting, ...]
        Known problems with causes and fixes.
    """

    key: str
    name: str
    total_time: str
    difficulty: str
    steps: tuple[ProtocolStep, ...]
    yield_text: str = ""
    pre_preparation: PrePreparation | None = None
    troubleshooting: tuple[Troubleshooting, ...] = ()

    @property
    def warnings(self) -> list[str]:
        """Every action warning, in protocol order."""
        return [
            warning
            for step in self.steps
            for action in step.actions
            for warning in action.warnings
        ]
