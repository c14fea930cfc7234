"""Resultado por canal e relatório agregado do fan-out."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from app.constants.orders import OutcomeStatus

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class ChannelOutcome:
    """delivered | skipped(reason) | failed(cause)."""

    status: OutcomeStatus
    detail: str | None = None

    @classmethod
    def delivered(cls, detail: str | None = None) -> ChannelOutcome:
        return cls(OutcomeStatus.DELIVERED, detail)

    @classmethod
    def skipped(cls, reason: str) -> ChannelOutcome:
        return cls(OutcomeStatus.SKIPPED, reason)

    @classmethod
    def failed(cls, cause: str) -> ChannelOutcome:
        return cls(OutcomeStatus.FAILED, cause)

    @property
    def is_delivered(self) -> bool:
        return self.status == OutcomeStatus.DELIVERED

    @property
    def is_failed(self) -> bool:
        return self.status == OutcomeStatus.FAILED

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status.value, "detail": self.detail}


@dataclass(frozen=True)
class DispatchReport:
    """Outcome de cada canal para um pedido. Usado só para logs."""

    order_id: str
    outcomes: Mapping[str, ChannelOutcome] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "outcomes", MappingProxyType(dict(self.outcomes)))

    def __getitem__(self, channel: str) -> ChannelOutcome:
        return self.outcomes[channel]

    def channels_with(self, status: OutcomeStatus) -> tuple[str, ...]:
        return tuple(name for name, outcome in self.outcomes.items() if outcome.status == status)

    @property
    def any_delivered(self) -> bool:
        """Pelo menos um canal avisou alguém."""
        return any(outcome.is_delivered for outcome in self.outcomes.values())

    @property
    def all_failed(self) -> bool:
        return bool(self.outcomes) and all(o.is_failed for o in self.outcomes.values())

    def as_dict(self) -> dict[str, Any]:
        return {name: outcome.as_dict() for name, outcome in self.outcomes.items()}
