from dataclasses import dataclass
from enum import Enum, auto


class GateState(Enum):
    PENDING = auto()
    RUNNING = auto()
    ACCEPTED = auto()
    REJECTED = auto()

    @property
    def terminal(self) -> bool:
        return self in (GateState.ACCEPTED, GateState.REJECTED)


@dataclass(frozen=True)
class CheckResult:
    check_id: str
    returncode: int
    duration_s: float

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class GateResult:
    order: list[str]
    results: dict[str, CheckResult]
    failed: list[str]
    skipped: list[str]
    state: GateState

    @property
    def accepted(self) -> bool:
        return self.state is GateState.ACCEPTED

    @property
    def exit_code(self) -> int:
        return 0 if self.accepted else 1
