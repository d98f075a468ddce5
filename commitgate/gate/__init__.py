from .runner import GateListener, GateRunner
from .types import CheckResult, GateResult, GateState

__all__ = ["GateRunner", "GateListener", "GateResult", "CheckResult", "GateState"]
