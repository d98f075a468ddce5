import logging
import os
import subprocess
import time

from commitgate.config import CheckConfig, GateConfig

from .types import CheckResult, GateResult, GateState

logger = logging.getLogger(__name__)

# Shell convention for "command could not be executed"
LAUNCH_FAILURE = 127


class GateListener:
    """Receives progress notifications from a :class:`GateRunner`.

    The base class ignores everything; subclasses override what they need.
    """

    def check_started(self, check: CheckConfig) -> None:
        pass

    def check_finished(self, check: CheckConfig, result: CheckResult) -> None:
        pass


class GateRunner:
    def __init__(self, gate: GateConfig, listener: GateListener | None = None):
        self.gate = gate
        self.listener = listener or GateListener()
        self.state = GateState.PENDING
        self.current: str | None = None

    def run(self) -> GateResult:
        order = self.gate.check_ids()
        results: dict[str, CheckResult] = {}
        failed: list[str] = []
        skipped: list[str] = []

        self.state = GateState.RUNNING
        for cid in order:
            if failed:
                skipped.append(cid)
                continue

            check = self.gate.get_check(cid)
            self.current = cid
            self.listener.check_started(check)
            result = self._run_check(check)
            results[cid] = result
            self.listener.check_finished(check, result)

            if not result.ok:
                failed.append(cid)

        self.current = None
        self.state = GateState.REJECTED if failed else GateState.ACCEPTED
        logger.debug(
            "gate %s: ran=%s failed=%s skipped=%s",
            self.state.name.lower(),
            list(results),
            failed,
            skipped,
        )
        return GateResult(order, results, failed, skipped, self.state)

    def _run_check(self, check: CheckConfig) -> CheckResult:
        logger.debug(
            "running %s: %r (cwd=%s)", check.id, check.command, check.working_dir
        )
        start = time.monotonic()
        try:
            completed = subprocess.run(
                check.command,
                shell=True,
                cwd=check.working_dir or None,
                env={**os.environ, **check.env},
            )
            returncode = completed.returncode
        except OSError as exc:
            logger.error("could not launch %s: %s", check.id, exc)
            returncode = LAUNCH_FAILURE
        duration = time.monotonic() - start

        logger.debug("%s exited %d after %.3fs", check.id, returncode, duration)
        return CheckResult(check.id, returncode, duration)
