"""LifecycleOrchestrator: create, start, query and stop one blockchain.

Pipeline: CREATE → START → INFO → STOP

Every step is awaited before the next one is issued, and every step is
gated on its CommandResult: the first failure ends the sequence. There
are no compensating actions, so a failed start leaves the chain created
and a failed stop leaves it running.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

import click
import structlog

from chainctl.domain.info import BlockchainInfo

if TYPE_CHECKING:
    from chainctl.clients.factory import CliClientFactory
    from chainctl.services.result import CommandResult

logger = logging.getLogger(__name__)


class LifecycleState(StrEnum):
    """Where the managed chain is in the sequence."""

    UNINITIALIZED = "uninitialized"
    CREATED = "created"
    STARTED = "started"
    QUERIED = "queried"
    STOPPED = "stopped"


class LifecycleStep(StrEnum):
    CREATE = "create"
    START = "start"
    INFO = "info"
    STOP = "stop"


# Step → state reached when it succeeds.
STEP_TRANSITIONS: dict[LifecycleStep, LifecycleState] = {
    LifecycleStep.CREATE: LifecycleState.CREATED,
    LifecycleStep.START: LifecycleState.STARTED,
    LifecycleStep.INFO: LifecycleState.QUERIED,
    LifecycleStep.STOP: LifecycleState.STOPPED,
}

_STEP_VERBS: dict[LifecycleStep, str] = {
    LifecycleStep.CREATE: "create",
    LifecycleStep.START: "start",
    LifecycleStep.INFO: "get info for",
    LifecycleStep.STOP: "stop",
}


class LifecycleStepFailed(RuntimeError):
    """A lifecycle step returned ``ok=False``."""

    def __init__(self, step: LifecycleStep, chain_name: str, result: CommandResult[Any]) -> None:
        self.step = step
        self.chain_name = chain_name
        self.result = result
        reason = result.error.message if result.error else "unknown error"
        super().__init__(f"Unable to {_STEP_VERBS[step]} blockchain '{chain_name}': {reason}")


@dataclass
class LifecycleReport:
    """What a lifecycle run did, in order."""

    chain_name: str
    state: LifecycleState = LifecycleState.UNINITIALIZED
    results: list[tuple[LifecycleStep, CommandResult[Any]]] = field(default_factory=list)
    info: BlockchainInfo | None = None
    failed_step: LifecycleStep | None = None

    @property
    def ok(self) -> bool:
        return self.failed_step is None

    @property
    def steps(self) -> list[LifecycleStep]:
        return [step for step, _ in self.results]


class LifecycleOrchestrator:
    """Runs the fixed create/start/info/stop sequence against one chain.

    The factory is injected; the orchestrator never resolves services
    itself. *echo* receives each ``name: value`` line of the info payload.
    """

    def __init__(
        self,
        factory: CliClientFactory,
        *,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self._factory = factory
        self._echo = echo

    def _steps(
        self, chain_name: str
    ) -> list[tuple[LifecycleStep, Callable[[], Awaitable[CommandResult[Any]]]]]:
        forge = self._factory.forge
        blockchain = self._factory.blockchain
        return [
            (LifecycleStep.CREATE, lambda: forge.create_blockchain(chain_name)),
            (LifecycleStep.START, lambda: forge.start_blockchain(chain_name)),
            (LifecycleStep.INFO, lambda: blockchain.get_blockchain_info(chain_name)),
            (LifecycleStep.STOP, lambda: forge.stop_blockchain(chain_name)),
        ]

    async def execute(self, chain_name: str) -> LifecycleReport:
        """Run the sequence, stopping at the first failed step. Never raises."""
        report = LifecycleReport(chain_name=chain_name)
        with structlog.contextvars.bound_contextvars(chain=chain_name):
            await self._advance(report)
        return report

    async def _advance(self, report: LifecycleReport) -> None:
        chain_name = report.chain_name
        for step, call in self._steps(chain_name):
            result = await call()
            report.results.append((step, result))

            if not result.ok:
                report.failed_step = step
                logger.warning(
                    "Lifecycle step %s failed for %s in state %s",
                    step,
                    chain_name,
                    report.state,
                )
                break

            report.state = STEP_TRANSITIONS[step]
            logger.debug("Blockchain %s is now %s", chain_name, report.state)

            if step is LifecycleStep.INFO:
                report.info = result.result
                for line in report.info.render():
                    self._echo(line)

    async def run(self, chain_name: str) -> LifecycleReport:
        """Run the sequence and raise LifecycleStepFailed on the first failure."""
        report = await self.execute(chain_name)
        if report.failed_step is not None:
            _, result = report.results[-1]
            raise LifecycleStepFailed(report.failed_step, chain_name, result)
        return report
