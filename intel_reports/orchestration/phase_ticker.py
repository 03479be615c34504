"""
Cosmetic progress phases shown while a generation request is outstanding.

The ticker walks a fixed list of messages on a timer. It has no connection to
the real request: it never completes a generation, and it stops advancing at
the last phase instead of looping.
"""
import asyncio
import logging
from typing import Callable, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# The bar stays below this until the real result exists
MAX_PERCENT_WHILE_GENERATING = 95.0


class GenerationPhase(BaseModel):
    """One perceived-progress step."""
    model_config = ConfigDict(frozen=True)

    message: str
    duration_ms: int


GENERATION_PHASES: Tuple[GenerationPhase, ...] = (
    GenerationPhase(message="Querying SpaceNexus database...", duration_ms=3000),
    GenerationPhase(message="Gathering company profiles and financial data...", duration_ms=4000),
    GenerationPhase(message="Analyzing recent news and market events...", duration_ms=5000),
    GenerationPhase(message="Generating AI-powered insights...", duration_ms=8000),
    GenerationPhase(message="Synthesizing findings and recommendations...", duration_ms=6000),
    GenerationPhase(message="Formatting report sections...", duration_ms=4000),
    GenerationPhase(message="Finalizing intelligence report...", duration_ms=3000),
)


class PhaseTicker:
    """Advances a phase index on a timer until the last phase or until stopped."""

    def __init__(self, phases: Iterable[GenerationPhase] = GENERATION_PHASES,
                 on_advance: Optional[Callable[[int, GenerationPhase], None]] = None):
        self.phases: Tuple[GenerationPhase, ...] = tuple(phases)
        if not self.phases:
            raise ValueError("PhaseTicker needs at least one phase")
        self.on_advance = on_advance
        self.index = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def current_phase(self) -> GenerationPhase:
        return self.phases[self.index]

    @property
    def message(self) -> str:
        return self.current_phase.message

    @property
    def percent_complete(self) -> float:
        percent = (self.index + 1) / len(self.phases) * 100
        return min(percent, MAX_PERCENT_WHILE_GENERATING)

    def start(self):
        """Reset to the first phase and start advancing. Needs a running loop."""
        self.stop()
        self.index = 0
        self._task = asyncio.get_running_loop().create_task(self._advance())

    def stop(self):
        """Cancel any scheduled advancement; the index stays where it is."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _advance(self):
        while self.index < len(self.phases) - 1:
            await asyncio.sleep(self.phases[self.index].duration_ms / 1000)
            self.index += 1
            logger.debug(f"Generation phase {self.index + 1}/{len(self.phases)}: {self.message}")
            if self.on_advance is not None:
                self.on_advance(self.index, self.current_phase)

    async def wait(self):
        """Wait until the ticker reaches the last phase or is stopped."""
        task = self._task
        if task is not None and not task.done():
            await asyncio.wait({task})
