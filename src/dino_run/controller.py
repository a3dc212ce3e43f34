"""
controller.py: Phase state machine between the host and the simulation.
"""

from typing import Callable, Dict, Optional, Protocol

from .data_models import Phase, Snapshot
from .scheduler import FrameScheduler, TickTask
from .simulation import Simulation

JUMP = "jump"
START_OR_RESTART = "start_or_restart"
START = "start"
RESTART = "restart"


class Renderer(Protocol):
    def draw(self, snapshot: Snapshot) -> None: ...


class GameController:
    """
    Routes commands into the Simulation and owns the tick task. Ticks only
    run while the phase is Running.
    """

    def __init__(self, simulation: Optional[Simulation] = None,
                 scheduler: Optional[FrameScheduler] = None,
                 renderer: Optional[Renderer] = None):
        self.simulation = simulation or Simulation()
        self.scheduler = scheduler or FrameScheduler()
        self.renderer = renderer
        self._task: Optional[TickTask] = None

        self._handlers: Dict[str, Callable[[], None]] = {
            JUMP: self.jump,
            START_OR_RESTART: self.start_or_restart,
            START: self.start_or_restart,
            RESTART: self.start_or_restart,
        }

    @property
    def phase(self) -> Phase:
        return self.simulation.phase

    @property
    def ticking(self) -> bool:
        return self._task is not None and not self._task.cancelled

    def dispatch(self, command: str):
        """Handles a named command from the host. Unknown names are dropped."""
        handler = self._handlers.get(command)
        if handler:
            handler()

    def start_or_restart(self):
        if self.phase is Phase.RUNNING:
            return

        self.simulation.start_run()
        self._task = self.scheduler.schedule(self._on_tick)
        print("Run started.")
        self._render()

    def jump(self):
        if self.phase is not Phase.RUNNING:
            return
        self.simulation.jump()

    def resize(self, width: float, height: float):
        self.simulation.resize(width, height)
        if not self.ticking:
            self._render()

    def _on_tick(self):
        if self.simulation.tick():
            self._game_over()
            return
        self._render()

    def _game_over(self):
        self.simulation.end_run()
        if self._task:
            self._task.cancel()
            self._task = None
        print(f"Game over. Final score: {self.simulation.state.score}")
        self._render()

    def _render(self):
        if self.renderer is not None:
            self.renderer.draw(self.simulation.snapshot())
