"""Engine - fixed-timestep loop that drives the animation systems."""

from unitcircle.clock import Clock
from unitcircle.types import System


class Engine:
    def __init__(self, tps: int = 25) -> None:
        self._clock = Clock(tps)
        self._systems: list[System] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        """Advance one tick; the host loop calls this from its frame accumulator."""
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        """Advance up to n ticks, returning early if a system requests a stop."""
        self._stop_requested = False
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
