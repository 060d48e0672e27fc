"""Protocol definitions for pluggable collaborators.

The generator only needs a uniform random source. `random.Random` satisfies
the protocol, so seeded and entropy-backed sources share one interface.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """
    Uniform random number source.

    A source is scoped to a single generation request; the library never keeps
    one between calls.
    """

    def randint(self, a: int, b: int) -> int:
        """Return a uniformly distributed integer N with a <= N <= b."""
        ...

    def random(self) -> float:
        """Return a uniformly distributed float in [0.0, 1.0)."""
        ...
