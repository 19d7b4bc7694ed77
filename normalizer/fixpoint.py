import logging
from typing import Callable


log = logging.getLogger(__name__)


class FixpointError(RuntimeError):
    pass


def iterate(start: frozenset, step: Callable[[frozenset], frozenset], bound: int) -> list[frozenset]:
    """Applies `step` until the working set stops growing.

    Returns every intermediate set, `start` first and the fixpoint last.
    `bound` is the size of the finite universe the working set lives in;
    `bound - len(current)` must strictly decrease on every round that does
    not stop the loop.

    Raises:
        FixpointError: a round shrank the set, left the universe or
            failed to decrease the measure.
    """
    rounds = [start]
    current = start
    measure = bound - len(current)

    is_changing = True
    while is_changing:
        new = step(current)
        if not current <= new:
            raise FixpointError(f"Round {len(rounds)} dropped {set(current - new)}")

        is_changing = new != current
        if is_changing:
            new_measure = bound - len(new)
            if not 0 <= new_measure < measure:
                raise FixpointError(
                    f"Round {len(rounds)} did not decrease the measure: {measure} -> {new_measure}"
                )
            log.debug("round %d: %d elements, measure %d", len(rounds), len(new), new_measure)
            measure = new_measure
            rounds.append(new)
        current = new

    return rounds
