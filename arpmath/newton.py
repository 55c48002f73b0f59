from typing import Callable

from ._engine import Float
from .constants import GUARD_BITS


def newton(f_over_df: Callable[[Float], Float], guess: Float, prec: int) -> Float:
    """Refine ``guess`` toward a root of ``f`` and return it at ``prec`` bits.

    ``f_over_df(t)`` must return ``f(t) / f'(t)`` as a new Float. It receives
    a read-only view of the current guess. Working precision starts at the
    guess's precision and doubles each step until it covers ``2 * prec``,
    which is enough once the guess sits in the quadratic basin.

    The guess is updated in place and returned.
    """
    work = guess.prec
    if work == 0:
        raise ValueError("newton: initial guess has zero precision")
    guess.set_prec(work + GUARD_BITS)

    while work < 2 * prec:
        guess.sub(guess, f_over_df(guess.frozen()))
        work *= 2
        guess.set_prec(work + GUARD_BITS)

    return guess.set_prec(prec)
