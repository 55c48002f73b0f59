"""The constant pi and the process-wide cache of its most precise value."""

import logging
import threading
from typing import Optional

from ._engine import Float
from .constants import GUARD_BITS, PI_CACHE_PREC, PI_DIGITS

logger = logging.getLogger(__name__)


def compute_pi(dst: Float) -> Float:
    """Set ``dst`` to pi at its own precision, bypassing any cache.

    Following R. P. Brent, Multiple-precision zero-finding methods and the
    complexity of elementary function evaluation, in Analytic Computational
    Complexity, Academic Press, New York, 1975, Section 8.
    """
    prec = dst.prec
    if prec == 0:
        # zero precision only represents signed zeros and infinities
        return dst.set(Float())

    work = prec + GUARD_BITS
    a = Float(1, work)
    b = Float(prec=work)
    b.sqrt(Float(2, work)).mul_2exp(b, -1)  # b = 1/sqrt(2)
    t = Float(0.25, work)
    x = Float(1, work)

    limit = Float(prec=work).mul_2exp(Float(1, work), -(prec + 1))

    y = Float(prec=work)
    while y.sub(a, b).abs(y) >= limit:
        y.set(a)
        a.add(a, b).mul_2exp(a, -1)  # a = (a+b)/2
        b.mul(b, y).sqrt(b)  # b = sqrt(ab)

        y.sub(a, y)
        y.mul(y, y).mul(y, x)  # y = x(a-y)**2
        t.sub(t, y)
        x.mul_2exp(x, 1)

    a.mul(a, a).quo(a, t)  # pi = a**2 / t
    return dst.set(a)


class PiCache:
    """Grow-only holder of the most precise value of pi computed so far.

    Readers get the published value without locking; it is a read-only
    Float and is replaced, never modified, when a request needs more
    precision. Growth is serialized so concurrent misses do not all
    compute the same value.
    """

    def __init__(self, initial: Optional[Float] = None):
        if initial is None:
            initial = Float.parse(PI_DIGITS, PI_CACHE_PREC)
        self._value = initial.frozen()
        self._lock = threading.Lock()

    @property
    def prec(self) -> int:
        return self._value.prec

    def load(self) -> Float:
        return self._value

    def get(self, prec: int) -> Float:
        """Return pi with at least ``prec`` bits. The result must not be modified."""
        value = self._value
        if value.prec >= prec:
            return value

        with self._lock:
            # another thread may have grown the cache while we waited
            value = self._value
            if value.prec >= prec:
                return value
            logger.debug("growing pi cache from %d to %d bits", value.prec, prec)
            value = compute_pi(Float(prec=prec)).frozen()
            self._value = value
        return value


PI_CACHE = PiCache()


def cached_pi(prec: int) -> Float:
    """Read-only pi with at least ``prec`` bits from the process-wide cache."""
    return PI_CACHE.get(prec)


def pi(dst: Float, cache: Optional[PiCache] = None) -> Float:
    """Set ``dst`` to pi at its precision; zero precision yields ``+0``."""
    if dst.prec == 0:
        return dst.set(Float())
    if cache is None:
        cache = PI_CACHE
    return dst.set(cache.get(dst.prec))
