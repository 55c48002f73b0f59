import logging
import math
import sys

import gmpy2

from ._engine import Float
from .constants import GUARD_BITS
from .log import log
from .newton import newton

logger = logging.getLogger(__name__)

# |z| >= 2**_RANGE_BITS puts e**z outside every representable exponent.
_RANGE_BITS = max(gmpy2.get_emax_max(), -gmpy2.get_emin_min()).bit_length() + 1

# |z| < 2**_NATIVE_BITS keeps e**z a normal double.
_NATIVE_BITS = 9


def _native_exp(z: Float) -> float:
    try:
        return math.exp(z.to_float())
    except OverflowError:
        return math.inf


def _out_of_range(dst: Float, z: Float) -> Float:
    """Round an overflowing or underflowing e**z into ``dst``'s mode."""
    one = Float(1, dst.prec)
    if z.signbit():
        return dst.mul_2exp(one, gmpy2.get_emin_min() - 2)
    return dst.mul_2exp(one, gmpy2.get_emax_max())


def exp(dst: Float, z: Float) -> Float:
    """Set ``dst`` to e**z.

    ``dst`` gets ``z``'s precision if it has none. exp(0) is 1, exp(-Inf) is
    +0 and exp(+Inf) is +Inf. When neither ``dst`` nor ``z`` has a precision,
    exp(0) is 1 at 64 bits, the precision of ``Float(1)``. Results beyond the
    exponent range overflow or underflow as ``dst``'s mode dictates.
    ``dst`` may be ``z``.
    """
    if dst.prec == 0:
        dst.set_prec(z.prec)
    if z.is_zero():
        return dst.set(1)
    if z.is_inf():
        return dst.set(Float()) if z.signbit() else dst.set(z)

    z = z.frozen()
    prec = dst.prec

    # initial estimate from IEEE-754 math
    seed = _native_exp(z)
    if math.isinf(seed) or seed < sys.float_info.min:
        if z.exponent() > _RANGE_BITS:
            return _out_of_range(dst, z)
        # Out of double range (or too close to its edge to carry 53 bits):
        # reduce the argument with
        #     e**z = (e**(z/2**k))**(2**k)
        # Each squaring doubles the relative error, so carry k more bits.
        k = max(z.exponent() - _NATIVE_BITS, 1)
        logger.debug("exp: reducing argument %s by 2**%d", z, k)
        work = prec + k + GUARD_BITS
        t = Float(prec=max(work, z.prec)).mul_2exp(z, -k)
        exp(t, t)
        for _ in range(k):
            t.mul(t, t)
        if t.is_inf() or t.is_zero():
            return _out_of_range(dst, z)
        return dst.set(t)

    # f(t)/f'(t) = t*(log(t) - z), whose root is e**z
    def f_over_df(t):
        x = log(Float(), t)
        x.sub(x, z)
        return x.mul(x, t)

    return dst.set(newton(f_over_df, Float(seed), prec))
