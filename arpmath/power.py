from ._engine import Float
from .constants import GUARD_BITS
from .errors import DomainError
from .exp import exp
from .log import log


def pow(dst: Float, z: Float, w: Float) -> Float:
    """Set ``dst`` to z**w.

    ``dst`` gets the larger of ``z``'s and ``w``'s precision if it has none,
    and z**0 is 1 at 64 bits when none of them has one.
    Raises DomainError when ``z`` is negative, including -0. ``dst`` may be
    ``z`` or ``w``.

    Integer ``w`` has no square-and-multiply path; every exponent goes through
    exp(w*log(z)).
    """
    if dst.prec == 0:
        dst.set_prec(max(z.prec, w.prec))
    if z.signbit():
        raise DomainError("pow", "negative base")

    # z**0 = 1
    if w.is_zero():
        return dst.set(1)

    # z**1 = z, (+Inf)**w = +Inf
    if w.cmp(1) == 0 or z.is_inf():
        return dst.set(z)

    work = dst.prec + GUARD_BITS
    t = log(Float(prec=work), z)
    t.mul(t, w)
    return dst.set(exp(t, t))
