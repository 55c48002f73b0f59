from ._engine import Float
from .constants import GUARD_BITS
from .errors import DomainError


def agm(dst: Float, a: Float, b: Float) -> Float:
    """Set ``dst`` to the arithmetic-geometric mean of ``a`` and ``b``.

    The result has ``dst``'s precision, or the larger of ``a``'s and ``b``'s
    when ``dst`` has none. ``a`` and ``b`` are never modified and ``dst`` may
    be either of them.
    """
    if dst.prec == 0:
        dst.set_prec(max(a.prec, b.prec))
    prec = dst.prec

    if a.signbit() or b.signbit():
        raise DomainError("agm", "argument is negative")
    if a.is_zero() or b.is_zero():
        return dst.set(Float())
    if a.is_inf() or b.is_inf():
        return dst.set_inf()

    work = prec + GUARD_BITS
    a2 = Float(a, work)
    b2 = Float(b, work)
    if a2 < b2:
        a2, b2 = b2, a2
    # a2 >= b2 from here on

    # Stop once a2 and b2 agree to half the guard bits past prec, relative
    # to a2. The working values cannot get closer than a few ulps of work.
    one = Float(1, work)
    limit = Float(prec=work)
    old = Float(prec=work)
    diff = Float(prec=work)
    while True:
        old.set(a2)
        a2.add(a2, b2).mul_2exp(a2, -1)
        b2.mul(b2, old).sqrt(b2)
        limit.mul_2exp(one, a2.exponent() - prec - GUARD_BITS // 2)
        if diff.sub(a2, b2).abs(diff) < limit:
            break

    return dst.set(a2)
