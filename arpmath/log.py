from ._engine import Float
from .agm import agm
from .constants import GUARD_BITS
from .errors import DomainError, InvariantError
from .pi import cached_pi


def _cancelled_bits(z: Float) -> int:
    # leading bits lost in z - 1 when z is close to 1
    d = Float(prec=GUARD_BITS).sub(z, Float(1, GUARD_BITS))
    return max(0, -d.exponent())


def log(dst: Float, z: Float) -> Float:
    """Set ``dst`` to the natural logarithm of ``z``.

    ``dst`` gets ``z``'s precision if it has none. Raises DomainError when
    ``z`` is negative, including -0. log(+0) is -Inf and log(+Inf) is +Inf.
    """
    if dst.prec == 0:
        dst.set_prec(z.prec)
    if z.signbit():
        raise DomainError("log", "argument is negative")
    if z.is_zero():
        return dst.set_inf(signbit=True)
    if z.is_inf():
        return dst.set(z)

    prec = dst.prec + GUARD_BITS

    order = z.cmp(1)
    if order == 0:
        return dst.set(Float())
    if order not in (1, -1):
        raise InvariantError(f"log: unexpected comparison result {order!r}")

    work = prec + _cancelled_bits(z)
    one = Float(1, work)
    x = Float(prec=work)
    if order > 0:
        x.set(z)
    else:
        # for 0 < z < 1, log(z) = -log(1/z)
        x.quo(one, z)

    # Square x until x >= 2**(work/2), counting squarings in k. Past that
    # point
    #     log(x) = pi / (2 * AGM(1, 4/x))
    # holds to the working precision.
    limit = Float(prec=work).mul_2exp(one, work // 2)
    k = 0
    while x < limit:
        x.mul(x, x)
        k += 1

    mean = agm(Float(), one, Float(prec=work).quo(Float(4, work), x))
    x.quo(cached_pi(work), mean.mul_2exp(mean, 1))

    if order < 0:
        x.neg(x)
    # undo the squarings
    x.mul_2exp(x, -k)

    return dst.set(x)
