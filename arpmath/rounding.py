from ._engine import Float, RoundingMode
from .errors import InvariantError


def _rounds_up(z: Float, mode: RoundingMode) -> bool:
    # whether 0 < |z| < 1 rounds to magnitude 1 rather than 0
    negative = z.signbit()
    half = Float(prec=z.prec).abs(z).cmp(0.5)
    if mode is RoundingMode.NEAREST_EVEN:
        return half > 0
    if mode is RoundingMode.NEAREST_AWAY:
        return half >= 0
    if mode is RoundingMode.TO_ZERO:
        return False
    if mode is RoundingMode.AWAY_FROM_ZERO:
        return True
    if mode is RoundingMode.TO_NEGATIVE_INF:
        return negative
    if mode is RoundingMode.TO_POSITIVE_INF:
        return not negative
    raise InvariantError(f"round: unknown rounding mode {mode!r}")


def round(dst: Float, z: Float, mode: RoundingMode) -> Float:
    """Set ``dst`` to ``z`` rounded to an integer according to ``mode``.

    ``dst`` gets ``z``'s precision if it has none; its precision and mode are
    otherwise left as they were. ``dst`` may be ``z``.
    """
    if dst.prec == 0:
        dst.set_prec(z.prec)

    if z.is_int() or z.is_inf():
        return dst.set(z)

    bits = z.exponent()
    if bits <= 0:
        # 0 < |z| < 1
        if _rounds_up(z, mode):
            return dst.set(-1 if z.signbit() else 1)
        return dst.set(-0.0 if z.signbit() else 0.0)

    # z has a non-zero integer part of ``bits`` bits
    if dst.prec <= bits:
        return dst.set(z)

    # Let the engine round away the fraction: assign z into exactly as many
    # bits as its integer part needs, under the requested mode.
    z = z.frozen()
    prec, saved = dst.prec, dst.mode
    dst.set_prec(bits).set_mode(mode).set(z)
    return dst.set_prec(prec).set_mode(saved)
