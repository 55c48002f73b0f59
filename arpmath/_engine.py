"""Mutable arbitrary-precision binary float bound to gmpy2.

A ``Float`` carries its own precision and rounding mode, as the transcendental
engines expect. Every write rounds the exact result into the destination's
precision using the destination's mode; methods return ``self`` so calls can
be chained::

    >>> half_root = Float(prec=100)
    >>> format(half_root.sqrt(Float(2, 100)).mul_2exp(half_root, -1), ".20f")
    '0.70710678118654752440'

gmpy2 has no ties-away-from-zero rounding, so NEAREST_AWAY is built from two
roundings: toward zero with one extra bit, then away from zero.
"""

import enum
from typing import Callable, Union

import gmpy2


class RoundingMode(enum.Enum):
    NEAREST_EVEN = "ToNearestEven"
    NEAREST_AWAY = "ToNearestAway"
    TO_ZERO = "ToZero"
    AWAY_FROM_ZERO = "AwayFromZero"
    TO_NEGATIVE_INF = "ToNegativeInf"
    TO_POSITIVE_INF = "ToPositiveInf"


_GMPY2_ROUND = {
    RoundingMode.NEAREST_EVEN: gmpy2.RoundToNearest,
    RoundingMode.TO_ZERO: gmpy2.RoundToZero,
    RoundingMode.AWAY_FROM_ZERO: gmpy2.RoundAwayZero,
    RoundingMode.TO_NEGATIVE_INF: gmpy2.RoundDown,
    RoundingMode.TO_POSITIVE_INF: gmpy2.RoundUp,
}

Number = Union[int, float, str]

_ZERO = gmpy2.mpfr(0)


def _context(prec, rnd):
    return gmpy2.context(
        precision=prec,
        round=rnd,
        emin=gmpy2.get_emin_min(),
        emax=gmpy2.get_emax_max(),
        trap_invalid=True,
    )


def _round(compute: Callable[[], "gmpy2.mpfr"], prec: int, mode: RoundingMode):
    """Evaluate ``compute`` so that its result is rounded to ``prec`` bits."""
    if prec == 0:
        with _context(2, gmpy2.RoundToNearest):
            value = compute()
        # zero precision holds only signed zeros and infinities
        if gmpy2.is_finite(value) and not gmpy2.is_zero(value):
            value = gmpy2.copy_sign(_ZERO, value)
        return value
    if mode is RoundingMode.NEAREST_AWAY:
        with _context(prec + 1, gmpy2.RoundToZero):
            truncated = compute()
        with _context(prec, gmpy2.RoundAwayZero):
            return gmpy2.mpfr(truncated)
    with _context(prec, _GMPY2_ROUND[mode]):
        return compute()


def _default_prec(value) -> int:
    if isinstance(value, Float):
        return value.prec
    if isinstance(value, float):
        return 53
    if isinstance(value, int):
        return max(64, value.bit_length())
    if isinstance(value, str):
        return 64
    return value.precision  # gmpy2.mpfr


class Float:
    """Arbitrary-precision binary float with a per-value precision and mode.

    ``Float()`` is ``+0`` with precision 0; such a value adopts the precision
    of whatever is next written into it. ``Float(x)`` copies the precision of
    ``x`` (53 bits for Python floats, 64 for ints and strings).
    """

    __slots__ = ("_value", "_prec", "_mode", "_frozen")

    def __init__(self, value=None, prec: int = 0, mode: RoundingMode = RoundingMode.NEAREST_EVEN):
        if prec < 0:
            raise ValueError(f"precision must be non-negative, got {prec}")
        self._value = _ZERO
        self._prec = prec
        self._mode = RoundingMode(mode)
        self._frozen = False
        if value is not None:
            self.set(value)

    @classmethod
    def parse(cls, text: str, prec: int, mode: RoundingMode = RoundingMode.NEAREST_EVEN) -> "Float":
        if prec <= 0:
            raise ValueError(f"precision must be positive, got {prec}")
        return cls(text, prec, mode)

    # -- attributes ---------------------------------------------------------

    @property
    def prec(self) -> int:
        return self._prec

    @property
    def mode(self) -> RoundingMode:
        return self._mode

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def frozen(self) -> "Float":
        """Return a read-only view of the current value."""
        if self._frozen:
            return self
        view = Float.__new__(Float)
        view._value = self._value
        view._prec = self._prec
        view._mode = self._mode
        view._frozen = True
        return view

    def _check_mutable(self):
        if self._frozen:
            raise TypeError("cannot modify a read-only Float")

    def _store(self, value, prec: int) -> "Float":
        self._check_mutable()
        self._value = value
        self._prec = prec
        return self

    def set_prec(self, prec: int) -> "Float":
        """Round the value to ``prec`` bits using the current mode."""
        if prec < 0:
            raise ValueError(f"precision must be non-negative, got {prec}")
        value = self._value
        return self._store(_round(lambda: gmpy2.mpfr(value), prec, self._mode), prec)

    def set_mode(self, mode: RoundingMode) -> "Float":
        self._check_mutable()
        self._mode = RoundingMode(mode)
        return self

    # -- assignment ---------------------------------------------------------

    def set(self, x: Union["Float", Number]) -> "Float":
        """Round ``x`` into this value; a zero precision adopts ``x``'s."""
        prec = self._prec or _default_prec(x)
        value = x._value if isinstance(x, Float) else x
        return self._store(_round(lambda: gmpy2.mpfr(value), prec, self._mode), prec)

    def set_inf(self, signbit: bool = False) -> "Float":
        return self._store(-gmpy2.inf() if signbit else gmpy2.inf(), self._prec)

    # -- arithmetic ---------------------------------------------------------

    def _unary(self, x: "Float", op) -> "Float":
        prec = self._prec or x._prec
        a = x._value
        return self._store(_round(lambda: op(a), prec, self._mode), prec)

    def _binary(self, x: "Float", y: "Float", op) -> "Float":
        prec = self._prec or max(x._prec, y._prec)
        a, b = x._value, y._value
        return self._store(_round(lambda: op(a, b), prec, self._mode), prec)

    def add(self, x: "Float", y: "Float") -> "Float":
        return self._binary(x, y, gmpy2.add)

    def sub(self, x: "Float", y: "Float") -> "Float":
        return self._binary(x, y, gmpy2.sub)

    def mul(self, x: "Float", y: "Float") -> "Float":
        return self._binary(x, y, gmpy2.mul)

    def quo(self, x: "Float", y: "Float") -> "Float":
        return self._binary(x, y, gmpy2.div)

    def sqrt(self, x: "Float") -> "Float":
        return self._unary(x, gmpy2.sqrt)

    def neg(self, x: "Float") -> "Float":
        return self._unary(x, lambda a: -a)

    def abs(self, x: "Float") -> "Float":
        return self._unary(x, abs)

    def mul_2exp(self, x: "Float", n: int) -> "Float":
        """Set to ``x * 2**n``."""
        return self._unary(x, lambda a: gmpy2.mul_2exp(a, n))

    # -- inspection ---------------------------------------------------------

    def signbit(self) -> bool:
        return gmpy2.is_signed(self._value)

    def is_zero(self) -> bool:
        return gmpy2.is_zero(self._value)

    def is_inf(self) -> bool:
        return gmpy2.is_infinite(self._value)

    def is_int(self) -> bool:
        return gmpy2.is_integer(self._value)

    def exponent(self) -> int:
        """Binary exponent ``e`` with ``2**(e-1) <= |x| < 2**e``; 0 for zero and infinities."""
        if not gmpy2.is_regular(self._value):
            return 0
        mant, exp = self._value.as_mantissa_exp()
        return int(exp) + int(abs(mant)).bit_length()

    def cmp(self, y: Union["Float", Number]) -> int:
        a = self._value
        b = y._value if isinstance(y, Float) else y
        return (a > b) - (a < b)

    def to_float(self) -> float:
        with _context(53, gmpy2.RoundToNearest):
            return float(self._value)

    def to_mpfr(self) -> "gmpy2.mpfr":
        return self._value

    # -- protocol -----------------------------------------------------------

    def _other(self, y):
        return y._value if isinstance(y, Float) else y

    def __eq__(self, y):
        if not isinstance(y, (Float, int, float)):
            return NotImplemented
        return self._value == self._other(y)

    def __lt__(self, y):
        return self._value < self._other(y)

    def __le__(self, y):
        return self._value <= self._other(y)

    def __gt__(self, y):
        return self._value > self._other(y)

    def __ge__(self, y):
        return self._value >= self._other(y)

    __hash__ = None

    def __float__(self):
        return self.to_float()

    def __format__(self, spec):
        return format(self._value, spec)

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return f"Float('{self._value}', prec={self._prec}, mode={self._mode.name})"
