#!/usr/bin/env python3
"""
ARPMath: Arbitrary Precision Transcendental Functions

This library computes logarithms, exponentials, powers, the arithmetic-
geometric mean, pi and directed integer rounding on arbitrary precision
binary floats. Every operation writes into a destination Float and works to
that destination's precision and rounding mode, carrying 64 guard bits
internally.

Examples:
    >>> from arpmath import Float, RoundingMode, FP64, agm, pi, log, pow, round
    >>> format(pi(Float(prec=FP64)), ".15g")
    '3.14159265358979'

    >>> format(agm(Float(), Float(1.0), Float(0.125)), ".9f")
    '0.451969522'

    >>> x = Float(2, 200)
    >>> format(log(Float(), x), ".30f")
    '0.693147180559945309417232121458'

    >>> format(pow(Float(), Float(2, FP64), Float(0.5)), ".15f")
    '1.414213562373095'

    >>> round(Float(), Float(2.5), RoundingMode.NEAREST_EVEN)
    Float('2.0', prec=53, mode=NEAREST_EVEN)

Constants:
    BF16, FP16, FP32, FP64, FP128, FP256: Mantissa bits of the standard formats
    Float, RoundingMode: The arbitrary precision value type and its rounding modes
    agm, pi, log, exp, pow, round: The transcendental operations
    DomainError: Raised for arguments outside an operation's domain
"""

import logging

from ._engine import Float, RoundingMode
from .agm import agm
from .constants import BF16, FP16, FP32, FP64, FP128, FP256, GUARD_BITS
from .errors import DomainError, InvariantError
from .exp import exp
from .log import log
from .newton import newton
from .pi import PI_CACHE, PiCache, cached_pi, compute_pi, pi
from .power import pow
from .rounding import round

logging.getLogger(__name__).addHandler(logging.NullHandler())

version = "0.1.0"
