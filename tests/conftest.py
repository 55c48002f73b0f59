import gmpy2
import pytest


@pytest.fixture
def ulps():
    """Distance between a Float and a gmpy2 reference, in units of the last place."""

    def distance(got, want, prec):
        with gmpy2.context(precision=prec + 256):
            diff = abs(got.to_mpfr() - want)
            unit = gmpy2.mul_2exp(gmpy2.mpfr(1), gmpy2.get_exp(want) - prec)
            return float(diff / unit)

    return distance
