import gmpy2
import pytest

from arpmath import DomainError, Float, pow


@pytest.mark.parametrize("prec", [24, 53, 113, 500])
@pytest.mark.parametrize("z, w", [("2", "10"), ("3", "-2.5"), ("0.7", "13.25"), ("1e10", "0.1"), ("123.5", "1")])
def test_pow_matches_reference(z, w, prec, ulps):
    zf = Float.parse(z, prec)
    wf = Float.parse(w, prec)
    got = pow(Float(), zf, wf)
    assert got.prec == prec
    with gmpy2.context(precision=prec + 128):
        want = gmpy2.mpfr(zf.to_mpfr()) ** wf.to_mpfr()
    assert ulps(got, want, prec) <= 1


@pytest.mark.parametrize("z", ["0.001", "1", "2", "1e300"])
def test_pow_zero_exponent_is_one(z):
    got = pow(Float(), Float.parse(z, 80), Float(0.0))
    assert got == 1
    assert got.prec == 80


@pytest.mark.parametrize("z", ["0.001", "2", "3.5", "1e300"])
def test_pow_unit_exponent_is_identity(z):
    zf = Float.parse(z, 80)
    assert pow(Float(), zf, Float(1.0)) == zf


@pytest.mark.parametrize("prec", [53, 200, 1000])
def test_pow_half_is_square_root(prec, ulps):
    two = Float(2, prec)
    got = pow(Float(), two, Float(0.5))
    with gmpy2.context(precision=prec + 128):
        want = gmpy2.sqrt(gmpy2.mpfr(2))
    assert ulps(got, want, prec) <= 1


@pytest.mark.parametrize("w", [-3.0, 0.5, 2.0])
def test_pow_of_infinity_is_infinity(w):
    got = pow(Float(), Float(prec=53).set_inf(), Float(w))
    assert got.is_inf()
    assert not got.signbit()


def test_pow_of_zero():
    assert pow(Float(), Float(0.0), Float(3.0)).is_zero()
    assert pow(Float(), Float(0.0), Float(-3.0)).is_inf()


@pytest.mark.parametrize("z", [-2.0, -0.0])
def test_pow_negative_base_is_domain_error(z):
    with pytest.raises(DomainError) as info:
        pow(Float(), Float(z), Float(2.0))
    assert info.value.operation == "pow"


def test_pow_uses_larger_argument_precision():
    got = pow(Float(), Float(3, 70), Float(2, 90))
    assert got.prec == 90


def test_pow_destination_may_alias_arguments(ulps):
    z = Float.parse("1.75", 120)
    w = Float.parse("3.5", 120)
    with gmpy2.context(precision=248):
        want = gmpy2.mpfr(z.to_mpfr()) ** w.to_mpfr()
    pow(z, z, w)
    assert ulps(z, want, 120) <= 1

    z = Float.parse("1.75", 120)
    pow(w, z, w)
    assert ulps(w, want, 120) <= 1


def test_pow_of_empty_operands_is_one_at_64_bits():
    got = pow(Float(), Float(), Float())
    assert got == 1
    assert got.prec == 64
