import gmpy2
import pytest

from arpmath import DomainError, Float, agm
from reference import PRECISIONS

# 350 decimal digits are enough for up to 1000 binary digits
AGM_TABLE = [
    (
        "1",
        "2",
        "1.4567910310469068691864323832650819749738639432213055907941723832679264545802509002574737128184484443281894018160367999355762430743401245116912132499522793768970211976726893728266666782707432902072384564600963133367494416649516400826932239086263376738382410254887262645136590660408875885100466728130947439789355129117201754471869564160356411130706061",
    ),
    (
        "1",
        "10",
        "4.2504070949322748617281643183731348667984678641901928596701476622237553127409037845252854607876171790458817135897668652366410690187825866854343005714304399718866701345600268795095037823053677248108795697049522041225723229732458947507697835936406527028150257238518982793084569470658500853106997941082919334694146843915361847332301248942222685517896377",
    ),
    (
        "1",
        "0.125",
        "0.45196952219967034359164911331276507645541557018306954112635037493237190371123433961098897571407153216488726488616781446636283304514042965741376539315003644325377859387794608118242990700589889155408232061013871480906595147189700268152276449512798584772002737950386745259435790965051247641106770187776231088478906739003673011639874297764052324720923824",
    ),
    (
        "1",
        "0.00390625",
        "0.2266172673264813935990249059047521131153183423554951008357647589399579243281007098800682366778894106068183449922373565084840603788091294841822891406755449218057751291845474188560350241555526734834267320629182988862200822134426714354129001630331838172767684623648755579758508073234772093745831056731263684472818466567279847347734121500617411676068370",
    ),
    (
        "1",
        "0.0001220703125",
        "0.15107867088555894565277006051956059212554039802503247524478909254186086852737399490629222674071181480492157167137547694132610166031526264375084434300568336411139925857454913414480542768807718797335060713475211709310835676172131569048902323084439330888400622327072954342544508199547787750415198261456314278054748992781108231991187512975110547417178045",
    ),
]


@pytest.mark.parametrize("prec", PRECISIONS)
@pytest.mark.parametrize("a, b, want", AGM_TABLE)
def test_agm_table(a, b, want, prec):
    got = agm(Float(), Float.parse(a, prec), Float.parse(b, prec))
    assert got.prec == prec
    assert got == Float.parse(want, prec)


def test_agm_literal_at_double_precision():
    got = agm(Float(), Float(1.0), Float(0.125))
    assert format(got, ".9f") == "0.451969522"


@pytest.mark.parametrize("prec", [24, 53, 200, 1000])
def test_agm_is_symmetric(prec):
    a = Float.parse("3.25", prec)
    b = Float.parse("0.0625", prec)
    assert agm(Float(), a, b) == agm(Float(), b, a)


@pytest.mark.parametrize("value", ["1", "0.3", "17.5", "1e-40", "1e40"])
def test_agm_fixed_point(value):
    a = Float.parse(value, 113)
    assert agm(Float(), a, a) == a


def test_agm_uses_destination_precision():
    got = agm(Float(prec=300), Float(1.0), Float(2.0))
    assert got.prec == 300
    assert got == Float.parse(AGM_TABLE[0][2], 300)


def test_agm_leaves_arguments_alone():
    a = Float(1.0)
    b = Float(0.125)
    agm(Float(prec=200), a, b)
    assert a == 1.0 and a.prec == 53
    assert b == 0.125 and b.prec == 53


def test_agm_destination_may_alias_argument():
    a = Float(1.0)
    b = Float(0.125)
    agm(a, a, b)
    assert a == agm(Float(), Float(1.0), Float(0.125))


@pytest.mark.parametrize("shift", [-600, 600, 2000])
@pytest.mark.parametrize("prec", [53, 300])
def test_agm_scales_with_magnitude(shift, prec):
    # agm(s*a, s*b) == s*agm(a, b)
    a = Float.parse("1.3", prec)
    b = Float.parse("0.7", prec)
    scaled = agm(
        Float(),
        Float(prec=prec).mul_2exp(a, shift),
        Float(prec=prec).mul_2exp(b, shift),
    )
    unit = agm(Float(), a, b)
    assert Float(prec=prec).mul_2exp(scaled, -shift) == unit


@pytest.mark.parametrize("prec", [53, 200])
@pytest.mark.parametrize("shift", [60, 500, 1500])
def test_agm_of_widely_separated_arguments(shift, prec, ulps):
    a = Float(prec=prec).mul_2exp(Float.parse("1.3", prec), shift)
    b = Float.parse("0.7", prec)
    got = agm(Float(), a, b)
    assert got.prec == prec
    with gmpy2.context(precision=prec + 128):
        want = gmpy2.agm(a.to_mpfr(), b.to_mpfr())
    assert ulps(got, want, prec) <= 1


def test_agm_negative_argument_is_domain_error():
    with pytest.raises(DomainError):
        agm(Float(), Float(-1.0), Float(2.0))


def test_agm_zero_argument():
    assert agm(Float(), Float(0.0), Float(2.0)).is_zero()
