"""Tunables and well-known values shared by the engines."""

# Extra working precision carried by every engine and dropped on return.
GUARD_BITS = 64

# Mantissa bits of the standard IEEE-754 formats.
BF16 = 8  # BFloat16
FP16 = 11  # Half precision
FP32 = 24  # Single precision
FP64 = 53  # Double precision
FP128 = 113  # Quadruple precision
FP256 = 237  # Octuple precision

# The pi cache starts out holding this literal rounded to PI_CACHE_PREC bits.
PI_CACHE_PREC = 1024
PI_DIGITS = (
    "3."
    "14159265358979323846264338327950288419716939937510"
    "58209749445923078164062862089986280348253421170679"
    "82148086513282306647093844609550582231725359408128"
    "48111745028410270193852110555964462294895493038196"
    "44288109756659334461284756482337867831652712019091"
    "45648566923460348610454326648213393607260249141273"
    "72458700660631558817488152092096282925409171536444"
)
