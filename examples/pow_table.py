import numpy as np
from arpmath import FP64, FP256, Float, log, pow

# Compare x**y at double and octuple precision against numpy.
bases = np.linspace(0.5, 4.0, 8)
exponent = 1.0 / 3.0

for b in bases:
    wide = pow(Float(prec=FP256), Float(float(b)), Float(exponent))
    narrow = pow(Float(prec=FP64), Float(float(b)), Float(exponent))
    print(f"{b:5.2f}**(1/3)  numpy={np.power(b, exponent):.17g}  fp64={narrow:.17g}  fp256={wide:.40g}")

# ln(x) at 256 bits next to numpy's double result.
for b in bases:
    print(f"ln({b:5.2f})  numpy={np.log(b):.17g}  fp256={log(Float(prec=FP256), Float(float(b))):.40g}")
