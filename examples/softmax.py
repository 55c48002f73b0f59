import numpy as np
from arpmath import FP32, Float, exp

A0 = np.random.rand(6)  # Random array in the range [0,1)
B0 = [Float(float(x), FP32) for x in A0]  # Round to single precision.

# Find the max value.
max_val = max(B0, key=float)

# calculate exp(x-max) for each value.
shifted_exp = [exp(Float(), Float(prec=FP32).sub(x, max_val)) for x in B0]
exp_sum = Float(prec=FP32)
for x in shifted_exp:
    exp_sum.add(exp_sum, x)

# calculate the softmax: [exp(x-max) / sum(exp(x-max))]
result = [float(Float(prec=FP32).quo(x, exp_sum)) for x in shifted_exp]
print("Calculated = ", result)

# NumPy's softmax.
np_softmax = np.exp(A0 - np.max(A0)) / np.exp(A0 - np.max(A0)).sum()
print("Reference = ", np_softmax)
