"""
Arbitrary Signal Lengths
========================
Wavelet transforms halve the signal at every level, so they need lengths
that are powers of two. The Ancient Egyptian decomposition writes any length
as a sum of distinct powers of two and transforms each piece on its own.
This example thresholds small coefficients of a noisy step signal of length
1000 and reconstructs it.
"""

from __future__ import annotations

# %%
import matplotlib.pyplot as plt
import numpy as np

from fastwavelets.numpy import create_transform
from fastwavelets.utils import egyptian_segmentation

# %%
# Setup
# #####

rng = np.random.default_rng(0)
n = 1000
clean = np.where(np.arange(n) < 400, 1.0, -0.5)
noisy = clean + 0.2 * rng.normal(size=n)

print("Segments (offset, size):")  # noqa: T201
for offset, p in egyptian_segmentation(n):
    print(f"  {offset:4d} {2**p:4d}")  # noqa: T201

aed = create_transform("Fast Wavelet Transform", "Haar", arbitrary_length=True)

# %%
# Hard Thresholding
# #################

coeffs = aed.forward(noisy)
threshold = 0.2 * np.sqrt(2 * np.log(n))
coeffs[np.abs(coeffs) < threshold] = 0.0
denoised = aed.reverse(coeffs)

print(f"Kept {np.count_nonzero(coeffs)} of {n} coefficients")  # noqa: T201

fig, ax = plt.subplots(figsize=(8, 3))
ax.plot(noisy, color="0.7", lw=0.8, label="noisy")
ax.plot(denoised, color="C3", label="denoised")
ax.plot(clean, "k--", lw=1, label="clean")
ax.legend()
ax.set(xlabel="Sample", title="Haar denoising of 1000 samples")
