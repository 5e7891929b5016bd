"""
Maximal Overlap Wavelet Transform
=================================
The MODWT does not downsample, so every level has as many coefficients as the
signal and shifting the signal simply shifts the coefficients. This example
decomposes a signal with two tones and a spike and checks that the energy is
split across the levels.
"""

from __future__ import annotations

# %%
import matplotlib.pyplot as plt
import numpy as np

from fastwavelets.numpy import MaximalOverlapTransform
from fastwavelets.plot import plot_modwt

# %%
# Setup
# #####

n = 300
t = np.arange(n)
signal = np.sin(2 * np.pi * t / 50) + 0.3 * np.sin(2 * np.pi * t / 6)
signal[150] += 2.0
modwt = MaximalOverlapTransform("Symlet 5")

# %%
# Decomposition
# #############

coeffs = modwt.forward(signal, level=4)
energies = np.sum(coeffs**2, axis=1)
for label, energy in zip([f"D{j}" for j in range(1, 5)] + ["A4"], energies):
    print(f"{label}: {100 * energy / np.sum(signal**2):5.1f}%")  # noqa: T201

fig, axs = plt.subplots(coeffs.shape[0], 1, figsize=(8, 6), sharex=True)
plot_modwt(coeffs, axes=axs, lw=0.8)
fig.tight_layout()

# %%
# Reconstruction
# ##############

print(f"Max reconstruction error: {np.abs(modwt.reverse(coeffs) - signal).max():.2e}")  # noqa: T201
