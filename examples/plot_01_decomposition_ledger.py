"""
Decomposition Ledger
====================
This example decomposes a chirp with the fast wavelet transform and shows
every level of the decomposition. Each row of the ledger is the signal after
that many pyramid steps, so the signal can be rebuilt from any of them.
"""

from __future__ import annotations

# %%
import matplotlib.pyplot as plt
import numpy as np

from fastwavelets.numpy import FastWaveletTransform
from fastwavelets.plot import create_colorbar, plot_ledger

# %%
# Setup
# #####

n = 512
t = np.linspace(0, 1, n, endpoint=False)
chirp = np.sin(2 * np.pi * (4 + 60 * t) * t)
fwt = FastWaveletTransform("Daubechies 4")

# %%
# Ledger
# ######

ledger = fwt.decompose(chirp)
print(f"Ledger shape: {ledger.shape}")  # noqa: T201

fig, ax = plt.subplots(figsize=(8, 4))
im = plot_ledger(ledger, ax=ax)
create_colorbar(im=im, ax=ax)
ax.set(title="Daubechies 4 decomposition of a chirp")

# %%
# Reconstruction From Every Level
# ###############################

for level in range(ledger.shape[0]):
    error = np.abs(fwt.recompose(ledger, level) - chirp).max()
    print(f"Level {level:2d}: max error {error:.2e}")  # noqa: T201
