"""
Image Transform
===============
Every transform lifts to 2-D by transforming rows and then columns. This
example compares the cascade and packet decompositions of a zone plate.
"""

from __future__ import annotations

# %%
import matplotlib.pyplot as plt
import numpy as np

from fastwavelets.numpy import create_transform
from fastwavelets.plot import create_colorbar, despine

# %%
# Setup
# #####

shape = (256, 256)
x, y = np.meshgrid(*[np.arange(s, dtype=float) - (s - 1) / 2 for s in shape], indexing="ij")
zone_plate = np.cos(np.pi / max(shape) * (x**2 + y**2))

# %%
# Cascade and Packet Coefficients
# ###############################

fig, axs = plt.subplots(1, 2, figsize=(9, 4))
for ax, name in zip(axs, ["Fast Wavelet Transform", "Wavelet Packet Transform"]):
    transform = create_transform(name, "Coiflet 2")
    coeffs = transform.forward(zone_plate, level=3)
    error = np.abs(transform.reverse(coeffs, level=3) - zone_plate).max()
    print(f"{name}: max reconstruction error {error:.2e}")  # noqa: T201
    im = ax.imshow(np.log10(np.abs(coeffs) + 1e-6).T, cmap="magma")
    create_colorbar(im=im, ax=ax)
    despine(ax)
    ax.set(title=name)
fig.tight_layout()
