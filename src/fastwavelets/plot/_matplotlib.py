from __future__ import annotations

from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.colorbar import Colorbar
from matplotlib.image import AxesImage
from mpl_toolkits.axes_grid1 import make_axes_locatable

from ..typing import DecompositionLedger, MODWTCoefficients


def despine(ax: Axes) -> None:
    for spine in ax.spines:
        ax.spines[spine].set_visible(False)
    ax.xaxis.set_visible(False)
    ax.yaxis.set_visible(False)


def create_colorbar(
    im: AxesImage,
    ax: Axes | None = None,
    size: float = 0.05,
    pad: float = 0.1,
    orientation: str = "vertical",
) -> tuple[Axes, Colorbar]:
    r"""Attach a colorbar to the side of an axis.

    Parameters
    ----------
    im : :obj:`AxesImage <matplotlib.image.AxesImage>`
        Image from which the colorbar will be created.
    ax : :obj:`Axes <matplotlib.axes.Axes>`, optional
        Axis to split. Uses `plt.gca()` if None.
    size : :obj:`float`, optional
        Width of the colorbar relative to the axis, by default 0.05.
    pad : :obj:`float`, optional
        Padding between colorbar axis and input axis, by default 0.1.
    orientation : :obj:`str`, optional
        Orientation of the colorbar, by default "vertical".

    Returns
    -------
    Tuple[:obj:`Axes <matplotlib.axes.Axes>`, :obj:`Colorbar <matplotlib.colorbar.Colorbar>`]
        **cax** : Colorbar axis.

        **cb** : Colorbar.
    """
    if ax is None:
        ax = plt.gca()
    divider = make_axes_locatable(ax)
    cax: Axes = divider.append_axes(
        "right" if orientation == "vertical" else "bottom", size=f"{size:%}", pad=pad
    )
    fig = ax.get_figure()
    cb = fig.colorbar(im, cax=cax, orientation=orientation)  # type: ignore[union-attr]
    return cax, cb


def plot_ledger(
    ledger: DecompositionLedger,
    ax: Axes | None = None,
    **kwargs: Any,
) -> AxesImage:
    """
    Show every row of a decomposition ledger as one line of an image.

    Parameters
    ----------
    ledger : np.ndarray
        Output of :meth:`fastwavelets.numpy.WaveletTransform.decompose`.
    ax : :obj:`Axes <matplotlib.axes.Axes>`, optional
        Axis to draw on. Uses `plt.gca()` if None.
    **kwargs
        Passed on to :obj:`matplotlib.axes.Axes.imshow`.

    Returns
    -------
    :obj:`AxesImage <matplotlib.image.AxesImage>`
        The image.
    """
    if ax is None:
        ax = plt.gca()
    ledger = np.asarray(ledger)
    vmax = float(np.abs(ledger).max()) or 1.0
    opts: dict[str, Any] = {
        "aspect": "auto",
        "interpolation": "nearest",
        "cmap": "RdBu_r",
        "vmin": -vmax,
        "vmax": vmax,
    }
    opts.update(kwargs)
    im = ax.imshow(ledger, **opts)
    ax.set(xlabel="Coefficient", ylabel="Level")
    ax.set_yticks(np.arange(ledger.shape[0]))
    return im


def plot_modwt(
    coeffs: MODWTCoefficients,
    axes: np.ndarray | None = None,
    **kwargs: Any,
) -> np.ndarray:
    """
    Plot MODWT levels on a stack of axes, details first and approximation last.

    Parameters
    ----------
    coeffs : np.ndarray
        Output of :meth:`fastwavelets.numpy.MaximalOverlapTransform.forward`.
    axes : np.ndarray of :obj:`Axes <matplotlib.axes.Axes>`, optional
        One axis per row of ``coeffs``. Created if None.
    **kwargs
        Passed on to :obj:`matplotlib.axes.Axes.plot`.

    Returns
    -------
    np.ndarray
        The axes.
    """
    coeffs = np.asarray(coeffs)
    nrows = coeffs.shape[0]
    if axes is None:
        _, axes = plt.subplots(nrows, 1, sharex=True, squeeze=False)
    axes = np.asarray(axes).ravel()
    for j, (ax, row) in enumerate(zip(axes, coeffs)):
        ax.plot(row, **kwargs)
        ax.set_ylabel(f"D{j + 1}" if j < nrows - 1 else f"A{nrows - 1}")
    axes[-1].set_xlabel("Sample")
    return axes
