"""Tests for the command line demo."""

from __future__ import annotations

import numpy as np
import pytest

from fastwavelets.cli import main


def _rows(output):
    lines = output.splitlines()
    return {lines[i].rstrip(":"): lines[i + 1] for i in range(len(lines) - 1) if lines[i].endswith(":")}


def test_fast_wavelet_transform(capsys):
    assert main(["fwt", "haar02"]) == 0
    rows = _rows(capsys.readouterr().out)
    assert rows["time domain"] == " 1.000000" * 8
    assert rows["Hilbert domain"] == " 2.828427" + " 0.000000" * 7
    assert rows["reconstruction"] == " 1.000000" * 8


def test_steps(capsys):
    assert main(["FWT", "Haar", "1"]) == 0
    rows = _rows(capsys.readouterr().out)
    assert rows["Hilbert domain"] == " 1.414214" * 4 + " 0.000000" * 4


def test_wavelet_packet_transform(capsys):
    assert main(["Wavelet Packet Transform", "Daubechies 2"]) == 0
    rows = _rows(capsys.readouterr().out)
    assert rows["reconstruction"] == " 1.000000" * 8


def test_fourier_transform(capsys):
    assert main(["dft", "haar"]) == 0
    rows = _rows(capsys.readouterr().out)
    values = [float(value) for value in rows["frequency domain"].split()]
    np.testing.assert_allclose(values, [4.0, 4.0, 0, 0, 0, 0, 0, 0], atol=1e-6)
    assert "Hilbert domain" not in rows


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["xyz", "haar"], "Unknown transform"),
        (["fwt", "morlet"], "Unknown wavelet"),
        (["dft", "morlet"], "Unknown wavelet"),
        (["fwt", "haar", "9"], "outside of the valid range"),
    ],
)
def test_invalid_names_print_usage(capsys, argv, message):
    assert main(argv) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("usage: fastwavelets")
    assert message in captured.err


@pytest.mark.parametrize("argv", [[], ["fwt"], ["fwt", "haar", "two"], ["a", "b", "1", "2"]])
def test_malformed_arguments(capsys, argv):
    assert main(argv) == 2
    assert "usage: fastwavelets" in capsys.readouterr().err


def test_help(capsys):
    assert main(["--help"]) == 0
    assert "available wavelets" in capsys.readouterr().out


def test_fourier_rows_have_no_negative_zeros(capsys):
    assert main(["dft", "haar"]) == 0
    rows = _rows(capsys.readouterr().out)
    for row in rows.values():
        assert "-0.000000" not in row
        assert len(row.split()) == 8
