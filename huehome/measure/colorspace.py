# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: sRGB → Linear RGB → XYZ (D65) → CIELAB

The constants below must not change: recommendation and estimation
results are compared against golden values computed with them.

All conversions are pure NumPy for determinism and no external dependencies.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from huehome.schema import LabColor


# D65 reference white (2 degree observer), Y normalized to 1
D65_WHITE = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)

# CIE f(t) break point, (6/29)^3 rounded as in the classic formulation
_EPSILON = 0.008856
_KAPPA_SLOPE = 7.787
_OFFSET = 16.0 / 116.0


# =============================================================================
# Packed colors
# =============================================================================


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a 0xRRGGBB int."""
    return ((int(r) & 0xFF) << 16) | ((int(g) & 0xFF) << 8) | (int(b) & 0xFF)


def unpack_rgb(rgb: int) -> tuple[int, int, int]:
    """Split a packed color into (r, g, b). Any alpha byte is ignored."""
    return (rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF


def rgb_to_hex(rgb: int) -> str:
    """Packed color to "#RRGGBB"."""
    r, g, b = unpack_rgb(rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(hex_color: str) -> int:
    """
    "#RRGGBB" (or "RRGGBB") to a packed color.

    Raises:
        ValueError: if the string is not six hex digits
    """
    digits = hex_color.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected 6 hex digits, got {hex_color!r}")
    return int(digits, 16)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut results are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ XYZ
# =============================================================================

# Linear sRGB to XYZ (D65)
_M_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

# XYZ (D65) to linear sRGB
_M_XYZ_TO_RGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
], dtype=np.float64)


def linear_rgb_to_xyz(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ (Y of white = 1).

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _M_RGB_TO_XYZ)


def xyz_to_linear_rgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to linear RGB (unclipped).

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with linear RGB values
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    return np.einsum('...j,ij->...i', xyz, _M_XYZ_TO_RGB)


# =============================================================================
# XYZ ↔ CIELAB
# =============================================================================


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(t > _EPSILON, np.cbrt(t), _KAPPA_SLOPE * t + _OFFSET)


def _lab_f_inv(f: NDArray[np.float64]) -> NDArray[np.float64]:
    cubed = f ** 3
    return np.where(cubed > _EPSILON, cubed, (f - _OFFSET) / _KAPPA_SLOPE)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIELAB relative to the D65 white point.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with (L, a, b)
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    fx, fy, fz = np.moveaxis(_lab_f(xyz / D65_WHITE), -1, 0)

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIELAB to CIE XYZ. Inverse of xyz_to_lab.

    Args:
        lab: Array of shape (..., 3) with (L, a, b)

    Returns:
        Array of shape (..., 3) with XYZ values
    """
    lab = np.asarray(lab, dtype=np.float64)

    fy = (lab[..., 0] + 16.0) / 116.0
    fx = lab[..., 1] / 500.0 + fy
    fz = fy - lab[..., 2] / 200.0

    f = np.stack([fx, fy, fz], axis=-1)
    return _lab_f_inv(f) * D65_WHITE


# =============================================================================
# Convenience: sRGB ↔ LAB (full chain)
# =============================================================================


def srgb_uint8_to_lab(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB pixels [0,255] to CIELAB.

    Full chain: sRGB → Linear RGB → XYZ → LAB

    Args:
        pixels: Array of shape (..., 3) with uint8 sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with (L, a, b)
    """
    srgb = np.asarray(pixels).astype(np.float64) / 255.0
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear(srgb)))


def lab_to_srgb_uint8(lab: NDArray[np.float64]) -> NDArray[np.uint8]:
    """
    Convert CIELAB to uint8 sRGB pixels.

    Full chain: LAB → XYZ → Linear RGB → sRGB. Channels are clipped to
    [0, 1] and rounded to the nearest 8-bit step.

    Args:
        lab: Array of shape (..., 3) with (L, a, b)

    Returns:
        Array of shape (..., 3) with uint8 sRGB values
    """
    srgb = linear_to_srgb(xyz_to_linear_rgb(lab_to_xyz(lab)))
    return np.round(srgb * 255.0).astype(np.uint8)


def rgb_to_lab(rgb: int) -> LabColor:
    """
    Convert a packed sRGB color to LabColor.

    Every 24-bit value is valid; the source color is kept on the result.

    Example:
        >>> c = rgb_to_lab(0x0000FF)
        >>> round(c.l, 1), round(c.a, 1), round(c.b, 1)
        (32.3, 79.2, -107.9)
    """
    pixel = np.array(unpack_rgb(rgb), dtype=np.uint8)
    L, a, b = srgb_uint8_to_lab(pixel)
    return LabColor(l=float(L), a=float(a), b=float(b), rgb=rgb & 0xFFFFFF)


def lab_to_rgb(l: float, a: float, b: float) -> int:
    """
    Convert LAB components to a packed sRGB color.

    Out-of-gamut colors are clipped per channel.
    """
    r, g, bl = lab_to_srgb_uint8(np.array([l, a, b], dtype=np.float64))
    return pack_rgb(r, g, bl)


# =============================================================================
# ΔE Distance (Perceptual Color Difference)
# =============================================================================


def delta_e(c1: LabColor, c2: LabColor) -> float:
    """
    CIE76 color difference: Euclidean distance in LAB.

    Reference thresholds (LAB units, 0-100 scale):
    - ΔE ≈ 1: barely perceptible
    - ΔE ≈ 2-3: noticeable side by side
    - ΔE ≈ 10+: clearly different colors
    """
    return c1.distance_to(c2)


def delta_e_batch(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Vectorized ΔE for arrays of LAB colors.

    Args:
        lab1: Array of shape (N, 3) or (3,)
        lab2: Array broadcastable against lab1

    Returns:
        Array of shape (N,) with ΔE values
    """
    delta = np.asarray(lab1, dtype=np.float64) - np.asarray(lab2, dtype=np.float64)
    return np.sqrt(np.sum(delta ** 2, axis=-1))
