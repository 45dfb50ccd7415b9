# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Material color estimation.

Finds the intrinsic color of a masked surface while ignoring the shadows
and specular highlights the camera also sees on it:

1. Convert masked pixels to LAB
2. Drop pixels whose lightness is more than 1.5σ from the mean
3. Cluster the survivors (k=3) and keep the most populated cluster
4. Derive confidence from how tightly pixels sit around that center
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from huehome.schema import ColorInfo, LabColor
from huehome.measure.clustering import kmeans, largest_cluster
from huehome.measure.colorspace import (
    delta_e_batch,
    lab_to_rgb,
    pack_rgb,
    rgb_to_lab,
    srgb_uint8_to_lab,
)

logger = logging.getLogger(__name__)

# Returned when the mask selects nothing
FALLBACK_RGB = 0x808080
FALLBACK_CONFIDENCE = 0.5


class EstimationError(ValueError):
    """Frame or mask cannot be interpreted as pixel buffers."""


class DimensionMismatchError(EstimationError):
    """Frame and mask have different height/width."""


@dataclass(frozen=True)
class EstimatorConfig:
    """Configuration for material color estimation."""

    # Pixels with |L - mean| > sigma_factor * std are treated as
    # shadow or highlight
    sigma_factor: float = 1.5

    # Clusters: material, shadow-ish, highlight-ish
    n_clusters: int = 3
    max_iter: int = 100
    seed: Optional[int] = 42

    # Mean ΔE that maps to zero confidence before clamping.
    # Empirical; keep at 50 so results stay comparable.
    distance_scale: float = 50.0
    min_confidence: float = 0.3
    max_confidence: float = 0.95

    # Max masked pixels to process. 0 = no subsampling (accuracy priority)
    max_pixels: int = 0


def estimate_color(
    frame: Union[str, Path, NDArray[np.uint8]],
    mask: NDArray,
    config: Optional[EstimatorConfig] = None,
) -> ColorInfo:
    """
    Estimate the material color of the masked surface in a frame.

    Args:
        frame: One of:
            - NumPy array of shape (H, W, 3) or (H, W, 4) with uint8 sRGB
              values. Alpha is ignored.
            - Path to an image file (requires Pillow).
        mask: Array of shape (H, W), (H, W, 1) or (H, W, C). A pixel is
            selected when it is non-zero (any color channel for
            multi-channel masks). Binary and weighted masks both work.
        config: Estimation settings (uses defaults if None)

    Returns:
        ColorInfo for the dominant material color. An empty mask yields
        mid-gray (0x808080) with confidence 0.5.

    Raises:
        DimensionMismatchError: frame and mask sizes differ
        EstimationError: frame or mask has an unusable shape or dtype

    Example:
        >>> frame = np.full((4, 4, 3), [200, 120, 80], dtype=np.uint8)
        >>> info = estimate_color(frame, np.ones((4, 4), dtype=np.uint8))
        >>> hex(info.rgb), info.confidence
        ('0xc87850', 0.95)
    """
    cfg = config or EstimatorConfig()

    pixels = _load_frame(frame)
    selected = _load_mask(mask)

    if pixels.shape[:2] != selected.shape:
        raise DimensionMismatchError(
            f"Frame is {pixels.shape[1]}x{pixels.shape[0]} but mask is "
            f"{selected.shape[1]}x{selected.shape[0]}"
        )

    rgb_flat = pixels.reshape(-1, 3)[selected.reshape(-1)]

    if len(rgb_flat) == 0:
        logger.warning("Mask selects no pixels; returning mid-gray fallback")
        return ColorInfo(
            rgb=FALLBACK_RGB,
            lab=rgb_to_lab(FALLBACK_RGB),
            confidence=FALLBACK_CONFIDENCE,
        )

    # Subsample with a fixed stride so results stay deterministic
    if cfg.max_pixels > 0 and len(rgb_flat) > cfg.max_pixels:
        step = math.ceil(len(rgb_flat) / cfg.max_pixels)
        rgb_flat = rgb_flat[::step]

    lab_flat = srgb_uint8_to_lab(rgb_flat)

    keep = remove_shadows_and_highlights(lab_flat, cfg.sigma_factor)
    if not np.any(keep):
        logger.warning("Lightness filter removed every pixel; using unfiltered mask")
        keep = np.ones(len(lab_flat), dtype=bool)

    cluster_lab = lab_flat[keep]
    cluster_rgb = rgb_flat[keep]

    centroids, labels = kmeans(
        cluster_lab,
        k=cfg.n_clusters,
        max_iter=cfg.max_iter,
        seed=cfg.seed,
    )
    dominant, counts = largest_cluster(labels, len(centroids))
    center = centroids[dominant]

    logger.debug(
        f"Material clusters: sizes={counts.tolist()} dominant={dominant} "
        f"kept={len(cluster_lab)}/{len(lab_flat)}"
    )

    avg_distance = float(delta_e_batch(cluster_lab, center).mean())
    confidence = confidence_from_distance(avg_distance, cfg)

    rgb = lab_to_rgb(*center)

    return ColorInfo(
        rgb=rgb,
        lab=rgb_to_lab(rgb),
        confidence=confidence,
        sample_rgb=_nearest_pixel_rgb(center, cluster_lab, cluster_rgb, labels, dominant),
        pixel_count=len(cluster_lab),
    )


def remove_shadows_and_highlights(
    lab_pixels: NDArray[np.float64],
    sigma_factor: float = 1.5,
) -> NDArray[np.bool_]:
    """
    Flag pixels whose lightness lies within ``sigma_factor`` standard
    deviations of the mean.

    Args:
        lab_pixels: Array of shape (N, 3) with (L, a, b)
        sigma_factor: Half-width of the accepted band in standard deviations

    Returns:
        Boolean array of shape (N,), True for pixels to keep
    """
    lightness = lab_pixels[:, 0]
    mean = lightness.mean()
    std = lightness.std()

    lower = mean - sigma_factor * std
    upper = mean + sigma_factor * std

    logger.debug(f"Lightness band: mean={mean:.2f} std={std:.2f} [{lower:.2f}, {upper:.2f}]")
    return (lightness >= lower) & (lightness <= upper)


def confidence_from_distance(
    avg_distance: float,
    config: Optional[EstimatorConfig] = None,
) -> float:
    """
    Map mean ΔE around the chosen center to a confidence score.

    ``1 - avg_distance / distance_scale`` clamped to
    [min_confidence, max_confidence].
    """
    cfg = config or EstimatorConfig()
    raw = 1.0 - avg_distance / cfg.distance_scale
    return float(min(max(raw, cfg.min_confidence), cfg.max_confidence))


def _nearest_pixel_rgb(
    center: NDArray[np.float64],
    lab_pixels: NDArray[np.float64],
    rgb_pixels: NDArray[np.uint8],
    labels: NDArray[np.int64],
    cluster_id: int,
) -> int:
    """Packed color of the real pixel in the cluster closest to its center."""
    members = labels == cluster_id
    distances = np.sum((lab_pixels[members] - center) ** 2, axis=1)
    r, g, b = rgb_pixels[members][np.argmin(distances)]
    return pack_rgb(r, g, b)


def _load_frame(
    frame: Union[str, Path, NDArray[np.uint8]],
) -> NDArray[np.uint8]:
    """
    Load a frame from file or validate an array.

    Returns:
        Array of shape (H, W, 3), uint8
    """
    if isinstance(frame, (str, Path)):
        try:
            from PIL import Image
        except ImportError as e:
            raise ImportError(
                "Pillow is required for image loading. "
                "Install with: pip install huehome[image]"
            ) from e

        with Image.open(frame) as img:
            return np.array(img.convert("RGB"), dtype=np.uint8)

    if not isinstance(frame, np.ndarray):
        raise TypeError(f"Expected file path or numpy array, got {type(frame)}")

    if frame.ndim != 3 or frame.shape[2] not in (3, 4):
        raise EstimationError(
            f"Expected (H, W, 3) or (H, W, 4) frame, got shape {frame.shape}"
        )
    if frame.dtype != np.uint8:
        raise EstimationError(f"Expected uint8 frame, got {frame.dtype}")

    return frame[..., :3]


def _load_mask(mask: NDArray) -> NDArray[np.bool_]:
    """
    Reduce a mask to a boolean (H, W) selection.

    Multi-channel masks select a pixel when any color channel is non-zero.
    """
    mask = np.asarray(mask)

    if mask.ndim == 3:
        channels = mask.shape[2]
        if channels == 1:
            mask = mask[..., 0]
        elif channels >= 3:
            mask = mask[..., :3].max(axis=2)
        else:
            mask = mask[..., 0]

    if mask.ndim != 2:
        raise EstimationError(f"Expected (H, W) or (H, W, C) mask, got shape {mask.shape}")
    if not (np.issubdtype(mask.dtype, np.number) or mask.dtype == np.bool_):
        raise EstimationError(f"Expected numeric mask, got {mask.dtype}")

    return mask != 0
