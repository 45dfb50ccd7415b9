# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Recommendation payload serializer.

Formats recommendations for the layers that consume them: the renderer
applies ``hex`` to the masked region, the scene store keeps the accepted
color against an object id. Serialization never changes the values.
"""

from __future__ import annotations

import json
from typing import Iterable, Optional

from huehome.runtime.serializers.base import SerializerFormat, format_lab
from huehome.schema import ColorInfo, ColorRecommendation


def to_payload(
    recommendations: Iterable[ColorRecommendation],
    *,
    base: Optional[ColorInfo] = None,
    format: SerializerFormat = SerializerFormat.JSON,
    include_lab: bool = True,
    object_id: str | None = None,
) -> str:
    """Serialize ranked recommendations.

    Args:
        recommendations: Output of recommend(), already ranked.
        base: Detected surface color the recommendations were built for.
        format: JSON, JSON_PRETTY or NATURAL (plain text list).
        include_lab: Include LAB components next to hex values.
        object_id: Optional scene object identifier.

    Returns:
        Serialized string.

    Example (JSON_PRETTY)::

        {
          "source": "huehome",
          "object_id": "wall-2",
          "base": { "hex": "#0000FF", "lab": "L32.3/a79.2/b-107.9", "confidence": 0.95 },
          "recommendations": [
            { "rank": 1, "hex": "#00A400", "category": "complementary",
              "confidence": 0.85, "reason": "...", "lab": "L32.3/a-79.2/b107.9" }
          ]
        }
    """
    recs = list(recommendations)

    if format == SerializerFormat.NATURAL:
        return _to_natural(recs, base, include_lab)

    data = _build_data(recs, base, include_lab, object_id)
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def _build_data(
    recs: list[ColorRecommendation],
    base: Optional[ColorInfo],
    include_lab: bool,
    object_id: str | None,
) -> dict:
    result: dict = {"source": "huehome"}

    if object_id:
        result["object_id"] = object_id

    if base is not None:
        entry = {"hex": base.hex, "confidence": round(base.confidence, 3)}
        if include_lab:
            entry["lab"] = format_lab(base.lab)
        result["base"] = entry

    items = []
    for rank, rec in enumerate(recs, start=1):
        item = {
            "rank": rank,
            "hex": rec.hex,
            "category": rec.category.value,
            "confidence": round(rec.confidence, 3),
            "reason": rec.reason,
        }
        if include_lab:
            item["lab"] = format_lab(rec.lab_color)
        items.append(item)
    result["recommendations"] = items

    return result


def _to_natural(
    recs: list[ColorRecommendation],
    base: Optional[ColorInfo],
    include_lab: bool,
) -> str:
    lines: list[str] = []

    if base is not None:
        lines.append(f"Detected color: {base.hex} ({base.confidence:.0%} confidence)")
        lines.append("")

    if not recs:
        lines.append("No recommendations.")
        return "\n".join(lines)

    lines.append("Recommendations:")
    for rank, rec in enumerate(recs, start=1):
        lab = f" [{format_lab(rec.lab_color)}]" if include_lab else ""
        label = rec.category.value.replace("_", "-")
        lines.append(
            f"{rank}. {rec.hex} {label} ({rec.confidence:.0%}){lab} -- {rec.reason}"
        )

    return "\n".join(lines)
