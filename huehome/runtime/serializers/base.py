# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def format_lab(lab) -> str:
    """Compact LAB string like ``L32.3/a79.2/b-107.9``."""
    return f"L{lab.l:.1f}/a{lab.a:.1f}/b{lab.b:.1f}"
