# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Delivery runtime for HueHome.

Serialization of recommendations for the rendering and persistence
layers. The delivery layer never modifies color values.
"""

from huehome.runtime.serializers import SerializerFormat, to_payload

__all__ = [
    "to_payload",
    "SerializerFormat",
]
