# Copyright (c) 2026 HueHome
# SPDX-License-Identifier: MIT

"""
Serializers for recommendation delivery.

All serializers preserve values exactly -- no modification or inference.
"""

from huehome.runtime.serializers.base import SerializerFormat
from huehome.runtime.serializers.payload import to_payload

__all__ = [
    "SerializerFormat",
    "to_payload",
]
