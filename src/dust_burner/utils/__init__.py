# -*- coding: utf-8 -*-
"""Utility modules."""

from dust_burner.utils.amounts import format_satoshi, parse_amount
from dust_burner.utils.validation import is_address, mask_address

__all__ = [
    "format_satoshi",
    "is_address",
    "mask_address",
    "parse_amount",
]
