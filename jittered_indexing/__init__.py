"""Jittered fractional indexing: collision-resistant sort keys between two keys."""

import logging

from .jitter import generate_key_between, generate_n_keys_between
from .lexorank import BASE_36_DIGITS
from .models import DEFAULT_JITTER_BITS, JitterOptions
from .primitives import FRACTIONAL_INDEXING, LEXORANK, FractionalIndexing, KeyPrimitive, LexoRank
from .utils import (
    InvalidArgument,
    assert_non_negative_integer,
    collision_probability,
    default_random_bit,
    secure_random_bit,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BASE_36_DIGITS",
    "DEFAULT_JITTER_BITS",
    "FRACTIONAL_INDEXING",
    "LEXORANK",
    "FractionalIndexing",
    "InvalidArgument",
    "JitterOptions",
    "KeyPrimitive",
    "LexoRank",
    "assert_non_negative_integer",
    "collision_probability",
    "default_random_bit",
    "generate_key_between",
    "generate_n_keys_between",
    "secure_random_bit",
]
