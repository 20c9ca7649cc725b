"""Utility functions for kubeglance."""

from kubeglance.utils.formatting import (
    human_duration,
    map_to_str,
    na,
    to_age,
    to_percentage_str,
)
from kubeglance.utils.resource_parser import (
    cpu_millicores,
    memory_bytes,
    parse_quantity,
)

__all__ = [
    # Formatting
    "human_duration",
    "map_to_str",
    "na",
    "to_age",
    "to_percentage_str",
    # Quantities
    "cpu_millicores",
    "memory_bytes",
    "parse_quantity",
]
