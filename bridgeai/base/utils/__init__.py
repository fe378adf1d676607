"""Shared pure helpers: prompt hashing, cost estimation, JSON reply parsing."""

from .hashing import generate_hash
from .cost import PRICING, ModelRate, calculate_cost
from .json_output import clean_json_markers, attempt_json_repair, parse_json_reply

__all__ = [
    "generate_hash",
    "PRICING",
    "ModelRate",
    "calculate_cost",
    "clean_json_markers",
    "attempt_json_repair",
    "parse_json_reply",
]
