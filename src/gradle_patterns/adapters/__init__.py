"""Adapters between the convention core and its surroundings."""

from __future__ import annotations

from .policy_file import PolicyDocument, load_policy, parse_policy
from .registry import ConventionRegistry, UnknownConventionError

__all__ = [
    "ConventionRegistry",
    "PolicyDocument",
    "UnknownConventionError",
    "load_policy",
    "parse_policy",
]
