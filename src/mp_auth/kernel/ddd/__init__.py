"""Kernel DDD helpers."""
from mp_auth.kernel.ddd.invariant import Invariant

__all__ = ["Invariant"]
