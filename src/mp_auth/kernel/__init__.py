"""Kernel – errors, result types, clock and invariant helpers."""
