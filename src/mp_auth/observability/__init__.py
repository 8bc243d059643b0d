"""Observability – logging and audit."""
