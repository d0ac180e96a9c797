"""Shared helpers (logging, datetime) used across layers."""
