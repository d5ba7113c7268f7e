"""Utility helpers for conversio."""
