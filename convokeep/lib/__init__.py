"""Shared JSON helpers."""
