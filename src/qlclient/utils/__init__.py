"""Utility helpers for qlclient."""
