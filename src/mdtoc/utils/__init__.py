"""Utility helpers for mdtoc."""
