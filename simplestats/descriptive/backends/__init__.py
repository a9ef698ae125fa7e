"""Computational backends for descriptive statistics."""

from simplestats.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = ["CPUDescriptiveBackend"]
