"""Entropy sources for word selection."""

from . import device, interface, simulator
