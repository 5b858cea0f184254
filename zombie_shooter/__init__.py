"""Zombies & Mummies: enemy motion, hit-testing and the frame loop."""

__version__ = "1.0.0"
