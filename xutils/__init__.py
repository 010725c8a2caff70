"""Atomic integers, a spin lock, a counting barrier, binary marshalling, file key loading and memory regions."""

__version__ = "0.1.0"