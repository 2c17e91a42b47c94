"""Checkpoint-learning pod racing agent."""

__version__ = "0.1.0"
