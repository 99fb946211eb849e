"""Slug processor: infer deployment settings for GitHub repos and dispatch them to Nomad."""

__version__ = "0.1.0"
