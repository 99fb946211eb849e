"""Sandbox module for materialising repositories on local disk."""

from slug_processor.sandbox.checkout import CloneError, clone_slug

__all__ = ["CloneError", "clone_slug"]
