"""Batch deployment pipeline: clone, analyze, persist, dispatch."""
