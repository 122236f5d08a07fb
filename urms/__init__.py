"""Semantic-graph runtime with evolution, reflection, memory and analysis stages."""

__version__ = "0.1.0"