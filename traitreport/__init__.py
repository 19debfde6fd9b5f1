"""Genotype interpretation for canine trait reports."""

__version__ = "0.1.0"
