"""
Infrastructure utilities.

Cross-cutting concerns: logging, input fingerprinting.
"""

from .logging import setup_logging
from .fingerprint import hash_genotypes, get_environment_info

__all__ = ["setup_logging", "hash_genotypes", "get_environment_info"]
