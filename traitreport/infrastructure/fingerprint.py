"""
Input fingerprinting.

Hashes the genotype input of a report so that reports produced from the
same results can be matched up, and records the environment they ran in.
"""

import hashlib
import json
import platform
import sys
from datetime import datetime
from typing import Any, Dict, Mapping

from ..core.genotype import GenotypeValue, display_value


def hash_genotypes(genotypes: Mapping[str, GenotypeValue]) -> str:
    """
    Generate a SHA256 hash of a genotype mapping.

    NoCall values hash by their string form.

    Args:
        genotypes: Mapping of locus name to genotype value

    Returns:
        64-character hex string (SHA256 hash)
    """
    normalized = {name: display_value(value) for name, value in genotypes.items()}

    # Sort keys for consistent ordering
    json_str = json.dumps(normalized, sort_keys=True)

    return hashlib.sha256(json_str.encode()).hexdigest()


def get_environment_info() -> Dict[str, Any]:
    """
    Collect environment information for report metadata.

    Returns:
        Dict with Python version, package version, platform, timestamp
    """
    from .. import __version__

    return {
        "python_version": sys.version.split()[0],
        "traitreport_version": __version__,
        "platform": platform.platform(),
        "timestamp": datetime.now().isoformat(),
    }
