"""Codec defaults.

Used when encode/decode are called without an explicit version or
strategy.
"""

from .core.versions import get_version
from .engine.strategy import Strategy

CODEC_CONFIG = {
    "version": "v1_standard",
    "filter": "strict",
    "encoding": "extensions",
}


def default_version():
    """The configured default Version."""
    return get_version(CODEC_CONFIG["version"])


def default_strategy():
    """The configured default Strategy."""
    return Strategy.from_names(CODEC_CONFIG["filter"], CODEC_CONFIG["encoding"])
