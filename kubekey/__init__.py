"""
Kubekey - Deterministic, reversible identity keys for Kubernetes resources.
"""

from kubekey.resource_key import (
    ResourceKey,
    MalformedKeyError,
    ZERO_KEY,
    make_resource_key,
    decode_resource_key,
)
from kubekey.resource_utils import BUILTIN_API_VERSIONS, is_builtin_api_version
from kubekey.config import Config

__all__ = [
    "ResourceKey",
    "MalformedKeyError",
    "ZERO_KEY",
    "make_resource_key",
    "decode_resource_key",
    "BUILTIN_API_VERSIONS",
    "is_builtin_api_version",
    "Config",
]

__version__ = "0.1.0"
