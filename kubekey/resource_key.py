"""
Identity keys for Kubernetes resources.

A ResourceKey identifies a resource by its API version, kind, namespace and
name. Keys have a canonical string form ("apiVersion:kind:namespace:name")
that is used as a log token and as the persisted representation, and can be
decoded back into a key.

Fields are not escaped: a field containing ":" produces a string that does not
decode back to the same key. Existing persisted keys rely on this format, so
the limitation is kept as-is.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from kubekey.resource_utils import (
    CONFIGMAP_KIND,
    DEPLOYMENT_KIND,
    SECRET_KIND,
    is_builtin_api_version,
)

logger = logging.getLogger(__name__)

DELIMITER = ":"
KEY_PARTS = 4

_FIELDS = ("api_version", "kind", "namespace", "name")


class MalformedKeyError(ValueError):
    """Raised when a string is not a valid canonical resource key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"malformed key {key!r}: expected {KEY_PARTS} '{DELIMITER}'-separated parts, "
            f"got {len(key.split(DELIMITER))}"
        )


class ResourceKey:
    """
    Immutable identifier of a Kubernetes resource.

    None becomes an empty field and other non-string values are converted
    with str(), so every key can be encoded.
    """

    __slots__ = _FIELDS

    def __init__(
        self,
        api_version: Optional[str] = "",
        kind: Optional[str] = "",
        namespace: Optional[str] = "",
        name: Optional[str] = "",
    ):
        object.__setattr__(self, "api_version", _as_field(api_version))
        object.__setattr__(self, "kind", _as_field(kind))
        object.__setattr__(self, "namespace", _as_field(namespace))
        object.__setattr__(self, "name", _as_field(name))

    def __setattr__(self, attr: str, value: Any) -> None:
        raise AttributeError(f"ResourceKey is immutable, cannot set {attr!r}")

    def __delattr__(self, attr: str) -> None:
        raise AttributeError(f"ResourceKey is immutable, cannot delete {attr!r}")

    def _astuple(self) -> tuple[str, str, str, str]:
        return (self.api_version, self.kind, self.namespace, self.name)

    def __hash__(self) -> int:
        return hash(self._astuple())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ResourceKey):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __repr__(self) -> str:
        return (
            f"ResourceKey(api_version={self.api_version!r}, kind={self.kind!r}, "
            f"namespace={self.namespace!r}, name={self.name!r})"
        )

    def __str__(self) -> str:
        return self.encode()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __reduce__(self):
        return (ResourceKey, self._astuple())

    def encode(self) -> str:
        """Return the canonical "apiVersion:kind:namespace:name" form."""
        return DELIMITER.join(self._astuple())

    @classmethod
    def decode(cls, key: str) -> "ResourceKey":
        """Decode a canonical string. See decode_resource_key()."""
        return decode_resource_key(key)

    @classmethod
    def from_manifest(cls, manifest: Mapping) -> "ResourceKey":
        """
        Build a key from a Kubernetes manifest dictionary.

        Reads apiVersion, kind, metadata.namespace and metadata.name. Missing
        values, and a metadata field that is not a mapping, become empty
        strings; present values are copied verbatim.
        """
        metadata = manifest.get("metadata")
        if not isinstance(metadata, Mapping):
            metadata = {}
        return cls(
            api_version=manifest.get("apiVersion"),
            kind=manifest.get("kind"),
            namespace=metadata.get("namespace"),
            name=metadata.get("name"),
        )

    def is_zero(self) -> bool:
        """Return True if every field is empty (the "no key" sentinel)."""
        return (
            self.api_version == ""
            and self.kind == ""
            and self.namespace == ""
            and self.name == ""
        )

    def is_kubernetes_builtin_resource(self) -> bool:
        """Return True if the API version is one of the built-in Kubernetes APIs."""
        return is_builtin_api_version(self.api_version)

    def _is_builtin_kind(self, kind: str) -> bool:
        # Custom resources may reuse built-in kind names, so the API version
        # has to be built-in too.
        return self.kind == kind and self.is_kubernetes_builtin_resource()

    def is_deployment(self) -> bool:
        return self._is_builtin_kind(DEPLOYMENT_KIND)

    def is_configmap(self) -> bool:
        return self._is_builtin_kind(CONFIGMAP_KIND)

    def is_secret(self) -> bool:
        return self._is_builtin_kind(SECRET_KIND)


def _as_field(value: Optional[Any]) -> str:
    if value is None:
        return ""
    # YAML may load names such as 1234 as ints
    return value if isinstance(value, str) else str(value)


ZERO_KEY = ResourceKey()


def make_resource_key(obj: Any) -> ResourceKey:
    """
    Build a ResourceKey from a Kubernetes resource.

    Args:
        obj: Either a manifest dictionary, or an object exposing
            get_api_version(), get_kind(), get_namespace() and get_name()

    Returns:
        ResourceKey populated verbatim from the resource

    Raises:
        TypeError: If obj is neither a mapping nor exposes the accessors
    """
    if isinstance(obj, Mapping):
        return ResourceKey.from_manifest(obj)

    accessors = ("get_api_version", "get_kind", "get_namespace", "get_name")
    missing = [a for a in accessors if not callable(getattr(obj, a, None))]
    if missing:
        raise TypeError(
            f"Cannot build a ResourceKey from {type(obj).__name__}: "
            f"missing {', '.join(missing)}"
        )

    return ResourceKey(
        api_version=obj.get_api_version(),
        kind=obj.get_kind(),
        namespace=obj.get_namespace(),
        name=obj.get_name(),
    )


def decode_resource_key(key: str) -> ResourceKey:
    """
    Decode a canonical "apiVersion:kind:namespace:name" string.

    The string is split on every ":" and must yield exactly four parts.
    Empty parts are accepted, so ":::" decodes to the zero key.

    Args:
        key: Canonical key string

    Returns:
        The decoded ResourceKey

    Raises:
        MalformedKeyError: If the string does not split into exactly four parts
    """
    parts = key.split(DELIMITER)
    if len(parts) != KEY_PARTS:
        logger.debug(f"Rejecting malformed resource key: {key!r}")
        raise MalformedKeyError(key)
    api_version, kind, namespace, name = parts
    return ResourceKey(api_version=api_version, kind=kind, namespace=namespace, name=name)
