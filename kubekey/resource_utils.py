"""
Constants and helpers for classifying Kubernetes resources by API version and kind.
"""

# API group/versions served natively by the Kubernetes API server.
# Anything outside this set is treated as a custom resource.
BUILTIN_API_VERSIONS = frozenset(
    [
        "admissionregistration.k8s.io/v1",
        "admissionregistration.k8s.io/v1beta1",
        "apiextensions.k8s.io/v1",
        "apiextensions.k8s.io/v1beta1",
        "apiregistration.k8s.io/v1",
        "apiregistration.k8s.io/v1beta1",
        "apps/v1",
        "authentication.k8s.io/v1",
        "authentication.k8s.io/v1beta1",
        "authorization.k8s.io/v1",
        "authorization.k8s.io/v1beta1",
        "autoscaling/v1",
        "autoscaling/v2beta1",
        "autoscaling/v2beta2",
        "batch/v1",
        "batch/v1beta1",
        "certificates.k8s.io/v1beta1",
        "coordination.k8s.io/v1",
        "coordination.k8s.io/v1beta1",
        "extensions/v1beta1",
        "internal.autoscaling.k8s.io/v1alpha1",
        "metrics.k8s.io/v1beta1",
        "networking.k8s.io/v1",
        "networking.k8s.io/v1beta1",
        "node.k8s.io/v1beta1",
        "policy/v1beta1",
        "rbac.authorization.k8s.io/v1",
        "rbac.authorization.k8s.io/v1beta1",
        "scheduling.k8s.io/v1",
        "scheduling.k8s.io/v1beta1",
        "storage.k8s.io/v1",
        "storage.k8s.io/v1beta1",
        "v1",
    ]
)

DEPLOYMENT_KIND = "Deployment"
CONFIGMAP_KIND = "ConfigMap"
SECRET_KIND = "Secret"


def is_builtin_api_version(api_version: str) -> bool:
    """
    Check if an API version belongs to the built-in Kubernetes API surface.

    The match is exact and case-sensitive: no prefix, wildcard or
    version-skew matching is attempted.

    Args:
        api_version: The resource's API version (e.g., "apps/v1", "v1")

    Returns:
        True if the API version is built-in, False otherwise
    """
    return api_version in BUILTIN_API_VERSIONS
