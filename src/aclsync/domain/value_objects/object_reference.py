"""Object references - path-like ids of permissions-bearing objects."""

TOKENS_REFERENCE = "/authorization/tokens"
PASSWORDS_REFERENCE = "/authorization/passwords"
REGISTERED_MODELS_ROOT_REFERENCE = "/registered-models/root"

JOBS_PREFIX = "/jobs/"
PIPELINES_PREFIX = "/pipelines/"


def build_reference(resource_type: str, identifier: str) -> str:
    """Build ``/<resource_type>/<identifier>``."""
    return f"/{resource_type}/{identifier}"


def identifier_of(object_id: str) -> str:
    """Last path segment of an object id, e.g. ``abc`` for ``/clusters/abc``."""
    return object_id.rstrip("/").rsplit("/", 1)[-1]


def is_job(reference: str) -> bool:
    return reference.startswith(JOBS_PREFIX)


def is_pipeline(reference: str) -> bool:
    return reference.startswith(PIPELINES_PREFIX)
