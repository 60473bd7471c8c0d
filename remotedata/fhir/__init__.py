"""
FHIR-style resource collaborator.

Architecture:
- requests.*  - pure builders of RequestDescriptor values
- bundle.*    - entry extraction and pagination links
- reference.* - Reference | Resource tagged union
- FHIRClient  - runs builders through an injected request function

Examples:
    from remotedata.fhir import ClientConfig, FHIRClient, make_reference

    client = FHIRClient.from_config(ClientConfig(base_url="https://fhir.example.com/"))
    rd = await client.get(make_reference("Patient", "1"))
"""

from . import requests
from .bundle import (
    ResourcesMap,
    extract_bundle_resources,
    find_link,
    get_included_resource,
    get_main_resources,
    get_resources_of_type,
)
from .client import NO_RESOURCES_FOUND, TOO_MANY_RESOURCES_FOUND, FHIRClient
from .config import (
    DEFAULT_INACTIVE_MAPPING,
    NO_INACTIVE_MAPPING,
    ClientConfig,
    InactiveMapping,
    InactiveMappingItem,
)
from .reference import (
    Reference,
    Resource,
    Target,
    get_reference,
    is_reference,
    is_resource,
    make_reference,
    parse_reference,
    to_reference,
)

__all__ = (
    # Namespaces
    "requests",
    # Client
    "FHIRClient",
    "NO_RESOURCES_FOUND",
    "TOO_MANY_RESOURCES_FOUND",
    # Config
    "ClientConfig",
    "DEFAULT_INACTIVE_MAPPING",
    "InactiveMapping",
    "InactiveMappingItem",
    "NO_INACTIVE_MAPPING",
    # References
    "Reference",
    "Resource",
    "Target",
    "get_reference",
    "is_reference",
    "is_resource",
    "make_reference",
    "parse_reference",
    "to_reference",
    # Bundles
    "ResourcesMap",
    "extract_bundle_resources",
    "find_link",
    "get_included_resource",
    "get_main_resources",
    "get_resources_of_type",
)
