"""
Remote data library for driving application state from network calls.

Core building blocks: a four-state sum type for the lifecycle of a remote
operation, combinators over it, and controllers that run async operations
and expose their state.

Architecture:
- core        - NotAsked | Loading | Success | Failure, guards, transforms
- lift        - exceptions and kungfu Results into RemoteData and back
- collection  - many RemoteData values into one
- controller  - ServiceController, Pager, CRUDController
- transport   - RequestDescriptor and the httpx request function
- fhir        - FHIR-style resource requests over an injected transport
"""

# Core types
from .core import (
    Failure,
    Loading,
    NotAsked,
    RemoteData,
    RemoteDataResult,
    Status,
    Success,
    failure,
    fold,
    is_failure,
    is_loading,
    is_not_asked,
    is_success,
    is_success_all,
    loading,
    map_failure,
    map_success,
    not_asked,
    success,
)

# Type aliases
from ._types import JSON, Listener, Operation, SearchParams, Unsubscribe, Updater

# Errors
from ._errors import (
    InvalidReferenceError,
    MissingInactiveMappingError,
    NotSettledError,
    ResourceTargetError,
    UnwrapError,
)

# Lift helpers
from . import lift
from .lift import (
    UNKNOWN_ERROR,
    attempt,
    call,
    catching_async,
    ensure,
    investigate,
    lifted,
    normalize_error,
    service,
    to_result,
    with_default,
)

# Collection
from .collection import partition, resolve, resolve_map, sequence, sequence_map

# Transport
from .transport import HttpxService, RequestDescriptor, RequestService

# Resource collaborator
from . import fhir
from .fhir import ClientConfig, FHIRClient, InactiveMappingItem, Reference, Resource

# Controllers
from .controller import CRUDController, Pager, ServiceController

__all__ = (
    # Variants
    "Failure",
    "Loading",
    "NotAsked",
    "RemoteData",
    "RemoteDataResult",
    "Status",
    "Success",
    # Constructors
    "failure",
    "loading",
    "not_asked",
    "success",
    # Guards
    "is_failure",
    "is_loading",
    "is_not_asked",
    "is_success",
    "is_success_all",
    # Transform
    "fold",
    "map_failure",
    "map_success",
    # Type aliases
    "JSON",
    "Listener",
    "Operation",
    "SearchParams",
    "Unsubscribe",
    "Updater",
    # Errors
    "InvalidReferenceError",
    "MissingInactiveMappingError",
    "NotSettledError",
    "ResourceTargetError",
    "UnwrapError",
    # Lift
    "lift",
    "UNKNOWN_ERROR",
    "attempt",
    "call",
    "catching_async",
    "ensure",
    "investigate",
    "lifted",
    "normalize_error",
    "service",
    "to_result",
    "with_default",
    # Collection
    "partition",
    "resolve",
    "resolve_map",
    "sequence",
    "sequence_map",
    # Transport
    "HttpxService",
    "RequestDescriptor",
    "RequestService",
    # Resources
    "fhir",
    "ClientConfig",
    "FHIRClient",
    "InactiveMappingItem",
    "Reference",
    "Resource",
    # Controllers
    "CRUDController",
    "Pager",
    "ServiceController",
)
