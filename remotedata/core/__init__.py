"""
RemoteData core
===============

Four-state sum type for the lifecycle of a remote operation:
NotAsked -> Loading -> Success | Failure -> (reload) Loading -> ...
"""

from .guards import is_failure, is_loading, is_not_asked, is_success, is_success_all
from .transform import fold, map_failure, map_success
from .variants import (
    Failure,
    Loading,
    NotAsked,
    RemoteData,
    RemoteDataResult,
    Status,
    Success,
    failure,
    loading,
    not_asked,
    success,
)

__all__ = (
    # Variants
    "Failure",
    "Loading",
    "NotAsked",
    "Success",
    # Aliases
    "RemoteData",
    "RemoteDataResult",
    "Status",
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
)
