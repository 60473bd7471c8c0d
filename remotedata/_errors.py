from __future__ import annotations

import typing


class UnwrapError(Exception):
    """Asserting helper met a variant it cannot unwrap."""

    value: typing.Any

    def __init__(self, message: str, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"{message}: {value!r}")


class NotSettledError(Exception):
    """Conversion to Result requested while the value is still pending."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"Remote data is not settled yet: {value!r}")


class ResourceTargetError(ValueError):
    """Neither resource id nor search parameters were given."""

    resource_type: str | None

    def __init__(self, resource_type: str | None) -> None:
        self.resource_type = resource_type
        super().__init__(f"Resource id and search parameters are not specified for {resource_type}")


class MissingInactiveMappingError(LookupError):
    """Resource type has no inactive mapping configured."""

    resource_type: str

    def __init__(self, resource_type: str) -> None:
        self.resource_type = resource_type
        super().__init__(f"Specify inactive mapping for {resource_type} to mark item deleted")


class InvalidReferenceError(ValueError):
    """Reference does not name a resource type."""

    reference: typing.Any

    def __init__(self, reference: typing.Any) -> None:
        self.reference = reference
        super().__init__(f"resourceType is missing from {reference!r}")


__all__ = (
    "InvalidReferenceError",
    "MissingInactiveMappingError",
    "NotSettledError",
    "ResourceTargetError",
    "UnwrapError",
)
