"""
Controllers: RemoteData state driven by async operations.

- ServiceController - any operation, with reload / soft reload / set
- Pager             - paginated search with next / previous links
- CRUDController    - load, save and soft-delete one resource
"""

from ._state import StateController
from .crud import EMPTY_RESPONSE_ERROR, CRUDController
from .pager import DEFAULT_RESOURCES_ON_PAGE, Pager
from .service import ServiceController

__all__ = (
    "CRUDController",
    "DEFAULT_RESOURCES_ON_PAGE",
    "EMPTY_RESPONSE_ERROR",
    "Pager",
    "ServiceController",
    "StateController",
)
