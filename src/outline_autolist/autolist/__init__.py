"""List-editing overrides for the extend and delete-back triggers."""

from .handlers import (
    DeleteBackAction,
    ExtendAction,
    classify_delete_back,
    classify_extend,
    handle_delete_back,
    handle_extend,
)
from .host import ListHost, OutdentError
from .locator import locate_item_boundary
from .session import DELETE_BACK_ADVICE_ID, EXTEND_ADVICE_ID, AutolistSession

__all__ = [
    "AutolistSession",
    "DELETE_BACK_ADVICE_ID",
    "DeleteBackAction",
    "EXTEND_ADVICE_ID",
    "ExtendAction",
    "ListHost",
    "OutdentError",
    "classify_delete_back",
    "classify_extend",
    "handle_delete_back",
    "handle_extend",
    "locate_item_boundary",
]
