from ._checks import check_callable, check_error_kind
from ._main import Pipeable

__all__ = ["Pipeable", "check_callable", "check_error_kind"]
