# =============================================================================
# givebutter/operations/__init__.py  —  The operation catalog
# =============================================================================
#
# Each module in this package exposes an OPERATIONS list.  They are
# registered here once, at import time, into a name → descriptor mapping
# that the dispatcher and the MCP layer look up on every call.
#
# Registration checks every descriptor:
#   - names are unique across the catalog
#   - every path placeholder is a required Integer argument
# =============================================================================

from givebutter.errors import UnknownOperationError
from givebutter.models import OperationDescriptor
from givebutter.operations import campaigns, contacts, donations
from givebutter.operations.base import is_integer_field

_REGISTRY: dict[str, OperationDescriptor] = {}


def _check_path_params(op: OperationDescriptor) -> None:
    fields = op.arguments.model_fields
    for param in op.path_params:
        info = fields.get(param)
        if info is None or not info.is_required() or not is_integer_field(info):
            raise ValueError(
                f"Operation '{op.name}': path parameter '{param}' must be a "
                f"required Integer argument"
            )


def register(op: OperationDescriptor) -> None:
    if op.name in _REGISTRY:
        raise ValueError(f"Operation '{op.name}' already registered")
    _check_path_params(op)
    _REGISTRY[op.name] = op


def get_operation(name: str) -> OperationDescriptor:
    """Look up an operation by tool name."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownOperationError(f"Unknown operation '{name}'") from None


def list_operations() -> list[OperationDescriptor]:
    """All registered operations, in declaration order."""
    return list(_REGISTRY.values())


for _module in (campaigns, contacts, donations):
    for _op in _module.OPERATIONS:
        register(_op)
