"""
JSON conversion, rendering and summaries for decoded schemas.

Public API:
- `module_to_dict`, `contract_to_dict`, `type_to_dict`, `fields_to_dict`
- `render_type`, `render_fields`, `type_depth`
- `summarize_module`, `summarize_contract`, `ModuleSummary`, `ContractSummary`
"""

from __future__ import annotations

from .api import (  # noqa: F401
    ContractSummary,
    ModuleSummary,
    contract_to_dict,
    fields_to_dict,
    module_to_dict,
    render_fields,
    render_type,
    summarize_contract,
    summarize_module,
    type_depth,
    type_to_dict,
)

__all__ = [
    "module_to_dict",
    "contract_to_dict",
    "type_to_dict",
    "fields_to_dict",
    "render_type",
    "render_fields",
    "type_depth",
    "summarize_module",
    "summarize_contract",
    "ModuleSummary",
    "ContractSummary",
]
