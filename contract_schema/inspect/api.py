"""
Inspection helpers for decoded schemas.

- `*_to_dict`: JSON-ready structures. Keys follow the wire vocabulary
  (`typeTag`, `sizeLength`, `ofLeft`, ...) and tags are rendered by name, so
  dumps stay readable and diffable.
- `render_type`: Rust-flavoured one-line rendering (`Vec<u8>`, `[u8; 32]`).
- `summarize_module`: compact per-contract overview for humans.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..model import (
    ArrayType,
    Contract,
    EnumType,
    Fields,
    ListType,
    MapType,
    Module,
    NamedFields,
    NoFields,
    PairType,
    ScalarType,
    SetType,
    SizeLength,
    SizeLengthValue,
    StringType,
    StructType,
    Type,
    TypeTag,
    UnnamedFields,
)


def _pascal(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


def _size_length(value: SizeLengthValue) -> Union[str, int]:
    return value.name if isinstance(value, SizeLength) else value


def type_to_dict(t: Type) -> Dict[str, Any]:
    out: Dict[str, Any] = {"typeTag": _pascal(t.tag.name)}
    if isinstance(t, PairType):
        out["ofLeft"] = type_to_dict(t.of_left)
        out["ofRight"] = type_to_dict(t.of_right)
    elif isinstance(t, (ListType, SetType)):
        out["sizeLength"] = _size_length(t.size_length)
        out["of"] = type_to_dict(t.of)
    elif isinstance(t, MapType):
        out["sizeLength"] = _size_length(t.size_length)
        out["ofKeys"] = type_to_dict(t.of_keys)
        out["ofValues"] = type_to_dict(t.of_values)
    elif isinstance(t, ArrayType):
        out["size"] = t.size
        out["of"] = type_to_dict(t.of)
    elif isinstance(t, StructType):
        out["fields"] = fields_to_dict(t.fields)
    elif isinstance(t, EnumType):
        out["variants"] = [[name, fields_to_dict(f)] for name, f in t.variants]
    elif isinstance(t, StringType):
        out["sizeLength"] = _size_length(t.size_length)
    return out


def fields_to_dict(f: Fields) -> Dict[str, Any]:
    out: Dict[str, Any] = {"fieldsTag": _pascal(f.tag.name)}
    if isinstance(f, NamedFields):
        out["contents"] = [[name, type_to_dict(t)] for name, t in f.contents]
    elif isinstance(f, UnnamedFields):
        out["contents"] = [type_to_dict(t) for t in f.contents]
    return out


def contract_to_dict(contract: Contract) -> Dict[str, Any]:
    return {
        "state": type_to_dict(contract.state) if contract.state is not None else None,
        "init": type_to_dict(contract.init) if contract.init is not None else None,
        "receive": {name: type_to_dict(t) for name, t in contract.receive.items()},
    }


def module_to_dict(module: Module) -> Dict[str, Any]:
    return {name: contract_to_dict(contract) for name, contract in module.items()}


_SCALAR_NAMES = {
    TypeTag.UNIT: "()",
    TypeTag.BOOL: "bool",
    TypeTag.AMOUNT: "Amount",
    TypeTag.ACCOUNT_ADDRESS: "AccountAddress",
    TypeTag.CONTRACT_ADDRESS: "ContractAddress",
    TypeTag.TIMESTAMP: "Timestamp",
    TypeTag.DURATION: "Duration",
}

_STRING_NAMES = {
    TypeTag.STRING: "String",
    TypeTag.CONTRACT_NAME: "ContractName",
    TypeTag.RECEIVE_NAME: "ReceiveName",
}


def render_fields(f: Fields) -> str:
    """Render members as they would follow a struct or variant name ("" for none)."""
    if isinstance(f, NamedFields):
        inner = ", ".join(f"{name}: {render_type(t)}" for name, t in f.contents)
        return f" {{ {inner} }}" if inner else " {}"
    if isinstance(f, UnnamedFields):
        return "(" + ", ".join(render_type(t) for t in f.contents) + ")"
    return ""


def render_type(t: Type) -> str:
    """
    Rust-flavoured rendering of a type.

    Integer scalars render as their primitive (`u64`); collections render as
    the std types they are usually derived from (`Vec`, `BTreeSet`,
    `BTreeMap`). Size-length metadata is not shown.
    """
    if isinstance(t, ScalarType):
        return _SCALAR_NAMES.get(t.tag, t.tag.name.lower())
    if isinstance(t, PairType):
        return f"({render_type(t.of_left)}, {render_type(t.of_right)})"
    if isinstance(t, ListType):
        return f"Vec<{render_type(t.of)}>"
    if isinstance(t, SetType):
        return f"BTreeSet<{render_type(t.of)}>"
    if isinstance(t, MapType):
        return f"BTreeMap<{render_type(t.of_keys)}, {render_type(t.of_values)}>"
    if isinstance(t, ArrayType):
        return f"[{render_type(t.of)}; {t.size}]"
    if isinstance(t, StructType):
        return "struct" + render_fields(t.fields)
    if isinstance(t, EnumType):
        variants = ", ".join(name + render_fields(f) for name, f in t.variants)
        return f"enum {{ {variants} }}" if variants else "enum {}"
    return _STRING_NAMES[t.tag]


def _fields_children(f: Fields) -> List[Type]:
    if isinstance(f, NamedFields):
        return [t for _, t in f.contents]
    if isinstance(f, UnnamedFields):
        return list(f.contents)
    return []


def type_depth(t: Type) -> int:
    """Number of nested `Type` levels, counting `t` itself."""
    children: List[Type] = []
    if isinstance(t, PairType):
        children = [t.of_left, t.of_right]
    elif isinstance(t, (ListType, SetType, ArrayType)):
        children = [t.of]
    elif isinstance(t, MapType):
        children = [t.of_keys, t.of_values]
    elif isinstance(t, StructType):
        children = _fields_children(t.fields)
    elif isinstance(t, EnumType):
        for _, f in t.variants:
            children.extend(_fields_children(f))
    return 1 + max((type_depth(c) for c in children), default=0)


@dataclass
class ContractSummary:
    name: str
    state: Optional[str]
    init: Optional[str]
    receive: Dict[str, str] = field(default_factory=dict)
    max_depth: int = 0


@dataclass
class ModuleSummary:
    contract_count: int
    entrypoint_count: int
    contracts: List[ContractSummary] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contract_count": self.contract_count,
            "entrypoint_count": self.entrypoint_count,
            "contracts": [c.__dict__ for c in self.contracts],
        }


def summarize_contract(name: str, contract: Contract) -> ContractSummary:
    slots = [t for t in (contract.state, contract.init) if t is not None]
    slots.extend(contract.receive.values())
    return ContractSummary(
        name=name,
        state=render_type(contract.state) if contract.state is not None else None,
        init=render_type(contract.init) if contract.init is not None else None,
        receive={entry: render_type(t) for entry, t in sorted(contract.receive.items())},
        max_depth=max((type_depth(t) for t in slots), default=0),
    )


def summarize_module(module: Module) -> ModuleSummary:
    """Summarize contracts in name order."""
    contracts = [summarize_contract(name, module[name]) for name in sorted(module)]
    return ModuleSummary(
        contract_count=len(contracts),
        entrypoint_count=sum(len(c.receive) for c in contracts),
        contracts=contracts,
    )
