import json

from contract_schema import inspect
from contract_schema.model import (
    ArrayType,
    Contract,
    EnumType,
    ListType,
    MapType,
    NamedFields,
    NoFields,
    PairType,
    ScalarType,
    SetType,
    SizeLength,
    StringType,
    StructType,
    TypeTag,
    UnnamedFields,
)

U8 = ScalarType(TypeTag.U8)
BOOL = ScalarType(TypeTag.BOOL)


def test_render_scalars_and_collections():
    assert inspect.render_type(ScalarType(TypeTag.UNIT)) == "()"
    assert inspect.render_type(ScalarType(TypeTag.I128)) == "i128"
    assert inspect.render_type(ScalarType(TypeTag.ACCOUNT_ADDRESS)) == "AccountAddress"
    assert inspect.render_type(PairType(U8, BOOL)) == "(u8, bool)"
    assert inspect.render_type(ListType(SizeLength.U32, U8)) == "Vec<u8>"
    assert inspect.render_type(SetType(SizeLength.U8, U8)) == "BTreeSet<u8>"
    string = StringType(TypeTag.STRING, SizeLength.U32)
    assert inspect.render_type(MapType(SizeLength.U32, string, U8)) == "BTreeMap<String, u8>"
    assert inspect.render_type(ArrayType(32, U8)) == "[u8; 32]"


def test_render_structs_and_enums():
    assert inspect.render_type(StructType(NamedFields((("r", U8), ("ok", BOOL))))) == "struct { r: u8, ok: bool }"
    assert inspect.render_type(StructType(UnnamedFields((U8, U8)))) == "struct(u8, u8)"
    assert inspect.render_type(StructType(NoFields())) == "struct"
    animal = EnumType((("Cat", NoFields()), ("Dog", UnnamedFields((U8,))), ("Bird", NamedFields((("wings", U8),)))))
    assert inspect.render_type(animal) == "enum { Cat, Dog(u8), Bird { wings: u8 } }"
    assert inspect.render_type(EnumType(())) == "enum {}"


def test_type_to_dict_uses_wire_vocabulary():
    t = MapType(SizeLength.U16, StringType(TypeTag.RECEIVE_NAME, SizeLength.U32), ArrayType(4, U8))
    assert inspect.type_to_dict(t) == {
        "typeTag": "Map",
        "sizeLength": "U16",
        "ofKeys": {"typeTag": "ReceiveName", "sizeLength": "U32"},
        "ofValues": {"typeTag": "Array", "size": 4, "of": {"typeTag": "U8"}},
    }


def test_module_to_dict_is_json_serializable():
    module = {
        "a": Contract(
            state=StructType(NamedFields((("n", U8),))),
            receive={"go": EnumType((("On", NoFields()), ("Off", UnnamedFields((BOOL,)))))},
        )
    }
    d = inspect.module_to_dict(module)
    assert d["a"]["init"] is None
    assert d["a"]["state"]["fields"] == {"fieldsTag": "Named", "contents": [["n", {"typeTag": "U8"}]]}
    assert d["a"]["receive"]["go"]["variants"][0] == ["On", {"fieldsTag": "None"}]
    json.dumps(d)


def test_type_depth():
    assert inspect.type_depth(U8) == 1
    assert inspect.type_depth(PairType(U8, ListType(SizeLength.U8, U8))) == 3
    assert inspect.type_depth(StructType(NoFields())) == 1
    assert inspect.type_depth(EnumType((("A", UnnamedFields((PairType(U8, U8),))),))) == 3


def test_summarize_module():
    module = {
        "zeta": Contract(receive={"b": U8, "a": BOOL}),
        "alpha": Contract(state=PairType(U8, U8), init=U8),
    }
    summary = inspect.summarize_module(module)
    assert summary.contract_count == 2
    assert summary.entrypoint_count == 2
    alpha, zeta = summary.contracts
    assert alpha.name == "alpha"
    assert alpha.state == "(u8, u8)"
    assert alpha.max_depth == 2
    assert list(zeta.receive) == ["a", "b"]
    assert zeta.state is None
    assert summary.to_dict()["contracts"][1]["receive"] == {"a": "bool", "b": "u8"}


def test_type_to_dict_emits_raw_size_length():
    assert inspect.type_to_dict(StringType(TypeTag.STRING, 7)) == {"typeTag": "String", "sizeLength": 7}
    assert inspect.type_to_dict(ListType(9, U8))["sizeLength"] == 9
    json.dumps(inspect.type_to_dict(MapType(200, U8, U8)))
