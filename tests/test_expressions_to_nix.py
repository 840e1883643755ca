import pytest

from nixtree.expressions import (
    BooleanPrimitive,
    FloatPrimitive,
    FunctionDefinition,
    Identifier,
    Import,
    Inherit,
    IntegerPrimitive,
    LetExpression,
    NixAttributeSet,
    NixList,
    NixPath,
    NullPrimitive,
    StringPrimitive,
    WithStatement,
    coerce_expression,
)


def test_rebuild_primitives():
    assert NullPrimitive().rebuild() == "null"
    assert BooleanPrimitive(value=True).rebuild() == "true"
    assert IntegerPrimitive(value=-12).rebuild() == "-12"
    assert FloatPrimitive(value=2.5).rebuild() == "2.5"
    assert Identifier(name="lib.licenses.mit").rebuild() == "lib.licenses.mit"
    assert NixPath(path="./foo.nix").rebuild() == "./foo.nix"


def test_rebuild_float_always_has_a_dot():
    assert FloatPrimitive(value=1.0).rebuild() == "1.0"
    assert FloatPrimitive(value=1e20).rebuild() == "100000000000000000000.0"
    assert FloatPrimitive(value=1e-7).rebuild() == "0.0000001"
    with pytest.raises(ValueError, match="finite"):
        FloatPrimitive(value=float("inf")).rebuild()


def test_rebuild_string_escapes():
    assert StringPrimitive(value='say "hi"').rebuild() == '"say \\"hi\\""'
    assert StringPrimitive(value="a\\b\nc").rebuild() == '"a\\\\b\\nc"'
    assert StringPrimitive(value="${x}").rebuild() == '"\\${x}"'


def test_str_is_rebuild():
    assert str(NixList(items=[1])) == "[\n  1\n]"


def test_rebuild_nix_list_multiline():
    assert (
        NixList(items=[Identifier(name="foo"), Identifier(name="bar")]).rebuild()
        == "[\n  foo\n  bar\n]"
    )
    assert NixList().rebuild() == "[ ]"


def test_rebuild_attribute_set():
    value = NixAttributeSet(
        values={
            "name": "test",
            "services.udev.extraRules": "x",
            'fileSystems."/".device': "/dev/sda",
            "with space": 1,
            "inherit": 2,
        }
    )
    assert value.rebuild() == "\n".join(
        [
            "{",
            '  name = "test";',
            '  services.udev.extraRules = "x";',
            '  fileSystems."/".device = "/dev/sda";',
            '  "with space" = 1;',
            '  "inherit" = 2;',
            "}",
        ]
    )
    assert NixAttributeSet().rebuild() == "{ }"


def test_rebuild_nested_indentation():
    value = NixAttributeSet(values={"a": {"b": [1, {"c": True}]}})
    assert value.rebuild() == "\n".join(
        [
            "{",
            "  a = {",
            "    b = [",
            "      1",
            "      {",
            "        c = true;",
            "      }",
            "    ];",
            "  };",
            "}",
        ]
    )


def test_rebuild_let():
    value = LetExpression(bindings={"x": 1, "in": 2}, body=Identifier(name="x"))
    assert value.rebuild() == 'let\n  x = 1;\n  "in" = 2;\nin\nx'


def test_rebuild_let_inside_set():
    value = NixAttributeSet(
        values={"a": LetExpression(bindings={"x": 1}, body=Identifier(name="x"))}
    )
    assert value.rebuild() == "{\n  a = let\n    x = 1;\n  in\n  x;\n}"


def test_rebuild_functions():
    assert (
        FunctionDefinition(parameters=["x"], body=Identifier(name="x")).rebuild()
        == "x: x"
    )
    assert (
        FunctionDefinition(
            parameters=["a", "b"], body=NixAttributeSet(), variadic=True
        ).rebuild()
        == "{ a, b, ... }: { }"
    )
    assert (
        FunctionDefinition(parameters=["a", "b"], body=NullPrimitive()).rebuild()
        == "{ a, b }: null"
    )
    assert (
        FunctionDefinition(parameters=["a"], body=1, variadic=True).rebuild()
        == "{ a, ... }: 1"
    )
    assert FunctionDefinition(parameters=[], body=1).rebuild() == "{ }: 1"


def test_rebuild_import():
    assert Import(target="./overlays").rebuild() == "import ./overlays"
    assert Import(target="/etc/nixos/lib.nix").rebuild() == "import /etc/nixos/lib.nix"
    assert Import(target="lib.nix").rebuild() == 'import "lib.nix"'


def test_placeholder_variants():
    assert Inherit(names=["a", "b"]).rebuild() == "/* not implemented */"
    assert (
        WithStatement(environment=Identifier(name="pkgs"), body=[1]).rebuild()
        == "/* not implemented */"
    )


def test_coerce_expression():
    assert coerce_expression(None) == NullPrimitive()
    assert coerce_expression(True) == BooleanPrimitive(value=True)
    assert coerce_expression(3) == IntegerPrimitive(value=3)
    assert coerce_expression(0.5) == FloatPrimitive(value=0.5)
    assert coerce_expression("s") == StringPrimitive(value="s")
    assert coerce_expression([1]) == NixList(items=[IntegerPrimitive(value=1)])
    assert coerce_expression({"a": 1}) == NixAttributeSet(
        values={"a": IntegerPrimitive(value=1)}
    )
    with pytest.raises(ValueError, match="finite"):
        coerce_expression(float("nan"))
    with pytest.raises(ValueError, match="Unsupported expression type"):
        coerce_expression(object())


def test_nodes_are_immutable():
    value = NixAttributeSet(values={"a": 1})
    with pytest.raises(Exception):
        value.values = {}


def test_binding_mappings_are_read_only():
    value = NixAttributeSet(values={"a": 1})
    with pytest.raises(TypeError):
        value.values["b"] = IntegerPrimitive(value=2)
    let = LetExpression(bindings={"x": 1}, body=Identifier(name="x"))
    with pytest.raises(TypeError):
        let.bindings["y"] = IntegerPrimitive(value=2)
    assert value.rebuild() == "{\n  a = 1;\n}"


def test_binding_mapping_is_copied_from_input():
    source = {"a": 1}
    value = NixAttributeSet(values=source)
    source["b"] = 2
    assert list(value.keys()) == ["a"]


def test_nodes_are_hashable():
    first = NixAttributeSet(values={"a": [1, 2], "b": {"c": None}})
    second = NixAttributeSet(values={"a": [1, 2], "b": {"c": None}})
    assert first == second
    assert hash(first) == hash(second)
    let = LetExpression(bindings={"x": 1}, body=Identifier(name="x"))
    assert {first, let, NixAttributeSet()} == {second, let, NixAttributeSet()}
