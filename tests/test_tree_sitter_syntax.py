"""Check rebuilt output against the tree-sitter Nix grammar."""

from pathlib import Path

import pytest
import tree_sitter_nix as ts_nix
from tree_sitter import Language, Parser

from nixtree import dumps, parse_file
from nixtree.expressions import FunctionDefinition, Import, LetExpression, NixList

NIX_LANGUAGE = Language(ts_nix.language())
PARSER = Parser(NIX_LANGUAGE)
NIX_FILES = Path(__file__).parent / "nix-files"


def assert_valid_nix(code: str) -> None:
    tree = PARSER.parse(code.encode("utf-8"))
    assert not tree.root_node.has_error, code


@pytest.mark.parametrize("name", ["home.nix", "configuration.nix"])
def test_rebuilt_files_are_valid_nix(name):
    assert_valid_nix(dumps(parse_file(NIX_FILES / name)))


def test_rebuilt_constructs_are_valid_nix():
    value = FunctionDefinition(
        parameters=["pkgs", "lib"],
        variadic=True,
        body=LetExpression(
            bindings={
                "names": ["a", 'b "quoted"', "${not-interpolated}"],
                "ratio": 1e-7,
                "nested.key": {"x y": None, "in": -1},
            },
            body=NixList(items=[Import(target="./a.nix"), Import(target="b.nix")]),
        ),
    )
    assert_valid_nix(dumps(value))
