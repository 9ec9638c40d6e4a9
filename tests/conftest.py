"""Shared rustdoc JSON fixtures."""

from typing import Any

import pytest

from docmd.type_model import CrateIndex


def _item(item_id: int, name: str | None, kind: str, payload: Any, **extra: Any) -> dict[str, Any]:
    data = {
        "id": item_id,
        "crate_id": 0,
        "name": name,
        "visibility": "public",
        "docs": None,
        "inner": {kind: payload},
    }
    data.update(extra)
    return data


def _generic(name: str, bounds: list[Any] | None = None) -> dict[str, Any]:
    return {"name": name, "kind": {"type": {"bounds": bounds or [], "default": None, "is_synthetic": False}}}


def _path(path: str, item_id: int, args: Any = None) -> dict[str, Any]:
    return {"resolved_path": {"path": path, "id": item_id, "args": args}}


def _angle(*args: Any) -> dict[str, Any]:
    return {"angle_bracketed": {"args": [{"type": a} for a in args], "constraints": []}}


NO_GENERICS = {"params": [], "where_predicates": []}


def serde_json_dump() -> dict[str, Any]:
    """Return a small rustdoc JSON dump of a ``serde_json``-like crate."""
    items = [
        _item(0, "serde_json", "module", {"is_crate": True, "items": [1, 10, 12, 20, 30, 40, 50, 70, 80]},
              docs="Serde JSON support.\n\nMore detail."),
        # struct Point { pub x: i32, pub(crate) y: i32 }
        _item(1, "Point", "struct", {
            "kind": {"plain": {"fields": [2, 3], "has_stripped_fields": False}},
            "generics": NO_GENERICS,
            "impls": [4, 5, 6],
        }, docs="A point."),
        _item(2, "x", "struct_field", {"primitive": "i32"}, docs="Horizontal position.\n\nIn pixels."),
        _item(3, "y", "struct_field", {"primitive": "i32"}, visibility="crate"),
        _item(4, None, "impl", {
            "trait": None,
            "for": _path("Point", 1),
            "items": [7],
            "is_negative": False,
            "is_synthetic": False,
            "blanket_impl": None,
        }),
        _item(5, None, "impl", {
            "trait": {"path": "Clone", "id": 100, "args": None},
            "for": _path("Point", 1),
            "items": [],
            "is_negative": False,
            "is_synthetic": False,
            "blanket_impl": None,
        }),
        _item(6, None, "impl", {
            "trait": {"path": "Send", "id": 101, "args": None},
            "for": _path("Point", 1),
            "items": [],
            "is_negative": False,
            "is_synthetic": True,
            "blanket_impl": None,
        }),
        _item(7, "new", "function", {
            "sig": {
                "inputs": [["x", {"primitive": "i32"}], ["y", {"primitive": "i32"}]],
                "output": {"generic": "Self"},
                "is_c_variadic": False,
            },
            "generics": NO_GENERICS,
            "header": {"is_const": True, "is_unsafe": False, "is_async": False, "abi": "Rust"},
            "has_body": True,
        }, docs="Creates a point."),
        # struct Wrapper<T>(pub T, _);
        _item(10, "Wrapper", "struct", {
            "kind": {"tuple": [11, None]},
            "generics": {"params": [_generic("T")], "where_predicates": []},
            "impls": [],
        }),
        _item(11, "0", "struct_field", {"generic": "T"}),
        _item(12, "Marker", "struct", {"kind": "unit", "generics": NO_GENERICS, "impls": []}),
        # enum Shape { Circle(f64), Rect { width: f64 }, Empty = 3 }
        _item(20, "Shape", "enum", {
            "variants": [21, 22, 23],
            "generics": NO_GENERICS,
            "has_stripped_variants": False,
            "impls": [],
        }),
        _item(21, "Circle", "variant", {"kind": {"tuple": [24]}, "discriminant": None}, docs="A circle."),
        _item(22, "Rect", "variant", {"kind": {"struct": {"fields": [25], "has_stripped_fields": False}},
                                      "discriminant": None}),
        _item(23, "Empty", "variant", {"kind": "plain", "discriminant": {"expr": "3", "value": "3"}}),
        _item(24, "0", "struct_field", {"primitive": "f64"}),
        _item(25, "width", "struct_field", {"primitive": "f64"}),
        _item(30, "IntOrFloat", "union", {
            "generics": NO_GENERICS,
            "fields": [31, 32],
            "has_stripped_fields": False,
            "impls": [],
        }, docs="A union."),
        _item(31, "i", "struct_field", {"primitive": "u32"}),
        _item(32, "f", "struct_field", {"primitive": "f32"}),
        # pub type Result<T> = core::result::Result<T, Error>;
        _item(40, "Result", "type_alias", {
            "type": _path("core::result::Result", 41, _angle({"generic": "T"}, _path("Error", 50))),
            "generics": {"params": [_generic("T")], "where_predicates": []},
        }, docs="Alias for a `Result` with the error type `serde_json::Error`."),
        _item(41, "Result", "enum", {
            "variants": [42, 43],
            "generics": {"params": [_generic("T"), _generic("E")], "where_predicates": []},
            "has_stripped_variants": False,
            "impls": [],
        }, crate_id=1),
        _item(42, "Ok", "variant", {"kind": {"tuple": [44]}, "discriminant": None},
              crate_id=1, docs="Contains the success value"),
        _item(43, "Err", "variant", {"kind": {"tuple": [45]}, "discriminant": None},
              crate_id=1, docs="Contains the error value"),
        _item(44, "0", "struct_field", {"generic": "T"}, crate_id=1),
        _item(45, "0", "struct_field", {"generic": "E"}, crate_id=1),
        _item(50, "Error", "struct", {
            "kind": {"plain": {"fields": [], "has_stripped_fields": True}},
            "generics": NO_GENERICS,
            "impls": [],
        }, docs="This type represents all possible errors."),
        # pub fn to_string<T: Serialize + ?Sized>(value: &T) -> Result<String>
        _item(60, "to_string", "function", {
            "sig": {
                "inputs": [["value", {"borrowed_ref": {"lifetime": None, "is_mutable": False,
                                                       "type": {"generic": "T"}}}]],
                "output": _path("Result", 40, _angle(_path("String", 103))),
                "is_c_variadic": False,
            },
            "generics": {
                "params": [_generic("T", [
                    {"trait_bound": {"trait": {"path": "Serialize", "id": 104, "args": None},
                                     "generic_params": [], "modifier": "none"}},
                    {"trait_bound": {"trait": {"path": "Sized", "id": 105, "args": None},
                                     "generic_params": [], "modifier": "maybe"}},
                ])],
                "where_predicates": [],
            },
            "header": {"is_const": False, "is_unsafe": False, "is_async": False, "abi": "Rust"},
            "has_body": True,
        }, docs="Serialize the given data structure as a String of JSON."),
        _item(70, "Index", "trait", {
            "is_auto": False,
            "is_unsafe": False,
            "items": [71, 72],
            "generics": NO_GENERICS,
            "bounds": [],
            "implementations": [],
        }),
        _item(71, "Output", "assoc_type", {"generics": NO_GENERICS, "bounds": [], "type": None}),
        _item(72, "index", "function", {
            "sig": {
                "inputs": [["self", {"borrowed_ref": {"lifetime": None, "is_mutable": False,
                                                      "type": {"generic": "Self"}}}]],
                "output": None,
                "is_c_variadic": False,
            },
            "generics": NO_GENERICS,
            "header": {"is_const": False, "is_unsafe": False, "is_async": False, "abi": "Rust"},
            "has_body": False,
        }, docs="Index into a value."),
        _item(80, "ser", "module", {"is_crate": False, "items": [60]}),
        _item(90, "Hidden", "struct", {"kind": "unit", "generics": NO_GENERICS, "impls": []},
              visibility="default"),
    ]
    paths = {
        0: ["serde_json"],
        1: ["serde_json", "Point"],
        10: ["serde_json", "Wrapper"],
        12: ["serde_json", "Marker"],
        20: ["serde_json", "Shape"],
        30: ["serde_json", "IntOrFloat"],
        40: ["serde_json", "Result"],
        41: ["core", "result", "Result"],
        50: ["serde_json", "Error"],
        60: ["serde_json", "ser", "to_string"],
        70: ["serde_json", "Index"],
        80: ["serde_json", "ser"],
        90: ["serde_json", "Hidden"],
    }
    return {
        "root": 0,
        "crate_version": "1.0.0",
        "format_version": 39,
        "index": {str(i["id"]): i for i in items},
        "paths": {str(k): {"crate_id": 0, "path": v, "kind": "struct"} for k, v in paths.items()},
    }


@pytest.fixture
def crate_data() -> dict[str, Any]:
    """Return a fresh copy of the sample dump."""
    return serde_json_dump()


@pytest.fixture
def crate(crate_data: dict[str, Any]) -> CrateIndex:
    """Return the sample dump loaded into the type model."""
    return CrateIndex.from_json(crate_data)
