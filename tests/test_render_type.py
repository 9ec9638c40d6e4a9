"""Tests for rendering type expressions."""

from typing import Any

from docmd.render_type import (
    generic_param_names,
    render_fn_header,
    render_generic_params,
    render_type,
    render_where_clause,
)


def path(name: str, *args: Any) -> dict[str, Any]:
    """Build a resolved path type with angle-bracketed type arguments."""
    rendered_args = None
    if args:
        rendered_args = {"angle_bracketed": {"args": [{"type": a} for a in args], "constraints": []}}
    return {"resolved_path": {"path": name, "id": 1, "args": rendered_args}}


T = {"generic": "T"}
I32 = {"primitive": "i32"}


def test_simple_types() -> None:
    """Verify primitives, generics and paths."""
    assert render_type(I32) == "i32"
    assert render_type(T) == "T"
    assert render_type(path("Vec", T)) == "Vec<T>"
    assert render_type(path("std::collections::HashMap", {"primitive": "str"}, I32)) == (
        "std::collections::HashMap<str, i32>"
    )


def test_substitution() -> None:
    """Verify generic names are replaced by the substitution map."""
    assert render_type(path("Result", T, {"generic": "E"}), {"E": "Error"}) == "Result<T, Error>"


def test_tuples() -> None:
    """Verify unit, one-element and multi-element tuples."""
    assert render_type({"tuple": []}) == "()"
    assert render_type({"tuple": [I32]}) == "(i32,)"
    assert render_type({"tuple": [I32, T]}) == "(i32, T)"


def test_slices_and_arrays() -> None:
    """Verify slice and array syntax."""
    assert render_type({"slice": {"primitive": "u8"}}) == "[u8]"
    assert render_type({"array": {"type": {"primitive": "u8"}, "len": "32"}}) == "[u8; 32]"


def test_references_and_pointers() -> None:
    """Verify borrowed references and raw pointers."""
    assert render_type({"borrowed_ref": {"lifetime": "'a", "is_mutable": True, "type": T}}) == "&'a mut T"
    assert render_type({"borrowed_ref": {"lifetime": None, "is_mutable": False, "type": {"primitive": "str"}}}) == "&str"
    assert render_type({"raw_pointer": {"is_mutable": False, "type": {"primitive": "u8"}}}) == "*const u8"
    assert render_type({"raw_pointer": {"is_mutable": True, "type": {"primitive": "u8"}}}) == "*mut u8"


def test_function_pointer() -> None:
    """Verify function pointer types."""
    fp = {
        "function_pointer": {
            "sig": {"inputs": [["_", I32]], "output": {"primitive": "bool"}, "is_c_variadic": False},
            "generic_params": [],
            "header": {"is_const": False, "is_unsafe": True, "is_async": False, "abi": {"C": {"unwind": False}}},
        }
    }
    assert render_type(fp) == 'unsafe extern "C" fn(i32) -> bool'


def test_trait_objects() -> None:
    """Verify dyn and impl trait types."""
    bound = {"trait_bound": {"trait": {"path": "Iterator", "id": 1, "args": None}, "generic_params": [], "modifier": "none"}}
    dyn = {"dyn_trait": {"traits": [{"trait": {"path": "Error", "id": 2, "args": None}, "generic_params": []}],
                         "lifetime": "'static"}}
    assert render_type(dyn) == "dyn Error + 'static"
    assert render_type({"impl_trait": [bound]}) == "impl Iterator"


def poly(name: str, id_: int) -> dict[str, Any]:
    """Build a dyn trait entry without generic arguments."""
    return {"trait": {"path": name, "id": id_, "args": None}, "generic_params": []}


def test_reference_to_multi_bound_trait_object_is_grouped() -> None:
    """Verify references and pointers to multi-bound trait objects get parentheses."""
    error_send = {"dyn_trait": {"traits": [poly("Error", 2), poly("Send", 3)], "lifetime": None}}
    write_send = {"dyn_trait": {"traits": [poly("Write", 4), poly("Send", 3)], "lifetime": None}}
    a_b = {"dyn_trait": {"traits": [poly("A", 5), poly("B", 6)], "lifetime": None}}
    assert render_type({"borrowed_ref": {"lifetime": None, "is_mutable": False, "type": error_send}}) == "&(dyn Error + Send)"
    assert render_type({"borrowed_ref": {"lifetime": "'a", "is_mutable": True, "type": write_send}}) == "&'a mut (dyn Write + Send)"
    assert render_type({"raw_pointer": {"is_mutable": False, "type": a_b}}) == "*const (dyn A + B)"


def test_lifetime_bound_counts_toward_grouping() -> None:
    """Verify a trait object with one trait and a lifetime is grouped, a lone trait is not."""
    with_lifetime = {"dyn_trait": {"traits": [poly("Error", 2)], "lifetime": "'static"}}
    alone = {"dyn_trait": {"traits": [poly("Error", 2)], "lifetime": None}}
    assert render_type({"borrowed_ref": {"lifetime": None, "is_mutable": False, "type": with_lifetime}}) == "&(dyn Error + 'static)"
    assert render_type({"borrowed_ref": {"lifetime": None, "is_mutable": False, "type": alone}}) == "&dyn Error"


def test_reference_to_multi_bound_impl_trait_is_grouped() -> None:
    """Verify impl trait pointees with several bounds are grouped."""
    bounds = [
        {"trait_bound": {"trait": {"path": "Read", "id": 7, "args": None}, "generic_params": [], "modifier": "none"}},
        {"trait_bound": {"trait": {"path": "Send", "id": 3, "args": None}, "generic_params": [], "modifier": "none"}},
    ]
    assert render_type({"borrowed_ref": {"lifetime": None, "is_mutable": True, "type": {"impl_trait": bounds}}}) == "&mut (impl Read + Send)"


def test_associated_type_binding() -> None:
    """Verify equality constraints inside angle brackets."""
    iterator = {
        "path": "Iterator",
        "id": 1,
        "args": {
            "angle_bracketed": {
                "args": [],
                "constraints": [{"name": "Item", "args": None, "binding": {"equality": {"type": I32}}}],
            }
        },
    }
    bound = {"trait_bound": {"trait": iterator, "generic_params": [], "modifier": "none"}}
    assert render_type({"impl_trait": [bound]}) == "impl Iterator<Item = i32>"


def test_qualified_path() -> None:
    """Verify projections with and without a trait."""
    qp = {"qualified_path": {"name": "Item", "args": None, "self_type": T,
                             "trait": {"path": "Iterator", "id": 1, "args": None}}}
    assert render_type(qp) == "<T as Iterator>::Item"
    qp["qualified_path"]["trait"] = None
    assert render_type(qp) == "T::Item"


def test_infer() -> None:
    """Verify the inferred type placeholder."""
    assert render_type("infer") == "_"


def test_generic_params() -> None:
    """Verify lifetime, bounded, const and synthetic parameters."""
    params = [
        {"name": "'a", "kind": {"lifetime": {"outlives": []}}},
        {"name": "T", "kind": {"type": {"bounds": [
            {"trait_bound": {"trait": {"path": "Clone", "id": 1, "args": None}, "generic_params": [], "modifier": "none"}},
            {"trait_bound": {"trait": {"path": "Sized", "id": 2, "args": None}, "generic_params": [], "modifier": "maybe"}},
        ], "default": None, "is_synthetic": False}}},
        {"name": "N", "kind": {"const": {"type": {"primitive": "usize"}, "default": None}}},
        {"name": "impl Trait", "kind": {"type": {"bounds": [], "default": None, "is_synthetic": True}}},
    ]
    assert render_generic_params(params) == "<'a, T: Clone + ?Sized, const N: usize>"
    assert generic_param_names(params) == ["'a", "T", "N"]


def test_where_clause() -> None:
    """Verify bound predicates in where clauses."""
    generics = {
        "params": [],
        "where_predicates": [
            {"bound_predicate": {"type": T, "bounds": [
                {"trait_bound": {"trait": {"path": "Send", "id": 1, "args": None}, "generic_params": [], "modifier": "none"}},
            ], "generic_params": []}},
        ],
    }
    assert render_where_clause(generics) == " where T: Send"
    assert render_where_clause({"params": [], "where_predicates": []}) == ""


def test_fn_header() -> None:
    """Verify qualifier order and ABI names."""
    assert render_fn_header({"is_const": True, "is_async": False, "is_unsafe": True, "abi": "Rust"}) == "const unsafe "
    assert render_fn_header({"abi": {"System": {"unwind": True}}}) == 'extern "system-unwind" '
    assert render_fn_header(None) == ""
