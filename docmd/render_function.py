"""Render function signatures."""

from docmd.render_fields import visibility_keyword
from docmd.render_type import (
    Subst,
    render_fn_header,
    render_fn_inputs,
    render_fn_output,
    render_generic_params,
    render_where_clause,
)
from docmd.type_model import Item


def render_function_signature(item: Item, subst: Subst = None, *, visibility: str | None = None) -> str:
    """Render ``pub const unsafe fn name<T>(a: T) -> U where ...``."""
    inner = item.inner
    sig = inner.get("sig", inner.get("decl")) or {}
    generics = inner.get("generics") or {}
    return (
        visibility_keyword(visibility if visibility is not None else item.visibility)
        + render_fn_header(inner.get("header"))
        + f"fn {item.display_name}"
        + render_generic_params(generics.get("params") or [], subst)
        + render_fn_inputs(sig, subst)
        + render_fn_output(sig, subst)
        + render_where_clause(generics, subst)
    )
