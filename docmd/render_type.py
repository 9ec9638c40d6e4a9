"""Render rustdoc JSON type expressions back to Rust source syntax.

Every function takes an optional ``subst`` mapping from generic parameter
names to replacement text. Type aliases use it to show an aliased enum with
the alias's concrete arguments filled in.
"""

from typing import Any

Subst = dict[str, str] | None

ABI_NAMES = {
    "C": "C",
    "Cdecl": "cdecl",
    "Stdcall": "stdcall",
    "Fastcall": "fastcall",
    "Aapcs": "aapcs",
    "Win64": "win64",
    "SysV64": "sysv64",
    "System": "system",
}


def lifetime(name: str) -> str:
    """Return a lifetime with exactly one leading apostrophe."""
    return name if name.startswith("'") else f"'{name}"


def render_type(type_: Any, subst: Subst = None) -> str:
    """Render one type expression."""
    if type_ is None:
        return "()"
    if type_ == "infer":
        return "_"
    if isinstance(type_, str):
        return type_
    kind, value = next(iter(type_.items()))

    if kind == "resolved_path":
        return render_path(value, subst)
    if kind == "generic":
        return (subst or {}).get(value, value)
    if kind == "primitive":
        return value
    if kind == "tuple":
        inner = [render_type(t, subst) for t in value]
        if len(inner) == 1:
            return f"({inner[0]},)"
        return f"({', '.join(inner)})"
    if kind == "slice":
        return f"[{render_type(value, subst)}]"
    if kind == "array":
        return f"[{render_type(value['type'], subst)}; {value['len']}]"
    if kind == "pat":
        return render_type(value["type"], subst)
    if kind == "raw_pointer":
        mutability = "mut" if value.get("is_mutable") else "const"
        return f"*{mutability} {_render_pointee(value['type'], subst)}"
    if kind == "borrowed_ref":
        out = "&"
        if value.get("lifetime"):
            out += lifetime(value["lifetime"]) + " "
        if value.get("is_mutable"):
            out += "mut "
        return out + _render_pointee(value["type"], subst)
    if kind == "function_pointer":
        return _render_function_pointer(value, subst)
    if kind == "dyn_trait":
        return _render_dyn_trait(value, subst)
    if kind == "impl_trait":
        return "impl " + render_bounds(value, subst)
    if kind == "qualified_path":
        return _render_qualified_path(value, subst)
    return kind


def path_name(path: dict[str, Any]) -> str:
    """Return the path of a resolved path as written in source."""
    return path.get("path") or path.get("name") or "?"


def short_path_name(path: dict[str, Any]) -> str:
    """Return the last segment of a resolved path."""
    return path_name(path).rsplit("::", 1)[-1]


def render_path(path: dict[str, Any], subst: Subst = None, *, short: bool = False) -> str:
    """Render a resolved path with its generic arguments."""
    name = short_path_name(path) if short else path_name(path)
    return name + render_generic_args(path.get("args"), subst)


def render_generic_args(args: Any, subst: Subst = None) -> str:
    """Render ``<A, B, Item = C>`` or ``(A, B) -> C`` argument lists."""
    if not args:
        return ""
    if args == "return_type_notation":
        return "(..)"
    if "angle_bracketed" in args:
        body = args["angle_bracketed"]
        rendered = [render_generic_arg(a, subst) for a in body.get("args") or []]
        constraints = body.get("constraints", body.get("bindings")) or []
        rendered += [_render_constraint(c, subst) for c in constraints]
        return f"<{', '.join(rendered)}>" if rendered else ""
    if "parenthesized" in args:
        body = args["parenthesized"]
        inputs = ", ".join(render_type(t, subst) for t in body.get("inputs") or [])
        out = f"({inputs})"
        if body.get("output") is not None:
            out += f" -> {render_type(body['output'], subst)}"
        return out
    return ""


def render_generic_arg(arg: Any, subst: Subst = None) -> str:
    """Render one angle-bracketed argument."""
    if arg == "infer":
        return "_"
    if "lifetime" in arg:
        return lifetime(arg["lifetime"])
    if "type" in arg:
        return render_type(arg["type"], subst)
    if "const" in arg:
        return arg["const"].get("expr") or arg["const"].get("value") or "_"
    return "_"


def alias_type_args(args: Any) -> list[Any]:
    """Return the generic argument entries of an angle-bracketed list."""
    if not args or "angle_bracketed" not in args:
        return []
    return list(args["angle_bracketed"].get("args") or [])


def _render_constraint(constraint: dict[str, Any], subst: Subst) -> str:
    name = constraint["name"] + render_generic_args(constraint.get("args"), subst)
    binding = constraint.get("binding") or {}
    if "equality" in binding:
        return f"{name} = {render_term(binding['equality'], subst)}"
    if "constraint" in binding:
        return f"{name}: {render_bounds(binding['constraint'], subst)}"
    return name


def render_term(term: dict[str, Any], subst: Subst = None) -> str:
    """Render the right-hand side of an associated item equality."""
    if "type" in term:
        return render_type(term["type"], subst)
    if "constant" in term:
        return term["constant"].get("expr") or term["constant"].get("value") or "_"
    return "_"


def render_bounds(bounds: list[Any], subst: Subst = None) -> str:
    """Render a ``+``-separated bound list."""
    return " + ".join(render_bound(b, subst) for b in bounds)


def render_bound(bound: Any, subst: Subst = None) -> str:
    """Render one trait, outlives or precise-capture bound."""
    if "trait_bound" in bound:
        tb = bound["trait_bound"]
        prefix = render_higher_ranked(tb.get("generic_params"))
        modifier = tb.get("modifier", "none")
        if modifier == "maybe":
            prefix += "?"
        elif modifier == "maybe_const":
            prefix += "~const "
        return prefix + render_path(tb["trait"], subst)
    if "outlives" in bound:
        return lifetime(bound["outlives"])
    if "use" in bound:
        captured = []
        for arg in bound["use"]:
            if isinstance(arg, str):
                captured.append(arg)
            elif "lifetime" in arg:
                captured.append(lifetime(arg["lifetime"]))
            else:
                captured.append(next(iter(arg.values())))
        return f"use<{', '.join(captured)}>"
    return "?"


def render_higher_ranked(params: list[dict[str, Any]] | None) -> str:
    """Render a ``for<'a> `` prefix, or nothing."""
    if not params:
        return ""
    return f"for<{', '.join(render_generic_param(p) for p in params)}> "


def render_generic_param(param: dict[str, Any], subst: Subst = None) -> str:
    """Render a generic parameter declaration such as ``T: Clone`` or ``const N: usize``."""
    name = param["name"]
    kind = param.get("kind") or {}
    if "lifetime" in kind:
        outlives = (kind["lifetime"] or {}).get("outlives") or []
        out = lifetime(name)
        if outlives:
            out += ": " + " + ".join(lifetime(o) for o in outlives)
        return out
    if "const" in kind:
        return f"const {name}: {render_type(kind['const'].get('type'), subst)}"
    bounds = (kind.get("type") or {}).get("bounds") or []
    if bounds:
        return f"{name}: {render_bounds(bounds, subst)}"
    return name


def render_generic_params(params: list[dict[str, Any]], subst: Subst = None) -> str:
    """Render a declaration parameter list, skipping compiler-synthesized ones."""
    visible = [p for p in params if not _is_synthetic(p)]
    if not visible:
        return ""
    return f"<{', '.join(render_generic_param(p, subst) for p in visible)}>"


def generic_param_names(params: list[dict[str, Any]]) -> list[str]:
    """Return parameter names in use-site form (``'a``, ``T``, ``N``)."""
    names = []
    for p in params:
        if _is_synthetic(p):
            continue
        kind = p.get("kind") or {}
        names.append(lifetime(p["name"]) if "lifetime" in kind else p["name"])
    return names


def _is_synthetic(param: dict[str, Any]) -> bool:
    kind = param.get("kind") or {}
    return bool((kind.get("type") or {}).get("is_synthetic"))


def render_where_clause(generics: dict[str, Any] | None, subst: Subst = None) -> str:
    """Render the ``where`` predicates of a generics block, or nothing."""
    predicates = (generics or {}).get("where_predicates") or []
    rendered = []
    for pred in predicates:
        if "bound_predicate" in pred:
            bp = pred["bound_predicate"]
            rendered.append(
                render_higher_ranked(bp.get("generic_params"))
                + f"{render_type(bp['type'], subst)}: {render_bounds(bp.get('bounds') or [], subst)}"
            )
        elif "lifetime_predicate" in pred:
            lp = pred["lifetime_predicate"]
            outlives = " + ".join(lifetime(o) for o in lp.get("outlives") or [])
            rendered.append(f"{lifetime(lp['lifetime'])}: {outlives}")
        elif "eq_predicate" in pred:
            ep = pred["eq_predicate"]
            rendered.append(f"{render_type(ep['lhs'], subst)} = {render_term(ep['rhs'], subst)}")
    if not rendered:
        return ""
    return " where " + ", ".join(rendered)


def render_fn_header(header: dict[str, Any] | None) -> str:
    """Render qualifiers such as ``const unsafe extern "C" ``."""
    header = header or {}
    out = ""
    if header.get("is_const", header.get("const_")):
        out += "const "
    if header.get("is_async", header.get("async_")):
        out += "async "
    if header.get("is_unsafe", header.get("unsafe_")):
        out += "unsafe "
    abi = header.get("abi", "Rust")
    if isinstance(abi, dict):
        abi_kind, abi_value = next(iter(abi.items()))
        if abi_kind == "Other":
            name = str(abi_value).strip('"')
        else:
            name = ABI_NAMES.get(abi_kind, abi_kind.lower())
            if isinstance(abi_value, dict) and abi_value.get("unwind"):
                name += "-unwind"
        out += f'extern "{name}" '
    elif abi and abi != "Rust":
        out += f'extern "{abi}" '
    return out


def render_fn_inputs(sig: dict[str, Any], subst: Subst = None, *, named: bool = True) -> str:
    """Render the parenthesized parameter list of a signature."""
    inputs = []
    for name, type_ in sig.get("inputs") or []:
        rendered = render_type(type_, subst)
        if name == "self":
            inputs.append(_render_self(type_, subst))
        elif named and name and name != "_":
            inputs.append(f"{name}: {rendered}")
        else:
            inputs.append(rendered)
    if sig.get("is_c_variadic", sig.get("c_variadic")):
        inputs.append("...")
    return f"({', '.join(inputs)})"


def _render_self(type_: Any, subst: Subst) -> str:
    if type_ == {"generic": "Self"}:
        return "self"
    if isinstance(type_, dict) and "borrowed_ref" in type_:
        ref = type_["borrowed_ref"]
        if ref.get("type") == {"generic": "Self"}:
            out = "&"
            if ref.get("lifetime"):
                out += lifetime(ref["lifetime"]) + " "
            if ref.get("is_mutable"):
                out += "mut "
            return out + "self"
    return f"self: {render_type(type_, subst)}"


def render_fn_output(sig: dict[str, Any], subst: Subst = None) -> str:
    """Render `` -> T``, or nothing for the unit return type."""
    output = sig.get("output")
    if output is None or output == {"tuple": []}:
        return ""
    return f" -> {render_type(output, subst)}"


def _render_function_pointer(fp: dict[str, Any], subst: Subst) -> str:
    sig = fp.get("sig", fp.get("decl")) or {}
    return (
        render_higher_ranked(fp.get("generic_params"))
        + render_fn_header(fp.get("header"))
        + "fn"
        + render_fn_inputs(sig, subst, named=False)
        + render_fn_output(sig, subst)
    )


def _render_pointee(type_: Any, subst: Subst) -> str:
    """Render the target of a reference or pointer, grouping multi-bound traits."""
    rendered = render_type(type_, subst)
    if not isinstance(type_, dict):
        return rendered
    if "dyn_trait" in type_:
        dyn = type_["dyn_trait"]
        bounds = len(dyn.get("traits") or []) + bool(dyn.get("lifetime"))
    elif "impl_trait" in type_:
        bounds = len(type_["impl_trait"] or [])
    else:
        return rendered
    return f"({rendered})" if bounds > 1 else rendered


def _render_dyn_trait(dyn: dict[str, Any], subst: Subst) -> str:
    parts = [
        render_higher_ranked(poly.get("generic_params")) + render_path(poly["trait"], subst)
        for poly in dyn.get("traits") or []
    ]
    if dyn.get("lifetime"):
        parts.append(lifetime(dyn["lifetime"]))
    return "dyn " + " + ".join(parts)


def _render_qualified_path(qp: dict[str, Any], subst: Subst) -> str:
    self_type = render_type(qp["self_type"], subst)
    name = qp["name"] + render_generic_args(qp.get("args"), subst)
    trait = qp.get("trait")
    if trait is None:
        return f"{self_type}::{name}"
    return f"<{self_type} as {render_path(trait, subst)}>::{name}"
