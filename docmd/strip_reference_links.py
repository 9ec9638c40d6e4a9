"""Rewrite leftover reference-style link markers to their label text."""


def strip_reference_links(text: str) -> str:
    """Turn ``[label][reference]`` into ``label``.

    Bracket depth is tracked so that ``[a [b] c][ref]`` keeps its nested
    brackets. A bracket group that is not followed by a second group (after
    optional whitespace) is left unchanged.
    """
    result: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if c != "[":
            result.append(c)
            i += 1
            continue

        label, i, closed = _read_group(text, i + 1)
        j = i
        while j < n and text[j].isspace():
            j += 1

        if closed and j < n and text[j] == "[":
            _, end, ref_closed = _read_group(text, j + 1)
            if ref_closed:
                result.append(label)
                i = end
                continue

        result.append("[")
        result.append(label)
        if closed:
            result.append("]")
    return "".join(result)


def _read_group(text: str, start: int) -> tuple[str, int, bool]:
    """Read up to the bracket closing the group opened just before ``start``.

    Returns the inner text, the index after the closing bracket and whether
    the group was closed before the end of the text.
    """
    depth = 1
    i = start
    while i < len(text):
        c = text[i]
        if c == "[":
            depth += 1
        elif c == "]":
            depth -= 1
            if depth == 0:
                return text[start:i], i + 1, True
        i += 1
    return text[start:], i, False
