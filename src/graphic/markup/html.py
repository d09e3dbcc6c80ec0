"""Render TeX-ish node and edge labels as HTML for display.

Labels are typed the way one would write them inside ``$...$`` in TeX:
``v_{i+1}^2``, ``x_3``, ``\\{a\\}``. The renderer maps every character to
one of the Computer Modern faces a TeX document would use for it, and turns
``^`` / ``_`` groups into ``<sup>`` / ``<sub>`` markup. Anything it cannot
parse is shown verbatim in the typewriter face so the user sees exactly
what they typed.
"""

import html
import logging

logger = logging.getLogger(__name__)

CMR = "cmr10"
CMMI = "cmmi10"
CMSY = "cmsy10"
CMTT = "cmtt10"

SCRIPT_MARKERS = "^_"
ESCAPABLE = "{} "

UPRIGHT_CHARS = set("[]();:+=")

# ',' and '.' live in the slots of ';' and ':' in the math italic font.
CMMI_COMMA = "&#59;"
CMMI_PERIOD = "&#58;"
EN_DASH = "&#8211;"


class MarkupError(ValueError):
    """Raised internally when a label cannot be parsed."""
    pass


def to_html(src: str) -> str:
    """Convert a label source string to an HTML fragment.

    Never raises: a label that fails the syntax checks comes back as the
    raw text in a single ``cmtt10`` span.
    """
    if not src:
        return ""
    problem = check_markup(src)
    if problem is None:
        try:
            return _render(src)
        except MarkupError as e:
            problem = str(e)
    logger.debug(f"Label {src!r} shown verbatim: {problem}")
    return fallback_html(src)


def fallback_html(src: str) -> str:
    return f'<font face="{CMTT}">{html.escape(src, quote=False)}</font>'


def check_markup(src: str) -> str | None:
    """Return a description of the first syntax problem, or None if valid."""
    items = list(_scan(src))
    depth = 0
    for i, ch, escaped in items:
        if escaped:
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth < 0:
                return f"unmatched '}}' at position {i}"
    if depth != 0:
        return "unbalanced braces"

    for (_, ch, escaped), where in ((items[0], "start"), (items[-1], "end")):
        if not escaped and ch in SCRIPT_MARKERS:
            return f"'{ch}' at {where} of label"

    for k in range(len(items) - 2):
        marker, opener, closer = items[k], items[k + 1], items[k + 2]
        if (not marker[2] and marker[1] in SCRIPT_MARKERS
                and not opener[2] and opener[1] == "{"
                and not closer[2] and closer[1] == "}"):
            return f"empty '{marker[1]}{{}}' script at position {marker[0]}"
    return None


def _is_escape(s: str, i: int) -> bool:
    return 0 <= i < len(s) - 1 and s[i] == "\\" and s[i + 1] in ESCAPABLE


def _scan(s: str):
    """Yield (index, char, escaped) with escape pairs folded into one item."""
    i = 0
    while i < len(s):
        if _is_escape(s, i):
            yield i, s[i + 1], True
            i += 2
        else:
            yield i, s[i], False
            i += 1


def _first_script(s: str) -> tuple[int, int]:
    """Index and brace depth of the first unescaped script marker (-1 if none)."""
    depth = 0
    for i, ch, escaped in _scan(s):
        if escaped:
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch in SCRIPT_MARKERS:
            return i, depth
    return -1, 0


def _first_open_brace(s: str) -> int:
    for i, ch, escaped in _scan(s):
        if not escaped and ch == "{":
            return i
    return -1


def _matching_brace(s: str, open_index: int) -> int:
    depth = 0
    for i, ch, escaped in _scan(s):
        if i < open_index or escaped:
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    raise MarkupError(f"no '}}' matches '{{' at position {open_index}")


def _render(s: str) -> str:
    if not s:
        return ""

    first, depth = _first_script(s)
    if first == -1:
        return _fontify(s)

    if first == 0:
        tag = "sup" if s[0] == "^" else "sub"
        if len(s) == 1:
            raise MarkupError(f"'{s[0]}' with nothing to attach")
        if s[1] == "{":
            close = _matching_brace(s, 1)
            script, rest = s[2:close], s[close + 1:]
        elif _is_escape(s, 1):
            script, rest = s[1:3], s[3:]
        else:
            script, rest = s[1], s[2:]
        return f"<{tag}>{_render(script)}</{tag}>{_render(rest)}"

    if depth == 0:
        return _render(s[:first]) + _render(s[first:])

    # The marker sits inside a brace group: render around the group.
    open_index = _first_open_brace(s)
    close = _matching_brace(s, open_index)
    return (_render(s[:open_index])
            + _render(s[open_index + 1:close])
            + _render(s[close + 1:]))


def _char_glyph(ch: str, escaped: bool) -> tuple[str, str] | None:
    """Font face and HTML text for one character; None if it is not shown."""
    if escaped:
        if ch in "{}":
            return CMSY, ch
        return CMR, "&nbsp;"

    if ch in "{} ":
        return None
    if ch.isdigit() or ch in UPRIGHT_CHARS:
        return CMR, ch
    if ch == "-":
        return CMR, EN_DASH
    if ch == ",":
        return CMMI, CMMI_COMMA
    if ch == ".":
        return CMMI, CMMI_PERIOD
    return CMMI, html.escape(ch, quote=False)


def _fontify(s: str) -> str:
    runs: list[list[str]] = []
    for _, ch, escaped in _scan(s):
        glyph = _char_glyph(ch, escaped)
        if glyph is None:
            continue
        face, text = glyph
        if runs and runs[-1][0] == face:
            runs[-1][1] += text
        else:
            runs.append([face, text])
    return "".join(f'<font face="{face}">{text}</font>' for face, text in runs)
