"""Glob pattern compilation.

Translates route-id globs into a single anchored regex, compiled once
when the filter configuration is built.

Supported syntax::

    *         any run of characters within one segment
    **        zero or more whole segments (only as a full segment)
    ?         exactly one character within a segment
    [a-z]     character class; [!x] and [^x] negate
    [slug]    a whole segment like this also matches the text "[slug]"
    {a,b}     alternation, nestable
    {1..3}    numeric sequence

Malformed syntax (an unclosed ``[`` or ``{``) is read literally rather
than rejected, so a glob never fails to compile.
"""

import re
from dataclasses import dataclass

# Brace expansion stops once a pattern fans out beyond this many alternatives
_MAX_EXPANSIONS = 4096

# {start..end} numeric sequences longer than this are read literally
_MAX_RANGE = 1000

_RANGE_RE = re.compile(r"^(-?\d+)\.\.(-?\d+)$")

# Whole segments shaped like dynamic route markers: [id], [...path], [[...path]]
_DYNAMIC_SEGMENT_RE = re.compile(r"^(?:\[\[\.\.\.[\w-]+\]\]|\[(?:\.\.\.)?[\w-]+\])$")

_GLOBSTAR = object()


@dataclass(frozen=True, slots=True)
class GlobPattern:
    """A compiled glob.

    Attributes:
        source: The (normalized) pattern text as configured.
        regex: Alternation of every brace expansion, matched with ``fullmatch``.
    """

    source: str
    regex: re.Pattern[str]

    def matches(self, route: str) -> bool:
        return self.regex.fullmatch(route) is not None


def compile_glob(pattern: str) -> GlobPattern:
    """Compile *pattern* into a :class:`GlobPattern`."""
    alternatives = expand_braces(pattern)
    source = "|".join(f"(?:{translate(alt)})" for alt in alternatives)
    try:
        regex = re.compile(source)
    except re.error:
        # e.g. a reversed class range like [z-a]
        regex = re.compile(re.escape(pattern))
    return GlobPattern(source=pattern, regex=regex)


def glob_match(route: str, pattern: str) -> bool:
    """One-shot match of *route* against *pattern*.

    Compiles on every call; use :func:`compile_glob` for repeated use.
    """
    return compile_glob(pattern).matches(route)


# ---------------------------------------------------------------------------
# Brace expansion
# ---------------------------------------------------------------------------


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` and ``{1..3}`` groups into a list of plain globs.

    Groups without a top-level comma or a numeric range (``{abc}``) are
    literal.  Order follows the alternatives as written; duplicates are
    dropped.
    """
    expanded = _expand(pattern)
    if len(expanded) > _MAX_EXPANSIONS:
        return [pattern]
    return list(dict.fromkeys(expanded))


def _expand(pattern: str) -> list[str]:
    for start, end in _brace_groups(pattern):
        alternatives = _alternatives(pattern[start + 1 : end])
        if alternatives is None:
            continue
        prefix, suffix = pattern[:start], pattern[end + 1 :]
        result: list[str] = []
        for alt in alternatives:
            result.extend(_expand(prefix + alt + suffix))
            if len(result) > _MAX_EXPANSIONS:
                return result
        return result
    return [pattern]


def _brace_groups(pattern: str) -> list[tuple[int, int]]:
    """Return (start, end) indexes of balanced top-level ``{...}`` groups."""
    groups: list[tuple[int, int]] = []
    depth = 0
    start = 0
    for i, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
            if depth == 0:
                groups.append((start, i))
    return groups


def _alternatives(body: str) -> list[str] | None:
    parts: list[str] = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        if ch == "," and depth == 0:
            parts.append(current)
            current = ""
        else:
            current += ch
    parts.append(current)
    if len(parts) > 1:
        return parts

    match = _RANGE_RE.match(body)
    if match is None:
        return None
    first, last = int(match.group(1)), int(match.group(2))
    if abs(last - first) >= _MAX_RANGE:
        return None
    step = 1 if last >= first else -1
    return [str(n) for n in range(first, last + step, step)]


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------


def translate(pattern: str) -> str:
    """Translate a brace-free glob into regex source (unanchored).

    Examples::

        "admin/**"      -> "admin(?:/.+)?"
        "**/test"       -> "(?:.+/)?test"
        "blog/*"        -> "blog/[^/]*"
    """
    parts: list[object] = []
    for segment in pattern.split("/"):
        if segment == "**":
            if parts and parts[-1] is _GLOBSTAR:
                continue
            parts.append(_GLOBSTAR)
        else:
            parts.append(_translate_dynamic(segment) or _translate_segment(segment))

    if parts == [_GLOBSTAR]:
        return ".*"

    out = ""
    last = len(parts) - 1
    for i, part in enumerate(parts):
        if part is _GLOBSTAR:
            if i == 0:
                out += "(?:.+/)?"
            else:
                out += "(?:/.+)?"
                if i != last:
                    out += "/"
            continue
        if i > 0 and parts[i - 1] is not _GLOBSTAR:
            out += "/"
        out += str(part)
    return out


def _translate_dynamic(segment: str) -> str | None:
    """Read a dynamic-marker segment both as a class and as literal text."""
    if not _DYNAMIC_SEGMENT_RE.match(segment):
        return None
    return f"(?:{_translate_segment(segment)}|{re.escape(segment)})"


def _translate_segment(segment: str) -> str:
    out = ""
    i = 0
    n = len(segment)
    while i < n:
        ch = segment[i]
        if ch == "*":
            while i + 1 < n and segment[i + 1] == "*":
                i += 1
            out += "[^/]*"
        elif ch == "?":
            out += "[^/]"
        elif ch == "[":
            end = _class_end(segment, i)
            if end is None:
                out += re.escape(ch)
            else:
                out += _translate_class(segment[i + 1 : end])
                i = end
        else:
            out += re.escape(ch)
        i += 1
    return out


def _class_end(segment: str, start: int) -> int | None:
    """Index of the ``]`` closing the class opened at *start*, if any."""
    i = start + 1
    if i < len(segment) and segment[i] in "!^":
        i += 1
    # A leading ] is part of the class
    if i < len(segment) and segment[i] == "]":
        i += 1
    end = segment.find("]", i)
    return None if end == -1 else end


def _translate_class(body: str) -> str:
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]
    body = body.replace("\\", "\\\\").replace("[", "\\[")
    if body.startswith("]"):
        body = "\\" + body
    if negate:
        return f"[^/{body}]"
    return f"[{body}]"
