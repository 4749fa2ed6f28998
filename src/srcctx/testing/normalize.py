from __future__ import annotations


_LEAD = "|"


def normalize(content: str) -> str:
    """Strip an indented, ``|``-led text block down to its payload.

    Blank lines are dropped; every other line must contain ``|`` and keeps
    only what follows the first one, newline-terminated. Lets expected
    multi-line output sit indented inside a test body::

        normalize('''
            |error: boom
            | 1 | x
        ''') == "error: boom\\n 1 | x\\n"
    """
    out: list[str] = []
    for line in content.splitlines():
        if not line.strip():
            continue
        idx = line.find(_LEAD)
        if idx < 0:
            raise ValueError(f"non-empty lines must start with `{_LEAD}` character: `{line}`")
        out.append(line[idx + len(_LEAD) :] + "\n")
    return "".join(out)
