"""Line-oriented substring search over in-memory text."""


def _lines(contents: str) -> list[str]:
    """Split ``contents`` on newlines.

    A trailing newline does not produce a final empty line. A carriage
    return directly before a newline is dropped along with it.
    """
    lines = contents.split("\n")
    tail = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if tail:
        lines.append(tail)
    return lines


def search(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` containing ``query``, case-sensitively.

    Examples:
        search("duct", "Rust:\\nsafe, fast, productive.") -> ["safe, fast, productive."]
    """
    return [line for line in _lines(contents) if query in line]


def search_case_insensitive(query: str, contents: str) -> list[str]:
    """Return the lines of ``contents`` containing ``query``, ignoring case.

    Both sides are lowered for the comparison only; matching lines are
    returned with their original casing.
    """
    query = query.lower()
    return [line for line in _lines(contents) if query in line.lower()]
