"""File glue: the cipher works on one logical line of text."""


def join_lines(content: str) -> str:
    """
    Join lines with single spaces and drop the final line terminator.

    Blank lines in the middle still contribute their separator, so
    "a\\n\\nb" becomes "a  b". Expects newlines already normalized to "\\n".
    """
    if not content:
        return ""
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return " ".join(lines)


def read_text(path: str) -> str:
    # Universal newlines turn \r\n and \r into \n before joining
    with open(path, "r", encoding="utf-8") as f:
        return join_lines(f.read())


def write_text(path: str, data: str):
    # newline="" keeps the text byte-for-byte, pad spaces included
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(data)
