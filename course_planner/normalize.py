"""Text canonicalization for course codes and catalog records."""

from typing import List

BOM = "\ufeff"
# UTF-8 BOM bytes as they appear when a file is decoded as Latin-1
RAW_BOM = "\xef\xbb\xbf"


def strip_bom(text: str) -> str:
    if text.startswith(BOM):
        return text[len(BOM):]
    if text.startswith(RAW_BOM):
        return text[len(RAW_BOM):]
    return text


def normalize_code(raw: str) -> str:
    """Canonicalize a course code for comparison and lookup.

    Strips a leading BOM and surrounding whitespace, then keeps only ASCII
    letters and digits, upper-cased. Never raises; the result may be empty.

        >>> normalize_code(" csci-101 ")
        'CSCI101'
    """
    text = strip_bom(raw).strip()
    return "".join(ch.upper() for ch in text if ch.isascii() and ch.isalnum())


def split_record(line: str) -> List[str]:
    """Split a catalog line on commas. No quoting is supported."""
    return [strip_bom(field).strip() for field in line.rstrip("\r\n").split(",")]


def is_comment(line: str) -> bool:
    check = strip_bom(line).strip()
    return not check or check.startswith("#")
