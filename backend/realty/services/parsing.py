import math
import re

_NUMBER_RE = re.compile(r"(\d+(?:[.,]\d+)?)")


def parse_investment_return(value) -> float | None:
    """Coerce an investment return to a percentage.

    Numbers pass through. Text such as ``"до 25% в год"`` yields the first
    number it contains (``25.0``); a comma is accepted as the decimal
    separator. Text without digits, blanks and ``None`` yield ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return None
    match = _NUMBER_RE.search(text)
    if not match:
        return None
    return float(match.group(1).replace(",", "."))


def parse_optional_number(value: str | None) -> float | None:
    """Parse a query-string number. Blank means "not given"; garbage raises ValueError."""
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    number = float(text.replace(",", "."))
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return number


def sanitize_filename(filename: str) -> str:
    name = filename.rsplit("/", 1)[-1].rsplit("\\", 1)[-1]
    name = re.sub(r"[^\w.\-]+", "-", name, flags=re.UNICODE).strip("-.")
    return name or "file"
