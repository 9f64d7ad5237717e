import re, unicodedata
from typing import Optional

# SQLite INTEGER (and BIGINT elsewhere) is a signed 64-bit value.
MAX_DB_INTEGER = 2**63 - 1
MIN_DB_INTEGER = -(2**63)

def fits_db_integer(n: int) -> bool:
    return MIN_DB_INTEGER <= n <= MAX_DB_INTEGER

def is_blank(s: Optional[str]) -> bool:
    return s is None or not s.strip()

def normalize_email(s: str) -> str:
    if not s:
        return ""
    # Unicode-normalize, strip "format" chars (incl. zero-width), trim spaces, lowercase
    s = unicodedata.normalize("NFKC", s)
    s = "".join(ch for ch in s if unicodedata.category(ch) != "Cf")
    s = s.strip().lower()
    s = re.sub(r"\s+", "", s)
    return s
