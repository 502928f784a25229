import math
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional


# ===========================
# Size Scale Table
# ===========================
SIZE_SCALES: Dict[str, int] = {
    "B": 1,
    "KB": 1024,
    "MB": 1024 ** 2,
    "GB": 1024 ** 3,
    "TB": 1024 ** 4
}

SIZE_PATTERN = re.compile(r"([\d.]+)\s*([A-Z]*)")


# ===========================
# Known Tracker Date Formats
# ===========================
DATE_FORMATS = [
    "%d-%b-%y",
    "%d-%b-%Y",
    "%d-%b-%y %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y %H:%M",
    "%d.%m.%Y",
    "%d-%m-%Y %H:%M",
    "%d-%m-%Y",
    "%d/%m/%Y",
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
]


# ===========================
# Size Parsing to Bytes
# ===========================
def parse_size_to_bytes(size_str: Optional[str], scales: Optional[Dict[str, int]] = None) -> int:
    if not size_str:
        return 0

    scales = scales or SIZE_SCALES
    clean_str = str(size_str).strip().upper().replace(",", ".")

    match = SIZE_PATTERN.search(clean_str)
    if not match:
        return 0

    try:
        value = float(match.group(1))
    except ValueError:
        return 0

    if not math.isfinite(value):
        return 0

    return math.floor(value * scales.get(match.group(2), 1))


# ===========================
# Date Parsing
# ===========================
def parse_date(date_str: Optional[str]) -> Optional[datetime]:
    text = str(date_str or "").strip()
    if not text:
        return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


# ===========================
# Date Normalization
# ===========================
def normalize_date(date_str: Optional[str]) -> str:
    parsed = parse_date(date_str)
    if parsed is None:
        parsed = datetime.now(timezone.utc)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    try:
        return parsed.astimezone(timezone.utc).isoformat()
    except (OverflowError, ValueError):
        return datetime.now(timezone.utc).isoformat()


# ===========================
# Count Coercion
# ===========================
def safe_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        parsed = int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            parsed = int(float(value))
        except (TypeError, ValueError, OverflowError):
            return 0
    return parsed if parsed >= 0 else 0


# ===========================
# Episode Marker
# ===========================
def format_episode_marker(episode_number: int) -> str:
    return str(episode_number).zfill(2)
