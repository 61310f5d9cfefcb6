# stayhub/core/validators.py
import re
from datetime import datetime, timezone
from typing import Union

from fastapi import status

from stayhub.core.errors import ValidationError

# primary keys are INT columns (signed 32-bit)
MAX_ID = 2**31 - 1
_ID_RE = re.compile(r"^[1-9][0-9]{0,9}$")


def parse_id(raw: Union[str, int]) -> int:
    """
    Turn a path identifier into an int, or raise ValidationError (400).
    """
    if isinstance(raw, bool):
        raise ValidationError("Invalid ID!", status_code=status.HTTP_400_BAD_REQUEST)
    if isinstance(raw, int):
        if 0 < raw <= MAX_ID:
            return raw
    elif _ID_RE.match(raw.strip()) and int(raw) <= MAX_ID:
        return int(raw)
    raise ValidationError("Invalid ID!", status_code=status.HTTP_400_BAD_REQUEST)


def to_utc_naive(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; naive input is taken as UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
