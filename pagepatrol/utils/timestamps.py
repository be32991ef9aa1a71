from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo


def formatted_timestamp(timezone: str = "America/Sao_Paulo", now: Optional[datetime] = None) -> str:
    """Timestamp used for run directories and artifact names

    Format: 2024-05-01-13h-05m-09s
    """
    now = now or datetime.now(ZoneInfo(timezone))
    if now.tzinfo is not None:
        now = now.astimezone(ZoneInfo(timezone))
    return now.strftime("%Y-%m-%d-%Hh-%Mm-%Ss")


def generate_filename(name: str, extension: str = "webp", timezone: str = "America/Sao_Paulo") -> str:
    """Build '<name>-<timestamp>.<extension>'"""
    return f"{name}-{formatted_timestamp(timezone)}.{extension}"
