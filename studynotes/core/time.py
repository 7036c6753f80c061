"""Helpers de reloj en UTC."""
from datetime import datetime, timedelta, timezone
from typing import Optional


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def next_after(prev: Optional[datetime]) -> datetime:
    """Hora actual, forzada a ser estrictamente posterior a `prev`.

    Con relojes de baja resolución dos llamadas seguidas pueden devolver el
    mismo instante; se avanza un microsegundo en ese caso.
    """
    now = now_utc()
    if prev is not None and now <= prev:
        return prev + timedelta(microseconds=1)
    return now
