"""
Durées de revalidation — "1h", "30m", "1w2d" → timedelta.

Unités : s (secondes), m (minutes), h (heures), d (jours), w (semaines),
M (mois = 30 jours), y (années = 365 jours).
"""
import re
from datetime import timedelta
from typing import Union

DurationLike = Union[timedelta, int, str]

_UNITS: dict = {
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
    "w": timedelta(weeks=1),
    "M": timedelta(days=30),
    "y": timedelta(days=365),
}

_GROUP = re.compile(r"(\d+)([smhdwMy])")


def parse_duration(value: DurationLike) -> timedelta:
    """
    Convertit une durée en timedelta.

    Args:
        value: timedelta, nombre de secondes (int) ou chaîne "1h", "1w2d"...

    Returns:
        timedelta strictement positive

    Raises:
        ValueError: chaîne illisible ou durée nulle/négative
    """
    if isinstance(value, timedelta):
        duration = value
    elif isinstance(value, bool):
        raise ValueError(f"Durée invalide : {value!r}")
    elif isinstance(value, int):
        duration = timedelta(seconds=value)
    elif isinstance(value, str):
        duration = _parse_string(value.strip())
    else:
        raise ValueError(f"Durée invalide : {value!r}")

    if duration <= timedelta(0):
        raise ValueError(f"Durée nulle ou négative : {value!r}")
    return duration


def _parse_string(text: str) -> timedelta:
    # La chaîne doit être entièrement couverte par des groupes <nombre><unité>
    if not text or _GROUP.sub("", text):
        raise ValueError(f"Durée invalide : {text!r} (attendu ex. '1h', '1w2d')")

    total = timedelta(0)
    try:
        for amount, unit in _GROUP.findall(text):
            total += int(amount) * _UNITS[unit]
    except OverflowError as e:
        raise ValueError(f"Durée trop grande : {text!r}") from e
    return total
