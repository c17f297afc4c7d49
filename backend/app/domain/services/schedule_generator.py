"""
Générateur de planning des rappels.

Répartit `target_count` rappels dans la fenêtre d'éveil [réveil, coucher) :
la fenêtre est découpée en tranches égales et chaque rappel est placé au
milieu de sa tranche, jamais exactement au réveil ni au coucher.

Fonctions pures, sans I/O : mêmes entrées => même planning.
"""
import math
import re
from typing import List

from app.domain.errors import ValidationError

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_clock(value: str) -> int:
    """Convertit "HH:MM" en minutes depuis minuit (0-1439)."""
    match = _CLOCK_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValidationError(f"Heure invalide (format HH:MM attendu): {value!r}")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValidationError(f"Heure hors limites: {value!r}")
    return hours * 60 + minutes


def format_clock(minutes: int) -> str:
    """Convertit des minutes depuis minuit en "HH:MM"."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def normalize_clock(value: str) -> str:
    """"7:05" -> "07:05" (lève ValidationError si invalide)"""
    return format_clock(parse_clock(value))


def _round_half_up(value: float) -> int:
    # round() de Python arrondit au pair (2.5 -> 2), on veut 2.5 -> 3
    return int(math.floor(value + 0.5))


def compute_reminder_minutes(wake_minutes: int, sleep_minutes: int, target_count: int) -> List[int]:
    """
    Minutes (depuis minuit) des rappels, dans l'ordre croissant.

    slot = (coucher - réveil) / target_count, division réelle.
    Rappel i = réveil + slot * i + slot / 2, arrondi à la minute la plus proche.
    """
    if target_count <= 0:
        return []

    slot = (sleep_minutes - wake_minutes) / target_count
    return [
        _round_half_up(wake_minutes + slot * i + slot / 2)
        for i in range(target_count)
    ]


def generate_schedule(wake_time: str, sleep_time: str, target_count: int) -> List[str]:
    """Planning "HH:MM" des rappels pour une fenêtre d'éveil et un objectif donnés."""
    minutes = compute_reminder_minutes(parse_clock(wake_time), parse_clock(sleep_time), target_count)
    return [format_clock(m) for m in minutes]
