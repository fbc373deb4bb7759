"""Spell out rupee amounts using the Indian numbering system."""

from decimal import ROUND_HALF_UP, Decimal

_UNITS = [
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
]
_TENS = [
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty",
    "ninety",
]

CRORE = 10_000_000
LAKH = 100_000


def _below_hundred(n: int) -> str:
    if n < 20:
        return _UNITS[n]
    tens, digit = divmod(n, 10)
    return _TENS[tens] + (f"-{_UNITS[digit]}" if digit else "")


def _spell(n: int) -> str:
    if n == 0:
        return "zero"

    parts = []
    if n >= CRORE:
        parts.append(f"{_spell(n // CRORE)} crore")
        n %= CRORE
    if n >= LAKH:
        parts.append(f"{_below_hundred(n // LAKH)} lakh")
        n %= LAKH
    if n >= 1000:
        parts.append(f"{_below_hundred(n // 1000)} thousand")
        n %= 1000
    if n >= 100:
        parts.append(f"{_below_hundred(n // 100)} hundred")
        n %= 100
    if n:
        parts.append(_below_hundred(n))
    return " ".join(parts)


def _title(words: str) -> str:
    return " ".join(
        "-".join(piece.capitalize() for piece in word.split("-"))
        for word in words.split()
    )


def amount_in_words(value: float) -> str:
    """
    Spell an amount, e.g. ``1250.5`` -> ``One Thousand Two Hundred Fifty And
    Fifty Paise Only``.
    """
    if value < 0:
        raise ValueError("amount must not be negative")

    amount = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    rupees = int(amount)
    paise = int((amount - rupees) * 100)

    words = _spell(rupees)
    if paise:
        words += f" and {_spell(paise)} paise"
    return f"{_title(words)} Only"
