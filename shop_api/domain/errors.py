# shop_api/domain/errors.py
"""Wyjatki domenowe rzucane przez serwisy, tlumaczone na HTTP w routerach.

Bledy walidacji to zwykly ``ValueError``.
"""


class NotFoundError(LookupError):
    """Encja (produkt, kategoria, item koszyka) nie istnieje."""


class ConflictError(Exception):
    """Zapis naruszylby unikalnosc, np. kategoria o tej samej nazwie."""
