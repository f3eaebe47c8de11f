"""Сервисы для обращения к AnkiConnect."""

from .cards import CardsManager
from .client import Client
from .decks import DecksManager, to_epoch_millis


__all__ = ["CardsManager", "Client", "DecksManager", "to_epoch_millis"]
