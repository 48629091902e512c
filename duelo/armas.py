"""Base classes for attack and defence weapons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ArmaAtaque(ABC):
    """An attack weapon with a force range."""

    descricao: str
    min_forca: int
    max_forca: int

    def descricao_formatada(self) -> str:
        """Description followed by the force range, tab separated."""
        return f"{self.descricao}\t[{self.min_forca},{self.max_forca}]"

    @abstractmethod
    def gerar_forca_ataque(self) -> int:
        """Force dealt by one attack with this weapon."""

    @abstractmethod
    def gerar_ruido_ataque(self) -> str:
        """Sound the weapon makes when it strikes."""


@dataclass
class ArmaDefesa:
    """A defence item that absorbs a fixed amount of damage."""

    descricao: str
    resistencia: int