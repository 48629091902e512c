"""Base class for characters taking part in a fight."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from duelo.armas import ArmaAtaque, ArmaDefesa


@dataclass(eq=False)
class Personagem(ABC):
    """A fighter with an identifier, a name, hit points and two weapons."""

    id: int
    nome: str
    vida: int
    arma_ataque: ArmaAtaque
    arma_defesa: ArmaDefesa

    def gerar_ataque(self) -> int:
        """Force of this character's attack."""
        return self.arma_ataque.gerar_forca_ataque()

    def criar_defesa(self) -> int:
        """Damage this character's defence absorbs."""
        return self.arma_defesa.resistencia

    @abstractmethod
    def pegar_descricao(self) -> str:
        """The character's catchphrase."""