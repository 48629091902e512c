"""Turn-based fight between two teams of characters."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator
from typing import TextIO

from duelo.personagem import Personagem

_SEPARADOR = "---------------------------------------------------------"


class Simulador:
    """Holds two teams and plays random rounds until one team is down."""

    def __init__(self) -> None:
        self.equipe1: list[Personagem] = []
        self.equipe2: list[Personagem] = []

    def _equipe(self, equipe: int) -> list[Personagem]:
        if equipe == 1:
            return self.equipe1
        if equipe == 2:
            return self.equipe2
        raise ValueError(f"equipe inválida: {equipe}")

    def adicionar_personagem(self, personagem: Personagem, equipe: int) -> None:
        """Add a character to team 1 or 2; any other team is an error."""
        self._equipe(equipe).append(personagem)

    def remover_personagem(self, personagem: Personagem, equipe: int) -> bool:
        """Remove the first member with the character's id; False if absent."""
        membros = self._equipe(equipe)
        for posicao, membro in enumerate(membros):
            if membro.id == personagem.id:
                del membros[posicao]
                return True
        return False

    def calcular_vida_equipe(self, seletor_de_equipe: int) -> int:
        """Total hit points of team 1, or of team 2 for any other selector."""
        equipe = self.equipe1 if seletor_de_equipe == 1 else self.equipe2
        return sum(personagem.vida for personagem in equipe)

    def proximo_personagem(self, equipe: int) -> Personagem | None:
        """First member of the team still alive, or None."""
        return next((p for p in self._equipe(equipe) if p.vida > 0), None)

    def criar_combate(self, atacante: Personagem, defensor: Personagem) -> int:
        """Resolve one attack, lower the defender's life and return the damage."""
        dano = max(0, atacante.gerar_ataque() - defensor.criar_defesa())
        defensor.vida = max(0, defensor.vida - dano)
        return dano

    def criar_saida(self, atacante: Personagem, defensor: Personagem, dano: int) -> str:
        """Text report of one round."""
        partes = [
            f"{_SEPARADOR}\n",
            f"O personagem {atacante.nome} irá atacar o {defensor.nome}\n",
            f"com a sua arma {atacante.arma_ataque.descricao_formatada()}\n",
            f"Dano causado = {dano}\n",
        ]
        if dano > 0:
            partes.append(f"{atacante.nome}: {atacante.pegar_descricao()}")
        partes.append(
            f"\nVIDA:\n{atacante.nome} [{atacante.vida}] {defensor.nome} [{defensor.vida}]"
        )
        partes.append(
            f"\nEquipe 1 {self.calcular_vida_equipe(1)} x "
            f"{self.calcular_vida_equipe(2)} Equipe 2"
        )
        partes.append(f"\n{_SEPARADOR}\n")
        return "".join(partes)

    def rodadas(self, rng: random.Random) -> Iterator[str]:
        """Play rounds while both teams are alive, yielding each round's report."""
        while self.calcular_vida_equipe(1) > 0 and self.calcular_vida_equipe(2) > 0:
            equipe_que_ataca = 1 if rng.randrange(2) == 0 else 2
            while True:
                membro1 = self.equipe1[rng.randrange(len(self.equipe1))]
                membro2 = self.equipe2[rng.randrange(len(self.equipe2))]
                if membro1.vida >= 1 and membro2.vida >= 1:
                    break
            if equipe_que_ataca == 1:
                atacante, defensor = membro1, membro2
            else:
                atacante, defensor = membro2, membro1
            dano = self.criar_combate(atacante, defensor)
            yield self.criar_saida(atacante, defensor, dano)

    def iniciar_simulacao(
        self, rng: random.Random | None = None, saida: TextIO | None = None
    ) -> None:
        """Run the whole fight, writing each round's report."""
        rng = rng if rng is not None else random.Random()
        saida = saida if saida is not None else sys.stdout
        for relatorio in self.rodadas(rng):
            print(relatorio, file=saida)