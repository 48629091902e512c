"""Command that stages the default fight."""

from __future__ import annotations

import argparse
import random

from duelo.acessorios import (
    Caderno,
    Caneta,
    Capa,
    Capacete,
    Colher,
    Escudo,
    Espelho,
    Faca,
    Fuzil,
    Porta,
    Rosa,
    Taco,
    Espada,
)
from duelo.personagens import CanetaAzul, Chapolin, Chaves, Mascara, PicaPau, Supla
from duelo.simulador import Simulador


def criar_simulador() -> Simulador:
    """Build the simulator with the default characters and weapons."""
    arma = Rosa("Super Rosa Amarela", 0, 10)
    arma2 = Colher("Colher de Pata", 0, 50)
    arma3 = Taco("Taco de beisebol", 0, 100)
    arma4 = Fuzil("Fuzil de pente alongado", 50, 1000)
    Espada("Espada longa", 10, 500)
    arma6 = Caneta("Taco de beisebol", 0, 40)
    Faca("Faquinha de pão", 0, 300)

    escudo = Escudo("Latão", 1)
    escudo2 = Capa("Capa de invisibilidade", 2)
    escudo3 = Espelho("Capa de invisibilidade", 200)
    escudo4 = Porta("Porta", 50)
    escudo5 = Caderno("Caderno brochurão", 10)
    escudo6 = Capacete("Porta", 150)

    p1 = Chaves(1, "Chaves del ocho", 100, arma, escudo)
    p3 = Chapolin(2, "heroi", 200, arma2, escudo2)
    p2 = CanetaAzul(3, "Azul caneta", 100, arma6, escudo3)
    p4 = Mascara(4, "Demais", 100, arma3, escudo4)
    p5 = PicaPau(5, "hehehe", 100, arma4, escudo5)
    p6 = Supla(6, "Papito", 120, arma6, escudo6)

    simulador = Simulador()
    simulador.adicionar_personagem(p1, 1)
    simulador.adicionar_personagem(p2, 2)
    simulador.adicionar_personagem(p3, 1)
    simulador.adicionar_personagem(p4, 2)
    simulador.adicionar_personagem(p5, 1)
    simulador.adicionar_personagem(p6, 2)
    return simulador


def main(argv: list[str] | None = None) -> int:
    """Run the default fight and print every round."""
    parser = argparse.ArgumentParser(prog="duelo", description="Simula um duelo entre equipes.")
    parser.add_argument("--semente", type=int, default=None, help="semente do sorteio")
    args = parser.parse_args(argv)
    criar_simulador().iniciar_simulacao(random.Random(args.semente))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())