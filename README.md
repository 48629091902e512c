# duelo

A small console battle simulator. Two teams of characters take turns
attacking each other until one team has no life left.

Each character (`Personagem`) has an id, a name, a life total, one attack
weapon and one piece of defensive gear.

- **Attack weapons** (`ArmaAtaque`) have a description, a minimum and a
  maximum force, and make a sound when they strike:
  - `Caneta`, `Espada`, `Rosa` and `Taco` always strike with their maximum force;
  - `Colher`, `Faca` and `Fuzil` strike with maximum minus minimum force.
- **Defensive gear** (`ArmaDefesa`: `Caderno`, `Capa`, `Capacete`, `Escudo`,
  `Espelho`, `Porta`) has a description and a resistance.
- **Characters** (`CanetaAzul`, `Chapolin`, `Chaves`, `Mascara`, `PicaPau`,
  `Supla`) differ only in their catchphrase, returned by `pegar_descricao()`.

Damage in one exchange is the attacker's force minus the defender's
resistance, never below zero. A character's life never drops below zero.
Chance only decides which team attacks in a round and which living member
of each team takes part.

## Installation

```
pip install .
```

## Running the battle

```
duelo
duelo --semente 42
```

This builds the standard line-up of six characters, three per team, and
prints every round: who attacks whom, with which weapon, the damage done,
the attacker's catchphrase when the hit lands, both fighters' life and both
teams' total life. The battle ends when either team's total life reaches
zero. `--semente` seeds the random draws so that a battle can be replayed.

## Using it from Python

```python
import random

from duelo.acessorios import Espada, Escudo, Rosa, Porta
from duelo.personagens import Chaves, Chapolin
from duelo.simulador import Simulador

simulador = Simulador()
simulador.adicionar_personagem(Chaves(1, "Chaves", 100, Rosa("Rosa", 0, 10), Escudo("Latão", 1)), 1)
simulador.adicionar_personagem(Chapolin(2, "Chapolin", 100, Espada("Espada", 10, 50), Porta("Porta", 5)), 2)

simulador.iniciar_simulacao(random.Random(42))
```

`iniciar_simulacao(rng=None, saida=None)` writes each round's report to
`saida` (standard output by default). `rodadas(rng)` yields the text of each
round instead, so a battle can be inspected step by step. `criar_combate`
resolves a single attack and `criar_saida` formats its report.

Other `Simulador` methods:

- `remover_personagem(personagem, equipe)` removes the first member with the
  same id and returns `False` if there is none;
- `calcular_vida_equipe(seletor)` sums the life of team 1, or of team 2 for
  any other selector;
- `proximo_personagem(equipe)` returns the first living member, or `None`.

Teams are numbered 1 and 2; passing any other team number to
`adicionar_personagem`, `remover_personagem` or `proximo_personagem` raises
`ValueError`.

`criar_simulador()` in `duelo.main` returns the standard line-up used by the
`duelo` command.

## Tests

```
pip install .[test]
pytest
```