import re

from duelo.main import criar_simulador, main
from duelo.personagens import CanetaAzul, Chapolin, Chaves, Mascara, PicaPau, Supla


def test_criar_simulador_teams():
    sim = criar_simulador()
    assert [type(p) for p in sim.equipe1] == [Chaves, Chapolin, PicaPau]
    assert [type(p) for p in sim.equipe2] == [CanetaAzul, Mascara, Supla]
    assert sim.calcular_vida_equipe(1) == 400
    assert sim.calcular_vida_equipe(2) == 320


def test_criar_simulador_names_and_ids():
    sim = criar_simulador()
    assert [p.nome for p in sim.equipe1] == ["Chaves del ocho", "heroi", "hehehe"]
    assert sorted(p.id for p in sim.equipe1 + sim.equipe2) == [1, 2, 3, 4, 5, 6]
    assert sim.equipe2[0].arma_ataque is sim.equipe2[2].arma_ataque


def test_main_runs_fight_to_the_end(capsys):
    assert main(["--semente", "1"]) == 0
    texto = capsys.readouterr().out
    placares = re.findall(r"Equipe 1 (\d+) x (\d+) Equipe 2", texto)
    assert placares
    final = tuple(int(v) for v in placares[-1])
    assert min(final) == 0
    assert max(final) > 0


def test_main_seed_is_reproducible(capsys):
    main(["--semente", "42"])
    primeiro = capsys.readouterr().out
    main(["--semente", "42"])
    segundo = capsys.readouterr().out
    assert primeiro == segundo
    assert "O personagem " in primeiro