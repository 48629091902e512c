"""The concrete characters and their catchphrases."""

from __future__ import annotations

from duelo.personagem import Personagem


class CanetaAzul(Personagem):
    def pegar_descricao(self) -> str:
        return "Caneta Azul"


class Chapolin(Personagem):
    def pegar_descricao(self) -> str:
        return "Quem não chora não mama"


class Chaves(Personagem):
    def pegar_descricao(self) -> str:
        return "Eii, não contava com a minha astucia?"


class Mascara(Personagem):
    def pegar_descricao(self) -> str:
        return "Quem não chora não mama"


class PicaPau(Personagem):
    def pegar_descricao(self) -> str:
        return "O nenem não é nenem"


class Supla(Personagem):
    def pegar_descricao(self) -> str:
        return "Eai champs"