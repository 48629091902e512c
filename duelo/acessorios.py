"""Concrete attack and defence weapons."""

from __future__ import annotations

from duelo.armas import ArmaAtaque, ArmaDefesa


class Caneta(ArmaAtaque):
    """Pen: always strikes at full force."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca

    def gerar_ruido_ataque(self) -> str:
        return "flic flic"


class Colher(ArmaAtaque):
    """Spoon: strikes with the width of its force range."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca - self.min_forca

    def gerar_ruido_ataque(self) -> str:
        return "cush cush"


class Espada(ArmaAtaque):
    """Sword: always strikes at full force."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca

    def gerar_ruido_ataque(self) -> str:
        return "swosh swosh"


class Faca(ArmaAtaque):
    """Knife: strikes with the width of its force range."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca - self.min_forca

    def gerar_ruido_ataque(self) -> str:
        return "crac crac"


class Fuzil(ArmaAtaque):
    """Rifle: strikes with the width of its force range."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca - self.min_forca

    def gerar_ruido_ataque(self) -> str:
        return "tum tum"


class Rosa(ArmaAtaque):
    """Rose: always strikes at full force."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca

    def gerar_ruido_ataque(self) -> str:
        return "plin plin"


class Taco(ArmaAtaque):
    """Bat: always strikes at full force."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca

    def gerar_ruido_ataque(self) -> str:
        return "tac tac"


class Caderno(ArmaDefesa):
    """Notebook used as a shield."""


class Capa(ArmaDefesa):
    """Cape."""


class Capacete(ArmaDefesa):
    """Helmet."""


class Escudo(ArmaDefesa):
    """Shield."""


class Espelho(ArmaDefesa):
    """Mirror."""


class Porta(ArmaDefesa):
    """Door used as a shield."""