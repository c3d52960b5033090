"""
Mapeamento de Colunas da BD_Aulas

Decide, uma vez por carga do CSV, em qual coluna está cada campo lógico:
pelos cabeçalhos (quando existem e resolvem todos os campos críticos) ou
pelo layout fixo por letra.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Sequence

from src.core.constants import CAMPOS_CRITICOS, LAYOUT_POSICIONAL, SINONIMOS_CABECALHO
from src.core.texto import normalizar_texto

_RE_NUMERICO = re.compile(r'^[0-9]+$')


class OrigemColunas(str, Enum):
    POSICIONAL = 'posicional'
    INFERIDO = 'inferido'


@dataclass(frozen=True)
class MapaColunas:
    """Índice de coluna por campo. -1 significa 'coluna inexistente'."""

    origem: OrigemColunas
    materia: int
    seccion: int
    tipo: int
    aula: int
    estado: int
    obs: int = -1
    reemplazo: int = -1
    hora_inicio: int = -1
    prof_titular: int = -1

    @property
    def cabecalho_consumido(self) -> bool:
        return self.origem is OrigemColunas.INFERIDO

    @classmethod
    def posicional(cls) -> 'MapaColunas':
        return cls(origem=OrigemColunas.POSICIONAL, **LAYOUT_POSICIONAL)


def tem_cabecalho(cabecalho_normalizado: Sequence[str]) -> bool:
    """Heurística: se há texto não numérico, provavelmente há cabeçalhos."""
    return any(c and not _RE_NUMERICO.match(c) for c in cabecalho_normalizado)


def _procurar(cabecalho: Sequence[str], sinonimos: Sequence[str]) -> int:
    # O primeiro sinônimo da lista que aparecer em alguma coluna vence.
    for chave in sinonimos:
        for idx, celula in enumerate(cabecalho):
            if chave in celula:
                return idx
    return -1


def mapear_colunas(primeira_linha: Sequence[str]) -> MapaColunas:
    """
    Monta o MapaColunas a partir da primeira linha do CSV.

    Se algum campo crítico não for achado, o mapa por cabeçalho inteiro é
    descartado e usamos o layout por letra. Nunca usamos um mapa parcial.
    """
    cabecalho = [normalizar_texto(c) for c in primeira_linha]

    if not tem_cabecalho(cabecalho):
        return MapaColunas.posicional()

    indices: Dict[str, int] = {
        campo: _procurar(cabecalho, sinonimos)
        for campo, sinonimos in SINONIMOS_CABECALHO.items()
    }

    if any(indices[campo] < 0 for campo in CAMPOS_CRITICOS):
        return MapaColunas.posicional()

    return MapaColunas(origem=OrigemColunas.INFERIDO, **indices)
