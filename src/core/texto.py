"""
Normalização de Texto

Gera chaves de comparação canônicas para materia, sección, tipo e horário,
de modo que "Análisis Matemático II" e "ANALISIS  MATEMATICO 2" casem.
"""

import re
import unicodedata
from typing import Optional

_ROMANOS = {
    'X': '10',
    'IX': '9',
    'VIII': '8',
    'VII': '7',
    'VI': '6',
    'V': '5',
    'IV': '4',
    'III': '3',
    'II': '2',
    'I': '1',
}
# Só tokens soltos: "VIA" não vira "5IA"
_RE_ROMANO = re.compile(r'\b(X|IX|VIII|VII|VI|V|IV|III|II|I)\b', re.ASCII)
_RE_ESPACOS = re.compile(r'\s+')
_RE_HORA = re.compile(r'([0-9]{1,2})[:.]([0-9]{2})')


def remover_acentos(texto: str) -> str:
    nfd = unicodedata.normalize('NFD', texto)
    return "".join(c for c in nfd if not unicodedata.combining(c))


def normalizar_texto(valor) -> str:
    """
    Chave canônica: sem acentos, romanos I..X em arábicos, maiúsculas,
    espaços colapsados. Nunca falha; None/vazio vira "".
    """
    if valor is None:
        return ""
    texto = remover_acentos(str(valor))
    texto = _RE_ROMANO.sub(lambda m: _ROMANOS[m.group(0)], texto)
    return _RE_ESPACOS.sub(' ', texto.upper()).strip()


def normalizar_hora(valor) -> str:
    """Normaliza para "HH:MM". Aceita 8:00, 08.00, 08:00 hs, etc."""
    m = _RE_HORA.search(str(valor or ""))
    if not m:
        return ""
    return f"{m.group(1).zfill(2)}:{m.group(2)}"


def normalizar_tipo(valor) -> str:
    t = normalizar_texto(valor or "")
    if not t:
        return ""
    if t == 'T' or t.startswith('TEO'):
        return 'T'
    if t == 'P' or t.startswith('PRA'):
        return 'P'
    # fallback: primeira letra
    return t[0]


def minutos_desde_hora(valor) -> Optional[int]:
    hora = normalizar_hora(valor)
    if not hora:
        return None
    hh, mm = hora.split(':')
    return int(hh) * 60 + int(mm)
