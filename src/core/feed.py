"""
Fonte de Dados: CSV publicado da BD_Aulas

Baixa o CSV, valida que é realmente um CSV utilizável e monta o snapshot
imutável (linhas brutas, mapa de colunas, linhas de dados) que o resolver
consulta. Cada validação falha com uma exceção própria antes do parsing
seguinte.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import requests

from src.core.colunas import MapaColunas, mapear_colunas
from src.core.constants import MARCADORES_LOGIN, TAMANHO_AMOSTRA_LOGIN
from src.core.csv_parser import Linha, parse_csv
from src.core.erros import FeedEsquemaEstreito, FeedInacessivel, FeedPaginaLogin, FeedVazio
from src.core.logger import get_logger

logger = get_logger(__name__)

# Força saída texto/CSV (às vezes o Google devolve HTML se não é público)
CABECALHOS_HTTP = {'Accept': 'text/csv,text/plain,*/*'}


@dataclass(frozen=True)
class SnapshotFeed:
    linhas: Tuple[Linha, ...]
    colunas: MapaColunas
    linhas_dados: Tuple[Linha, ...]


def parece_pagina_login(texto: str) -> bool:
    amostra = (texto or "")[:TAMANHO_AMOSTRA_LOGIN].lower()
    return any(marcador in amostra for marcador in MARCADORES_LOGIN)


def montar_snapshot(texto: str, min_colunas: int) -> SnapshotFeed:
    """
    Valida e converte o corpo da resposta em SnapshotFeed.

    Raises:
        FeedPaginaLogin: o corpo é HTML de login/permissão.
        FeedVazio: nenhuma linha com conteúdo.
        FeedEsquemaEstreito: a linha mais larga tem menos que min_colunas.
    """
    if parece_pagina_login(texto):
        trecho = " ".join(texto[:120].split())
        raise FeedPaginaLogin(trecho)

    linhas = parse_csv(texto)
    if not linhas:
        raise FeedVazio()

    max_colunas = max(len(linha) for linha in linhas)
    if max_colunas < min_colunas:
        raise FeedEsquemaEstreito(max_colunas, min_colunas)

    colunas = mapear_colunas(linhas[0])
    linhas_dados = linhas[1:] if colunas.cabecalho_consumido else linhas
    return SnapshotFeed(linhas=linhas, colunas=colunas, linhas_dados=linhas_dados)


class FonteAulas:
    """
    Carregador do CSV de aulas. Uma chamada a carregar() = um GET.

    Não há retry nem timeout próprio: uma falha sobe direto para quem chamou.
    """

    def __init__(self, url: str, min_colunas: int = 13, sessao: Optional[requests.Session] = None):
        self.url = url
        self.min_colunas = min_colunas
        self.sessao = sessao or requests.Session()

    def baixar(self) -> str:
        try:
            resposta = self.sessao.get(self.url, headers=CABECALHOS_HTTP)
        except requests.RequestException as e:
            logger.warning(f"Falha de transporte ao baixar CSV de aulas: {e}")
            raise FeedInacessivel(None, detalhe=type(e).__name__) from e

        if not resposta.ok:
            logger.warning(f"CSV de aulas respondeu HTTP {resposta.status_code}")
            raise FeedInacessivel(resposta.status_code)

        # Sem charset no Content-Type o requests assume ISO-8859-1; o export do Sheets é UTF-8
        if 'charset' not in resposta.headers.get('Content-Type', '').lower():
            resposta.encoding = 'utf-8'
        return resposta.text

    def carregar(self) -> SnapshotFeed:
        texto = self.baixar()
        snapshot = montar_snapshot(texto, self.min_colunas)
        logger.info(
            f"CSV de aulas carregado: {len(snapshot.linhas_dados)} linhas de dados "
            f"(colunas: {snapshot.colunas.origem.value})"
        )
        return snapshot
