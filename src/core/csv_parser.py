"""
Parser de CSV do export do Google Sheets.

Vírgula como separador, campos opcionalmente entre aspas duplas com ""
como escape, e CRLF/LF/CR como fim de linha. Linhas totalmente em branco
são descartadas. Aspas não fechadas no fim do texto não geram erro: o que
foi acumulado é devolvido.
"""

from typing import List, Tuple

Linha = Tuple[str, ...]


def _linha_tem_conteudo(linha: List[str]) -> bool:
    return any(celula.strip() for celula in linha)


def parse_csv(texto: str) -> Tuple[Linha, ...]:
    linhas: List[Linha] = []
    linha: List[str] = []
    atual: List[str] = []
    entre_aspas = False

    texto = texto or ""
    i = 0
    n = len(texto)
    while i < n:
        ch = texto[i]
        prox = texto[i + 1] if i + 1 < n else ''

        if ch == '"' and entre_aspas and prox == '"':
            atual.append('"')
            i += 2
            continue
        if ch == '"':
            entre_aspas = not entre_aspas
            i += 1
            continue
        if ch == ',' and not entre_aspas:
            linha.append("".join(atual))
            atual = []
            i += 1
            continue
        if ch in '\r\n' and not entre_aspas:
            if ch == '\r' and prox == '\n':
                i += 1
            linha.append("".join(atual))
            atual = []
            if _linha_tem_conteudo(linha):
                linhas.append(tuple(linha))
            linha = []
            i += 1
            continue

        atual.append(ch)
        i += 1

    linha.append("".join(atual))
    if _linha_tem_conteudo(linha):
        linhas.append(tuple(linha))
    return tuple(linhas)
