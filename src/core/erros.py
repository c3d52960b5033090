"""
Hierarquia de Erros da Integração com as Planilhas.

Separa erros de entrada do usuário (viram resultado com status 400) dos
erros de integração com a fonte externa (viram 502). Cada exceção carrega
contexto suficiente para diagnosticar uma planilha mal compartilhada sem
acesso ao servidor.
"""

from enum import Enum
from typing import Optional


class TipoErro(str, Enum):
    INPUT_MISSING_FIELD = 'INPUT_MISSING_FIELD'
    FEED_UNREACHABLE = 'FEED_UNREACHABLE'
    FEED_IS_LOGIN_PAGE = 'FEED_IS_LOGIN_PAGE'
    FEED_EMPTY = 'FEED_EMPTY'
    FEED_SCHEMA_TOO_NARROW = 'FEED_SCHEMA_TOO_NARROW'
    MALLA_UPSTREAM = 'MALLA_UPSTREAM'


class AulasError(Exception):
    """Erro base de integração. Nunca é re-tentado automaticamente."""

    tipo: TipoErro = TipoErro.FEED_UNREACHABLE
    status_http: int = 502

    def __init__(self, mensagem: str, debug: str = ''):
        super().__init__(mensagem)
        self.mensagem = mensagem
        self.debug = debug

    def para_dict(self) -> dict:
        return {
            'ok': False,
            'error': self.mensagem,
            'tipo': self.tipo.value,
            'debug': self.debug,
        }


class FeedInacessivel(AulasError):
    """Falha de transporte ou HTTP != 2xx ao baixar o CSV."""

    tipo = TipoErro.FEED_UNREACHABLE

    def __init__(self, status_upstream: Optional[int] = None, detalhe: str = ''):
        self.status_upstream = status_upstream
        if status_upstream is not None:
            mensagem = f"No se pudo leer el CSV de aulas (HTTP {status_upstream})"
            debug = f"http={status_upstream}"
        else:
            mensagem = "No se pudo leer el CSV de aulas (sin respuesta del servidor)"
            debug = detalhe
        super().__init__(mensagem, debug)


class FeedPaginaLogin(AulasError):
    """O link devolveu HTML de login/permissão em vez de CSV."""

    tipo = TipoErro.FEED_IS_LOGIN_PAGE

    def __init__(self, trecho: str = ''):
        self.trecho = trecho
        super().__init__(
            "El enlace no está devolviendo CSV (parece HTML de login/permisos). "
            "Revisá: Compartir → 'Cualquier persona con el enlace' → Lector.",
            debug=f"HTML_en_respuesta: {trecho}" if trecho else "HTML_en_respuesta",
        )


class FeedVazio(AulasError):
    tipo = TipoErro.FEED_EMPTY

    def __init__(self):
        super().__init__("CSV vacío", debug="rows=0")


class FeedEsquemaEstreito(AulasError):
    """A tabela tem menos colunas do que o layout D..M exige."""

    tipo = TipoErro.FEED_SCHEMA_TOO_NARROW

    def __init__(self, colunas_observadas: int, minimo: int):
        self.colunas_observadas = colunas_observadas
        self.minimo = minimo
        super().__init__(
            f"El CSV no tiene suficientes columnas (tiene {colunas_observadas}). "
            "Se espera una tabla estilo BD_Aulas con columnas hasta la M (D,E,F,H,I,J,L,M).",
            debug=f"cols={colunas_observadas}",
        )


class MallaUpstreamError(AulasError):
    """Resposta inválida ou de erro do Apps Script da malla."""

    tipo = TipoErro.MALLA_UPSTREAM
