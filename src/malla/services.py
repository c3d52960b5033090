"""
Camada de Serviço da Malla Curricular

Lê a BD_Malla pelo Web App do Apps Script e guarda as respostas em memória
por TTL, para que muitos usuários contem como 1 request real por minuto.
"""

import json
import threading
import time
from typing import Callable, Dict, Optional, Tuple

import requests

from src.core.erros import MallaUpstreamError
from src.core.logger import get_logger

logger = get_logger(__name__)


class MallaService:
    """
    Cache por chave "carrera||plan". Quando o TTL vence, o mapa inteiro é
    descartado (não há expiração por chave).
    """

    def __init__(
        self,
        url_base: str,
        token: str = '',
        ttl_segundos: float = 60,
        sessao: Optional[requests.Session] = None,
        relogio: Callable[[], float] = time.monotonic,
    ):
        self.url_base = url_base
        self.token = token
        self.ttl = ttl_segundos
        self.sessao = sessao or requests.Session()
        self._relogio = relogio
        self._lock = threading.Lock()
        self._carimbo = relogio()
        self._dados: Dict[str, dict] = {}

    def _buscar_upstream(self, carrera: str, plan: str) -> dict:
        params = {'carrera': carrera, 'plan': plan}
        if self.token:
            params['token'] = self.token

        try:
            resposta = self.sessao.get(self.url_base, params=params)
        except requests.RequestException as e:
            logger.warning(f"Falha ao contatar Apps Script da malla: {e}")
            raise MallaUpstreamError("No se pudo contactar el Apps Script de la malla", debug=type(e).__name__) from e

        texto = resposta.text
        try:
            dados = json.loads(texto)
        except ValueError:
            # Às vezes o Apps Script devolve HTML quando há problema de permissão.
            raise MallaUpstreamError(
                "Respuesta no válida desde Apps Script (no es JSON)",
                debug=texto[:200],
            )

        if not resposta.ok or (isinstance(dados, dict) and dados.get('ok') is False):
            erro = dados.get('error') if isinstance(dados, dict) else None
            raise MallaUpstreamError(
                erro or "No se pudo leer la BD_Malla",
                debug=json.dumps(dados, ensure_ascii=False)[:200],
            )

        if not isinstance(dados, dict):
            dados = {}
        materias = dados.get('materias')
        return {
            'carrera': dados.get('carrera') or carrera,
            'plan': str(dados.get('plan') or plan),
            'materias': materias if isinstance(materias, list) else [],
        }

    def obter(self, carrera: str, plan: str) -> Tuple[dict, bool]:
        """
        Retorna (payload, veio_do_cache).

        Raises:
            MallaUpstreamError: resposta inválida, de erro ou sem conexão.
        """
        chave = f"{carrera}||{plan}"

        with self._lock:
            agora = self._relogio()
            if agora - self._carimbo > self.ttl:
                self._carimbo = agora
                self._dados = {}

            if chave in self._dados:
                return self._dados[chave], True

        # O GET roda fora do lock: uma chave lenta não trava leituras das outras
        payload = self._buscar_upstream(carrera, plan)

        with self._lock:
            self._dados[chave] = payload
        logger.info(f"Malla carregada: {chave} ({len(payload['materias'])} materias)")
        return payload, False
