"""
Cache em Memória do Feed de Aulas.

Um único slot (o CSV inteiro é uma unidade) válido por TTL a partir da
última carga bem sucedida. Muitos alunos consultando contam como 1 request
real por minuto à planilha.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from src.core.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class LeituraFeed(Generic[T]):
    snapshot: T
    from_cache: bool
    ttl_restante_ms: int


class FeedCache(Generic[T]):
    """
    Serviço de cache injetável.

    O carregador é chamado sem argumentos e devolve o snapshot novo, ou
    levanta exceção. Falhas não são cacheadas: a próxima chamada tenta de
    novo. O lock garante uma só carga em voo quando o servidor usa threads.
    """

    def __init__(
        self,
        carregador: Callable[[], T],
        ttl_segundos: float = 60,
        relogio: Callable[[], float] = time.monotonic,
    ):
        self._carregador = carregador
        self._ttl = ttl_segundos
        self._relogio = relogio
        self._lock = threading.Lock()
        self._slot: Optional[Tuple[float, T]] = None

    @property
    def ttl_ms(self) -> int:
        return int(self._ttl * 1000)

    def _restante_ms(self, slot: Optional[Tuple[float, T]]) -> int:
        if slot is None:
            return 0
        idade = self._relogio() - slot[0]
        return max(0, int((self._ttl - idade) * 1000))

    def ttl_restante_ms(self) -> int:
        """Quanto falta para expirar, sem disparar carga."""
        return self._restante_ms(self._slot)

    def get_or_refresh(self) -> LeituraFeed[T]:
        with self._lock:
            slot = self._slot
            if slot is not None and self._relogio() - slot[0] < self._ttl:
                logger.debug("Feed servido do cache")
                return LeituraFeed(slot[1], True, self._restante_ms(slot))

            snapshot = self._carregador()
            # Carimbo = fim da carga; troca o slot de uma vez
            self._slot = (self._relogio(), snapshot)
            return LeituraFeed(snapshot, False, self.ttl_ms)

    get_snapshot = get_or_refresh
