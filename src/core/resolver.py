"""
Resolver de Aulas

Responde "em que aula está acontecendo esta turma agora?" a partir das
linhas de dados do CSV e do mapa de colunas.

Regra mínima (estrita): Materia + Tipo (T/P) + Sección. Se houver vários
candidatos, desempata pela hora mais próxima e prefere quem tem aula.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from src.core.colunas import MapaColunas
from src.core.constants import (
    AULA_NAO_ENCONTRADA,
    CODIGO_REEMPLAZO,
    ESTADOS_AULA,
    ICONE_GENERICO,
)
from src.core.erros import TipoErro
from src.core.texto import minutos_desde_hora, normalizar_hora, normalizar_texto, normalizar_tipo

# Hora ilegível conta como "infinitamente longe"
DIFERENCA_SEM_HORA = 10 ** 9
PESO_DIFERENCA = 1000

# Ordem em que os campos obrigatórios são verificados
CAMPOS_OBRIGATORIOS = ('materia', 'tipo', 'seccion')


@dataclass(frozen=True)
class Consulta:
    materia: str
    seccion: str
    tipo: str
    hora_inicio: str = ''

    def campo_faltante(self) -> Optional[str]:
        for campo in CAMPOS_OBRIGATORIOS:
            if not getattr(self, campo):
                return campo
        return None


@dataclass(frozen=True)
class EstadoInfo:
    icon: str
    text: str
    code: str

    def para_dict(self) -> dict:
        return {'icon': self.icon, 'text': self.text, 'code': self.code}


@dataclass(frozen=True)
class ResultadoConsulta:
    ok: bool
    found: bool
    aula: str = ''
    estado: Optional[EstadoInfo] = None
    reemplazo: str = ''
    observacion: str = ''
    erro: str = ''
    tipo_erro: Optional[TipoErro] = field(default=None, compare=False)

    @classmethod
    def campo_ausente(cls, campo: str) -> 'ResultadoConsulta':
        return cls(
            ok=False,
            found=False,
            erro=f"Falta {campo}",
            tipo_erro=TipoErro.INPUT_MISSING_FIELD,
        )

    @classmethod
    def nao_encontrado(cls) -> 'ResultadoConsulta':
        return cls(ok=True, found=False)

    def para_dict(self) -> dict:
        if not self.ok:
            return {
                'ok': False,
                'found': False,
                'error': self.erro,
                'tipo': self.tipo_erro.value if self.tipo_erro else '',
            }
        if not self.found:
            return {'ok': True, 'found': False}
        return {
            'ok': True,
            'found': True,
            'aula': self.aula,
            'estado': self.estado.para_dict() if self.estado else None,
            'reemplazo': self.reemplazo,
            'observacion': self.observacion,
        }


def _celula(linha: Sequence[str], idx: int) -> str:
    if idx < 0 or idx >= len(linha):
        return ''
    return str(linha[idx] or '')


def montar_consulta(corpo: Optional[Mapping]) -> Consulta:
    corpo = corpo if isinstance(corpo, Mapping) else {}
    return Consulta(
        materia=normalizar_texto(corpo.get('materia') or ''),
        seccion=normalizar_texto(corpo.get('seccion') or ''),
        # "T" | "P" (ou TEO/PRAC)
        tipo=normalizar_texto(corpo.get('tipo') or ''),
        hora_inicio=normalizar_hora(corpo.get('horaInicio') or ''),
    )


def decodificar_estado(codigo) -> EstadoInfo:
    c = normalizar_texto(codigo or '')
    if c in ESTADOS_AULA:
        icone, texto = ESTADOS_AULA[c]
        return EstadoInfo(icone, texto, c)
    return EstadoInfo(ICONE_GENERICO, c, c)


def pontuar_candidato(linha: Sequence[str], minutos_consulta: int, colunas: MapaColunas) -> int:
    """Menor é melhor: a diferença de horário domina, ter aula só desempata."""
    minutos_linha = minutos_desde_hora(_celula(linha, colunas.hora_inicio))
    if minutos_linha is None:
        diferenca = DIFERENCA_SEM_HORA
    else:
        diferenca = abs(minutos_linha - minutos_consulta)
    tem_aula = bool(_celula(linha, colunas.aula).strip())
    return diferenca * PESO_DIFERENCA + (0 if tem_aula else 1)


def escolher_melhor(
    candidatos: Sequence[Sequence[str]],
    hora_consulta: str,
    colunas: MapaColunas,
) -> Optional[Sequence[str]]:
    if not candidatos:
        return None

    minutos_consulta = minutos_desde_hora(hora_consulta)
    if minutos_consulta is None:
        for linha in candidatos:
            if _celula(linha, colunas.aula).strip():
                return linha
        return candidatos[0]

    # min() devolve o primeiro entre empates
    return min(candidatos, key=lambda linha: pontuar_candidato(linha, minutos_consulta, colunas))


def filtrar_candidatos(
    consulta: Consulta,
    linhas_dados: Iterable[Sequence[str]],
    colunas: MapaColunas,
) -> List[Sequence[str]]:
    tipo_consulta = normalizar_tipo(consulta.tipo)
    candidatos = []
    for linha in linhas_dados:
        materia = normalizar_texto(_celula(linha, colunas.materia))
        if not materia or materia != consulta.materia:
            continue
        if normalizar_texto(_celula(linha, colunas.seccion)) != consulta.seccion:
            continue
        tipo_linha = normalizar_tipo(_celula(linha, colunas.tipo))
        if not tipo_consulta or not tipo_linha or tipo_linha != tipo_consulta:
            continue
        candidatos.append(linha)
    return candidatos


def resolver_consulta(
    consulta: Consulta,
    linhas_dados: Iterable[Sequence[str]],
    colunas: MapaColunas,
) -> ResultadoConsulta:
    faltante = consulta.campo_faltante()
    if faltante:
        return ResultadoConsulta.campo_ausente(faltante)

    candidatos = filtrar_candidatos(consulta, linhas_dados, colunas)
    if not candidatos:
        return ResultadoConsulta.nao_encontrado()

    linha = escolher_melhor(candidatos, consulta.hora_inicio, colunas)

    estado = decodificar_estado(_celula(linha, colunas.estado))
    reemplazo = ''
    if estado.code == CODIGO_REEMPLAZO and colunas.reemplazo >= 0:
        reemplazo = _celula(linha, colunas.reemplazo).strip()
    aula = _celula(linha, colunas.aula).strip()

    return ResultadoConsulta(
        ok=True,
        found=True,
        aula=aula or AULA_NAO_ENCONTRADA,
        estado=estado,
        reemplazo=reemplazo,
        observacion=_celula(linha, colunas.obs).strip(),
    )


def montar_pedidos_lote(itens: Iterable) -> List[Tuple[str, Consulta]]:
    """Converte os itens de {classes: [...]} em (key, Consulta). Sem key, ignora."""
    pedidos = []
    for item in itens:
        if not isinstance(item, Mapping):
            continue
        chave = str(item.get('key') or '')
        if chave:
            pedidos.append((chave, montar_consulta(item)))
    return pedidos


def resolver_lote(
    pedidos: Iterable[Tuple[str, Consulta]],
    linhas_dados: Sequence[Sequence[str]],
    colunas: MapaColunas,
) -> Dict[str, ResultadoConsulta]:
    """Todas as consultas contra o MESMO snapshot (uma carga, vários matches)."""
    return {
        chave: resolver_consulta(consulta, linhas_dados, colunas)
        for chave, consulta in pedidos
    }
