import os

# O Config é "fail fast": precisa da URL antes do import
os.environ.setdefault('AULAS_CSV_URL', 'https://planilha.test/export?format=csv&gid=0')
os.environ.setdefault('MALLA_APPS_SCRIPT_URL', 'https://script.test/macros/s/abc/exec')

import pytest

from config import Config
from src import create_app
from src.core.cache import FeedCache
from src.core.feed import montar_snapshot

CABECALHO = (
    "Fecha,Dia,Turno,Asignatura,Sección,Tipo,Profesor,Observación,Reemplazo,"
    "Hora Inicio,Hora Fin,Aula,Estado"
)

CSV_AULAS = "\n".join([
    CABECALHO,
    ",Lunes,M,Análisis Matemático II,A,Teoría,Pérez,,,08:00,10:00,,",
    ",Lunes,M,Análisis Matemático II,A,Teoría,Pérez,Traer apunte,,08:05,10:00,Aula 12,P",
    ",Lunes,M,Análisis Matemático II,A,Práctica,Gómez,,,10:00,12:00,Lab 3,A",
    ",Lunes,T,Física I,B,T,Ruiz,,Sosa,14:00,16:00,Aula 5,R",
    ",Lunes,T,Química General,C,P,Díaz,,,16:00,18:00,Aula 7,REC",
])


class ConfigTeste(Config):
    TESTING = True
    RATELIMIT_ENABLED = False


class CarregadorFalso:
    """Substitui o GET do CSV contando quantas vezes foi chamado."""

    def __init__(self, texto=CSV_AULAS, min_colunas=13):
        self.texto = texto
        self.min_colunas = min_colunas
        self.chamadas = 0

    def __call__(self):
        self.chamadas += 1
        return montar_snapshot(self.texto, self.min_colunas)


@pytest.fixture
def carregador():
    return CarregadorFalso()


@pytest.fixture
def app(carregador):
    app = create_app(ConfigTeste)
    app.extensions['aulas_feed'] = FeedCache(carregador, ttl_segundos=60)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def carregador_falso():
    return CarregadorFalso
