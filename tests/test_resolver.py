
import unittest

from src.core import resolver
from src.core.colunas import MapaColunas
from src.core.erros import TipoErro
from src.core.resolver import Consulta, montar_consulta, montar_pedidos_lote

# Layout posicional: materia=3, seccion=4, tipo=5, obs=7, reemplazo=8,
# hora_inicio=9, aula=11, estado=12
COLUNAS = MapaColunas.posicional()


def linha(materia, seccion, tipo, hora='', aula='', estado='', obs='', reemplazo=''):
    celulas = [''] * 13
    celulas[3] = materia
    celulas[4] = seccion
    celulas[5] = tipo
    celulas[7] = obs
    celulas[8] = reemplazo
    celulas[9] = hora
    celulas[11] = aula
    celulas[12] = estado
    return tuple(celulas)


class TestPontuacao(unittest.TestCase):

    def setUp(self):
        self.sem_aula = linha("Física", "A", "T", hora="08:00")
        self.com_aula = linha("Física", "A", "T", hora="08:05", aula="Aula 12")

    def test_formula_de_pontuacao(self):
        consulta = 8 * 60 + 3
        self.assertEqual(resolver.pontuar_candidato(self.sem_aula, consulta, COLUNAS), 3001)
        self.assertEqual(resolver.pontuar_candidato(self.com_aula, consulta, COLUNAS), 2000)

    def test_hora_mais_proxima_vence(self):
        melhor = resolver.escolher_melhor([self.sem_aula, self.com_aula], "08:03", COLUNAS)
        self.assertIs(melhor, self.com_aula)

        melhor = resolver.escolher_melhor([self.sem_aula, self.com_aula], "08:01", COLUNAS)
        self.assertIs(melhor, self.sem_aula)

    def test_aula_so_desempata_mesma_diferenca(self):
        antes = linha("Física", "A", "T", hora="08:00")
        depois = linha("Física", "A", "T", hora="08:10", aula="Aula 3")
        melhor = resolver.escolher_melhor([antes, depois], "08:05", COLUNAS)
        self.assertIs(melhor, depois)

    def test_empate_fica_com_o_primeiro(self):
        a = linha("Física", "A", "T", hora="08:00", aula="Aula 1")
        b = linha("Física", "A", "T", hora="08:00", aula="Aula 2")
        self.assertIs(resolver.escolher_melhor([a, b], "08:00", COLUNAS), a)

    def test_hora_ilegivel_perde_mas_pode_ser_escolhida(self):
        ilegivel = linha("Física", "A", "T", hora="a confirmar", aula="Aula 9")
        valida = linha("Física", "A", "T", hora="23:00")
        self.assertIs(resolver.escolher_melhor([ilegivel, valida], "08:00", COLUNAS), valida)
        self.assertIs(resolver.escolher_melhor([ilegivel], "08:00", COLUNAS), ilegivel)
        self.assertEqual(
            resolver.pontuar_candidato(ilegivel, 480, COLUNAS),
            resolver.DIFERENCA_SEM_HORA * 1000,
        )

    def test_sem_hora_na_consulta_prefere_quem_tem_aula(self):
        sem = linha("Física", "A", "T")
        com = linha("Física", "A", "T", aula="Aula 4")
        self.assertIs(resolver.escolher_melhor([sem, com], "", COLUNAS), com)
        self.assertIs(resolver.escolher_melhor([sem], "", COLUNAS), sem)

    def test_sem_candidatos(self):
        self.assertIsNone(resolver.escolher_melhor([], "08:00", COLUNAS))


class TestDecodificarEstado(unittest.TestCase):

    def test_vocabulario(self):
        casos = {
            '': ('⏳', 'Aún no llegó'),
            'P': ('✅', 'Presente'),
            'a': ('❌', 'Ausente'),
            'AA': ('⚠️', 'Ausente c/ Aviso'),
            'R': ('🔄', 'Reemplazo'),
            'T': ('ℹ️', 'Tutoría'),
            ' rec ': ('📅', 'Recuperación'),
        }
        for codigo, (icone, texto) in casos.items():
            estado = resolver.decodificar_estado(codigo)
            self.assertEqual((estado.icon, estado.text), (icone, texto), codigo)

    def test_codigo_desconhecido_passa_direto(self):
        estado = resolver.decodificar_estado("Suspendida")
        self.assertEqual(estado.icon, 'ℹ️')
        self.assertEqual(estado.text, 'SUSPENDIDA')
        self.assertEqual(estado.code, 'SUSPENDIDA')


class TestResolverConsulta(unittest.TestCase):

    def setUp(self):
        self.linhas = [
            linha("", "A", "T", aula="Aula fantasma"),
            linha("Análisis Matemático II", "A", "Teoría", hora="08:00"),
            linha("ANALISIS MATEMATICO 2", "A", "TEO", hora="08:05", aula="Aula 12", estado="P", obs="Traer apunte"),
            linha("Análisis Matemático II", "A", "Práctica", hora="08:00", aula="Lab 3"),
            linha("Física I", "B", "T", aula="Aula 5", estado="R", reemplazo="Sosa"),
            linha("Química", "C", "P", aula="Aula 7", estado="P", reemplazo="Ninguém"),
        ]

    def consultar(self, **corpo):
        return resolver.resolver_consulta(montar_consulta(corpo), self.linhas, COLUNAS)

    def test_encontra_com_desempate_por_hora(self):
        r = self.consultar(materia="análisis matemático II", seccion="a", tipo="T", horaInicio="8:03")
        self.assertTrue(r.ok)
        self.assertTrue(r.found)
        self.assertEqual(r.aula, "Aula 12")
        self.assertEqual(r.estado.code, "P")
        self.assertEqual(r.observacion, "Traer apunte")
        self.assertEqual(r.reemplazo, "")

    def test_tipo_pratica_nao_mistura_com_teoria(self):
        r = self.consultar(materia="Análisis Matemático II", seccion="A", tipo="PRAC")
        self.assertEqual(r.aula, "Lab 3")

    def test_nao_encontrado_nao_e_erro(self):
        r = self.consultar(materia="Álgebra", seccion="A", tipo="T")
        self.assertTrue(r.ok)
        self.assertFalse(r.found)
        self.assertEqual(r.para_dict(), {'ok': True, 'found': False})

    def test_seccion_exige_igualdade_exata(self):
        r = self.consultar(materia="Física I", seccion="B1", tipo="T")
        self.assertFalse(r.found)

    def test_materia_vazia_nunca_casa(self):
        r = self.consultar(materia="x", seccion="A", tipo="T")
        self.assertFalse(r.found)

    def test_reemplazo_so_quando_estado_e_reemplazo(self):
        r = self.consultar(materia="Física 1", seccion="B", tipo="T")
        self.assertEqual(r.estado.text, "Reemplazo")
        self.assertEqual(r.reemplazo, "Sosa")

        r = self.consultar(materia="Química", seccion="C", tipo="P")
        self.assertEqual(r.reemplazo, "")

    def test_sem_aula_vira_no_hallada(self):
        linhas = [linha("Física I", "B", "T", hora="10:00")]
        r = resolver.resolver_consulta(montar_consulta({'materia': 'Física I', 'seccion': 'B', 'tipo': 'T'}), linhas, COLUNAS)
        self.assertEqual(r.aula, "No hallada")
        self.assertEqual(r.estado.text, "Aún no llegó")

    def test_campo_ausente_nao_varre_linhas(self):
        class LinhasProibidas:
            def __iter__(self):
                raise AssertionError("não deveria varrer as linhas")

        consulta = montar_consulta({'materia': 'Física I', 'tipo': 'T'})
        r = resolver.resolver_consulta(consulta, LinhasProibidas(), COLUNAS)
        self.assertFalse(r.ok)
        self.assertEqual(r.erro, "Falta seccion")
        self.assertEqual(r.tipo_erro, TipoErro.INPUT_MISSING_FIELD)

    def test_ordem_dos_campos_obrigatorios(self):
        self.assertEqual(Consulta('', '', '').campo_faltante(), 'materia')
        self.assertEqual(Consulta('X', '', '').campo_faltante(), 'tipo')
        self.assertEqual(Consulta('X', '', 'T').campo_faltante(), 'seccion')
        self.assertIsNone(Consulta('X', 'A', 'T').campo_faltante())


class TestLote(unittest.TestCase):

    def test_pedidos_sem_key_sao_ignorados(self):
        pedidos = montar_pedidos_lote([
            {'key': 'k1', 'materia': 'Física I', 'seccion': 'B', 'tipo': 'T'},
            {'materia': 'Física I', 'seccion': 'B', 'tipo': 'T'},
            "lixo",
        ])
        self.assertEqual([chave for chave, _ in pedidos], ['k1'])

    def test_resolver_lote_por_chave(self):
        linhas = [linha("Física I", "B", "T", aula="Aula 5", estado="P")]
        pedidos = montar_pedidos_lote([
            {'key': 'fis', 'materia': 'Física I', 'seccion': 'B', 'tipo': 'T'},
            {'key': 'qui', 'materia': 'Química', 'seccion': 'C', 'tipo': 'P'},
            {'key': 'inc', 'materia': 'Química'},
        ])
        resultados = resolver.resolver_lote(pedidos, linhas, COLUNAS)

        self.assertEqual(resultados['fis'].aula, "Aula 5")
        self.assertFalse(resultados['qui'].found)
        self.assertFalse(resultados['inc'].ok)


if __name__ == '__main__':
    unittest.main()
