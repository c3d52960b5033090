"""
Constantes Globais do Sistema.
Fonte Única da Verdade para o layout da planilha BD_Aulas.
"""

# Sinônimos de cabeçalho por campo lógico, em ordem de prioridade.
# Os cabeçalhos são comparados já normalizados (sem acento, maiúsculas).
SINONIMOS_CABECALHO = {
    'materia': ('ASIGNATURA', 'MATERIA', 'NOMBRE'),
    'seccion': ('SECCION',),
    'tipo': ('TIPO', 'T/P', 'TP'),
    'obs': ('OBSERVACION', 'OBS'),
    'reemplazo': ('REEMPLAZ', 'SUPL', 'SUPLENTE'),
    'hora_inicio': ('HORA INICIO', 'INICIO'),
    'aula': ('AULA',),
    'estado': ('ESTADO', 'ASIST'),
    'prof_titular': ('PROF', 'DOCENTE'),
}

# Sem estas colunas o mapa por cabeçalho é descartado inteiro.
CAMPOS_CRITICOS = ('materia', 'seccion', 'tipo', 'aula', 'estado')

# Layout fixo por letra (D,E,F,H,I,J,L,M) quando não há cabeçalho utilizável.
LAYOUT_POSICIONAL = {
    'materia': 3,        # D
    'seccion': 4,        # E
    'tipo': 5,           # F
    'obs': 7,            # H
    'reemplazo': 8,      # I
    'hora_inicio': 9,    # J
    'aula': 11,          # L
    'estado': 12,        # M
    'prof_titular': -1,
}

# Código de estado -> (ícone, texto exibido ao aluno)
ESTADOS_AULA = {
    '': ('⏳', 'Aún no llegó'),
    'P': ('✅', 'Presente'),
    'A': ('❌', 'Ausente'),
    'AA': ('⚠️', 'Ausente c/ Aviso'),
    'R': ('🔄', 'Reemplazo'),
    'T': ('ℹ️', 'Tutoría'),
    'REC': ('📅', 'Recuperación'),
}
ICONE_GENERICO = 'ℹ️'
CODIGO_REEMPLAZO = 'R'

AULA_NAO_ENCONTRADA = 'No hallada'

# Se a planilha não é pública, o Google devolve HTML de login/permissão.
MARCADORES_LOGIN = ('<html', 'accounts.google', 'signin')
TAMANHO_AMOSTRA_LOGIN = 300
