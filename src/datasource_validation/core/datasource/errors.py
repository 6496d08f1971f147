"""Erros canônicos do carregamento de instâncias de datasource.

Levantados apenas pelo loader. Problemas de campo do datasource
(nome vazio, variável obrigatória ausente, ...) nunca são exceções:
são reportados na árvore de erros do Validator.
"""


class DatasourceError(Exception):
    """Erro base do domínio de datasource."""


class DatasourcePathMissingError(DatasourceError):
    """Nenhum caminho de datasource foi informado."""


class DatasourceFileNotFoundError(DatasourceError):
    """Arquivo de datasource não existe no caminho informado."""


class UnsupportedDatasourceFormatError(DatasourceError):
    """Formato de datasource não suportado (v1: YAML/JSON)."""


class DatasourceParseError(DatasourceError):
    """Falha ao parsear YAML/JSON, arquivo vazio ou raiz não-mapeamento."""


class DatasourceStructureError(DatasourceError):
    """`inputs` ou `streams` fora da forma de lista de mapeamentos."""
