"""Erros canônicos do carregamento de package definitions.

Levantados apenas pelo loader; o Indexer nunca levanta exceção.
"""


class PackageError(Exception):
    """Erro base do domínio de package definition."""


class PackagePathMissingError(PackageError):
    """Nenhum caminho de package foi informado."""


class PackageFileNotFoundError(PackageError):
    """Arquivo de package não existe no caminho informado."""


class UnsupportedPackageFormatError(PackageError):
    """Formato de package não suportado (v1: YAML/JSON)."""


class PackageParseError(PackageError):
    """Falha ao parsear YAML/JSON, arquivo vazio ou raiz não-mapeamento."""


class PackageTemplateNotFoundError(PackageError):
    """Config template solicitado não existe no package."""


class PackageStructureError(PackageError):
    """Templates, inputs, datasets ou streams fora da forma de lista de mapeamentos."""
