"""Datasource instance: carregamento a partir de arquivos."""

from .errors import (  # noqa: F401
    DatasourceError,
    DatasourceFileNotFoundError,
    DatasourceParseError,
    DatasourcePathMissingError,
    DatasourceStructureError,
    UnsupportedDatasourceFormatError,
)
from .loader import load_datasource  # noqa: F401
