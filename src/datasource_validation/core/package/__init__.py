"""Package definition: carregamento, indexação e datasource default.

Componentes canônicos:
 - loader (YAML/JSON)
 - Schema Indexer (`index_package`)
 - tipos do schema indexado
 - builder de datasource default
"""

from .errors import (  # noqa: F401
    PackageError,
    PackageFileNotFoundError,
    PackageParseError,
    PackagePathMissingError,
    PackageStructureError,
    PackageTemplateNotFoundError,
    UnsupportedPackageFormatError,
)

from .defaults import build_default_datasource  # noqa: F401
from .indexer import index_package  # noqa: F401
from .loader import load_package  # noqa: F401
from .schema import InputSchema, SchemaTables, StreamDefinition, VarDefinition  # noqa: F401
