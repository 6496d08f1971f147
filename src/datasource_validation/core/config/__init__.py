# src/datasource_validation/core/config/__init__.py
"""
Camada de configuração do validador de datasources.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Materialização das settings do validador (mensagens, tipos YAML)
    - Hash canônico para rastreabilidade

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash  # noqa: F401
from .loader import DEFAULT_CONFIG, load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .settings import DEFAULT_SETTINGS, ValidationSettings  # noqa: F401
