# src/datasource_validation/core/config/errors.py
"""
Exceções canônicas da camada de configuração do validador de datasources.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, validação estrutural e resolução das settings do validador
(catálogo de mensagens, tipos com sintaxe estruturada).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais de configuração são tratados como falhas fatais
    - O core de validação nunca levanta estas exceções

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`

Limites explícitos:
    - Não representa erros de campo de um datasource (estes são dados)
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do validador.

    Todas as exceções levantadas durante carregamento e resolução de
    configuração devem herdar desta classe.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de defaults foi informado
    explicitamente, mas não existe no caminho especificado.

    Decisões arquiteturais:
        - Um defaults informado é obrigatório
        - Os defaults embutidos só são usados sozinhos quando nenhum
          arquivo é informado
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"validation": {"messages": {...}}}
        - override: {"validation": "strict"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(ConfigError):
    """
    Exceção levantada quando a seção `validation` da configuração resolvida
    possui valores com tipo incompatível (ex.: mensagem não-string).
    """
