# src/datasource_validation/__init__.py
"""
datasource-validation: validação estrutural de datasources contra o schema
de um package.

Um package declara inputs, streams (via datasets) e variáveis tipadas; um
datasource é a configuração escrita pelo usuário. O validador percorre o
datasource contra o schema indexado e produz uma árvore de erros com a
mesma forma da configuração, pronta para ser exibida campo a campo.

Arquitetura em alto nível:
    - core.package    → Schema Indexer e datasource default
    - core.validation → Validator, Value Validator e Has-Errors Predicate
    - core.config     → settings do validador (mensagens, tipos YAML)
    - runner          → execução a partir de arquivos, com rastreabilidade
    - report          → relatório Markdown de um run

Invariantes:
    - A validação é uma função pura de (datasource, schema)
    - Erros de campo são dados, nunca exceções
"""
from .core.package import build_default_datasource, index_package
from .core.validation import (
    flatten_errors,
    validate_datasource,
    validate_value,
    validation_has_errors,
)
from .runner import RunStatus, ValidationRun, run_validation

__all__ = [
    "build_default_datasource",
    "index_package",
    "flatten_errors",
    "validate_datasource",
    "validate_value",
    "validation_has_errors",
    "RunStatus",
    "ValidationRun",
    "run_validation",
]

__version__ = "0.1.0"
