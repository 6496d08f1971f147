# src/datasource_validation/core/validation/values.py
"""
Value Validator: valida um único valor contra sua definição de variável.

Regras (v1), avaliadas nesta ordem e mutuamente exclusivas:
    1. required + valor ausente ou string em branco → "<label> is required"
    2. tipo com sintaxe estruturada (default: `yaml`) + string não-vazia
       que não parseia → "Invalid YAML format"
    3. multi + valor presente que não é sequência → "Invalid format"
    4. required + multi + sequência vazia → "<label> is required"

Presença é explícita:
    - ausente = `None` (entrada inexistente ou `value: null`)
    - strings são comparadas após `strip()`
    - `0` e `False` são valores presentes

Invariantes:
    - Retorna `None` (sem erro) ou uma lista com exatamente uma mensagem
    - Nunca levanta exceção: falhas do parser YAML viram dado
    - Elementos de sequências `multi` não são validados
"""

from __future__ import annotations

from typing import Any, List, Optional

import yaml

from datasource_validation.core.config.settings import DEFAULT_SETTINGS, ValidationSettings
from datasource_validation.core.package.schema import VarDefinition


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


def is_present(value: Any) -> bool:
    """Um valor está presente se não é `None` nem string em branco."""
    return value is not None and not _is_blank(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def validate_value(
    value: Any,
    var_def: VarDefinition,
    *,
    settings: Optional[ValidationSettings] = None,
) -> Optional[List[str]]:
    """
    Valida um valor de variável.

    Args:
        value: valor informado na instância (`None` quando ausente).
        var_def: definição da variável no schema.
        settings: catálogo de mensagens e tipos YAML (default embutido).

    Returns:
        Optional[List[str]]: `None` quando válido, senão `[mensagem]`.
    """
    settings = settings or DEFAULT_SETTINGS
    present = is_present(value)

    if var_def.required and not present:
        return [settings.message("required", name=var_def.label)]

    parsed = value
    if present and isinstance(value, str) and settings.is_structured_text(var_def.type):
        try:
            parsed = yaml.safe_load(value)
        except yaml.YAMLError:
            return [settings.message("invalid_yaml")]

    if var_def.multi and present:
        if parsed is not None and not _is_sequence(parsed):
            return [settings.message("invalid_format")]
        if var_def.required and not parsed:
            return [settings.message("required", name=var_def.label)]

    return None
