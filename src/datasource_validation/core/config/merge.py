# src/datasource_validation/core/config/merge.py
"""
Deep-merge das camadas de configuração do validador.

Política:
    - dict sobre dict → merge recursivo por chave
    - list → substitui a lista base inteira (ex.: `structured_text_types`)
    - escalar → substitui quando o tipo coincide
    - qualquer outro encontro de tipos → `ConfigTypeConflictError`,
      com o caminho pontuado da chave (ex.: `validation.messages`)

Nenhuma das entradas é mutada; o resultado não compartilha objetos com elas.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _merge_value(base_value: Any, override_value: Any, path: str) -> Any:
    if isinstance(base_value, dict) and isinstance(override_value, dict):
        return _merge_dicts(base_value, override_value, path)
    if isinstance(override_value, list) or type(base_value) is type(override_value):
        return deepcopy(override_value)
    raise ConfigTypeConflictError(
        f"Type conflict at '{path}': "
        f"{type(base_value).__name__} in base, {type(override_value).__name__} in override"
    )


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any], path: str) -> Dict[str, Any]:
    merged: Dict[str, Any] = {}
    for key, base_value in base.items():
        if key in override:
            key_path = f"{path}.{key}" if path else str(key)
            merged[key] = _merge_value(base_value, override[key], key_path)
        else:
            merged[key] = deepcopy(base_value)
    for key, override_value in override.items():
        if key not in base:
            merged[key] = deepcopy(override_value)
    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Aplica `override` sobre `base` segundo a política do módulo.

    Args:
        base: camada inferior (ex.: `DEFAULT_CONFIG`).
        override: camada superior (arquivo de defaults ou local).

    Returns:
        Dict[str, Any]: nova configuração.

    Raises:
        ConfigTypeConflictError: raiz não-dict ou conflito de tipo em alguma chave.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requires dicts at the root, got: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )
    return _merge_dicts(base, override, "")
