"""
Has-Errors Predicate sobre a árvore de erros.

Cada nível da árvore tem forma fixa e seu próprio predicado:
    - vars map:   {"<var>": None | [msg]}
    - composite:  {"vars"?: vars map, "streams"?: {"<id>": composite}}
    - datasource: {"name", "description", "inputs": None | {"<type>": composite}}

`validation_has_errors` apenas escolhe o predicado pela forma do resultado.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

_COMPOSITE_KEYS = {"vars", "streams"}
_DATASOURCE_KEYS = {"name", "description", "inputs"}


def vars_have_errors(vars_map: Optional[Dict[str, Any]]) -> bool:
    if not vars_map:
        return False
    return any(bool(errors) for errors in vars_map.values())


def config_has_errors(result: Optional[Dict[str, Any]]) -> bool:
    """Input ou stream: erros nas próprias `vars` ou em qualquer stream aninhado."""
    if not result:
        return False
    if vars_have_errors(result.get("vars")):
        return True
    streams = result.get("streams") or {}
    return any(config_has_errors(stream) for stream in streams.values())


def datasource_has_errors(result: Optional[Dict[str, Any]]) -> bool:
    if not result:
        return False
    if result.get("name") or result.get("description"):
        return True
    inputs = result.get("inputs")
    if not isinstance(inputs, dict):
        return False
    return any(config_has_errors(input_result) for input_result in inputs.values())


def _is_datasource_result(result: Dict[str, Any]) -> bool:
    return (
        set(result) == _DATASOURCE_KEYS
        and (result["inputs"] is None or isinstance(result["inputs"], dict))
    )


def _is_composite_result(result: Dict[str, Any]) -> bool:
    return set(result) <= _COMPOSITE_KEYS and all(
        value is None or isinstance(value, dict) for value in result.values()
    )


def validation_has_errors(result: Optional[Dict[str, Any]]) -> bool:
    """Verifica erros em qualquer nível da árvore (datasource, input/stream ou vars map)."""
    if not isinstance(result, dict) or not result:
        return False
    if _is_datasource_result(result):
        return datasource_has_errors(result)
    if _is_composite_result(result):
        return config_has_errors(result)
    return vars_have_errors(result)
