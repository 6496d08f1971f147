"""Achata a árvore de erros em caminhos pontuados.

    {"inputs": {"foo": {"vars": {"x": ["x is required"]}}}}
    -> {"inputs.foo.vars.x": ["x is required"]}

Apenas folhas com erro entram no resultado; a ordem segue a árvore.
"""

from __future__ import annotations

from typing import Any, Dict, List


def flatten_errors(result: Any, prefix: str = "") -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {}
    if not isinstance(result, dict):
        return out
    for key, value in result.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            out.update(flatten_errors(value, path))
        elif isinstance(value, list) and value:
            out[path] = list(value)
    return out


def count_errors(result: Any) -> int:
    return sum(len(messages) for messages in flatten_errors(result).values())
