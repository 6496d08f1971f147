# src/datasource_validation/core/files.py
"""
Leitura de documentos YAML/JSON compartilhada pelos loaders de package e
de datasource.

Cada domínio informa seu rótulo (`kind`) e sua família de exceções
(`FileErrors`); a leitura e o parsing são os mesmos. Regras estruturais
específicas ficam no loader de cada domínio.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Type

import yaml


_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yml": yaml.safe_load,
    ".yaml": yaml.safe_load,
    ".json": json.loads,
}


@dataclass(frozen=True)
class FileErrors:
    """Exceções levantadas por `read_mapping` para um domínio."""

    path_missing: Type[Exception]
    not_found: Type[Exception]
    unsupported: Type[Exception]
    parse: Type[Exception]


def read_mapping(path: Optional[str], *, kind: str, errors: FileErrors) -> Dict[str, Any]:
    """Lê um arquivo YAML/JSON cuja raiz deve ser um mapeamento não vazio.

    Args:
        path: caminho do arquivo; o formato vem da extensão.
        kind: rótulo usado nas mensagens (ex.: "package", "datasource").
        errors: exceções do domínio chamador.
    """
    if not path or not str(path).strip():
        raise errors.path_missing(f"{kind} path is required")

    p = Path(path)
    if not p.is_file():
        raise errors.not_found(f"{kind} file not found: {p}")

    parser = _PARSERS.get(p.suffix.lower())
    if parser is None:
        raise errors.unsupported(f"unsupported {kind} format: {p.suffix or '<none>'}")

    try:
        data = parser(p.read_text(encoding="utf-8"))
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise errors.parse(f"failed to parse {kind} {p.name}: {e}") from e

    if data is None:
        raise errors.parse(f"{kind} file is empty: {p.name}")
    if not isinstance(data, dict):
        raise errors.parse(f"{kind} root must be a mapping, got {type(data).__name__}")
    return data


def require_list_of_mappings(document: Dict[str, Any], key: str, *, kind: str, error: Type[Exception]) -> None:
    """Garante que `document[key]`, quando presente, é uma lista de mapeamentos."""
    value = document.get(key)
    if value is None:
        return
    if not isinstance(value, list):
        raise error(f"{kind}.{key} must be a list, got {type(value).__name__}")
    for i, item in enumerate(value):
        if not isinstance(item, dict):
            raise error(f"{kind}.{key}[{i}] must be a mapping, got {type(item).__name__}")
