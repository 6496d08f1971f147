"""
Builder de datasource default a partir de um package definition.

Produz a instância inicial que um formulário apresentaria ao usuário:
um input habilitado por input do template, cada variável preenchida com
seu `default` declarado e um stream por stream declarado para o input.

Regras:
- Template: o informado por nome, ou o primeiro do package
- Nome do datasource: `<package name>-1`, salvo quando informado
- Id de stream: `<input type>-<dataset name>`
- `enabled` do stream vem da definição (default True)
- Defaults são copiados (deepcopy), nunca compartilhados com o package
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Iterable, List, Optional

from .errors import PackageTemplateNotFoundError
from .indexer import streams_by_input
from .schema import VarDefinition, as_list, index_vars, opt_str


def _default_vars(var_defs: Iterable[VarDefinition]) -> Dict[str, Dict[str, Any]]:
    return {
        var.name: {"value": deepcopy(var.default), "type": var.type}
        for var in var_defs
    }


def _select_template(package: Dict[str, Any], template: Optional[str]) -> Optional[Dict[str, Any]]:
    templates = [t for t in as_list(package.get("config_templates")) if isinstance(t, dict)]
    if template is None:
        return templates[0] if templates else None
    for candidate in templates:
        if candidate.get("name") == template:
            return candidate
    raise PackageTemplateNotFoundError(f"config template not found: {template}")


def build_default_datasource(
    package: Dict[str, Any],
    *,
    template: Optional[str] = None,
    name: Optional[str] = None,
) -> Dict[str, Any]:
    """Monta um datasource default para o package.

    Args:
        package: package definition.
        template: nome do config template (default: primeiro template).
        name: nome do datasource (default: `<package name>-1`).

    Raises:
        PackageTemplateNotFoundError: se `template` não existir no package.
    """
    selected = _select_template(package, template)
    streams = streams_by_input(as_list(package.get("datasets")))

    inputs: List[Dict[str, Any]] = []
    for raw_input in as_list((selected or {}).get("inputs")):
        if not isinstance(raw_input, dict):
            continue
        input_type = opt_str(raw_input.get("type"))
        if input_type is None:
            continue

        entry: Dict[str, Any] = {"type": input_type, "enabled": True}
        input_vars = index_vars(raw_input.get("vars"))
        if input_vars:
            entry["vars"] = _default_vars(input_vars)

        entry["streams"] = []
        for stream in streams.get(input_type, []):
            stream_entry: Dict[str, Any] = {
                "id": f"{input_type}-{stream.dataset}",
                "dataset": {"name": stream.dataset},
                "enabled": stream.enabled,
            }
            if stream.vars:
                stream_entry["vars"] = _default_vars(stream.vars)
            entry["streams"].append(stream_entry)

        inputs.append(entry)

    package_name = opt_str(package.get("name")) or "datasource"
    return {
        "name": name if name is not None else f"{package_name}-1",
        "description": "",
        "package": {
            "name": package.get("name"),
            "title": package.get("title"),
            "version": package.get("version"),
        },
        "inputs": inputs,
    }
