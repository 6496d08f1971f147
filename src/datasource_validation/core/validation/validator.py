# src/datasource_validation/core/validation/validator.py
"""
Validator: datasource instance + schema -> árvore de erros.

Percorre a instância de cima para baixo:
    datasource → inputs → streams → variáveis

Forma da árvore (v1):

    {
        "name": None | [msg],
        "description": None,
        "inputs": None | {
            "<input type>": {
                "vars": {"<var>": None | [msg], ...},        # opcional
                "streams": {                                  # opcional
                    "<stream id>": {"vars": {...}} | {},
                },
            },
        },
    }

Regras de travessia:
    - `inputs` é None quando o schema não declara nenhum input
    - Inputs de `type` desconhecido pelo schema são ignorados
    - `vars` de input só existe quando o input está habilitado e a
      definição declara variáveis
    - Streams só entram quando `dataset.name` resolve para um stream
      declarado sob o `type` do input
    - `vars` de stream só existe quando input, stream e definição do
      stream estão habilitados e a definição declara variáveis
    - Toda variável declarada e verificada tem entrada (None ou [msg])

Invariantes:
    - Função pura: nenhuma entrada é mutada, nada é compartilhado entre chamadas
    - Nunca levanta exceção para dados malformados
    - O contexto (quando informado) recebe apenas eventos e warnings
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from datasource_validation.core.config.settings import DEFAULT_SETTINGS, ValidationSettings
from datasource_validation.core.context import ValidationContext
from datasource_validation.core.package.indexer import index_package
from datasource_validation.core.package.schema import (
    InputSchema,
    SchemaTables,
    VarDefinition,
    as_list,
)

from .values import validate_value


STEP_ID = "datasource.validate"

ErrorList = Optional[List[str]]
VarsResult = Dict[str, ErrorList]
ConfigResult = Dict[str, Any]
DatasourceResult = Dict[str, Any]


def _is_enabled(raw: Dict[str, Any]) -> bool:
    # flag ausente = habilitado; apenas `False` explícito desabilita
    return raw.get("enabled", True) is not False


def _entry_value(entry: Any) -> Any:
    if isinstance(entry, dict):
        return entry.get("value")
    return None


def _validate_name(name: Any, settings: ValidationSettings) -> ErrorList:
    if not isinstance(name, str) or not name.strip():
        return [settings.message("name_required")]
    return None


def _validate_vars(
    raw_vars: Any,
    var_defs: Iterable[VarDefinition],
    *,
    settings: ValidationSettings,
    ctx: Optional[ValidationContext],
    where: str,
) -> VarsResult:
    entries = raw_vars if isinstance(raw_vars, dict) else {}
    results: VarsResult = {}
    for var in var_defs:
        results[var.name] = validate_value(_entry_value(entries.get(var.name)), var, settings=settings)

    if ctx is not None:
        for name in entries:
            if name not in results:
                ctx.add_warning(step_id=STEP_ID, message=f"{where}: undeclared var '{name}' ignored")

    return results


def _stream_id(raw_stream: Dict[str, Any], input_type: str, dataset_name: str) -> str:
    stream_id = raw_stream.get("id")
    if isinstance(stream_id, str) and stream_id:
        return stream_id
    return f"{input_type}-{dataset_name}"


def _validate_input(
    raw_input: Dict[str, Any],
    schema: InputSchema,
    *,
    settings: ValidationSettings,
    ctx: Optional[ValidationContext],
) -> ConfigResult:
    input_enabled = _is_enabled(raw_input)
    result: ConfigResult = {}

    if input_enabled and schema.vars:
        result["vars"] = _validate_vars(
            raw_input.get("vars"),
            schema.vars,
            settings=settings,
            ctx=ctx,
            where=f"inputs.{schema.type}",
        )

    streams: Dict[str, ConfigResult] = {}
    for raw_stream in as_list(raw_input.get("streams")):
        if not isinstance(raw_stream, dict):
            continue
        dataset = raw_stream.get("dataset")
        dataset_name = dataset.get("name") if isinstance(dataset, dict) else None
        stream_def = schema.stream_for(dataset_name)
        if stream_def is None:
            if ctx is not None:
                ctx.log(
                    step_id=STEP_ID,
                    level="DEBUG",
                    message="stream skipped: dataset not declared for input",
                    input_type=schema.type,
                    dataset=dataset_name,
                )
            continue

        stream_id = _stream_id(raw_stream, schema.type, stream_def.dataset)
        stream_result: ConfigResult = {}
        if input_enabled and _is_enabled(raw_stream) and stream_def.enabled and stream_def.vars:
            stream_result["vars"] = _validate_vars(
                raw_stream.get("vars"),
                stream_def.vars,
                settings=settings,
                ctx=ctx,
                where=f"inputs.{schema.type}.streams.{stream_id}",
            )
        streams[stream_id] = stream_result

    if streams:
        result["streams"] = streams

    return result


def validate_datasource(
    datasource: Any,
    schema: Union[SchemaTables, Dict[str, Any], None],
    *,
    settings: Optional[ValidationSettings] = None,
    ctx: Optional[ValidationContext] = None,
) -> DatasourceResult:
    """
    Valida uma instância de datasource contra o schema de um package.

    Args:
        datasource: instância de datasource (mapeamento).
        schema: `SchemaTables` já indexadas ou o package definition bruto
            (indexado nesta chamada).
        settings: catálogo de mensagens e tipos YAML (default embutido).
        ctx: contexto opcional para eventos e warnings.

    Returns:
        DatasourceResult: árvore de erros `{name, description, inputs}`.
    """
    settings = settings or DEFAULT_SETTINGS
    tables = schema if isinstance(schema, SchemaTables) else index_package(schema, ctx=ctx)
    instance = datasource if isinstance(datasource, dict) else {}

    results: DatasourceResult = {
        "name": _validate_name(instance.get("name"), settings),
        "description": None,
        "inputs": None,
    }

    if tables.is_empty:
        if ctx is not None:
            ctx.log(step_id=STEP_ID, level="INFO", message="no input schema; inputs not validated")
        return results

    inputs: Dict[str, ConfigResult] = {}
    for raw_input in as_list(instance.get("inputs")):
        if not isinstance(raw_input, dict):
            continue
        input_schema = tables.get(raw_input.get("type"))
        if input_schema is None:
            if ctx is not None:
                ctx.log(
                    step_id=STEP_ID,
                    level="DEBUG",
                    message="input skipped: type not declared in package",
                    input_type=raw_input.get("type"),
                )
            continue
        inputs[input_schema.type] = _validate_input(raw_input, input_schema, settings=settings, ctx=ctx)

    results["inputs"] = inputs

    if ctx is not None:
        ctx.log(
            step_id=STEP_ID,
            level="INFO",
            message="datasource validated",
            inputs_checked=list(inputs),
        )

    return results
