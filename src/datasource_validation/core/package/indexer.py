# src/datasource_validation/core/package/indexer.py
"""
Schema Indexer: package definition -> SchemaTables.

Este módulo achata os `config_templates` e os `datasets` de um package em
tabelas explícitas de lookup por `type` de input, consumidas pelo Validator.

Regras de indexação (v1):
    - Todos os inputs de todos os templates formam uma única tabela por `type`
    - Colisão de `type` entre templates: a última declaração vence
    - Variáveis: ordem preservada, dedupe por nome (primeira vence)
    - Streams de um input: todo stream de dataset cujo `input` é o `type`,
      em ordem de declaração dos datasets
    - Datasets sem `name` não podem ser correlacionados e são ignorados

Invariantes:
    - Nunca levanta exceção (campos ausentes viram coleções vazias)
    - Package sem templates ou sem inputs produz tabelas vazias
    - O package de entrada nunca é mutado

Limites explícitos:
    - Não carrega o package do disco (ver `loader.py`)
    - Não valida semântica do package
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from datasource_validation.core.context import ValidationContext

from .schema import InputSchema, SchemaTables, StreamDefinition, as_list, opt_str, index_vars


STEP_ID = "package.index"


def streams_by_input(datasets: List[Any]) -> Dict[str, List[StreamDefinition]]:
    out: Dict[str, List[StreamDefinition]] = {}
    for dataset in datasets:
        if not isinstance(dataset, dict):
            continue
        dataset_name = opt_str(dataset.get("name"))
        if dataset_name is None:
            continue
        for raw_stream in as_list(dataset.get("streams")):
            if not isinstance(raw_stream, dict):
                continue
            input_type = opt_str(raw_stream.get("input"))
            if input_type is None:
                continue
            out.setdefault(input_type, []).append(
                StreamDefinition.from_dict(raw_stream, dataset=dataset_name)
            )
    return out


def index_package(package: Any, *, ctx: Optional[ValidationContext] = None) -> SchemaTables:
    """
    Indexa um package definition em tabelas de lookup por `type` de input.

    Args:
        package: package definition (mapeamento com `config_templates` e `datasets`).
        ctx: contexto opcional para eventos e warnings de indexação.

    Returns:
        SchemaTables: tabelas indexadas (possivelmente vazias).
    """
    if not isinstance(package, dict):
        if ctx is not None:
            ctx.add_warning(step_id=STEP_ID, message="package definition is not a mapping")
        return SchemaTables()

    streams = streams_by_input(as_list(package.get("datasets")))
    inputs: Dict[str, InputSchema] = {}

    for template in as_list(package.get("config_templates")):
        if not isinstance(template, dict):
            continue
        for raw_input in as_list(template.get("inputs")):
            if not isinstance(raw_input, dict):
                continue
            input_type = opt_str(raw_input.get("type"))
            if input_type is None:
                continue
            if input_type in inputs and ctx is not None:
                ctx.add_warning(
                    step_id=STEP_ID,
                    message=f"input type '{input_type}' declared more than once; last declaration wins",
                )
            inputs[input_type] = InputSchema(
                type=input_type,
                title=opt_str(raw_input.get("title")),
                vars=index_vars(raw_input.get("vars")),
                streams=tuple(streams.get(input_type, [])),
            )

    if ctx is not None:
        ctx.log(
            step_id=STEP_ID,
            level="INFO",
            message="package indexed",
            package=package.get("name"),
            input_types=list(inputs),
        )

    return SchemaTables(inputs=inputs)
