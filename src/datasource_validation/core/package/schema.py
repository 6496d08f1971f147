"""
Tipos canônicos do schema indexado de um package.

O package definition chega como mapeamento solto (YAML/JSON). Estes tipos
são a forma explícita e imutável que o Validator consome: definições de
variável, de stream e de input, mais as tabelas de lookup por `type`.

Nenhum destes construtores levanta exceção para campos opcionais
ausentes ou malformados: o default é sempre uma coleção vazia.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple


def as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def opt_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


@dataclass(frozen=True)
class VarDefinition:
    """Variável declarada no schema (input-level ou stream-level)."""

    name: str
    type: Optional[str] = None
    required: bool = False
    multi: bool = False
    default: Any = None
    title: Optional[str] = None

    @property
    def label(self) -> str:
        # mensagens de required usam o título quando declarado
        return self.title or self.name

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["VarDefinition"]:
        if not isinstance(raw, dict):
            return None
        name = opt_str(raw.get("name"))
        if name is None:
            return None
        return cls(
            name=name,
            type=opt_str(raw.get("type")),
            required=raw.get("required") is True,
            multi=raw.get("multi") is True,
            default=raw.get("default"),
            title=opt_str(raw.get("title")),
        )


def index_vars(raw_vars: Any) -> Tuple[VarDefinition, ...]:
    """Normaliza uma lista de variáveis: ordem preservada, dedupe por nome (primeira vence)."""
    seen = set()
    out: List[VarDefinition] = []
    for raw in as_list(raw_vars):
        var = VarDefinition.from_dict(raw)
        if var is None or var.name in seen:
            continue
        seen.add(var.name)
        out.append(var)
    return tuple(out)


@dataclass(frozen=True)
class StreamDefinition:
    """Stream declarado em um dataset, associado a um input por `input`."""

    input: str
    dataset: str
    title: Optional[str] = None
    enabled: bool = True
    vars: Tuple[VarDefinition, ...] = ()

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], *, dataset: str) -> "StreamDefinition":
        return cls(
            input=str(raw.get("input")),
            dataset=dataset,
            title=opt_str(raw.get("title")),
            enabled=raw.get("enabled", True) is not False,
            vars=index_vars(raw.get("vars")),
        )


@dataclass(frozen=True)
class InputSchema:
    """Input indexado: variáveis de topo + streams declarados para o `type`."""

    type: str
    title: Optional[str] = None
    vars: Tuple[VarDefinition, ...] = ()
    streams: Tuple[StreamDefinition, ...] = ()

    def stream_for(self, dataset_name: Any) -> Optional[StreamDefinition]:
        for stream in self.streams:
            if stream.dataset == dataset_name:
                return stream
        return None


@dataclass(frozen=True)
class SchemaTables:
    """Tabelas de lookup do schema, chaveadas por `type` de input (ordem de declaração)."""

    inputs: Dict[str, InputSchema] = field(default_factory=dict)

    def __contains__(self, input_type: object) -> bool:
        return input_type in self.inputs

    def __iter__(self) -> Iterator[str]:
        return iter(self.inputs)

    def __len__(self) -> int:
        return len(self.inputs)

    def get(self, input_type: Any) -> Optional[InputSchema]:
        if not isinstance(input_type, str):
            return None
        return self.inputs.get(input_type)

    @property
    def is_empty(self) -> bool:
        return not self.inputs
