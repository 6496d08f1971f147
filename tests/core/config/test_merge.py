# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de configuração.

Os testes asseguram que:
- valores escalares são sobrescritos corretamente
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- conflitos de tipo são rejeitados explicitamente
- objetos de entrada não são mutados durante o merge
"""

import pytest

from datasource_validation.core.config.errors import ConfigTypeConflictError
from datasource_validation.core.config.merge import deep_merge


def test_merge_simple_override():
    base = {"a": 1, "b": 2}
    override = {"b": 99}
    out = deep_merge(base, override)
    assert out == {"a": 1, "b": 99}
    assert base == {"a": 1, "b": 2}
    assert override == {"b": 99}


def test_merge_nested_dict():
    base = {"validation": {"messages": {"required": "a", "invalid_format": "b"}}}
    override = {"validation": {"messages": {"required": "c"}}}
    out = deep_merge(base, override)
    assert out == {"validation": {"messages": {"required": "c", "invalid_format": "b"}}}


def test_merge_list_override_total():
    """
    Verifica que listas são sobrescritas integralmente durante o deep-merge.

    Decisões arquiteturais:
        - `structured_text_types` do override substitui a lista base
        - Não há merge elemento a elemento
    """
    base = {"validation": {"structured_text_types": ["yaml", "config"]}}
    override = {"validation": {"structured_text_types": ["yaml"]}}
    out = deep_merge(base, override)
    assert out == {"validation": {"structured_text_types": ["yaml"]}}


def test_merge_new_keys_are_added():
    out = deep_merge({"a": 1}, {"b": {"c": 2}})
    assert out == {"a": 1, "b": {"c": 2}}


def test_merge_type_conflict_raises():
    base = {"validation": {"messages": {}}}
    override = {"validation": "strict"}  # dict vs str
    with pytest.raises(ConfigTypeConflictError):
        deep_merge(base, override)


def test_merge_requires_dict_roots():
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"a": 1}, ["not", "a", "dict"])


def test_merge_conflict_reports_key_path():
    base = {"validation": {"messages": {"required": "{name} is required"}}}
    override = {"validation": {"messages": {"required": ["not", "a", "string"]}}}
    # lista substitui qualquer valor base
    assert deep_merge(base, override)["validation"]["messages"]["required"] == ["not", "a", "string"]

    with pytest.raises(ConfigTypeConflictError, match="validation.messages"):
        deep_merge(base, {"validation": {"messages": "none"}})


def test_merge_result_shares_nothing_with_inputs():
    base = {"validation": {"structured_text_types": ["yaml"]}}
    override = {"extra": {"nested": [1]}}
    out = deep_merge(base, override)
    out["validation"]["structured_text_types"].append("config")
    out["extra"]["nested"].append(2)
    assert base == {"validation": {"structured_text_types": ["yaml"]}}
    assert override == {"extra": {"nested": [1]}}
