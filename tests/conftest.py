# tests/conftest.py
"""
Fixtures compartilhados para testes do validador de datasources.

Este módulo define fixtures reutilizáveis que fornecem:
- um package definition de referência (templates + datasets)
- um datasource válido e um inválido para esse package
- a árvore de erros esperada para o datasource válido

Decisões arquiteturais:
    - Fixtures retornam estruturas novas a cada uso (sem estado compartilhado)
    - Dados são determinísticos e não dependem de filesystem
    - O package cobre todos os formatos de input relevantes:
      com vars e streams, sem nada, só com streams desabilitados,
      e com vars mas streams sem vars

Invariantes:
    - Nenhuma fixture executa validação
    - Nenhuma fixture realiza I/O
"""

import copy

import pytest


MOCK_PACKAGE = {
    "name": "mock-package",
    "title": "Mock package",
    "version": "0.0.0",
    "description": "description",
    "type": "mock",
    "datasets": [
        {
            "name": "foo",
            "streams": [
                {
                    "input": "foo",
                    "title": "Foo",
                    "vars": [{"name": "var-name", "type": "yaml"}],
                },
            ],
        },
        {
            "name": "bar",
            "streams": [
                {
                    "input": "bar",
                    "title": "Bar",
                    "vars": [{"name": "var-name", "type": "yaml", "required": True}],
                },
                {
                    "input": "with-no-stream-vars",
                    "title": "Bar stream no vars",
                    "enabled": True,
                },
            ],
        },
        {
            "name": "bar2",
            "streams": [
                {
                    "input": "bar",
                    "title": "Bar 2",
                    "vars": [{"default": "bar2-var-value", "name": "var-name", "type": "text"}],
                },
            ],
        },
        {
            "name": "disabled",
            "streams": [
                {
                    "input": "with-disabled-streams",
                    "title": "Disabled",
                    "enabled": False,
                    "vars": [{"multi": True, "required": True, "name": "var-name", "type": "text"}],
                },
            ],
        },
        {
            "name": "disabled2",
            "streams": [
                {
                    "input": "with-disabled-streams",
                    "title": "Disabled 2",
                    "enabled": False,
                },
            ],
        },
    ],
    "config_templates": [
        {
            "name": "datasource1",
            "title": "Datasource 1",
            "description": "test datasource",
            "inputs": [
                {
                    "type": "foo",
                    "title": "Foo",
                    "vars": [
                        {"default": "foo-input-var-value", "name": "foo-input-var-name", "type": "text"},
                        {
                            "default": "foo-input2-var-value",
                            "name": "foo-input2-var-name",
                            "required": True,
                            "type": "text",
                        },
                        {"name": "foo-input3-var-name", "type": "text", "required": True, "multi": True},
                    ],
                },
                {
                    "type": "bar",
                    "title": "Bar",
                    "vars": [
                        {
                            "default": ["value1", "value2"],
                            "name": "bar-input-var-name",
                            "type": "text",
                            "multi": True,
                        },
                        {"name": "bar-input2-var-name", "required": True, "type": "text"},
                    ],
                },
                {
                    "type": "with-no-config-or-streams",
                    "title": "With no config or streams",
                },
                {
                    "type": "with-disabled-streams",
                    "title": "With disabled streams",
                },
                {
                    "type": "with-no-stream-vars",
                    "enabled": True,
                    "vars": [{"required": True, "name": "var-name", "type": "text"}],
                },
            ],
        },
    ],
}


VALID_DATASOURCE = {
    "name": "datasource1-1",
    "config_id": "test-config",
    "enabled": True,
    "output_id": "test-output",
    "inputs": [
        {
            "type": "foo",
            "enabled": True,
            "vars": {
                "foo-input-var-name": {"value": "foo-input-var-value", "type": "text"},
                "foo-input2-var-name": {"value": "foo-input2-var-value", "type": "text"},
                "foo-input3-var-name": {"value": ["test"], "type": "text"},
            },
            "streams": [
                {
                    "id": "foo-foo",
                    "dataset": {"name": "foo", "type": "logs"},
                    "enabled": True,
                    "vars": {"var-name": {"value": "test_yaml: value", "type": "yaml"}},
                },
            ],
        },
        {
            "type": "bar",
            "enabled": True,
            "vars": {
                "bar-input-var-name": {"value": ["value1", "value2"], "type": "text"},
                "bar-input2-var-name": {"value": "test", "type": "text"},
            },
            "streams": [
                {
                    "id": "bar-bar",
                    "dataset": {"name": "bar", "type": "logs"},
                    "enabled": True,
                    "vars": {"var-name": {"value": "test_yaml: value", "type": "yaml"}},
                },
                {
                    "id": "bar-bar2",
                    "dataset": {"name": "bar2", "type": "logs"},
                    "enabled": True,
                    "vars": {"var-name": {"value": None, "type": "text"}},
                },
            ],
        },
        {
            "type": "with-no-config-or-streams",
            "enabled": True,
            "streams": [],
        },
        {
            "type": "with-disabled-streams",
            "enabled": True,
            "streams": [
                {
                    "id": "with-disabled-streams-disabled",
                    "dataset": {"name": "disabled", "type": "logs"},
                    "enabled": False,
                    "vars": {"var-name": {"value": None, "type": "text"}},
                },
                {
                    "id": "with-disabled-streams-disabled-without-vars",
                    "dataset": {"name": "disabled2", "type": "logs"},
                    "enabled": False,
                },
            ],
        },
        {
            "type": "with-no-stream-vars",
            "enabled": True,
            "vars": {"var-name": {"value": "test", "type": "text"}},
            "streams": [
                {
                    "id": "with-no-stream-vars-bar",
                    "dataset": {"name": "bar", "type": "logs"},
                    "enabled": True,
                },
            ],
        },
    ],
}


INVALID_INPUTS = [
    {
        "type": "foo",
        "enabled": True,
        "vars": {
            "foo-input-var-name": {"value": None, "type": "text"},
            "foo-input2-var-name": {"value": "", "type": "text"},
            "foo-input3-var-name": {"value": [], "type": "text"},
        },
        "streams": [
            {
                "id": "foo-foo",
                "dataset": {"name": "foo", "type": "logs"},
                "enabled": True,
                "vars": {"var-name": {"value": "invalidyaml: test\n foo bar:", "type": "yaml"}},
            },
        ],
    },
    {
        "type": "bar",
        "enabled": True,
        "vars": {
            "bar-input-var-name": {"value": "invalid value for multi", "type": "text"},
            "bar-input2-var-name": {"value": None, "type": "text"},
        },
        "streams": [
            {
                "id": "bar-bar",
                "dataset": {"name": "bar", "type": "logs"},
                "enabled": True,
                "vars": {"var-name": {"value": "    \n\n", "type": "yaml"}},
            },
            {
                "id": "bar-bar2",
                "dataset": {"name": "bar2", "type": "logs"},
                "enabled": True,
                "vars": {"var-name": {"value": None, "type": "text"}},
            },
        ],
    },
    {
        "type": "with-no-config-or-streams",
        "enabled": True,
        "streams": [],
    },
    {
        "type": "with-disabled-streams",
        "enabled": True,
        "streams": [
            {
                "id": "with-disabled-streams-disabled",
                "dataset": {"name": "disabled", "type": "logs"},
                "enabled": False,
                "vars": {
                    "var-name": {
                        "value": "invalid value but not checked due to not enabled",
                        "type": "text",
                    },
                },
            },
            {
                "id": "with-disabled-streams-disabled-without-vars",
                "dataset": {"name": "disabled2", "type": "logs"},
                "enabled": False,
            },
        ],
    },
    {
        "type": "with-no-stream-vars",
        "enabled": True,
        "vars": {"var-name": {"value": None, "type": "text"}},
        "streams": [
            {
                "id": "with-no-stream-vars-bar",
                "dataset": {"name": "bar", "type": "logs"},
                "enabled": True,
            },
        ],
    },
]


@pytest.fixture
def mock_package() -> dict:
    """
    Package definition de referência.

    Inputs declarados:
        - foo: 3 vars (uma required, uma required+multi) e stream `foo` (yaml)
        - bar: 2 vars (multi, required) e streams `bar` (yaml required) e `bar2`
        - with-no-config-or-streams: nada declarado
        - with-disabled-streams: apenas streams desabilitados na definição
        - with-no-stream-vars: 1 var required e stream `bar` sem vars

    Returns:
        dict: cópia independente do package.
    """
    return copy.deepcopy(MOCK_PACKAGE)


@pytest.fixture
def valid_datasource() -> dict:
    """Datasource sem nenhum erro para `mock_package`."""
    return copy.deepcopy(VALID_DATASOURCE)


@pytest.fixture
def invalid_datasource() -> dict:
    """
    Datasource com nome vazio e erros em todos os níveis verificáveis:
    required ausente/vazio, YAML inválido, formato multi inválido.
    """
    ds = copy.deepcopy(VALID_DATASOURCE)
    ds["name"] = ""
    ds["inputs"] = copy.deepcopy(INVALID_INPUTS)
    return ds
