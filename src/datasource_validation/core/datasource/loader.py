"""Loader de instâncias de datasource (YAML/JSON).

Só o esqueleto é verificado: `inputs` e, dentro de cada input,
`streams` precisam ser listas de mapeamentos quando presentes. Valores
de variáveis e flags ficam para o Validator, que os reporta como dados.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from datasource_validation.core.files import FileErrors, read_mapping, require_list_of_mappings

from .errors import (
    DatasourceFileNotFoundError,
    DatasourceParseError,
    DatasourcePathMissingError,
    DatasourceStructureError,
    UnsupportedDatasourceFormatError,
)


_ERRORS = FileErrors(
    path_missing=DatasourcePathMissingError,
    not_found=DatasourceFileNotFoundError,
    unsupported=UnsupportedDatasourceFormatError,
    parse=DatasourceParseError,
)


def load_datasource(*, path: Optional[str]) -> Dict[str, Any]:
    """Carrega um datasource.

    Raises:
        DatasourcePathMissingError: se path estiver ausente.
        DatasourceFileNotFoundError: se arquivo não existir.
        UnsupportedDatasourceFormatError: se extensão não suportada.
        DatasourceParseError: se parsing falhar ou a raiz não for mapeamento.
        DatasourceStructureError: se inputs/streams não forem listas de mapeamentos.
    """
    datasource = read_mapping(path, kind="datasource", errors=_ERRORS)

    require_list_of_mappings(datasource, "inputs", kind="datasource", error=DatasourceStructureError)
    for i, raw_input in enumerate(datasource.get("inputs") or []):
        where = f"inputs[{raw_input.get('type', i)}]"
        require_list_of_mappings(raw_input, "streams", kind=where, error=DatasourceStructureError)

    return datasource
