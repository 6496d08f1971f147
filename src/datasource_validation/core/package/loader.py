"""Loader de package definition (YAML/JSON).

Além da leitura, verifica o esqueleto que o Indexer percorre:
`config_templates[].inputs[]` e `datasets[].streams[]` precisam ser
listas de mapeamentos quando presentes. O conteúdo de cada item
(vars, flags, títulos) não é verificado aqui.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from datasource_validation.core.files import FileErrors, read_mapping, require_list_of_mappings

from .errors import (
    PackageFileNotFoundError,
    PackageParseError,
    PackagePathMissingError,
    PackageStructureError,
    UnsupportedPackageFormatError,
)


_ERRORS = FileErrors(
    path_missing=PackagePathMissingError,
    not_found=PackageFileNotFoundError,
    unsupported=UnsupportedPackageFormatError,
    parse=PackageParseError,
)


def load_package(*, path: Optional[str]) -> Dict[str, Any]:
    """Carrega um package definition.

    Raises:
        PackagePathMissingError: se path estiver ausente.
        PackageFileNotFoundError: se arquivo não existir.
        UnsupportedPackageFormatError: se extensão não suportada.
        PackageParseError: se parsing falhar ou a raiz não for mapeamento.
        PackageStructureError: se templates/datasets não tiverem a forma esperada.
    """
    package = read_mapping(path, kind="package", errors=_ERRORS)

    require_list_of_mappings(package, "config_templates", kind="package", error=PackageStructureError)
    require_list_of_mappings(package, "datasets", kind="package", error=PackageStructureError)

    for template in package.get("config_templates") or []:
        name = template.get("name", "?")
        require_list_of_mappings(template, "inputs", kind=f"config_templates[{name}]", error=PackageStructureError)
    for dataset in package.get("datasets") or []:
        name = dataset.get("name", "?")
        require_list_of_mappings(dataset, "streams", kind=f"datasets[{name}]", error=PackageStructureError)

    return package
