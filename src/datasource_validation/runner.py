# src/datasource_validation/runner.py
"""
Execução canônica de uma validação a partir de arquivos.

Responsabilidades:
- materializar settings a partir da configuração resolvida
- carregar package definition e datasource (YAML/JSON)
- indexar o package e validar o datasource
- produzir um `ValidationRun` rastreável (status + árvore + hashes)

Falhas de carregamento e de configuração nunca são levantadas para o
chamador: viram `ValidationErrorPayload` com status FAILED, no padrão
"decision required" (o operador corrige o arquivo, sem autocorreção).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import uuid4

from datasource_validation.core.config.errors import ConfigError
from datasource_validation.core.config.hashing import compute_config_hash
from datasource_validation.core.config.settings import DEFAULT_SETTINGS, ValidationSettings
from datasource_validation.core.context import ValidationContext
from datasource_validation.core.datasource.errors import (
    DatasourceError,
    DatasourceFileNotFoundError,
    DatasourcePathMissingError,
)
from datasource_validation.core.datasource.loader import load_datasource
from datasource_validation.core.errors import (
    DATASOURCE_INVALID,
    DATASOURCE_NOT_FOUND,
    PACKAGE_INVALID,
    PACKAGE_NOT_FOUND,
    configuration_failure,
    load_failure,
)
from datasource_validation.core.package.errors import (
    PackageError,
    PackageFileNotFoundError,
    PackagePathMissingError,
)
from datasource_validation.core.package.indexer import index_package
from datasource_validation.core.package.loader import load_package
from datasource_validation.core.validation.flatten import flatten_errors
from datasource_validation.core.validation.predicates import datasource_has_errors
from datasource_validation.core.validation.validator import validate_datasource


STEP_ID = "validation.run"


class RunStatus(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass
class ValidationRun:
    """Resultado de uma execução de validação."""

    run_id: str
    status: RunStatus
    package_path: Optional[str]
    datasource_path: Optional[str]
    results: Optional[Dict[str, Any]] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)
    package_hash: Optional[str] = None
    datasource_hash: Optional[str] = None
    error: Optional[Dict[str, Any]] = None

    @property
    def has_errors(self) -> bool:
        return self.status is not RunStatus.VALID

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "status": self.status.value,
            "package": {"path": self.package_path, "hash": self.package_hash},
            "datasource": {"path": self.datasource_path, "hash": self.datasource_hash},
            "results": self.results,
            "errors": {path: list(msgs) for path, msgs in self.errors.items()},
            "error": self.error,
        }


def run_validation(
    *,
    package_path: Optional[str],
    datasource_path: Optional[str],
    config: Optional[Dict[str, Any]] = None,
    ctx: Optional[ValidationContext] = None,
) -> ValidationRun:
    """Carrega, indexa e valida; nunca levanta exceção de carregamento.

    Args:
        package_path: arquivo YAML/JSON do package definition.
        datasource_path: arquivo YAML/JSON do datasource.
        config: configuração resolvida (ver `load_config`); None usa os defaults.
        ctx: contexto opcional; criado quando ausente.
    """
    ctx = ctx or ValidationContext(run_id=uuid4().hex)
    run = ValidationRun(
        run_id=ctx.run_id,
        status=RunStatus.FAILED,
        package_path=package_path,
        datasource_path=datasource_path,
    )

    try:
        settings = ValidationSettings.from_config(config) if config is not None else DEFAULT_SETTINGS
    except ConfigError as e:
        run.error = configuration_failure(
            message=str(e) or "invalid validator configuration",
            exception_class=e.__class__.__name__,
        ).to_dict()
        ctx.log(step_id=STEP_ID, level="ERROR", message=run.error["message"])
        return run

    try:
        package = load_package(path=package_path)
    except PackageError as e:
        not_found = isinstance(e, (PackageFileNotFoundError, PackagePathMissingError))
        run.error = load_failure(
            error_type=PACKAGE_NOT_FOUND if not_found else PACKAGE_INVALID,
            message=str(e) or "failed to load package",
            path=package_path,
            exception_class=e.__class__.__name__,
            hint="Check the package path and its YAML/JSON syntax",
        ).to_dict()
        ctx.log(step_id=STEP_ID, level="ERROR", message=run.error["message"])
        return run

    try:
        datasource = load_datasource(path=datasource_path)
    except DatasourceError as e:
        not_found = isinstance(e, (DatasourceFileNotFoundError, DatasourcePathMissingError))
        run.error = load_failure(
            error_type=DATASOURCE_NOT_FOUND if not_found else DATASOURCE_INVALID,
            message=str(e) or "failed to load datasource",
            path=datasource_path,
            exception_class=e.__class__.__name__,
            hint="Check the datasource path and its YAML/JSON syntax",
        ).to_dict()
        ctx.log(step_id=STEP_ID, level="ERROR", message=run.error["message"])
        return run

    run.package_hash = compute_config_hash(package)
    run.datasource_hash = compute_config_hash(datasource)

    tables = index_package(package, ctx=ctx)
    run.results = validate_datasource(datasource, tables, settings=settings, ctx=ctx)
    run.errors = flatten_errors(run.results)
    run.status = RunStatus.INVALID if datasource_has_errors(run.results) else RunStatus.VALID

    ctx.log(
        step_id=STEP_ID,
        level="INFO",
        message="validation finished",
        status=run.status.value,
        errors_count=len(run.errors),
    )
    return run
