"""
src/datasource_validation/report/report_md.py

Gerador canônico do relatório Markdown de uma validação (v1).

Regras:
- O relatório é derivado EXCLUSIVAMENTE do `ValidationRun` (ou de seu `to_dict()`).
- Não revalida, não recalcula, não acessa filesystem.
- Mesmo run => mesmo relatório (ordenação estável por caminho).

Estrutura mínima obrigatória:
# Datasource Validation Report

## Summary
## Errors
## Traceability
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple, Union

from datasource_validation.runner import ValidationRun


REQUIRED_SECTIONS: List[str] = [
    "# Datasource Validation Report",
    "## Summary",
    "## Errors",
    "## Traceability",
]


def _sorted_items(d: Any) -> List[Tuple[str, Any]]:
    if not isinstance(d, dict):
        return []
    return sorted(d.items(), key=lambda kv: kv[0])


def _as_pretty_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, sort_keys=True, indent=2)


def _escape_cell(text: str) -> str:
    return str(text).replace("|", "\\|").replace("\n", " ")


def render_validation_report(run: Union[ValidationRun, Dict[str, Any]]) -> str:
    """Gera o relatório Markdown de um run de validação."""
    data = run.to_dict() if isinstance(run, ValidationRun) else run
    if not isinstance(data, dict) or not data:
        raise ValueError("A validation run is required to render the report")

    package = data.get("package") if isinstance(data.get("package"), dict) else {}
    datasource = data.get("datasource") if isinstance(data.get("datasource"), dict) else {}
    errors = data.get("errors") if isinstance(data.get("errors"), dict) else {}
    results = data.get("results") if isinstance(data.get("results"), dict) else {}
    inputs = results.get("inputs") if isinstance(results.get("inputs"), dict) else None

    lines: List[str] = []

    lines.append("# Datasource Validation Report\n")

    lines.append("## Summary")
    lines.append(f"- **Run ID**: `{data.get('run_id', '<unknown>')}`")
    lines.append(f"- **Status**: `{data.get('status', '<unknown>')}`")
    lines.append(f"- **Fields with errors**: `{len(errors)}`")
    if inputs is None:
        lines.append("- **Inputs checked**: none (package declares no input schema)")
    else:
        checked = ", ".join(f"`{t}`" for t in inputs) or "none"
        lines.append(f"- **Inputs checked**: {checked}")
    lines.append("")

    lines.append("## Errors")
    failure = data.get("error")
    if isinstance(failure, dict) and failure:
        lines.append("Validation could not run.")
        lines.append("```json")
        lines.append(_as_pretty_json(failure))
        lines.append("```")
    elif errors:
        lines.append("| Field | Messages |")
        lines.append("|---|---|")
        for path, messages in _sorted_items(errors):
            joined = "; ".join(_escape_cell(m) for m in messages)
            lines.append(f"| `{_escape_cell(path)}` | {joined} |")
    else:
        lines.append("No errors found.")
    lines.append("")

    lines.append("## Traceability")
    lines.append(f"- **Package**: `{package.get('path')}` (sha256: `{package.get('hash')}`)")
    lines.append(f"- **Datasource**: `{datasource.get('path')}` (sha256: `{datasource.get('hash')}`)")

    content = "\n".join(lines) + "\n"

    for sec in REQUIRED_SECTIONS:
        if sec not in content:
            raise RuntimeError(f"Report generation failed: missing required section: {sec}")

    return content
