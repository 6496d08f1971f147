"""Relatórios derivados de um run de validação."""

from .report_md import REQUIRED_SECTIONS, render_validation_report  # noqa: F401
