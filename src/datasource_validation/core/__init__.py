# src/datasource_validation/core/__init__.py
"""
Core do validador de datasources.

Este pacote reúne as responsabilidades essenciais:
    - config     → carregamento, merge e settings do validador
    - package    → carregamento e indexação do package definition
    - datasource → carregamento da instância a validar
    - validation → Value Validator, Validator e predicados de erro

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de dependências de UI ou de I/O de rede

Limites explícitos:
    - Não renderiza formulários
    - Não persiste nem submete datasources
"""
