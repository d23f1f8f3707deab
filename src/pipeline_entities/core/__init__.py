# src/pipeline_entities/core/__init__.py
"""
Core do modelo de entidades.

Este pacote reúne os utilitários compartilhados por Entity e File:

    - core.paths     → acesso por path textual a estruturas aninhadas
    - core.cloning   → cópia profunda dos valores que entram/saem dos stores
    - core.pipeline  → registro ordenado de getters/setters e redução
    - core.hashing   → hash canônico de propriedades computadas
    - core.config    → carregamento e merge de arquivos de configuração
    - core.errors    → hierarquia de exceções

O core não conhece File nem o valor de arquivo virtual.
"""
