# src/settiload/core/__init__.py
"""
Core do SettiLoad.

Componentes principais:
    - document → readers JSON/XML/YAML e árvore genérica de documento
    - schema   → descrição de campos por tipo de estrutura (registry)
    - mapping  → mapeamento estrutural e coerção de tipos
    - loader   → orquestração: arquivo → reader → mapper → bool/exceção
    - hashing  → snapshot e fingerprint da configuração carregada

Princípios fundamentais:
    - Nenhuma decisão silenciosa: ordem de formatos e coerções são explícitas
    - Falhas são tipadas (`settiload.core.errors`)
    - Nenhum estado global mutável além do cache de schemas
"""
