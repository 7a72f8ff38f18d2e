# src/gaeenv/core/__init__.py
"""
Core do gaeenv.

Este pacote contém a implementação canônica e independente da CLI do
gaeenv: a resolução de uma árvore de documentos `app.yaml` em um conjunto
plano de variáveis de ambiente.

Componentes principais:
    - config     → parsing de documentos e exceções de parsing
    - resolution → tracker, store, política de erro, contexto e resolver
    - errors     → payload canônico e catálogo de códigos de erro
    - exceptions → exceções tipadas de resolução

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Nenhum estado global: todo estado pertence a uma run
    - Falhas são valores; apenas o ponto de entrada encerra o processo

Limites explícitos:
    - Não formata saída
    - Não depende da CLI
"""
