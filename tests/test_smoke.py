# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do gaeenv.

Este módulo contém testes mínimos cujo único objetivo é garantir que:
- o pacote é importável
- a API pública declarada em `__all__` existe

Limites explícitos:
    - Não testar lógica de resolução
    - Não evoluir para testes unitários ou de integração
"""


def test_smoke():
    """
    Smoke test mínimo do pacote.

    Garante feedback imediato em CI antes mesmo dos testes de domínio.
    """
    import gaeenv

    for name in gaeenv.__all__:
        assert hasattr(gaeenv, name), name
