# src/wpstarter/core/__init__.py
"""
Core do WP Starter.

Componentes principais:
    - config → validação por chave, defaults, registry de validadores e
               configuração append-only
    - setup  → protocolo de step, contexto de setup e tipos de resultado
    - errors → payload canônico e catálogo de códigos de erro

Princípios fundamentais:
    - Configuração inválida degrada para defaults, nunca aborta o setup
    - Violações de contrato da API são erros explícitos e tipados
    - Nenhum estado global: o registry é passado por referência
"""
