# src/wpstarter/__init__.py
"""
WP Starter — validação e normalização da configuração de setup.

Este pacote raiz define o namespace público do WP Starter, responsável por
transformar a configuração bruta fornecida pelo usuário (tipicamente a
seção `extra.wpstarter` do composer.json) em um objeto de configuração
sanitizado, somente leitura, consumido pelos steps de setup.

Arquitetura em alto nível:
    - core.config → validadores, registry, defaults e a configuração imutável
    - core.setup  → protocolo de step, resultados e contexto de setup
    - core.errors → payload canônico de erros

Limites explícitos:
    - Não escreve arquivos
    - Não executa steps nem orquestra o setup
    - Não realiza I/O de rede ou disco
"""
# src/wpstarter/__init__.py
from .core.config.config import Config
from .core.config.registry import ValidatorRegistry

__all__ = ["Config", "ValidatorRegistry"]
