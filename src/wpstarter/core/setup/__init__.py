# src/wpstarter/core/setup/__init__.py
"""
# Setup Core — WP Starter

Este pacote define os **contratos** entre a configuração validada e os
steps de setup, que são colaboradores externos.

## Componentes

- **types**
  - `StepStatus`: estados finais de execução
  - `StepResult`: resultado imutável da execução de um step

- **step**
  - `SetupStep` (Protocol): capacidade mínima exigida de um step customizado

- **context**
  - `SetupContext`: configuração, caminhos, eventos de log e warnings da run

## Limites Explícitos

- Não executa nem ordena steps
- Não escreve arquivos
"""
