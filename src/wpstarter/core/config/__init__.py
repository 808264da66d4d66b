# src/wpstarter/core/config/__init__.py

"""
Camada de configuração do WP Starter.

Este pacote contém as estruturas responsáveis por validar, normalizar e
expor a configuração de setup.

A configuração no WP Starter é:
    - validada chave a chave por funções puras
    - tolerante: valores inválidos caem para o default
    - append-only depois de construída

Responsabilidades do pacote:
    - Tabela de validadores por chave (`registry`)
    - Defaults fixos (`defaults`)
    - Validadores primitivos e específicos (`validators`)
    - Objeto de configuração imutável (`config`)
    - Parsing de texto YAML/JSON em memória (`loader`)

Invariantes:
    - `wp-version` nunca passa por validadores nem regras cruzadas
    - Uma chave definida nunca é sobrescrita ou removida

Limites explícitos:
    - Não lê arquivos do disco
    - Não executa steps
"""
