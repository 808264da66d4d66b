# src/wpstarter/core/config/validators.py
"""
Validadores canônicos da configuração de setup.

Este módulo reúne as funções puras que convertem valores brutos da
configuração do usuário em valores validados.

Política de validação (v1):
    - Todo validador recebe um valor bruto e retorna o valor validado
    - `None` significa "sem override": o default (ou a omissão) prevalece
    - Validadores nunca levantam exceções

Validadores primitivos:
    - validate_bool              → booleanos em várias grafias
    - validate_bool_or_ask       → booleano ou sentinela "ask"
    - validate_bool_or_ask_or_url → booleano, "ask" ou URL sanitizada
    - validate_int               → inteiros e strings numéricas
    - validate_url / validate_path → sanitização de caracteres

Validadores por chave:
    - validate_gitignore, validate_overwrite, validate_verbosity,
      validate_path_array, validate_content_dev_operation,
      validate_steps, validate_scripts

Limites explícitos:
    - Não conhece defaults nem regras entre chaves
    - Não acessa disco ou rede
"""

from __future__ import annotations

import importlib
import math
import re
import string
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from ..setup.step import SetupStep

Validator = Callable[[Any], Any]

ASK = "ask"
ASK_ALIASES = frozenset({"ask", "prompt", "query", "interrogate", "demand"})

HARD = "hard"
CONTENT_DEV_OPERATIONS = ("symlink", "copy")
SCRIPT_PREFIXES = ("pre-", "post-")
GITIGNORE_FLAGS = ("wp", "wp-content", "vendor", "common")

_BOOL_STRINGS = {
    "true": True,
    "false": False,
    "1": True,
    "0": False,
    "yes": True,
    "no": False,
    "on": True,
    "off": False,
}

# letras, dígitos e $-_.+!*'(),{}|\^~[]`<>#%";/?:@&=
_URL_SAFE_CHARS = frozenset(
    string.ascii_letters + string.digits + "$-_.+!*'(),{}|\\^~[]`<>#%\";/?:@&="
)

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)


# -----------------------------
# Primitivos
# -----------------------------
def _is_boolean_literal(value: Any) -> bool:
    """Comparação estrita com as formas literais aceitas (sem normalizar caixa)."""
    if isinstance(value, bool):
        return True
    if isinstance(value, int):
        return value in (0, 1)
    return isinstance(value, str) and value in _BOOL_STRINGS


def _sanitize_url(value: str) -> str:
    return "".join(ch for ch in value if ch in _URL_SAFE_CHARS)


def validate_bool(value: Any) -> Optional[bool]:
    """
    Converte grafias booleanas reconhecidas em `bool`.

    Aceita `True`/`False`, os inteiros `1`/`0` e, sem diferenciar caixa,
    as strings "true", "false", "1", "0", "yes", "no", "on", "off".
    Qualquer outro valor retorna `None`.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return {1: True, 0: False}.get(value)
    if isinstance(value, str):
        return _BOOL_STRINGS.get(value.lower())
    return None


def validate_bool_or_ask(value: Any) -> Union[bool, str, None]:
    if isinstance(value, str) and value.strip().lower() in ASK_ALIASES:
        return ASK
    return validate_bool(value)


def validate_url(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return _sanitize_url(value) or None


def validate_bool_or_ask_or_url(value: Any) -> Union[bool, str, None]:
    """
    Booleano, sentinela "ask" ou URL sanitizada.

    Apenas as formas literais exatas são tratadas como booleano; uma
    grafia como "TRUE" não é literal e segue para a sanitização de URL.
    """
    if _is_boolean_literal(value):
        return validate_bool(value)

    if validate_bool_or_ask(value) == ASK:
        return ASK

    return validate_url(value)


def validate_int(value: Any) -> Optional[int]:
    """
    Converte números e strings numéricas em `int` (truncando decimais).

    `bool` não é considerado numérico. Valores não finitos retornam `None`.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str) and _NUMERIC_RE.match(value):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            number = float(text)
            return int(number) if math.isfinite(number) else None
    return None


def validate_path(value: Any) -> Optional[str]:
    """
    Sanitiza um caminho relativo.

    Barras invertidas viram barras normais e caracteres inseguros para URL
    são removidos. Valores que não são string, ou que ficam vazios após a
    sanitização, retornam `None`.
    """
    if not isinstance(value, str):
        return None
    return _sanitize_url(value.replace("\\", "/")) or None


def _as_items(value: Any) -> Optional[List[Any]]:
    """Listas e tuplas como estão; mapas (objetos JSON) pelos seus valores."""
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, Mapping):
        return list(value.values())
    return None


def validate_path_array(value: Any) -> List[str]:
    items = _as_items(value)
    if items is None:
        return []

    paths = (validate_path(item) for item in items)
    # dedup preservando a primeira ocorrência
    return list(dict.fromkeys(path for path in paths if path))


# -----------------------------
# Validadores por chave
# -----------------------------
def validate_gitignore(value: Any) -> Union[Dict[str, Any], bool, str, None]:
    """
    Valida a chave `gitignore`.

    Quando o valor é um mapa, produz:
        - custom: lista de strings (entradas não-string são descartadas)
        - wp, wp-content, vendor, common: `True`, exceto quando validados
          explicitamente como `False`

    Chaves desconhecidas do mapa são ignoradas. Valores escalares seguem
    `validate_bool_or_ask_or_url`.
    """
    if isinstance(value, Mapping):
        custom = [entry for entry in _as_items(value.get("custom")) or [] if isinstance(entry, str)]

        flags = {
            flag: not (flag in value and validate_bool(value[flag]) is False)
            for flag in GITIGNORE_FLAGS
        }
        return {"custom": custom, **flags}

    return validate_bool_or_ask_or_url(value)


def validate_overwrite(value: Any) -> Union[List[str], bool, str, None]:
    if _as_items(value) is not None:
        return validate_path_array(value)
    if str(value).strip().lower() == HARD:
        return HARD
    return validate_bool_or_ask(value)


def validate_verbosity(value: Any) -> Optional[int]:
    level = validate_int(value)
    if level is not None and 0 <= level < 3:
        return level
    return None


def validate_content_dev_operation(value: Any) -> Union[bool, str, None]:
    """
    Valida a operação sobre o diretório de conteúdo de desenvolvimento.

    - "symlink" / "copy" (sem diferenciar caixa) são mantidos
    - sentinelas de pergunta viram "ask"
    - apenas `False` explícito é preservado; `True` ou valores não
      reconhecidos retornam `None` para forçar o default
    """
    if isinstance(value, str):
        value = value.strip().lower()

    if value in CONTENT_DEV_OPERATIONS:
        return value

    if validate_bool_or_ask(value) == ASK:
        return ASK

    return False if validate_bool(value) is False else None


def _resolve_reference(reference: str) -> Any:
    """
    Resolve "pacote.modulo:Atributo" ou "pacote.modulo.Atributo".

    Qualquer falha ao importar o módulo (inclusive erros levantados pelo
    próprio módulo durante o import) ou ao percorrer os atributos
    resulta em `None`.
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep:
        module_name, _, attr_path = reference.rpartition(".")
    if not module_name or not attr_path:
        return None

    try:
        target: Any = importlib.import_module(module_name)
        for attr in attr_path.split("."):
            target = getattr(target, attr, None)
            if target is None:
                return None
    except Exception:  # noqa: BLE001
        return None
    return target


def _as_callable(entry: Any) -> Optional[Callable[..., Any]]:
    """Callables como estão; strings são resolvidas como referência."""
    if isinstance(entry, str):
        entry = _resolve_reference(entry.strip())
    return entry if callable(entry) else None


def validate_steps(value: Any) -> Optional[Dict[str, type]]:
    """
    Valida `custom-steps`: mapa de nome do step → referência de classe.

    Apenas referências que resolvem para uma classe conforme ao protocolo
    `SetupStep` são mantidas; o valor resultante é a própria classe.
    """
    if not isinstance(value, Mapping):
        return None

    steps: Dict[str, type] = {}
    for name, reference in value.items():
        if not isinstance(reference, str):
            continue
        step_class = _resolve_reference(reference.strip())
        if isinstance(step_class, type) and issubclass(step_class, SetupStep):
            steps[str(name).strip()] = step_class

    return steps or None


def validate_scripts(value: Any) -> Optional[Dict[str, List[Callable[..., Any]]]]:
    """
    Valida `scripts`: mapa de evento (`pre-*` / `post-*`) → callables.

    Cada script pode ser um callable ou uma referência em string
    ("pacote.modulo:funcao"), mantida apenas quando resolve para um
    callable. Um script isolado vira lista de um elemento; em listas,
    itens não chamáveis são descartados. Eventos sem nenhum callable são
    removidos.
    """
    if not isinstance(value, Mapping):
        return None

    scripts: Dict[str, List[Callable[..., Any]]] = {}
    for name, entry in value.items():
        if not isinstance(name, str) or not name.startswith(SCRIPT_PREFIXES):
            continue
        items = _as_items(entry)
        if items is None:
            items = [entry]
        callables = [script for script in map(_as_callable, items) if script is not None]
        if callables:
            scripts[name] = callables

    return scripts or None
