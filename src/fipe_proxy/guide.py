"""Static usage guide payloads.

Two independent payloads exist: the manual merged into welcome and
per-resource error responses, and the catch-all guide returned for
unknown routes. They share wording but are defined separately.
"""

import copy
from typing import Any

VERSION = "1.0.0"
AUTHOR = "@alequizao"
EMAIL = "alexjuniorcalado@gmail.com"
INSTAGRAM = "https://instagram.com/alequizao"
WHATSAPP = "https://wa.me/5582988717072"

_EXAMPLES: dict[str, dict[str, str]] = {
    "1. Consultar Meses": {
        "Listar todos": "/api/mes",
        "Consultar específico": "/api/mes=319",
    },
    "2. Consultar Tipos de Veículo": {
        "Listar todos": "/api/mes=319&tipo",
        "Consultar específico": "/api/mes=319&tipo=2 (1:Carro, 2:Moto, 3:Caminhão)",
    },
    "3. Consultar Marcas": {
        "Listar todas": "/api/mes=319&tipo=2/marca",
        "Consultar específica": "/api/mes=319&tipo=2/marca=80",
    },
    "4. Consultar Modelos": {
        "Listar todos": "/api/mes=319&tipo=2/marca=80/modelo",
        "Consultar específico": "/api/mes=319&tipo=2/marca=80/modelo=8071",
    },
    "5. Consultar Anos": {
        "Listar todos": "/api/mes=319&tipo=2/marca=80/modelo=8071/ano",
        "Consultar específico": "/api/mes=319&tipo=2/marca=80/modelo=8071/ano=2020-1",
    },
    "6. Consulta Completa": {
        "Exemplo": "/api/mes=319&tipo=2/marca=80/modelo=8071/ano=2020-1/anomodelo=2020/combustivel=1",
    },
}

_STEPS: dict[str, str] = {
    "Como usar": "Siga o passo a passo abaixo para consultar um veículo:",
    "Passo 1": "Consulte o mês de referência usando /api/mes",
    "Passo 2": "Escolha o tipo de veículo usando /api/mes=XXX&tipo",
    "Passo 3": "Selecione a marca usando /api/mes=XXX&tipo=Y/marca",
    "Passo 4": "Escolha o modelo usando /api/mes=XXX&tipo=Y/marca=ZZ/modelo",
    "Passo 5": "Selecione o ano usando /api/mes=XXX&tipo=Y/marca=ZZ/modelo=WWWW/ano",
    "Passo 6": "Faça a consulta completa usando o exemplo em '6. Consulta Completa'",
}

_CODES: dict[str, dict[str, str]] = {
    "Tipos de Veículo": {
        "1": "Carro",
        "2": "Moto",
        "3": "Caminhão",
    },
    "Combustível": {
        "1": "Gasolina",
        "2": "Álcool",
        "3": "Diesel",
        "4": "Flex",
    },
}

_MANUAL: dict[str, Any] = {
    "contato": {
        "instagram": INSTAGRAM,
        "whatsapp": WHATSAPP,
        "autor": AUTHOR,
        "email": EMAIL,
        "versao": VERSION,
    },
    "exemplos": _EXAMPLES,
    "guiaDeUso": {**_STEPS, "Códigos Úteis": _CODES},
}

_ROUTE_NOT_FOUND: dict[str, Any] = {
    "error": "Rota não encontrada",
    "message": "A URL solicitada não existe ou está incorreta. Siga o passo a passo abaixo:",
    "contato": {
        "instagram": INSTAGRAM,
        "whatsapp": WHATSAPP,
    },
    "guiaDeUso": _STEPS,
    "exemplos": _EXAMPLES,
    "codigosUteis": _CODES,
}


def get_manual() -> dict[str, Any]:
    """Return a fresh copy of the usage manual."""
    return copy.deepcopy(_MANUAL)


def route_not_found_guide() -> dict[str, Any]:
    """Return a fresh copy of the catch-all guide for unknown routes."""
    return copy.deepcopy(_ROUTE_NOT_FOUND)
