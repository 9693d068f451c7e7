# cadastro/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from cadastro.domain.parceiro.value_objects import DOMINIOS_PESSOAIS

load_dotenv()


def _lista(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    debug: bool
    cors_origins: tuple[str, ...]
    viacep_base_url: str
    receitaws_base_url: str
    viacep_timeout: float
    receitaws_timeout: float
    dominios_pessoais: frozenset[str]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    extras = _lista(os.environ.get("EMAIL_DOMINIOS_PESSOAIS_EXTRA", ""))
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
        cors_origins=_lista(os.environ.get("API_CORS_ORIGINS", "http://localhost:4200")),
        viacep_base_url=os.environ.get("VIACEP_BASE_URL", "https://viacep.com.br/ws"),
        receitaws_base_url=os.environ.get(
            "RECEITAWS_BASE_URL", "https://receitaws.com.br/v1/cnpj",
        ),
        viacep_timeout=float(os.environ.get("VIACEP_TIMEOUT", "10")),
        receitaws_timeout=float(os.environ.get("RECEITAWS_TIMEOUT", "15")),
        dominios_pessoais=DOMINIOS_PESSOAIS | {d.lower() for d in extras},
    )
