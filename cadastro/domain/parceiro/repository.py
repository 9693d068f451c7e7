# cadastro/domain/parceiro/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Parceiro


class ParceiroRepository(Protocol):
    def adicionar(self, parceiro: Parceiro) -> Parceiro: ...
    def atualizar(self, parceiro: Parceiro) -> Parceiro: ...
    def remover(self, parceiro_id: int) -> None: ...

    def buscar_por_id(self, parceiro_id: int) -> Parceiro | None: ...
    def buscar_por_cnpj(self, cnpj: str) -> Parceiro | None: ...
    def buscar_por_cpf(self, cpf: str) -> Parceiro | None: ...
    def buscar_por_email(self, email: str) -> Parceiro | None: ...

    def listar(self, skip: int = 0, take: int = 50) -> list[Parceiro]: ...
    def buscar_por_nome(self, termo: str) -> list[Parceiro]: ...
    def buscar_por_localizacao(self, uf: str, municipio: str | None = None) -> list[Parceiro]: ...

    def existe(self, parceiro_id: int) -> bool: ...
    def cnpj_existe(self, cnpj: str, excluir_id: int | None = None) -> bool: ...
    def cpf_existe(self, cpf: str, excluir_id: int | None = None) -> bool: ...
    def email_existe(self, email: str, excluir_id: int | None = None) -> bool: ...

    def contar(self) -> int: ...
    def contar_por_uf(self, uf: str) -> int: ...
