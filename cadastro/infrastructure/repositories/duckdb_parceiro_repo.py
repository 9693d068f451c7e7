# cadastro/infrastructure/repositories/duckdb_parceiro_repo.py
from __future__ import annotations

import re
from datetime import datetime, timezone

import duckdb

from cadastro.domain.parceiro.entities import Parceiro
from cadastro.domain.parceiro.erros import ParceiroJaExiste, ParceiroNaoEncontrado
from cadastro.domain.parceiro.value_objects import Endereco

_COLUNAS = (
    "id, nome, cnpj, cpf, email, cep, uf, municipio, logradouro, numero, "
    "bairro, complemento, telefone, observacoes, criado_em, atualizado_em"
)

_MAX_PAGINA = 100
_MAX_BUSCA = 50

# DuckDB: 'Duplicate key "cnpj: 11222333000181" violates unique constraint'
_CHAVE_DUPLICADA = re.compile(r'Duplicate key "(\w+):', re.IGNORECASE)

_CONFLITOS = {
    "cnpj": ("documento", "Ja existe um parceiro cadastrado com este CNPJ"),
    "cpf": ("documento", "Ja existe um parceiro cadastrado com este CPF"),
    "email": ("email", "Ja existe um parceiro cadastrado com este email"),
}


def _conflito(err: duckdb.ConstraintException) -> ParceiroJaExiste | None:
    """Traduz violacao de indice UNIQUE; CHECK e outras restricoes retornam None."""
    match = _CHAVE_DUPLICADA.search(str(err))
    if match is None:
        return None
    campo, mensagem = _CONFLITOS.get(
        match.group(1).lower(), ("documento", "Ja existe um parceiro cadastrado com estes dados"),
    )
    return ParceiroJaExiste(campo, mensagem)


def _somente_digitos(raw: str, separadores: str) -> str:
    for sep in separadores:
        raw = raw.replace(sep, "")
    return raw.strip()


def _para_banco(momento: datetime) -> datetime:
    """DuckDB TIMESTAMP e naive: gravamos sempre em UTC."""
    return momento.astimezone(timezone.utc).replace(tzinfo=None)


def _do_banco(momento: datetime) -> datetime:
    return momento.replace(tzinfo=timezone.utc)


class DuckDBParceiroRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    # --- escrita ---

    def adicionar(self, parceiro: Parceiro) -> Parceiro:
        """INSERT e devolve o parceiro com o id gerado pela sequencia."""
        try:
            row = self._conn.execute(
                """INSERT INTO parceiros (nome, cnpj, cpf, email, cep, uf, municipio,
                       logradouro, numero, bairro, complemento, telefone, observacoes,
                       criado_em, atualizado_em)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                   RETURNING id""",
                self._parametros(parceiro),
            ).fetchone()
        except duckdb.ConstraintException as err:
            conflito = _conflito(err)
            if conflito is None:
                raise
            raise conflito from err
        if row is None:
            raise RuntimeError("INSERT em parceiros nao retornou id")
        return parceiro.com_id(int(row[0]))

    def atualizar(self, parceiro: Parceiro) -> Parceiro:
        """Documento e criado_em nunca mudam: ficam fora do SET."""
        if parceiro.id is None or not self.existe(parceiro.id):
            raise ParceiroNaoEncontrado(parceiro.id or 0)
        e = parceiro.endereco
        try:
            self._conn.execute(
                """UPDATE parceiros SET nome = ?, email = ?, cep = ?, uf = ?,
                       municipio = ?, logradouro = ?, numero = ?, bairro = ?,
                       complemento = ?, telefone = ?, observacoes = ?, atualizado_em = ?
                   WHERE id = ?""",
                [
                    parceiro.nome,
                    parceiro.email.valor,
                    e.cep,
                    e.uf,
                    e.municipio,
                    e.logradouro,
                    e.numero,
                    e.bairro,
                    e.complemento,
                    parceiro.telefone,
                    parceiro.observacoes,
                    _para_banco(parceiro.atualizado_em),
                    parceiro.id,
                ],
            )
        except duckdb.ConstraintException as err:
            conflito = _conflito(err)
            if conflito is None:
                raise
            raise conflito from err
        return parceiro

    def remover(self, parceiro_id: int) -> None:
        if not self.existe(parceiro_id):
            raise ParceiroNaoEncontrado(parceiro_id)
        self._conn.execute("DELETE FROM parceiros WHERE id = ?", [parceiro_id])

    # --- leitura ---

    def buscar_por_id(self, parceiro_id: int) -> Parceiro | None:
        return self._um(f"SELECT {_COLUNAS} FROM parceiros WHERE id = ?", [parceiro_id])

    def buscar_por_cnpj(self, cnpj: str) -> Parceiro | None:
        if not cnpj or not cnpj.strip():
            return None
        return self._um(
            f"SELECT {_COLUNAS} FROM parceiros WHERE cnpj = ?",
            [_somente_digitos(cnpj, "./- ")],
        )

    def buscar_por_cpf(self, cpf: str) -> Parceiro | None:
        if not cpf or not cpf.strip():
            return None
        return self._um(
            f"SELECT {_COLUNAS} FROM parceiros WHERE cpf = ?",
            [_somente_digitos(cpf, ".- ")],
        )

    def buscar_por_email(self, email: str) -> Parceiro | None:
        if not email or not email.strip():
            return None
        return self._um(
            f"SELECT {_COLUNAS} FROM parceiros WHERE email = ?",
            [email.strip().lower()],
        )

    def listar(self, skip: int = 0, take: int = 50) -> list[Parceiro]:
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM parceiros ORDER BY nome, id LIMIT ? OFFSET ?",
            [min(take, _MAX_PAGINA), skip],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_nome(self, termo: str) -> list[Parceiro]:
        if not termo or not termo.strip():
            return []
        rows = self._conn.execute(
            f"SELECT {_COLUNAS} FROM parceiros WHERE nome ILIKE ? ORDER BY nome, id LIMIT ?",
            [f"%{termo.strip()}%", _MAX_BUSCA],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def buscar_por_localizacao(self, uf: str, municipio: str | None = None) -> list[Parceiro]:
        if not uf or not uf.strip():
            return []
        sql = f"SELECT {_COLUNAS} FROM parceiros WHERE uf = ?"
        params: list[object] = [uf.strip().upper()]
        if municipio and municipio.strip():
            sql += " AND lower(municipio) = ?"
            params.append(municipio.strip().lower())
        rows = self._conn.execute(sql + " ORDER BY municipio, nome, id", params).fetchall()
        return [self._hidratar(r) for r in rows]

    # --- existencia e contagem ---

    def existe(self, parceiro_id: int) -> bool:
        return self._existe("id = ?", [parceiro_id], None)

    def cnpj_existe(self, cnpj: str, excluir_id: int | None = None) -> bool:
        return self._existe("cnpj = ?", [_somente_digitos(cnpj, "./- ")], excluir_id)

    def cpf_existe(self, cpf: str, excluir_id: int | None = None) -> bool:
        return self._existe("cpf = ?", [_somente_digitos(cpf, ".- ")], excluir_id)

    def email_existe(self, email: str, excluir_id: int | None = None) -> bool:
        return self._existe("email = ?", [email.strip().lower()], excluir_id)

    def contar(self) -> int:
        row = self._conn.execute("SELECT count(*) FROM parceiros").fetchone()
        return int(row[0]) if row else 0

    def contar_por_uf(self, uf: str) -> int:
        row = self._conn.execute(
            "SELECT count(*) FROM parceiros WHERE uf = ?", [uf.strip().upper()],
        ).fetchone()
        return int(row[0]) if row else 0

    # --- internos ---

    def _existe(self, condicao: str, params: list[object], excluir_id: int | None) -> bool:
        sql = f"SELECT 1 FROM parceiros WHERE {condicao}"
        if excluir_id is not None:
            sql += " AND id <> ?"
            params = [*params, excluir_id]
        return self._conn.execute(sql + " LIMIT 1", params).fetchone() is not None

    def _um(self, sql: str, params: list[object]) -> Parceiro | None:
        row = self._conn.execute(sql, params).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    @staticmethod
    def _parametros(parceiro: Parceiro) -> list[object]:
        e = parceiro.endereco
        return [
            parceiro.nome,
            parceiro.cnpj.valor if parceiro.cnpj else None,
            parceiro.cpf.valor if parceiro.cpf else None,
            parceiro.email.valor,
            e.cep,
            e.uf,
            e.municipio,
            e.logradouro,
            e.numero,
            e.bairro,
            e.complemento,
            parceiro.telefone,
            parceiro.observacoes,
            _para_banco(parceiro.criado_em),
            _para_banco(parceiro.atualizado_em),
        ]

    def _hidratar(self, row: tuple) -> Parceiro:  # type: ignore[type-arg]
        """Mapeia row do DuckDB para entidade de dominio.
        Colunas: id(0), nome(1), cnpj(2), cpf(3), email(4), cep(5), uf(6),
        municipio(7), logradouro(8), numero(9), bairro(10), complemento(11),
        telefone(12), observacoes(13), criado_em(14), atualizado_em(15)"""
        return Parceiro.reconstituir(
            id=int(row[0]),
            nome=str(row[1]),
            cnpj=str(row[2]) if row[2] is not None else None,
            cpf=str(row[3]) if row[3] is not None else None,
            email=str(row[4]),
            endereco=Endereco(
                cep=str(row[5]),
                uf=str(row[6]),
                municipio=str(row[7]),
                logradouro=str(row[8]),
                numero=str(row[9]),
                bairro=str(row[10]),
                complemento=str(row[11]) if row[11] is not None else None,
            ),
            telefone=str(row[12]),
            observacoes=str(row[13]) if row[13] is not None else None,
            criado_em=_do_banco(row[14]),
            atualizado_em=_do_banco(row[15]),
        )
