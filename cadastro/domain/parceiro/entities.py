# cadastro/domain/parceiro/entities.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from .erros import CampoObrigatorioAusente
from .value_objects import CNPJ, CPF, DOMINIOS_PESSOAIS, Documento, Email, Endereco


def _agora() -> datetime:
    return datetime.now(timezone.utc)


def _telefone(valor: str | None) -> str:
    stripped = (valor or "").strip()
    if not stripped:
        raise CampoObrigatorioAusente("telefone", "Telefone")
    return stripped


def _nome(valor: str | None) -> str:
    stripped = (valor or "").strip()
    if not stripped:
        raise CampoObrigatorioAusente("nome", "Nome/Razao social")
    return stripped


def _opcional(valor: str | None) -> str | None:
    return (valor or "").strip() or None


@dataclass(frozen=True, eq=False)
class Parceiro:
    """Aggregate Root. Parceiro comercial, pessoa juridica ou fisica.

    O documento e um CNPJ ou um CPF, nunca os dois: o tipo do campo e a
    uniao dos dois value objects. Instancias saem das fabricas
    (criar_pessoa_juridica, criar_pessoa_fisica, reconstituir); o construtor
    direto revalida os mesmos invariantes. Campos congelados: so mudam pelos
    metodos atualizar_*, que validam tudo antes de escrever.
    """

    nome: str
    documento: Documento
    email: Email
    endereco: Endereco
    telefone: str
    observacoes: str | None
    criado_em: datetime
    atualizado_em: datetime
    id: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.documento, (CNPJ, CPF)):
            raise TypeError("documento deve ser CNPJ ou CPF")
        if not isinstance(self.email, Email):
            raise TypeError("email deve ser Email")
        if not isinstance(self.endereco, Endereco):
            raise TypeError("endereco deve ser Endereco")
        object.__setattr__(self, "telefone", _telefone(self.telefone))
        object.__setattr__(self, "nome", _nome(self.nome))
        object.__setattr__(self, "observacoes", _opcional(self.observacoes))
        if self.atualizado_em < self.criado_em:
            raise ValueError("atualizado_em anterior a criado_em")

    def com_id(self, parceiro_id: int) -> Parceiro:
        """Copia com o id atribuido pela persistencia."""
        return replace(self, id=parceiro_id)

    @classmethod
    def criar_pessoa_juridica(
        cls,
        nome: str,
        cnpj: str,
        email: str,
        cep: str,
        uf: str,
        municipio: str,
        logradouro: str,
        numero: str,
        bairro: str,
        telefone: str,
        complemento: str | None = None,
        observacoes: str | None = None,
    ) -> Parceiro:
        return cls._criar(
            CNPJ, nome, cnpj, email, cep, uf, municipio, logradouro,
            numero, bairro, telefone, complemento, observacoes,
        )

    @classmethod
    def criar_pessoa_fisica(
        cls,
        nome: str,
        cpf: str,
        email: str,
        cep: str,
        uf: str,
        municipio: str,
        logradouro: str,
        numero: str,
        bairro: str,
        telefone: str,
        complemento: str | None = None,
        observacoes: str | None = None,
    ) -> Parceiro:
        return cls._criar(
            CPF, nome, cpf, email, cep, uf, municipio, logradouro,
            numero, bairro, telefone, complemento, observacoes,
        )

    @classmethod
    def _criar(
        cls,
        tipo_documento: type[CNPJ] | type[CPF],
        nome: str,
        documento: str,
        email: str,
        cep: str,
        uf: str,
        municipio: str,
        logradouro: str,
        numero: str,
        bairro: str,
        telefone: str,
        complemento: str | None,
        observacoes: str | None,
    ) -> Parceiro:
        # Campos obrigatorios antes dos value objects.
        telefone_ok = _telefone(telefone)
        nome_ok = _nome(nome)
        endereco = Endereco(cep, uf, municipio, logradouro, numero, bairro, complemento)

        doc = tipo_documento(documento)
        email_ok = Email(email)

        agora = _agora()
        return cls(
            nome=nome_ok,
            documento=doc,
            email=email_ok,
            endereco=endereco,
            telefone=telefone_ok,
            observacoes=_opcional(observacoes),
            criado_em=agora,
            atualizado_em=agora,
        )

    @classmethod
    def reconstituir(
        cls,
        id: int,
        nome: str,
        cnpj: str | None,
        cpf: str | None,
        email: str,
        endereco: Endereco,
        telefone: str,
        observacoes: str | None,
        criado_em: datetime,
        atualizado_em: datetime,
    ) -> Parceiro:
        """Reidrata um parceiro salvo. Exatamente um entre cnpj e cpf."""
        if (cnpj is None) == (cpf is None):
            raise ValueError(f"Parceiro {id}: exatamente um entre CNPJ e CPF")
        documento: Documento = CNPJ(cnpj) if cnpj is not None else CPF(cpf)
        return cls(
            id=id,
            nome=nome,
            documento=documento,
            email=Email(email),
            endereco=endereco,
            telefone=telefone,
            observacoes=observacoes,
            criado_em=criado_em,
            atualizado_em=atualizado_em,
        )

    def atualizar_email(self, novo_email: str) -> None:
        self._alterar("email", Email(novo_email))

    def atualizar_telefone(self, novo_telefone: str) -> None:
        self._alterar("telefone", _telefone(novo_telefone))

    def atualizar_endereco(
        self,
        cep: str,
        uf: str,
        municipio: str,
        logradouro: str,
        numero: str,
        bairro: str,
        complemento: str | None = None,
    ) -> None:
        self._alterar(
            "endereco", Endereco(cep, uf, municipio, logradouro, numero, bairro, complemento),
        )

    def _alterar(self, campo: str, valor: object) -> None:
        # valor ja validado pelo chamador
        object.__setattr__(self, campo, valor)
        object.__setattr__(self, "atualizado_em", _agora())

    @property
    def cnpj(self) -> CNPJ | None:
        return self.documento if isinstance(self.documento, CNPJ) else None

    @property
    def cpf(self) -> CPF | None:
        return self.documento if isinstance(self.documento, CPF) else None

    @property
    def e_pessoa_juridica(self) -> bool:
        return isinstance(self.documento, CNPJ)

    @property
    def e_pessoa_fisica(self) -> bool:
        return isinstance(self.documento, CPF)

    def tem_email_corporativo(self, dominios_pessoais: Iterable[str] = DOMINIOS_PESSOAIS) -> bool:
        """Classificacao do email contra a lista efetiva de webmails pessoais."""
        return self.email.e_corporativo(dominios_pessoais)

    @property
    def documento_formatado(self) -> str:
        return self.documento.formatado

    @property
    def tipo_pessoa(self) -> str:
        return self.documento.tipo.rotulo
