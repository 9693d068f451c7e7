# cadastro/application/dtos/parceiro_dto.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field

from cadastro.domain.parceiro.entities import Parceiro


class CriarParceiroRequest(BaseModel):
    """Dados do formulario. Obrigatoriedade e formato sao validados pelo dominio;
    aqui ficam apenas os limites de tamanho das colunas."""

    tipo_pessoa: Literal["F", "J"]
    nome: str = Field(max_length=200)
    documento: str
    cep: str
    uf: str = Field(max_length=2)
    municipio: str = Field(max_length=100)
    logradouro: str = Field(max_length=200)
    numero: str = Field(max_length=10)
    bairro: str = Field(max_length=100)
    email: str = Field(max_length=254)
    telefone: str = Field(max_length=20)
    complemento: str | None = Field(default=None, max_length=100)
    observacoes: str | None = Field(default=None, max_length=500)


class AtualizarEmailRequest(BaseModel):
    email: str = Field(max_length=254)


class AtualizarTelefoneRequest(BaseModel):
    telefone: str = Field(max_length=20)


class AtualizarEnderecoRequest(BaseModel):
    cep: str
    uf: str = Field(max_length=2)
    municipio: str = Field(max_length=100)
    logradouro: str = Field(max_length=200)
    numero: str = Field(max_length=10)
    bairro: str = Field(max_length=100)
    complemento: str | None = Field(default=None, max_length=100)


class EnderecoDTO(BaseModel):
    cep: str
    uf: str
    municipio: str
    logradouro: str
    numero: str
    bairro: str
    complemento: str | None
    endereco_completo: str


class ParceiroDTO(BaseModel):
    id: int
    nome: str
    documento: str
    documento_formatado: str
    tipo_pessoa: str
    email: str
    tem_email_corporativo: bool
    telefone: str
    endereco: EnderecoDTO
    observacoes: str | None
    criado_em: datetime
    atualizado_em: datetime

    @classmethod
    def de_entidade(cls, parceiro: Parceiro, dominios_pessoais: frozenset[str]) -> ParceiroDTO:
        if parceiro.id is None:
            raise ValueError("Parceiro ainda nao persistido")
        e = parceiro.endereco
        return cls(
            id=parceiro.id,
            nome=parceiro.nome,
            documento=parceiro.documento.valor,
            documento_formatado=parceiro.documento_formatado,
            tipo_pessoa=parceiro.tipo_pessoa,
            email=parceiro.email.valor,
            tem_email_corporativo=parceiro.tem_email_corporativo(dominios_pessoais),
            telefone=parceiro.telefone,
            endereco=EnderecoDTO(
                cep=e.cep,
                uf=e.uf,
                municipio=e.municipio,
                logradouro=e.logradouro,
                numero=e.numero,
                bairro=e.bairro,
                complemento=e.complemento,
                endereco_completo=e.completo,
            ),
            observacoes=parceiro.observacoes,
            criado_em=parceiro.criado_em,
            atualizado_em=parceiro.atualizado_em,
        )


class ContagemDTO(BaseModel):
    total: int
    uf: str | None = None


class RespostaPadrao(BaseModel):
    """Envelope das respostas do recurso /parceiros."""

    sucesso: bool
    mensagem: str
    codigo: str
    dados: Any = None
    detalhes: dict[str, Any] | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
