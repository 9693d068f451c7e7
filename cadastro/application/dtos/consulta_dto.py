# cadastro/application/dtos/consulta_dto.py
from pydantic import BaseModel, Field


class CepDTO(BaseModel):
    cep: str
    logradouro: str
    complemento: str
    bairro: str
    localidade: str
    uf: str


class EmpresaDTO(BaseModel):
    cnpj: str
    razao_social: str
    nome_fantasia: str
    email: str
    telefone: str
    cep: str
    logradouro: str
    numero: str
    complemento: str
    bairro: str
    municipio: str
    uf: str
    situacao: str


class ConsultaCompletaRequest(BaseModel):
    """Pelo menos um dos dois deve vir preenchido."""

    cep: str | None = Field(default=None, max_length=10)
    cnpj: str | None = Field(default=None, max_length=18)


class ConsultaCompletaDTO(BaseModel):
    """Resultado por consulta. Falha de uma nao derruba a outra: o motivo vai no erro_*."""

    cep: CepDTO | None = None
    cnpj: EmpresaDTO | None = None
    erro_cep: str | None = None
    erro_cnpj: str | None = None
