# cadastro/application/services/parceiro_service.py
from __future__ import annotations

from cadastro.domain.parceiro.entities import Parceiro
from cadastro.domain.parceiro.erros import ParceiroJaExiste, ParceiroNaoEncontrado
from cadastro.domain.parceiro.repository import ParceiroRepository
from cadastro.domain.parceiro.value_objects import DOMINIOS_PESSOAIS, CPF, Email, TipoPessoa
from cadastro.infrastructure.log import log

from ..dtos.parceiro_dto import (
    AtualizarEnderecoRequest,
    ContagemDTO,
    CriarParceiroRequest,
    ParceiroDTO,
)


def _identificacao(parceiro: Parceiro) -> str:
    """Documento apto para log: CNPJ formatado, CPF mascarado."""
    if isinstance(parceiro.documento, CPF):
        return parceiro.documento.mascarado
    return parceiro.documento.formatado


class ParceiroService:
    """Imperative Shell: valida no dominio, checa unicidade no repo, persiste."""

    def __init__(
        self,
        parceiro_repo: ParceiroRepository,
        dominios_pessoais: frozenset[str] = DOMINIOS_PESSOAIS,
    ) -> None:
        self._repo = parceiro_repo
        self._dominios_pessoais = dominios_pessoais

    def cadastrar(self, request: CriarParceiroRequest) -> ParceiroDTO:
        log(f"Cadastro de parceiro: {request.nome.strip() or '(sem nome)'}")
        if TipoPessoa(request.tipo_pessoa) is TipoPessoa.JURIDICA:
            parceiro = Parceiro.criar_pessoa_juridica(
                nome=request.nome,
                cnpj=request.documento,
                email=request.email,
                cep=request.cep,
                uf=request.uf,
                municipio=request.municipio,
                logradouro=request.logradouro,
                numero=request.numero,
                bairro=request.bairro,
                telefone=request.telefone,
                complemento=request.complemento,
                observacoes=request.observacoes,
            )
        else:
            parceiro = Parceiro.criar_pessoa_fisica(
                nome=request.nome,
                cpf=request.documento,
                email=request.email,
                cep=request.cep,
                uf=request.uf,
                municipio=request.municipio,
                logradouro=request.logradouro,
                numero=request.numero,
                bairro=request.bairro,
                telefone=request.telefone,
                complemento=request.complemento,
                observacoes=request.observacoes,
            )

        self._verificar_documento_unico(parceiro)
        self._verificar_email_unico(parceiro.email.valor, excluir_id=None)

        salvo = self._repo.adicionar(parceiro)
        log(f"Parceiro {salvo.id} cadastrado ({_identificacao(salvo)})")
        return self._dto(salvo)

    def obter(self, parceiro_id: int) -> ParceiroDTO | None:
        parceiro = self._repo.buscar_por_id(parceiro_id)
        return self._dto(parceiro) if parceiro else None

    def listar(self, skip: int, take: int) -> list[ParceiroDTO]:
        return [self._dto(p) for p in self._repo.listar(skip, take)]

    def buscar_por_nome(self, termo: str) -> list[ParceiroDTO]:
        return [self._dto(p) for p in self._repo.buscar_por_nome(termo)]

    def buscar_por_localizacao(self, uf: str, municipio: str | None) -> list[ParceiroDTO]:
        return [self._dto(p) for p in self._repo.buscar_por_localizacao(uf, municipio)]

    def contar(self, uf: str | None = None) -> ContagemDTO:
        if uf and uf.strip():
            return ContagemDTO(total=self._repo.contar_por_uf(uf), uf=uf.strip().upper())
        return ContagemDTO(total=self._repo.contar())

    def atualizar_email(self, parceiro_id: int, novo_email: str) -> ParceiroDTO:
        parceiro = self._carregar(parceiro_id)
        self._verificar_email_unico(Email(novo_email).valor, excluir_id=parceiro_id)
        parceiro.atualizar_email(novo_email)
        return self._salvar(parceiro, "email")

    def atualizar_telefone(self, parceiro_id: int, novo_telefone: str) -> ParceiroDTO:
        parceiro = self._carregar(parceiro_id)
        parceiro.atualizar_telefone(novo_telefone)
        return self._salvar(parceiro, "telefone")

    def atualizar_endereco(
        self, parceiro_id: int, request: AtualizarEnderecoRequest,
    ) -> ParceiroDTO:
        parceiro = self._carregar(parceiro_id)
        parceiro.atualizar_endereco(
            cep=request.cep,
            uf=request.uf,
            municipio=request.municipio,
            logradouro=request.logradouro,
            numero=request.numero,
            bairro=request.bairro,
            complemento=request.complemento,
        )
        return self._salvar(parceiro, "endereco")

    def remover(self, parceiro_id: int) -> None:
        self._repo.remover(parceiro_id)
        log(f"Parceiro {parceiro_id} removido")

    def _carregar(self, parceiro_id: int) -> Parceiro:
        parceiro = self._repo.buscar_por_id(parceiro_id)
        if parceiro is None:
            raise ParceiroNaoEncontrado(parceiro_id)
        return parceiro

    def _salvar(self, parceiro: Parceiro, campo: str) -> ParceiroDTO:
        self._repo.atualizar(parceiro)
        log(f"Parceiro {parceiro.id}: {campo} atualizado")
        return self._dto(parceiro)

    def _verificar_documento_unico(self, parceiro: Parceiro) -> None:
        if parceiro.cnpj is not None and self._repo.cnpj_existe(parceiro.cnpj.valor):
            raise ParceiroJaExiste("documento", "Ja existe um parceiro cadastrado com este CNPJ")
        if parceiro.cpf is not None and self._repo.cpf_existe(parceiro.cpf.valor):
            raise ParceiroJaExiste("documento", "Ja existe um parceiro cadastrado com este CPF")

    def _verificar_email_unico(self, email: str, excluir_id: int | None) -> None:
        if self._repo.email_existe(email, excluir_id=excluir_id):
            raise ParceiroJaExiste("email", "Ja existe um parceiro cadastrado com este email")

    def _dto(self, parceiro: Parceiro) -> ParceiroDTO:
        return ParceiroDTO.de_entidade(parceiro, self._dominios_pessoais)
