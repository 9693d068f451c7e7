# tests/domain/test_email_vo.py
import dataclasses

import pytest

from cadastro.domain.parceiro.erros import CodigoErro, ErroValidacao
from cadastro.domain.parceiro.value_objects import DOMINIOS_PESSOAIS, Email


def _codigo(raw: str | None) -> CodigoErro:
    with pytest.raises(ErroValidacao) as exc_info:
        Email(raw)
    assert exc_info.value.campo == "email"
    return exc_info.value.codigo


def test_email_normalizado_minusculo_e_sem_espacos():
    email = Email("  Joao.Silva@Empresa.COM.br ")
    assert email.valor == "joao.silva@empresa.com.br"
    assert email.parte_local == "joao.silva"
    assert email.dominio == "empresa.com.br"


def test_email_aceita_caracteres_permitidos_na_parte_local():
    assert Email("nome+tag_1%x-y@sub.dominio.io").valor == "nome+tag_1%x-y@sub.dominio.io"


@pytest.mark.parametrize("raw", [None, "", "    "])
def test_email_vazio(raw):
    assert _codigo(raw) is CodigoErro.ENTRADA_VAZIA


def test_email_muito_longo():
    assert _codigo("a" * 250 + "@x.com") is CodigoErro.MUITO_LONGO


def test_email_no_limite_de_254_e_aceito():
    raw = "a" * 248 + "@x.com"
    assert len(raw) == 254
    assert Email(raw).valor == raw


def test_email_muito_curto():
    assert _codigo("a@b") is CodigoErro.MUITO_CURTO


def test_email_sem_arroba():
    assert _codigo("contato.empresa.com") is CodigoErro.SEM_ARROBA


def test_email_com_duas_arrobas():
    assert _codigo("a@b@empresa.com") is CodigoErro.MULTIPLAS_ARROBAS


def test_email_pontos_consecutivos():
    assert _codigo("joao..silva@empresa.com") is CodigoErro.PONTOS_CONSECUTIVOS


@pytest.mark.parametrize("raw", [".joao@empresa.com", "joao@empresa.com."])
def test_email_ponto_na_borda(raw):
    assert _codigo(raw) is CodigoErro.PONTO_NA_BORDA


@pytest.mark.parametrize("raw", ["@empresa.com", "joao.silva@"])
def test_email_arroba_na_borda(raw):
    assert _codigo(raw) is CodigoErro.ARROBA_NA_BORDA


@pytest.mark.parametrize("raw", ["joao@empresa", "joao silva@empresa.com", "joao@empresa.c", "jo#o@empresa.com"])
def test_email_formato_invalido(raw):
    assert _codigo(raw) is CodigoErro.FORMATO_INVALIDO


def test_email_verificacoes_em_ordem():
    """Pontos consecutivos sao detectados antes do ponto na borda."""
    assert _codigo(".joao..silva@empresa.com") is CodigoErro.PONTOS_CONSECUTIVOS


def test_email_mensagem_legivel():
    with pytest.raises(ValueError, match="@"):
        Email("semarroba.com")


@pytest.mark.parametrize("dominio", sorted(DOMINIOS_PESSOAIS))
def test_dominios_pessoais_nao_sao_corporativos(dominio):
    assert Email(f"fulano@{dominio}").corporativo is False


def test_email_corporativo():
    assert Email("contato@empresa.com.br").corporativo is True


def test_classificacao_ignora_caixa():
    assert Email("Fulano@GMAIL.COM").corporativo is False


def test_subdominio_de_webmail_e_corporativo():
    """Match exato de dominio: mail.gmail.com nao esta na lista."""
    assert Email("fulano@mail.gmail.com").corporativo is True


def test_e_corporativo_com_lista_customizada():
    email = Email("contato@empresa.com.br")
    assert email.e_corporativo({"Empresa.com.br"}) is False
    assert email.e_corporativo(set()) is True
    assert Email("x@gmail.com").e_corporativo(set()) is True


def test_email_igualdade_e_imutabilidade():
    a = Email("Joao@Empresa.com")
    assert a == Email("joao@empresa.com")
    assert hash(a) == hash(Email("joao@empresa.com"))
    assert repr(a) == "Email('joao@empresa.com')"
    with pytest.raises(dataclasses.FrozenInstanceError):
        a._endereco = "outro@empresa.com"  # type: ignore[misc]


def test_cenarios_de_cadastro():
    email = Email("Leo@Empresa.COM.BR")
    assert email.valor == "leo@empresa.com.br"
    assert email.corporativo is True
    assert Email("leo@gmail.com").corporativo is False
    assert _codigo("email-invalido") is CodigoErro.SEM_ARROBA
