# tests/application/test_consultas.py
import httpx
import pytest

from cadastro.application.services.consulta_service import ConsultaService
from cadastro.domain.parceiro.erros import CodigoErro, ErroValidacao
from cadastro.domain.parceiro.value_objects import Endereco, limpar_cep
from cadastro.infrastructure.consultas.erros import ConsultaIndisponivel, ConsultaNaoEncontrada
from cadastro.infrastructure.consultas.receitaws import ReceitaWsClient
from cadastro.infrastructure.consultas.viacep import ViaCepClient

VIACEP_URL = "https://viacep.test/ws"
RECEITA_URL = "https://receitaws.test/v1/cnpj"

CEP_SE = {
    "cep": "01001-000",
    "logradouro": "Praca da Se",
    "complemento": "lado impar",
    "bairro": "Se",
    "localidade": "Sao Paulo",
    "uf": "SP",
}

EMPRESA = {
    "status": "OK",
    "cnpj": "11.222.333/0001-81",
    "nome": "EMPRESA TESTE LTDA",
    "fantasia": "TESTE",
    "email": "contato@empresa.com.br",
    "telefone": "(11) 3333-4444",
    "cep": "01.001-000",
    "logradouro": "PRACA DA SE",
    "numero": "100",
    "complemento": "",
    "bairro": "SE",
    "municipio": "SAO PAULO",
    "uf": "SP",
    "situacao": "ATIVA",
}


def _viacep(handler) -> ViaCepClient:
    return ViaCepClient(httpx.Client(transport=httpx.MockTransport(handler)), VIACEP_URL)


def _receita(handler) -> ReceitaWsClient:
    return ReceitaWsClient(httpx.Client(transport=httpx.MockTransport(handler)), RECEITA_URL)


def test_limpar_cep():
    assert limpar_cep(" 01.001-000 ") == "01001000"
    with pytest.raises(ErroValidacao) as exc_info:
        limpar_cep("0100100")
    assert exc_info.value.campo == "cep"
    assert exc_info.value.codigo is CodigoErro.COMPRIMENTO_INVALIDO


def test_limpar_cep_nao_numerico():
    with pytest.raises(ErroValidacao) as exc_info:
        limpar_cep("0100A000")
    assert exc_info.value.codigo is CodigoErro.NAO_NUMERICO


@pytest.mark.parametrize("raw", ["01001 000", " 01.001-000 ", "01001-000"])
def test_consulta_e_cadastro_aceitam_o_mesmo_cep(raw):
    chamadas = []

    def handler(request: httpx.Request) -> httpx.Response:
        chamadas.append(request.url.path)
        return httpx.Response(200, json=CEP_SE)

    _viacep(handler).consultar(raw)
    endereco = Endereco(raw, "SP", "Sao Paulo", "Praca da Se", "100", "Se")
    assert chamadas == [f"/ws/{endereco.cep}/json/"]


def test_viacep_consulta_url_e_mapeia_resposta():
    chamadas = []

    def handler(request: httpx.Request) -> httpx.Response:
        chamadas.append(str(request.url))
        return httpx.Response(200, json=CEP_SE)

    dto = _viacep(handler).consultar("01001-000")
    assert chamadas == [f"{VIACEP_URL}/01001000/json/"]
    assert dto.cep == "01001-000"
    assert dto.localidade == "Sao Paulo"
    assert dto.uf == "SP"


def test_viacep_cep_invalido_nao_chama_servico():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("nao deveria chamar")

    with pytest.raises(ErroValidacao):
        _viacep(handler).consultar("123")


def test_viacep_cep_inexistente():
    client = _viacep(lambda request: httpx.Response(200, json={"erro": True}))
    with pytest.raises(ConsultaNaoEncontrada, match="CEP nao encontrado"):
        client.consultar("99999999")


def test_viacep_status_http_de_erro():
    client = _viacep(lambda request: httpx.Response(500))
    with pytest.raises(ConsultaIndisponivel):
        client.consultar("01001000")


def test_viacep_falha_de_rede():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timeout", request=request)

    with pytest.raises(ConsultaIndisponivel):
        _viacep(handler).consultar("01001000")


def test_viacep_resposta_nao_json():
    client = _viacep(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(ConsultaIndisponivel):
        client.consultar("01001000")


def test_receitaws_consulta_e_mapeia_resposta():
    chamadas = []

    def handler(request: httpx.Request) -> httpx.Response:
        chamadas.append(str(request.url))
        return httpx.Response(200, json=EMPRESA)

    dto = _receita(handler).consultar("11.222.333/0001-81")
    assert chamadas == [f"{RECEITA_URL}/11222333000181"]
    assert dto.cnpj == "11.222.333/0001-81"
    assert dto.razao_social == "EMPRESA TESTE LTDA"
    assert dto.nome_fantasia == "TESTE"
    assert dto.cep == "01001000"
    assert dto.complemento == ""
    assert dto.situacao == "ATIVA"


def test_receitaws_cnpj_invalido_nao_chama_servico():
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("nao deveria chamar")

    with pytest.raises(ErroValidacao) as exc_info:
        _receita(handler).consultar("11.222.333/0001-99")
    assert exc_info.value.codigo is CodigoErro.DIGITO_VERIFICADOR_INCORRETO


def test_receitaws_status_error():
    client = _receita(
        lambda request: httpx.Response(200, json={"status": "ERROR", "message": "CNPJ rejeitado"}),
    )
    with pytest.raises(ConsultaNaoEncontrada, match="CNPJ rejeitado"):
        client.consultar("11222333000181")


def test_receitaws_status_error_sem_mensagem():
    client = _receita(lambda request: httpx.Response(200, json={"status": "ERROR"}))
    with pytest.raises(ConsultaNaoEncontrada, match="CNPJ nao encontrado"):
        client.consultar("11222333000181")


def test_receitaws_limite_de_requisicoes():
    client = _receita(lambda request: httpx.Response(429))
    with pytest.raises(ConsultaIndisponivel):
        client.consultar("11222333000181")


def test_consulta_service_delega():
    service = ConsultaService(
        viacep=_viacep(lambda request: httpx.Response(200, json=CEP_SE)),
        receitaws=_receita(lambda request: httpx.Response(200, json=EMPRESA)),
    )
    assert service.consultar_cep("01001000").bairro == "Se"
    assert service.consultar_cnpj("11222333000181").uf == "SP"


def _service(viacep_handler, receita_handler) -> ConsultaService:
    return ConsultaService(viacep=_viacep(viacep_handler), receitaws=_receita(receita_handler))


def _nao_chamar(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"chamada inesperada: {request.url}")


def test_consulta_completa_cep_e_cnpj():
    service = _service(
        lambda request: httpx.Response(200, json=CEP_SE),
        lambda request: httpx.Response(200, json=EMPRESA),
    )
    resultado = service.consultar_completa("01001-000", "11.222.333/0001-81")
    assert resultado.cep.localidade == "Sao Paulo"
    assert resultado.cnpj.razao_social == "EMPRESA TESTE LTDA"
    assert resultado.erro_cep is None
    assert resultado.erro_cnpj is None


def test_consulta_completa_so_cep_nao_chama_receitaws():
    service = _service(lambda request: httpx.Response(200, json=CEP_SE), _nao_chamar)
    resultado = service.consultar_completa("01001000", None)
    assert resultado.cep.uf == "SP"
    assert resultado.cnpj is None


def test_consulta_completa_falha_de_uma_nao_derruba_a_outra():
    service = _service(
        lambda request: httpx.Response(200, json={"erro": True}),
        lambda request: httpx.Response(200, json=EMPRESA),
    )
    resultado = service.consultar_completa("99999999", "11222333000181")
    assert resultado.cep is None
    assert resultado.erro_cep == "CEP nao encontrado"
    assert resultado.cnpj.uf == "SP"


def test_consulta_completa_cnpj_invalido_vira_erro_cnpj():
    service = _service(_nao_chamar, _nao_chamar)
    resultado = service.consultar_completa(None, "11.222.333/0001-99")
    assert resultado.cnpj is None
    assert "CNPJ invalido" in resultado.erro_cnpj


@pytest.mark.parametrize("cep, cnpj", [(None, None), ("", "  "), ("   ", None)])
def test_consulta_completa_sem_cep_nem_cnpj(cep, cnpj):
    service = _service(_nao_chamar, _nao_chamar)
    with pytest.raises(ErroValidacao, match="Pelo menos CEP ou CNPJ"):
        service.consultar_completa(cep, cnpj)
