# cadastro/domain/parceiro/value_objects.py
from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .erros import CampoObrigatorioAusente, CodigoErro, ErroValidacao

DOMINIOS_PESSOAIS: frozenset[str] = frozenset({
    "gmail.com",
    "hotmail.com",
    "yahoo.com",
    "outlook.com",
    "live.com",
    "icloud.com",
    "terra.com.br",
    "uol.com.br",
    "ig.com.br",
    "bol.com.br",
    "r7.com",
    "zipmail.com.br",
})

_PADRAO_EMAIL = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class TipoPessoa(str, Enum):
    JURIDICA = "J"
    FISICA = "F"

    @property
    def rotulo(self) -> str:
        return "Pessoa Juridica" if self is TipoPessoa.JURIDICA else "Pessoa Fisica"


def _digito_verificador(digitos: str, pesos: list[int]) -> int:
    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def _limpar_documento(
    raw: str | None, separadores: str, tamanho: int, nome: str,
) -> str:
    """Remove separadores e aplica as regras comuns a CNPJ e CPF.

    A ordem das verificacoes e fixa: vazio, comprimento, numerico, repetido.
    """
    limpo = raw or ""
    for sep in separadores:
        limpo = limpo.replace(sep, "")
    limpo = limpo.strip()
    if not limpo:
        raise ErroValidacao(
            "documento", CodigoErro.ENTRADA_VAZIA, f"{nome} nao pode ser vazio",
        )
    if len(limpo) != tamanho:
        raise ErroValidacao(
            "documento",
            CodigoErro.COMPRIMENTO_INVALIDO,
            f"{nome} invalido: comprimento {len(limpo)}, esperado {tamanho}",
        )
    if not (limpo.isascii() and limpo.isdigit()):
        raise ErroValidacao(
            "documento", CodigoErro.NAO_NUMERICO, f"{nome} invalido: deve conter apenas numeros",
        )
    if len(set(limpo)) == 1:
        raise ErroValidacao(
            "documento", CodigoErro.DIGITOS_REPETIDOS, f"{nome} invalido: todos digitos iguais",
        )
    return limpo


def _verificar_cnpj(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CNPJ."""
    pesos_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    if int(digitos[12]) != _digito_verificador(digitos[:12], pesos_1):
        return False
    pesos_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    return int(digitos[13]) == _digito_verificador(digitos[:13], pesos_2)


def _verificar_cpf(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF."""
    pesos_1 = [10, 9, 8, 7, 6, 5, 4, 3, 2]
    if int(digitos[9]) != _digito_verificador(digitos[:9], pesos_1):
        return False
    pesos_2 = [11, 10, 9, 8, 7, 6, 5, 4, 3, 2]
    return int(digitos[10]) == _digito_verificador(digitos[:10], pesos_2)


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ. Valida digitos verificadores no construtor."""

    _valor: str  # sempre 14 digitos sem formatacao
    tipo: ClassVar[TipoPessoa] = TipoPessoa.JURIDICA

    def __init__(self, raw: str | None) -> None:
        digitos = _limpar_documento(raw, "./- ", 14, "CNPJ")
        if not _verificar_cnpj(digitos):
            raise ErroValidacao(
                "documento",
                CodigoErro.DIGITO_VERIFICADOR_INCORRETO,
                "CNPJ invalido: digitos verificadores incorretos",
            )
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """14 digitos sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        d = self._valor
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CNPJ):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


@dataclass(frozen=True)
class CPF:
    """Value Object imutavel para CPF. NUNCA expoe valor completo em repr/str (LGPD)."""

    _valor: str  # sempre 11 digitos
    tipo: ClassVar[TipoPessoa] = TipoPessoa.FISICA

    def __init__(self, raw: str | None) -> None:
        digitos = _limpar_documento(raw, ".- ", 11, "CPF")
        if not _verificar_cpf(digitos):
            raise ErroValidacao(
                "documento",
                CodigoErro.DIGITO_VERIFICADOR_INCORRETO,
                "CPF invalido: digitos verificadores incorretos",
            )
        object.__setattr__(self, "_valor", digitos)

    @property
    def valor(self) -> str:
        """11 digitos sem formatacao. Nunca logar."""
        return self._valor

    @property
    def formatado(self) -> str:
        """XXX.XXX.XXX-XX, para exibicao ao proprio titular."""
        d = self._valor
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-**, formato seguro para logs."""
        d = self._valor
        return f"***.{d[3:6]}.{d[6:9]}-**"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CPF):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


Documento = CNPJ | CPF


@dataclass(frozen=True)
class Email:
    """Email normalizado em minusculas. Classificado como pessoal ou corporativo."""

    _endereco: str

    def __init__(self, raw: str | None) -> None:
        if raw is None or not raw.strip():
            raise ErroValidacao("email", CodigoErro.ENTRADA_VAZIA, "Email nao pode ser vazio")
        endereco = raw.strip().lower()

        if len(endereco) > 254:
            raise ErroValidacao(
                "email", CodigoErro.MUITO_LONGO, "Email muito longo (maximo 254 caracteres)",
            )
        if len(endereco) < 5:
            raise ErroValidacao("email", CodigoErro.MUITO_CURTO, "Email muito curto")
        if "@" not in endereco:
            raise ErroValidacao("email", CodigoErro.SEM_ARROBA, "Email deve conter @")
        if endereco.count("@") != 1:
            raise ErroValidacao(
                "email", CodigoErro.MULTIPLAS_ARROBAS, "Email deve conter exatamente um @",
            )
        if ".." in endereco:
            raise ErroValidacao(
                "email", CodigoErro.PONTOS_CONSECUTIVOS, "Email nao pode ter pontos consecutivos",
            )
        if endereco.startswith(".") or endereco.endswith("."):
            raise ErroValidacao(
                "email", CodigoErro.PONTO_NA_BORDA, "Email nao pode comecar ou terminar com ponto",
            )
        if endereco.startswith("@") or endereco.endswith("@"):
            raise ErroValidacao(
                "email", CodigoErro.ARROBA_NA_BORDA, "Email nao pode comecar ou terminar com @",
            )
        if not _PADRAO_EMAIL.match(endereco):
            raise ErroValidacao("email", CodigoErro.FORMATO_INVALIDO, "Formato de email invalido")

        object.__setattr__(self, "_endereco", endereco)

    @property
    def valor(self) -> str:
        return self._endereco

    @property
    def parte_local(self) -> str:
        return self._endereco.split("@")[0]

    @property
    def dominio(self) -> str:
        return self._endereco.split("@")[1]

    @property
    def corporativo(self) -> bool:
        """Somente a lista padrao. Com lista configurada, use e_corporativo."""
        return self.e_corporativo(DOMINIOS_PESSOAIS)

    def e_corporativo(self, dominios_pessoais: Iterable[str]) -> bool:
        """Corporativo = dominio fora da lista de webmails pessoais (match exato)."""
        pessoais = {d.strip().lower() for d in dominios_pessoais}
        return self.dominio.lower() not in pessoais

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self._endereco == other._endereco

    def __hash__(self) -> int:
        return hash(self._endereco)

    def __repr__(self) -> str:
        return f"Email({self._endereco!r})"

    def __str__(self) -> str:
        return self._endereco


def limpar_cep(raw: str | None) -> str:
    """Remove '-', '.' e espacos; exige 8 digitos ASCII.

    Mesma regra no cadastro (Endereco) e na consulta ao ViaCEP.
    """
    cep = raw or ""
    for sep in "-. ":
        cep = cep.replace(sep, "")
    if len(cep) != 8:
        raise ErroValidacao(
            "cep", CodigoErro.COMPRIMENTO_INVALIDO, "CEP deve conter exatamente 8 digitos",
        )
    if not (cep.isascii() and cep.isdigit()):
        raise ErroValidacao("cep", CodigoErro.NAO_NUMERICO, "CEP deve conter apenas numeros")
    return cep


def _obrigatorio(valor: str | None, campo: str, rotulo: str) -> str:
    stripped = (valor or "").strip()
    if not stripped:
        raise CampoObrigatorioAusente(campo, rotulo)
    return stripped


@dataclass(frozen=True)
class Endereco:
    """Endereco postal normalizado. CEP so digitos, UF em maiusculas."""

    cep: str
    uf: str
    municipio: str
    logradouro: str
    numero: str
    bairro: str
    complemento: str | None = None

    def __post_init__(self) -> None:
        cep = _obrigatorio(self.cep, "cep", "CEP")
        uf = _obrigatorio(self.uf, "uf", "Estado")
        municipio = _obrigatorio(self.municipio, "municipio", "Cidade")
        logradouro = _obrigatorio(self.logradouro, "logradouro", "Logradouro")
        numero = _obrigatorio(self.numero, "numero", "Numero")
        bairro = _obrigatorio(self.bairro, "bairro", "Bairro")

        cep = limpar_cep(cep)

        uf = uf.upper()
        if len(uf) != 2 or not (uf.isascii() and uf.isalpha()):
            raise ErroValidacao("uf", CodigoErro.FORMATO_INVALIDO, "UF deve ter 2 letras")

        complemento = (self.complemento or "").strip() or None

        object.__setattr__(self, "cep", cep)
        object.__setattr__(self, "uf", uf)
        object.__setattr__(self, "municipio", municipio)
        object.__setattr__(self, "logradouro", logradouro)
        object.__setattr__(self, "numero", numero)
        object.__setattr__(self, "bairro", bairro)
        object.__setattr__(self, "complemento", complemento)

    @property
    def cep_formatado(self) -> str:
        return f"{self.cep[:5]}-{self.cep[5:]}"

    @property
    def completo(self) -> str:
        return (
            f"{self.logradouro}, {self.numero}, {self.bairro}, "
            f"{self.municipio}/{self.uf}, CEP: {self.cep_formatado}"
        )
