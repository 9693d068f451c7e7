# cadastro/infrastructure/consultas/erros.py
from __future__ import annotations


class ConsultaNaoEncontrada(Exception):
    """O servico externo respondeu, mas nao conhece o CEP/CNPJ."""


class ConsultaIndisponivel(Exception):
    """Falha de rede, timeout ou status HTTP de erro no servico externo."""
