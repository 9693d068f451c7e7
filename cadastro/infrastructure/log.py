# cadastro/infrastructure/log.py
#
# Logger do servico de cadastro, com tempo decorrido desde o start.
#
# Design decisions:
#   - Uma unica funcao log() usada pelo service e pelos clientes de consulta.
#   - Sem framework de logging: stdout com flush, lido pelo supervisor do processo.
#   - Nunca recebe CPF completo: quem chama passa CPF.mascarado.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[cadastro {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
