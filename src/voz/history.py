"""Historico de requests recentes em arquivo JSON-lines.

Cada linha e a forma persistida de um RequestOptions. Linhas corrompidas
(JSON invalido ou token desconhecido) sao descartadas na leitura.
"""

from __future__ import annotations

from pathlib import Path

from voz.exceptions import OptionsDecodeError
from voz.logging import get_logger
from voz.options import RequestOptions

logger = get_logger("history")

DEFAULT_MAX_ENTRIES = 50


class RequestHistory:
    """Ultimas `max_entries` requests, da mais antiga para a mais recente.

    Nao e thread-safe: um unico processo deve escrever no arquivo.
    """

    def __init__(self, path: str | Path, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            msg = f"max_entries deve ser >= 1, recebido {max_entries}"
            raise ValueError(msg)
        self._path = Path(path)
        self._max_entries = max_entries

    @property
    def path(self) -> Path:
        return self._path

    def _read_lines(self) -> list[str]:
        if not self._path.exists():
            return []
        raw = self._path.read_text(encoding="utf-8")
        return [line for line in raw.splitlines() if line.strip()]

    def _write_lines(self, lines: list[str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        tmp_path.replace(self._path)

    def append(self, options: RequestOptions) -> None:
        """Adiciona `options` e descarta as entradas mais antigas alem do limite."""
        lines = self._read_lines()
        lines.append(options.to_json())
        overflow = len(lines) - self._max_entries
        if overflow > 0:
            lines = lines[overflow:]
            logger.debug("history_pruned", path=str(self._path), removed=overflow)
        self._write_lines(lines)

    def load(self) -> list[RequestOptions]:
        """Entradas validas, da mais antiga para a mais recente."""
        entries: list[RequestOptions] = []
        for lineno, line in enumerate(self._read_lines(), start=1):
            try:
                entries.append(RequestOptions.from_json(line))
            except OptionsDecodeError as e:
                logger.warning(
                    "history_entry_discarded",
                    path=str(self._path),
                    line=lineno,
                    fields=list(e.fields),
                    reason=e.reason,
                )
        return entries

    def clear(self) -> int:
        """Remove o arquivo. Retorna o numero de linhas descartadas."""
        count = len(self._read_lines())
        self._path.unlink(missing_ok=True)
        return count

    def __len__(self) -> int:
        return len(self._read_lines())
