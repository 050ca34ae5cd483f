"""Montagem da URL e da request HTTP de sintese.

Apenas constroi objetos httpx; envio, autenticacao e tratamento da
resposta ficam com o chamador.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import httpx

from voz.encoding import SPEAK_PATH_PREFIX

if TYPE_CHECKING:
    from voz.config.settings import ClientSettings
    from voz.options import RequestOptions


def _wire_path(path: str) -> str:
    """Ajusta o path de `RequestOptions.path` para a URL final.

    Controles ASCII (0x00-0x1f, 0x7f) sao rejeitados pelo httpx e um segmento
    "." ou ".." seria removido na normalizacao; ambos viram %XX.
    """
    segment = path[len(SPEAK_PATH_PREFIX) :]
    if segment in (".", ".."):
        segment = segment.replace(".", "%2E")
    else:
        segment = "".join(
            f"%{ord(char):02X}" if ord(char) < 0x20 or ord(char) == 0x7F else char
            for char in segment
        )
    return SPEAK_PATH_PREFIX + segment


def build_url(
    options: RequestOptions,
    base_url: str,
    extra_params: Sequence[tuple[str, str]] | None = None,
) -> httpx.URL:
    """URL completa da request de fala.

    O path de `options` e anexado ao path de `base_url`. Query parameters de
    `options` vem primeiro, na ordem dele, seguidos dos que ja estiverem em
    `base_url` e por fim de `extra_params` (ex: token de acesso).

    Raises:
        PathEncodingError: Se o texto nao pode ser percent-encoded.
    """
    base = httpx.URL(base_url)
    # O path ja vem escapado; httpx preserva escapes existentes.
    path = base.path.rstrip("/") + "/" + _wire_path(options.path)
    params = [
        *options.query_parameters,
        *base.params.multi_items(),
        *(extra_params or ()),
    ]
    return base.copy_with(path=path, params=httpx.QueryParams(params))


def build_request(
    options: RequestOptions,
    settings: ClientSettings,
    extra_params: Sequence[tuple[str, str]] | None = None,
) -> httpx.Request:
    """Request GET pronta para ser enviada por um httpx.Client."""
    return httpx.Request("GET", build_url(options, settings.base_url, extra_params))
