from __future__ import annotations

from typing import Any, Protocol


class InvoiceRenderer(Protocol):
    media_type: str

    def render(self, invoice: Any, template_id: str | None) -> bytes:
        ...
