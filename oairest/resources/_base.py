from urllib.parse import quote

from ..core.errors import InvalidArgumentError
from ..core.transport import HTTPTransport


class APIResource:
    """Base for endpoint facades: holds the shared transport."""

    def __init__(self, transport: HTTPTransport):
        self._transport = transport


def path(template: str, **ids: str) -> str:
    """Substitute path parameters into ``template``, rejecting empty ids."""
    for name, value in ids.items():
        if not value or not str(value).strip():
            raise InvalidArgumentError(f"`{name}` is required")
    return template.format(**{name: quote(str(value), safe="") for name, value in ids.items()})
