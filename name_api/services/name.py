# name_api/services/name.py

from name_api.config import NameSettings
from name_api.models.name import ConfiguredName


class NameService:
    """Read-only holder for the configured name, shared by all requests."""

    def __init__(self, configured: ConfiguredName) -> None:
        self._configured = configured

    @classmethod
    def from_settings(cls, settings: NameSettings) -> "NameService":
        return cls(ConfiguredName(value=settings.myname))

    def get_value(self) -> str:
        return self._configured.value
