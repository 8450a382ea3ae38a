"""The configured-name holder and its model."""

import pydantic
import pytest

from name_api.config import NameSettings
from name_api.models.name import ConfiguredName
from name_api.services.name import NameService


def test_get_value_returns_configured_value():
    service = NameService(ConfiguredName(value="Alice"))

    assert service.get_value() == "Alice"


def test_from_settings_uses_myname():
    service = NameService.from_settings(NameSettings(myname="Zoë"))

    assert service.get_value() == "Zoë"


def test_configured_name_is_immutable():
    configured = ConfiguredName(value="Alice")

    with pytest.raises(pydantic.ValidationError):
        configured.value = "Mallory"


def test_get_value_is_stable():
    service = NameService(ConfiguredName(value="Alice"))

    assert [service.get_value() for _ in range(3)] == ["Alice"] * 3
