from __future__ import annotations

import pytest

from versionkit.exceptions import (
    ConfigError,
    ErrorKind,
    IllegalFormatError,
    VersionKitError,
    is_error,
)


@pytest.mark.unit
class TestVersionKitError:
    """Tests for the base exception."""

    def test_message_only(self) -> None:
        exc = VersionKitError("boom", ErrorKind.CONFIG)

        assert str(exc) == "boom"
        assert exc.details == {}
        assert exc.kind is ErrorKind.CONFIG

    def test_details_are_rendered(self) -> None:
        exc = VersionKitError("boom", ErrorKind.CONFIG, {"a": 1, "b": "x"})

        assert str(exc) == "boom (a=1, b=x)"

    def test_details_are_copied(self) -> None:
        details = {"a": 1}
        exc = VersionKitError("boom", ErrorKind.CONFIG, details)
        exc.details["b"] = 2

        assert details == {"a": 1}

    def test_repr(self) -> None:
        exc = VersionKitError("boom", ErrorKind.ILLEGAL_FORMAT, {"a": 1})

        assert repr(exc) == "VersionKitError(message='boom', kind=ILLEGAL_FORMAT, details={'a': 1})"


@pytest.mark.unit
class TestIllegalFormatError:
    """Tests for IllegalFormatError."""

    def test_fields(self) -> None:
        exc = IllegalFormatError("bad", version="1.x", component="x")

        assert exc.kind is ErrorKind.ILLEGAL_FORMAT
        assert exc.version == "1.x"
        assert exc.component == "x"
        assert str(exc) == "bad (version=1.x, component=x)"

    def test_omits_missing_fields(self) -> None:
        exc = IllegalFormatError("bad", version="1.2.3.4")

        assert exc.details == {"version": "1.2.3.4"}

    def test_is_version_kit_error(self) -> None:
        assert isinstance(IllegalFormatError("bad"), VersionKitError)


@pytest.mark.unit
class TestConfigError:
    """Tests for ConfigError."""

    def test_fields(self) -> None:
        exc = ConfigError("bad", config_path="v.toml", option="descending")

        assert exc.kind is ErrorKind.CONFIG
        assert exc.details == {"path": "v.toml", "option": "descending"}


@pytest.mark.unit
class TestIsError:
    """Tests for is_error."""

    def test_matching_kind(self) -> None:
        assert is_error(IllegalFormatError("bad"), ErrorKind.ILLEGAL_FORMAT) is True

    def test_other_kind(self) -> None:
        assert is_error(IllegalFormatError("bad"), ErrorKind.CONFIG) is False

    def test_foreign_exception(self) -> None:
        assert is_error(ValueError("bad"), ErrorKind.ILLEGAL_FORMAT) is False
