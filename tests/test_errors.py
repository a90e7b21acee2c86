"""Tests for namereg.protocol.errors module."""

from __future__ import annotations

from namereg.protocol.errors import (
    NameRegError,
    InvalidNameError,
    InvalidZoneFileError,
    InvalidKeyError,
    PreconditionError,
    MissingPaymentKeyError,
    RegistrarNotConfiguredError,
    ProfileError,
    ProfileSigningError,
    InvalidProfileTokenError,
    ProfileUploadError,
    OwnerKeyProvisioningError,
    RegistrarError,
    RegistrarResponseError,
    RegistrarRejectedError,
)


class TestHierarchy:
    def test_invalid_name_is_namereg_error(self):
        assert issubclass(InvalidNameError, NameRegError)

    def test_invalid_zone_file_is_namereg_error(self):
        assert issubclass(InvalidZoneFileError, NameRegError)

    def test_invalid_key_is_namereg_error(self):
        assert issubclass(InvalidKeyError, NameRegError)

    def test_missing_payment_key_is_precondition_error(self):
        assert issubclass(MissingPaymentKeyError, PreconditionError)
        assert issubclass(PreconditionError, NameRegError)

    def test_registrar_not_configured_is_precondition_error(self):
        assert issubclass(RegistrarNotConfiguredError, PreconditionError)

    def test_profile_errors(self):
        assert issubclass(ProfileSigningError, ProfileError)
        assert issubclass(InvalidProfileTokenError, ProfileError)
        assert issubclass(ProfileUploadError, ProfileError)
        assert issubclass(ProfileError, NameRegError)

    def test_owner_key_error_is_namereg_error(self):
        assert issubclass(OwnerKeyProvisioningError, NameRegError)
        assert not issubclass(OwnerKeyProvisioningError, RegistrarError)

    def test_registrar_errors(self):
        assert issubclass(RegistrarResponseError, RegistrarError)
        assert issubclass(RegistrarRejectedError, RegistrarError)
        assert issubclass(RegistrarError, NameRegError)


class TestMessages:
    def test_namereg_error_message(self):
        err = NameRegError("something broke")
        assert str(err) == "something broke"

    def test_missing_payment_key_names_domain(self):
        err = MissingPaymentKeyError("alice.id")
        assert err.domain_name == "alice.id"
        assert str(err) == "Missing payment key for alice.id"

    def test_missing_payment_key_without_domain(self):
        assert str(MissingPaymentKeyError()) == "Missing payment key"

    def test_registrar_rejected_keeps_service_message(self):
        err = RegistrarRejectedError("name already exists")
        assert err.message == "name already exists"
        assert str(err) == "name already exists"

    def test_registrar_rejected_non_string_message(self):
        err = RegistrarRejectedError({"code": 42})
        assert err.message == {"code": 42}
        assert "42" in str(err)

    def test_no_message(self):
        err = NameRegError()
        assert str(err) == ""
