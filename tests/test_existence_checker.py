"""Tests for ExistenceChecker: validation, lookup and classification."""

import pytest

from app.core.exceptions import InternalError, InvalidArgumentError
from app.schemas.users import AccountRecord, UserFoundOut, UserNotFoundOut
from app.services.existence_checker import INVALID_EMAIL_MESSAGE, ExistenceChecker


class TestValidation:
    @pytest.mark.parametrize(
        "payload",
        [{}, {"email": 42}, {"email": None}, {"email": ""}, {"email": ["a@b.com"]}, None, "a@b.com", []],
    )
    def test_invalid_payload_never_hits_directory(self, checker, directory, payload):
        with pytest.raises(InvalidArgumentError) as exc:
            checker.check(payload)

        assert exc.value.code == "invalid-argument"
        assert exc.value.message == INVALID_EMAIL_MESSAGE
        assert directory.calls == []

    def test_email_syntax_is_not_validated(self, checker, directory):
        result = checker.check({"email": "not-an-email"})

        assert isinstance(result, UserNotFoundOut)
        assert directory.calls == ["not-an-email"]

    def test_extra_fields_are_ignored(self, checker, directory):
        result = checker.check({"email": "a@b.com", "phone": "+15550100"})

        assert isinstance(result, UserFoundOut)
        assert directory.calls == ["a@b.com"]


class TestLookup:
    def test_found_without_profile_fields(self, checker):
        result = checker.check({"email": "a@b.com"})

        assert result.model_dump(by_alias=True) == {
            "exists": True,
            "uid": "123",
            "name": None,
            "photoUrl": None,
        }

    def test_found_with_profile_fields(self, checker):
        result = checker.check({"email": "jane@example.com"})

        assert result.uid == "uid-jane"
        assert result.name == "Jane Doe"
        assert result.photo_url == "https://example.com/jane.png"

    def test_empty_profile_fields_become_null(self, make_directory):
        directory = make_directory(accounts={"e@x.com": AccountRecord(uid="u1", display_name="", photo_url="")})

        result = ExistenceChecker(directory).check({"email": "e@x.com"})

        assert result.name is None
        assert result.photo_url is None

    def test_not_found_is_a_result(self, checker):
        result = checker.check({"email": "nobody@x.com"})

        assert result.model_dump(by_alias=True) == {"exists": False}

    def test_other_failures_surface_as_internal(self, failing_directory):
        with pytest.raises(InternalError) as exc:
            ExistenceChecker(failing_directory).check({"email": "a@b.com"})

        assert exc.value.code == "internal"
        assert exc.value.message == "User pool us-east-1_x does not exist."

    def test_unexpected_exception_message_is_passed_through(self, make_directory):
        directory = make_directory(error=ConnectionError("Connection reset by peer"))

        with pytest.raises(InternalError) as exc:
            ExistenceChecker(directory).check({"email": "a@b.com"})

        assert exc.value.message == "Connection reset by peer"

    def test_repeated_checks_are_equal(self, checker):
        first = checker.check({"email": "a@b.com"})
        second = checker.check({"email": "a@b.com"})

        assert first == second
