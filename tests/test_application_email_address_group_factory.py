"""
Application: EmailAddressGroupFactory
"""

import logging

import pytest

from crm_email.application.email_address_group_factory import EmailAddressGroupFactory
from crm_email.domain.errors import ValidationError


def test_create_from_data_puts_flagged_primary_first_and_keeps_flags():
    factory = EmailAddressGroupFactory()

    group = factory.create_from_data(
        [
            {"emailAddress": "one@test.com", "primary": False, "invalid": True},
            {"emailAddress": "two@test.com", "primary": True, "optOut": True},
            {"emailAddress": "three@test.com"},
        ]
    )

    assert group.get_address_list() == ["two@test.com", "one@test.com", "three@test.com"]
    assert group.get_primary().is_opted_out()
    assert group.get_list()[1].is_invalid()


def test_create_from_data_without_flag_uses_first_row():
    group = EmailAddressGroupFactory().create_from_data(
        [{"emailAddress": "one@test.com"}, {"emailAddress": "two@test.com"}]
    )

    assert group.get_primary().get_address() == "one@test.com"


def test_create_from_data_with_several_primaries_keeps_first_and_warns(caplog):
    with caplog.at_level(logging.WARNING):
        group = EmailAddressGroupFactory().create_from_data(
            [
                {"emailAddress": "one@test.com"},
                {"emailAddress": "two@test.com", "primary": True},
                {"emailAddress": "three@test.com", "primary": True},
            ]
        )

    assert group.get_address_list() == ["two@test.com", "one@test.com", "three@test.com"]
    assert "Several primary" in caplog.text


def test_create_from_empty_data():
    factory = EmailAddressGroupFactory()

    assert factory.create_from_data([]).is_empty()
    assert factory.create_from_data(None).is_empty()

    group = factory.create_from_data([], primary_address="only@test.com")
    assert group.get_address_list() == ["only@test.com"]


def test_create_from_data_raises_on_malformed_row_and_duplicates():
    factory = EmailAddressGroupFactory()

    with pytest.raises(ValidationError) as exc_info:
        factory.create_from_data([{"primary": True}])
    assert exc_info.value.reason == "malformed"

    with pytest.raises(ValidationError, match="duplicate"):
        factory.create_from_data(
            [{"emailAddress": "one@test.com"}, {"emailAddress": "one@test.com", "primary": True}]
        )


def test_create_from_empty_data_ignores_blank_primary_address():
    factory = EmailAddressGroupFactory()

    assert factory.create_from_data([], primary_address="   ").is_empty()
    assert factory.create_from_data([], primary_address="").is_empty()
