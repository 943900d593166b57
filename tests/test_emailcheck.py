import pytest

from stringtasks.emailcheck import (
    check_allowed,
    check_domain_part,
    check_local_part,
    domain_part,
    has_single_at,
    is_valid_email,
    local_part,
)


@pytest.mark.parametrize(
    "address",
    [
        "simple@example.com",
        "very.common@example.com",
        "disposable.style.email.with+symbol@example.com",
        "other.email-with-hyphen@example.com",
        "fully-qualified-domain@example.com",
        "user.name+tag+sorting@example.com",
        "x@example.com",
        "mailhost!username@example.com",
        "user%example.com@example.com",
    ],
)
def test_valid_addresses(address):
    assert is_valid_email(address) is True


@pytest.mark.parametrize(
    "address",
    [
        "John..Doe@example.com",
        "Abc.example.com",
        "A@b@c@example.com",
        'a"b(c)d,e:f;g<h>i[j\\k]l@example.com',
        "1234567890123456789012345678901234567890123456789012345678901234+x@example.com",
        "i_like_underscore@but_its_not_allow_in this_part.example.com",
        "@example.com",
        "user@",
        ".user@example.com",
        "user.@example.com",
        "user@.example.com",
        "user@example.com.",
    ],
)
def test_invalid_addresses(address):
    assert is_valid_email(address) is False


def test_has_single_at():
    assert has_single_at("simple@example.com") is True
    assert has_single_at("Abc.example.com") is False
    assert has_single_at("A@b@c@example.com") is False


def test_parts_split_on_at():
    assert local_part("very.common@example.com") == "very.common"
    assert domain_part("very.common@example.com") == "example.com"


def test_parts_use_first_and_last_at():
    assert local_part("A@b@c@example.com") == "A"
    assert domain_part("A@b@c@example.com") == "example.com"


def test_parts_without_at_raise():
    with pytest.raises(ValueError):
        local_part("Abc.example.com")
    with pytest.raises(ValueError):
        domain_part("Abc.example.com")


def test_parts_round_trip():
    address = "user.name+tag+sorting@example.com"
    assert local_part(address) + "@" + domain_part(address) == address


def test_check_allowed_rejects_double_dot():
    assert check_allowed("a..b", set("ab.")) is False
    assert check_allowed("a.b.a", set("ab.")) is True


def test_check_allowed_rejects_foreign_char():
    assert check_allowed("abc", set("ab")) is False


def test_domain_without_dot_is_valid():
    assert check_domain_part("mailserver1") is True


def test_local_special_chars_not_allowed_in_domain():
    assert check_local_part("mailhost!username") is True
    assert check_domain_part("mailhost!username") is False


def test_length_limits():
    assert check_local_part("a" * 64) is True
    assert check_local_part("a" * 65) is False
    assert check_domain_part("a" * 63) is True
    assert check_domain_part("a" * 64) is False
    assert check_local_part("") is False
    assert check_domain_part("") is False