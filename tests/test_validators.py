import pytest

from market_console.validators import is_valid_email, is_valid_phone


@pytest.mark.parametrize("email", ["", "a@b.co", "first.last+tag@mail.example.org"])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["plain", "a@b", "a@b.c", "@example.com", "a b@example.com"])
def test_invalid_emails(email):
    assert not is_valid_email(email)


@pytest.mark.parametrize("phone", ["5550100000", "555-010-0000", "(555) 010-0000", "555 010 0000"])
def test_valid_phones(phone):
    assert is_valid_phone(phone)


@pytest.mark.parametrize("phone", ["12345", "555-010-00000", "abcdefghij", "+1 555 010 0000"])
def test_invalid_phones(phone):
    # the country code pushes the digit count past ten
    assert not is_valid_phone(phone)


def test_trailing_newline_is_rejected():
    assert not is_valid_phone("5551234567\n")
    assert not is_valid_email("a@b.co\n")
