from __future__ import annotations

from kanta.util.properties import MISSING, accessor_names, resolve


class Account:
    balance = 10

    def __init__(self) -> None:
        self.owner = "ada"

    def get_balance(self) -> int:
        return 20

    def getCurrency(self) -> str:
        return "EUR"

    @property
    def status(self) -> str:
        return "open"


def test_accessor_names() -> None:
    assert accessor_names("code") == ("get_code", "getCode")


def test_accessor_takes_precedence_over_attribute() -> None:
    assert resolve(Account(), "balance") == 20


def test_camel_case_accessor() -> None:
    assert resolve(Account(), "currency") == "EUR"


def test_plain_attribute_and_property() -> None:
    account = Account()
    assert resolve(account, "owner") == "ada"
    assert resolve(account, "status") == "open"


def test_non_callable_accessor_is_ignored() -> None:
    class Settings:
        get_mode = "not a method"
        mode = "strict"

    assert resolve(Settings(), "mode") == "strict"


def test_missing_property() -> None:
    assert resolve(Account(), "nickname") is MISSING
    assert not MISSING
