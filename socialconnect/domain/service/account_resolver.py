"""Local account resolution port."""

from abc import ABC, abstractmethod

from socialconnect.domain.value import AccountId


class AccountIdResolver(ABC):
    """Resolves the local account of the current caller."""

    @abstractmethod
    def resolve_account_id(self) -> AccountId | None:
        """Return the current account id, or None for anonymous callers."""
        pass


class StaticAccountIdResolver(AccountIdResolver):
    """Resolver bound to a fixed account, for jobs and tests."""

    def __init__(self, account_id: AccountId | None) -> None:
        self.account_id = account_id

    def resolve_account_id(self) -> AccountId | None:
        return self.account_id
