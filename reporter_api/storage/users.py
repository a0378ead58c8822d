"""Storage for the users, reporter_accounts and o_auth_accounts tables."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.exceptions import NotFoundError, WriteError
from ..core.logging import get_logger
from ..core.time import utcnow
from ..models import PRIVILEGE_REGISTERED, OAuthAccount, ReporterAccount, User
from .base import save

logger = get_logger(__name__)


class UserStorage(Protocol):
    """Read/write operations on users and their linked accounts."""

    # get
    def get_user_by_id(self, user_id: int) -> User: ...

    def get_oauth_data(self, a_id: Optional[str], a_type: str) -> OAuthAccount: ...

    def get_user_data_by_oauth(self, account: OAuthAccount) -> User: ...

    def get_reporter_account_data(self, email: str) -> ReporterAccount: ...

    def get_user_data_by_reporter_account(self, account: ReporterAccount) -> User: ...

    def get_reporter_account_by_user_id(self, user_id: int) -> ReporterAccount: ...

    # create
    def insert_user_by_oauth(self, account: OAuthAccount) -> User: ...

    def insert_user_by_reporter_account(self, account: ReporterAccount) -> User: ...

    # update
    def update_oauth_data(self, new_data: OAuthAccount) -> OAuthAccount: ...

    def update_reporter_account_password(
        self, account: ReporterAccount, password: str
    ) -> ReporterAccount: ...

    def update_reporter_account_active(
        self, account: ReporterAccount, active: bool
    ) -> ReporterAccount: ...

    def update_reporter_account_activate_token(
        self, account: ReporterAccount, token: str, expires_at: Optional[datetime]
    ) -> ReporterAccount: ...

    def activate_reporter_account(self, account: ReporterAccount) -> ReporterAccount: ...


class SQLModelUserStorage:
    """``UserStorage`` backed by a request-scoped SQLModel session."""

    def __init__(self, session: Session):
        self.session = session

    def get_user_by_id(self, user_id: int) -> User:
        user = self.session.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_oauth_data(self, a_id: Optional[str], a_type: str) -> OAuthAccount:
        """Return the newest OAuth account matching the provider identity."""

        logger.info("Getting the matching OAuth data: type=%s a_id=%s", a_type, a_id)
        account = self.session.exec(
            select(OAuthAccount)
            .where(OAuthAccount.type == a_type, OAuthAccount.a_id == a_id)
            .order_by(OAuthAccount.id.desc())
        ).first()
        if account is None:
            logger.info("storage.users.get_oauth_data: no record for %s/%s", a_type, a_id)
            raise NotFoundError("OAuth account not found")
        return account

    def get_user_data_by_oauth(self, account: OAuthAccount) -> User:
        matched = self.get_oauth_data(account.a_id, account.type)
        return self._owner(matched.user_id)

    def get_reporter_account_data(self, email: str) -> ReporterAccount:
        logger.info("Getting the matching reporter account data: %s", email)
        account = self.session.exec(
            select(ReporterAccount)
            .where(ReporterAccount.account == email)
            .order_by(ReporterAccount.id)
        ).first()
        if account is None:
            raise NotFoundError("Reporter account not found")
        return account

    def get_user_data_by_reporter_account(self, account: ReporterAccount) -> User:
        return self._owner(account.user_id)

    def get_reporter_account_by_user_id(self, user_id: int) -> ReporterAccount:
        account = self.session.exec(
            select(ReporterAccount).where(ReporterAccount.user_id == user_id)
        ).first()
        if account is None:
            raise NotFoundError("Reporter account not found")
        return account

    def insert_user_by_oauth(self, account: OAuthAccount) -> User:
        """Create a registered user from an OAuth profile and link the account."""

        user = User(
            email=account.email,
            first_name=account.first_name,
            last_name=account.last_name,
            gender=account.gender,
            privilege=PRIVILEGE_REGISTERED,
            registration_date=utcnow(),
        )
        return self._insert_with_account(
            user, account, context="storage.users.insert_user_by_oauth"
        )

    def insert_user_by_reporter_account(self, account: ReporterAccount) -> User:
        user = User(email=account.account, registration_date=utcnow())
        return self._insert_with_account(
            user, account, context="storage.users.insert_user_by_reporter_account"
        )

    def update_oauth_data(self, new_data: OAuthAccount) -> OAuthAccount:
        """Refresh the profile fields of an existing OAuth account.

        The identity (``type``, ``a_id``) and owner are left as stored.
        """

        matched = self.get_oauth_data(new_data.a_id, new_data.type)
        matched.email = new_data.email
        matched.name = new_data.name
        matched.first_name = new_data.first_name
        matched.last_name = new_data.last_name
        matched.gender = new_data.gender
        matched.picture = new_data.picture
        return save(self.session, matched, context="storage.users.update_oauth_data")

    def update_reporter_account_password(
        self, account: ReporterAccount, password: str
    ) -> ReporterAccount:
        account.password = password
        return save(
            self.session, account, context="storage.users.update_reporter_account_password"
        )

    def update_reporter_account_active(
        self, account: ReporterAccount, active: bool
    ) -> ReporterAccount:
        account.active = active
        return save(
            self.session, account, context="storage.users.update_reporter_account_active"
        )

    def update_reporter_account_activate_token(
        self, account: ReporterAccount, token: str, expires_at: Optional[datetime]
    ) -> ReporterAccount:
        account.activate_token = token
        account.activate_expires_at = expires_at
        return save(
            self.session,
            account,
            context="storage.users.update_reporter_account_activate_token",
        )

    def activate_reporter_account(self, account: ReporterAccount) -> ReporterAccount:
        """Mark the account active and spend its activation token."""

        account.active = True
        account.activate_token = None
        account.activate_expires_at = None
        return save(
            self.session, account, context="storage.users.activate_reporter_account"
        )

    def _owner(self, user_id: Optional[int]) -> User:
        if user_id is None:
            raise NotFoundError("User not found")
        return self.get_user_by_id(user_id)

    def _insert_with_account(
        self, user: User, account: Union[OAuthAccount, ReporterAccount], *, context: str
    ) -> User:
        # User and linked account are committed together or not at all.
        logger.info("Inserting user data: %s", user.email)
        try:
            self.session.add(user)
            self.session.flush()
            account.user_id = user.id
            self.session.add(account)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("%s.insert_error: %s", context, exc)
            raise WriteError("Failed to create user") from exc
        self.session.refresh(user)
        self.session.refresh(account)
        return user


__all__ = ["SQLModelUserStorage", "UserStorage"]
