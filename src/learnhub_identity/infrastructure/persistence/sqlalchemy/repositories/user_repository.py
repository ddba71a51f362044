"""UserRepository backed by the ``users`` table."""

import logging
from typing import Optional, Union

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from learnhub.domain.shared.time import ensure_tz_aware
from learnhub_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserId,
    UserRepository,
)
from learnhub_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _email_value(email: Union[str, Email]) -> str:
    return email.value if isinstance(email, Email) else Email(email).value


class UserRepositorySQLAlchemy(UserRepository):
    """
    Persist ``User`` aggregates through one ``AsyncSession``.

    Writes are flushed but never committed; the caller owns the transaction.
    A clash on the unique ``users.email`` index surfaces as
    ``EmailAlreadyExistsError``.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        model = await self._session.get(UserModel, user_id.value)
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == _email_value(email))
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        stmt = select(UserModel.id).where(UserModel.email == _email_value(email))
        return (await self._session.execute(stmt.limit(1))).first() is not None

    async def find_all(self) -> list[User]:
        return await self._fetch(select(UserModel))

    async def find_all_active(self) -> list[User]:
        return await self._fetch(select(UserModel).where(UserModel.is_active.is_(True)))

    async def save(self, user: User) -> None:
        model = await self._session.get(UserModel, user.id.value)
        created = model is None
        if created:
            model = UserModel(id=user.id.value, created_at=user.created_at)
            self._session.add(model)
        self._copy_fields(user, model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if "unique" in str(e).lower():
                raise EmailAlreadyExistsError(user.email.value) from e
            raise

        if created:
            logger.info("Created user %s <%s>", user.id, user.email)
        else:
            logger.debug("Saved user %s", user.id)

    async def delete(self, user_id: UserId) -> None:
        model = await self._session.get(UserModel, user_id.value)
        if model is None:
            return
        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted user %s", user_id)

    async def _fetch(self, stmt: Select) -> list[User]:
        result = await self._session.execute(stmt.order_by(UserModel.created_at))
        return [self._to_domain(m) for m in result.scalars()]

    @staticmethod
    def _copy_fields(user: User, model: UserModel) -> None:
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.email = user.email.value
        model.age = user.age
        model.is_active = user.is_active
        model.updated_at = user.updated_at

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User.reconstitute(
            id=UserId(model.id),
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            age=model.age,
            is_active=model.is_active,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
