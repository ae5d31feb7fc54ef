"""
Credential store operations: signup and credential verification.

Unknown user and wrong password both raise InvalidCredentials with the same
message, so callers cannot tell which one happened.
"""
import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import DuplicateUsername, InvalidCredentials, InvalidSignup, StoreError
from shared.observability import shop_login_total, shop_signup_total
from shared.security.passwords import hash_password, verify_password

from .models import User
from .repository import UserRepository

logger = structlog.get_logger(__name__)


class AuthService:

    @staticmethod
    async def create_user(db: AsyncSession, username: str, password: str) -> int:
        if not username or not password:
            shop_signup_total.labels(status="invalid").inc()
            raise InvalidSignup("Username and password are required")

        existing = await UserRepository.get_by_username(db, username)
        if existing:
            shop_signup_total.labels(status="duplicate").inc()
            raise DuplicateUsername(username)

        try:
            password_hash = hash_password(password)
        except ValueError:
            # passlib rejects passwords the backend cannot hash, e.g. NUL bytes for bcrypt
            shop_signup_total.labels(status="invalid").inc()
            raise InvalidSignup("Password contains characters that are not allowed")

        user = User(username=username, password_hash=password_hash)
        try:
            created = await UserRepository.create(db, user)
        except IntegrityError:
            # lost a race with a concurrent signup for the same name
            await db.rollback()
            shop_signup_total.labels(status="duplicate").inc()
            raise DuplicateUsername(username)
        except SQLAlchemyError as e:
            await db.rollback()
            shop_signup_total.labels(status="error").inc()
            logger.error("signup_store_error", username=username, error=str(e))
            raise StoreError("insert") from e

        shop_signup_total.labels(status="success").inc()
        logger.info("user_signed_up", user_id=created.id, username=username)
        return created.id

    @staticmethod
    async def verify_credentials(db: AsyncSession, username: str, password: str) -> User:
        user = await UserRepository.get_by_username(db, username) if username else None
        if not user or not verify_password(password, user.password_hash):
            shop_login_total.labels(status="failed").inc()
            logger.info("login_failed", username=username)
            raise InvalidCredentials()
        shop_login_total.labels(status="success").inc()
        return user

    @staticmethod
    async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
        if not username:
            return None
        return await UserRepository.get_by_username(db, username)
