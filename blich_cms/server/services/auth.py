"""
Admin authentication service.

Stateless bearer tokens: login verifies the password and issues a signed JWT,
logout is a no-op on the server, and every admin request decodes the token
again to resolve the current user.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError

from blich_cms.core.database.entities.admin_users import AdminUser
from blich_cms.core.database.repositories.admin_users import AdminUserRepository
from blich_cms.core.errors import AuthenticationError, ConflictError, ValidationError
from blich_cms.core.logging_config import get_logger
from blich_cms.core.models.io.auth import AdminUserRead, LoginResponse
from blich_cms.core.security import create_access_token, decode_access_token, hash_password, verify_password
from blich_cms.server.core.config import JWTConfig

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
MIN_PASSWORD_LENGTH = 8


class AuthService:
    """Login and token resolution for admin users."""

    def __init__(self, repository: AdminUserRepository, jwt_config: JWTConfig):
        self.repository = repository
        self.jwt = jwt_config

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Exchange credentials for an access token.

        Raises:
            AuthenticationError: Unknown email, inactive account or wrong password
        """
        user = await self.repository.get_by_email(email)
        if user is None or not user.is_active or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = create_access_token(
            str(user.id),
            secret=self.jwt.secret,
            algorithm=self.jwt.algorithm,
            expires_minutes=self.jwt.expires_minutes,
            extra_claims={"username": user.email},
        )
        logger.info(f"Admin user logged in: id={user.id}")
        return LoginResponse(token=token, user=AdminUserRead.model_validate(user))

    async def resolve_user(self, token: Optional[str]) -> AdminUser:
        """
        Resolve the admin user a bearer token was issued to.

        Raises:
            AuthenticationError: Missing, invalid or expired token, or the user is gone or inactive
        """
        claims = decode_access_token(token or "", secret=self.jwt.secret, algorithm=self.jwt.algorithm)
        try:
            user_id = int(claims["sub"])
        except (TypeError, ValueError) as e:
            raise AuthenticationError("Invalid token") from e

        user = await self.repository.get_by_id(user_id)
        if user is None or not user.is_active:
            raise AuthenticationError("Invalid token")
        return user

    async def create_admin(self, email: str, password: str, full_name: str = "") -> AdminUser:
        """
        Create a new admin account.

        Raises:
            ValidationError: Malformed email or too short password
            ConflictError: The email is already registered
        """
        email = email.strip().lower()
        if "@" not in email:
            raise ValidationError("Invalid email address", field="email")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters", field="password"
            )

        user = AdminUser(email=email, full_name=full_name, password_hash=hash_password(password))
        try:
            created = await self.repository.create(user)
        except IntegrityError as e:
            raise ConflictError("Admin user with this email already exists") from e
        logger.info(f"Admin user created: id={created.id}")
        return created
