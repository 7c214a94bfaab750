"""Server and session infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        BACKEND_URL: Backend API base URL (default: http://127.0.0.1:8000)
        FRONTEND_URL: URL users land on after signing in or out
        GOOGLE_CLIENT_ID: Google OAuth client ID
        GOOGLE_CLIENT_SECRET: Google OAuth client secret
        SESSION_SECRET_KEY: Secret key used to sign session tokens and cookies
            (required in production; a per-process random key otherwise)
        SESSION_COOKIE_NAME: Cookie holding the signed session token
        SESSION_REFRESH_THRESHOLD_MINUTES: Remaining lifetime under which a
            session token is reissued on the response

    Example:
        ```python
        from infrastructure.configuration import settings

        cookie_name = settings.server.SESSION_COOKIE_NAME
        token_expire = settings.server.ACCESS_TOKEN_EXPIRE_MINUTES
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    FRONTEND_URL: str = Field(default="/", alias="FRONTEND_URL")
    GOOGLE_CLIENT_ID: str | None = Field(default=None, alias="GOOGLE_CLIENT_ID")
    GOOGLE_CLIENT_SECRET: str | None = Field(default=None, alias="GOOGLE_CLIENT_SECRET")
    SECRET_KEY: str | None = Field(default=None, alias="SESSION_SECRET_KEY")
    SESSION_COOKIE_NAME: str = Field(
        default="access_token", alias="SESSION_COOKIE_NAME"
    )
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    ACCESS_TOKEN_MAX_AGE_MINUTES: int = 1440  # Defaults to 24 hours
    SESSION_REFRESH_THRESHOLD_MINUTES: int = Field(
        default=10, alias="SESSION_REFRESH_THRESHOLD_MINUTES"
    )
