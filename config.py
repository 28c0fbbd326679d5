import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PREFIX = data.get("API_PREFIX", "/api/v1")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Token signing: access and refresh tokens use distinct secrets
    JWT_SECRET = data.get("JWT_SECRET", "dev-access-secret-change-in-production")
    JWT_REFRESH_SECRET = data.get(
        "JWT_REFRESH_SECRET", "dev-refresh-secret-change-in-production"
    )
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_MINUTES = int(data.get("JWT_EXPIRES_MINUTES", 15))
    JWT_REFRESH_EXPIRES_DAYS = int(data.get("JWT_REFRESH_EXPIRES_DAYS", 7))

    # Account security
    SESSION_EXPIRY_HOURS = int(data.get("SESSION_EXPIRY_HOURS", 24))
    MAX_FAILED_LOGIN_ATTEMPTS = int(data.get("MAX_FAILED_LOGIN_ATTEMPTS", 5))
    LOCKOUT_DURATION_MINUTES = int(data.get("LOCKOUT_DURATION_MINUTES", 15))
    FAILED_ATTEMPT_RETENTION_HOURS = int(data.get("FAILED_ATTEMPT_RETENTION_HOURS", 24))
    PASSWORD_HISTORY_SIZE = int(data.get("PASSWORD_HISTORY_SIZE", 5))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    SESSION_CREATE_ATTEMPTS = int(data.get("SESSION_CREATE_ATTEMPTS", 2))

    DEFAULT_ROLE_NAME = data.get("DEFAULT_ROLE_NAME", "USER")
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
