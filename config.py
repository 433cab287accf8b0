import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _origins(value):
    if not value or value.strip() == "*":
        return "*"
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Config:
    PORT = int(os.environ.get("PORT", 3000))

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///cars.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # log every query in development
    SQLALCHEMY_ECHO = (
        os.environ.get("SQLALCHEMY_ECHO", "").lower() in ("1", "true", "yes")
        or os.environ.get("FLASK_ENV") == "development"
    )

    # images are served back from the static folder at /images/<name>
    STATIC_FOLDER = os.environ.get("STATIC_FOLDER", os.path.join(BASE_DIR, "public"))
    IMAGE_FOLDER = os.environ.get("IMAGE_FOLDER")

    CORS_ORIGINS = _origins(os.environ.get("CORS_ORIGINS"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ECHO = False
