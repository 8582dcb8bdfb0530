from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./tilequote.db"
    COMPANY_NAME: str = "Tiling Quote"
    COMPANY_EMAIL: str = ""
    COMPANY_PHONE: str = ""

    # Sharing — numbers starting with 0 are rewritten to this prefix
    COUNTRY_CODE: str = "+44"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
