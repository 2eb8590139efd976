from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "room_chat"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    DEFAULT_ROOM: str = "lobby"

    JOKE_URL: str = "https://icanhazdadjoke.com/"
    JOKE_TIMEOUT_SECONDS: float = 10.0

settings = Settings()
