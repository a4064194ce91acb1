from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "json"  # "json" | "memory"
    DATA_DIR: str = "./data"
    SERVICES_KEY: str = "barbershop_services"
    APPOINTMENTS_KEY: str = "barbershop_appointments"

    DEFAULT_START_TIME: str = "09:00"

    BUSINESS_NAME: str = "Barbearia Sousa"
    CURRENCY_SYMBOL: str = "R$"
    MESSAGE_LANGUAGE: str = "pt"


settings = Settings()
