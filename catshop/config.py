from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    environment: str = "development"
    jwt_secret: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    jwt_expires_seconds: int = 7 * 24 * 60 * 60  # 7 days
    bcrypt_rounds: int = 10
    frontend_origin: str = "http://localhost:5173"
    products_page_size: int = 9
    images_dir: str = "./public/images"
    user_store: str = "memory"  # "memory" or "sql"
    database_url: str = "sqlite+aiosqlite:///./data/db.sqlite3"
    data_dir: str = "./data"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def cors_origins(self) -> list[str]:
        origins = [self.frontend_origin, "http://localhost:5173"]
        return list(dict.fromkeys(o for o in origins if o))


settings = Settings()
