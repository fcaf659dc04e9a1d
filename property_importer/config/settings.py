from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "properties"
    db_username: str = "properties"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_connect_timeout_seconds: int = 10
    db_statement_timeout_ms: int = 15000

    fetch_timeout_seconds: int = 30
    # Directory that local paths and file:// URLs may read from; empty disables them.
    fetch_local_root: str = ""

    pdf_engine: str = "pdfplumber"

    extraction_provider: str = "openai"
    extraction_max_input_chars: int = 100_000
    extraction_retry_on_invalid_response: bool = True

    extraction_openai_api_key: str = ""
    extraction_openai_model_name: str = "gpt-4o"
    extraction_openai_timeout_seconds: int = 60
    extraction_openai_temperature: float = 0.0

    extraction_openai_compatible_base_url: str = ""
    extraction_openai_compatible_api_key: str = ""
    extraction_openai_compatible_model_name: str = ""
    extraction_openai_compatible_timeout_seconds: int = 60

    storage_backend: str = "local"
    storage_bucket: str = "property-assets"
    storage_archive_prefix: str = "documents"
    storage_root: str = "/app/storage"
    storage_public_base_url: str = "http://localhost:8000/storage"
    storage_timeout_seconds: int = 30
    supabase_url: str = ""
    supabase_key: str = ""

    concurrent_stage_timeout_seconds: int = 180
