import uvicorn

from property_importer.api.app import create_app
from property_importer.config.settings import Settings
from property_importer.database.connection import Database
from property_importer.logging.logger import Log
from property_importer.processor.processor import build_processor


def main() -> None:
    """Entry point: settings -> logging -> pool -> processor -> HTTP server."""
    settings = Settings()
    Log.configure(settings.log_level)
    database = Database.from_settings(settings)

    try:
        processor = build_processor(settings, database)
        app = create_app(processor)
        Log.info(f"Serving property importer on {settings.api_host}:{settings.api_port}")
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_level=settings.log_level.lower(),
        )
    finally:
        database.close()


if __name__ == "__main__":
    main()
