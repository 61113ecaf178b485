"""
FastAPI main application
Entry Catalog Server

Entrypoint for uvicorn (`uvicorn app.main:app`): loads settings,
configures logging and builds the app from app.factory.
"""
from app.config import load_config
from app.factory import create_app, setup_logging


settings = load_config()
setup_logging(settings.log_level)

app = create_app(settings)


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
