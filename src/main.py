import uvicorn
from fastapi import FastAPI

from src.config.settings_env import settings
from src.shared.utils import initialize_logger
from src.api.routers import parking


def create_app() -> FastAPI:
    initialize_logger()
    app = FastAPI(title=settings.APP_NAME)
    app.include_router(parking.router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.FASTAPI_HOST, port=settings.FASTAPI_PORT)
