import uvicorn

from recipe_api.core.config import settings


def run() -> None:
    uvicorn.run("recipe_api.main:app", host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
