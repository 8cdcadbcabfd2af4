import uvicorn

from user_directory.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "user_directory.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "dev",
    )
