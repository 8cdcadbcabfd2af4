from fastapi import Depends

from user_directory.core.config import Settings, get_settings
from user_directory.services.user_directory import UserDirectoryService
from user_directory.services.users_source import UsersSource


def get_users_source(settings: Settings = Depends(get_settings)) -> UsersSource:
    return UsersSource(
        base_url=settings.users_api_root,
        timeout=settings.users_api_timeout_seconds,
    )


def get_user_directory(
    source: UsersSource = Depends(get_users_source),
    settings: Settings = Depends(get_settings),
) -> UserDirectoryService:
    return UserDirectoryService(source, default_total=settings.default_total)
