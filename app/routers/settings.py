from fastapi import APIRouter, Depends

from app import dependencies as deps
from app.schemas.post import SettingsStatus
from app.settings import Settings

router = APIRouter()


@router.get("/settings/status", response_model=SettingsStatus)
def settings_status(current_settings: Settings = Depends(deps.get_settings)):
    """Report whether the GitHub connection is fully configured."""
    return SettingsStatus(
        configured=current_settings.is_configured,
        owner=current_settings.GITHUB_USERNAME,
        repo=current_settings.GITHUB_REPO,
        branch=current_settings.GITHUB_BRANCH,
    )
