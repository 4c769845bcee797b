from fastapi import APIRouter, Depends

from investdom.core.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
def health_check(settings: Settings = Depends(get_settings)):
    """
    Health check endpoint.

    Only reports whether the contact form integration is configured,
    never the configured values themselves.
    """
    return {
        "status": "ok",
        "env_vars": {
            "resend_api_key": bool(settings.resend_api_key),
            "contact_email": bool(settings.contact_email),
        },
        "site": settings.site_url,
    }
