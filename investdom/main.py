#run it with uvicorn investdom.main:app --reload
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import logging

# Load environment variables from .env file
load_dotenv()

from investdom.api.api_router import api_router
from investdom.core.config import get_settings

settings = get_settings()

# Set up logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Report contact form configuration on application startup"""
    current = get_settings()
    if not current.resend_api_key:
        logger.warning("⚠️ RESEND_API_KEY is not set - /api/contact will answer with a configuration error")
    if not current.contact_email:
        logger.warning(f"⚠️ CONTACT_EMAIL is not set - submissions go to {current.effective_contact_email}")
    logger.info(f"🚀 InvestDom backend ready for {current.site_url}")
    yield


app = FastAPI(title="InvestDom Website Backend", version="1.0.0", lifespan=lifespan)

# CORS setup - the form is posted from the website itself
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(api_router)
