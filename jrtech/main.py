#run it with uvicorn jrtech.main:app --reload --port 3001  (or: python -m jrtech)
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import logging

from jrtech.api.api_router import api_router
from jrtech.core.config import get_settings
from jrtech.core.errors import register_exception_handlers

# Load environment variables from .env file
load_dotenv()

settings = get_settings()

# Set up logging
logging.basicConfig(
    level=settings.effective_log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title=f"{settings.site_name} Backend", version="1.0.0")

# CORS setup so the landing page (served from another port) can post to /contact
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router)


def run():
    """Start the backend with uvicorn on HOST:PORT"""
    import uvicorn

    logger.info(f"Starting backend server on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.effective_log_level.lower())
