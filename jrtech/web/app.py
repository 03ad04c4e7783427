#run it with uvicorn jrtech.web.app:app --reload --port 5173  (or: python -m jrtech.web)
from pathlib import Path
from datetime import datetime
import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from dotenv import load_dotenv

from jrtech.core.config import get_settings
from jrtech.web.content import build_landing_content

# Load environment variables from .env file
load_dotenv()

settings = get_settings()

logging.basicConfig(
    level=settings.effective_log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

WEB_DIR = Path(__file__).resolve().parent

app = FastAPI(title=f"{settings.site_name} Landing Page", version="1.0.0", docs_url=None, redoc_url=None)
app.state.templates = Jinja2Templates(directory=str(WEB_DIR / "templates"))
app.mount("/static", StaticFiles(directory=str(WEB_DIR / "static")), name="static")


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing(request: Request):
    """Landing page with the hero, product, features, pricing and contact sections."""
    templates = request.app.state.templates
    current = get_settings()
    content = build_landing_content(current.site_name)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "content": content,
            "brand_mark": current.site_name.split()[0][:2].upper() if current.site_name.strip() else "",
            "contact_api_url": current.contact_api_url,
            "year": datetime.now().year,
        },
    )


def run():
    """Start the presentation app with uvicorn on HOST:WEB_PORT"""
    import uvicorn

    logger.info(f"Starting landing page on http://localhost:{settings.web_port}")
    uvicorn.run(app, host=settings.host, port=settings.web_port, log_level=settings.effective_log_level.lower())
