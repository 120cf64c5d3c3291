import logging

import uvicorn
from fastapi import FastAPI

from .settings import settings
from .routers import webhooks
from .routers import schemas

logging.basicConfig(
	level=settings.log_level.upper(),
	format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
	datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="CEFR Evaluation Report API")
app.include_router(webhooks.router)
app.include_router(schemas.router)

@app.get("/info")
def root():
	return {"status": "ok", "webhook_secret_configured": bool(settings.webhook_secret)}


def run() -> None:
	logger.info(f"Starting CEFR report receiver on {settings.host}:{settings.port}")
	uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
	run()
