"""
Prompt practice API server.

Usage:
    python main.py            # production
    python main.py --dev      # auto-reload
    python main.py --port 8100
"""

import argparse
import logging
import os
from contextlib import asynccontextmanager

import sentry_sdk
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()
load_dotenv(".env.local", override=True)

from core.database import close_engine
from web_api.routes import hf_router, lessons_router, practice_router, users_router

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

SENTRY_DSN = os.environ.get("SENTRY_DSN")
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        environment=os.environ.get("ENVIRONMENT", "development"),
        traces_sample_rate=0.1,
    )
    logger.info("Sentry error tracking enabled")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_engine()


app = FastAPI(title="Prompt Practice API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(practice_router)
app.include_router(users_router)
app.include_router(lessons_router)
app.include_router(hf_router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def main():
    parser = argparse.ArgumentParser(description="Run the prompt practice API")
    parser.add_argument("--dev", action="store_true", help="Enable auto-reload")
    parser.add_argument(
        "--port", type=int, default=int(os.environ.get("PORT", "3001"))
    )
    parser.add_argument("--host", default="0.0.0.0")
    args = parser.parse_args()

    logger.info("Server running on port %d", args.port)
    uvicorn.run("main:app", host=args.host, port=args.port, reload=args.dev)


if __name__ == "__main__":
    main()
