"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sba504.api.routes import calculator
from sba504.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="SBA 504 Calculator",
    description="Own vs rent estimator for commercial real estate financed with an SBA 504 loan",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculator.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("sba504.api.app:app", port=8000, reload=settings.debug)
