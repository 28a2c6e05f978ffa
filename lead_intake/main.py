"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from lead_intake.adapters.inbound.http.routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Roof Lead Intake",
    description="Two-step roofing lead intake with sheet storage and routed e-mail notifications",
    version="0.1.0",
)

app.include_router(router)
