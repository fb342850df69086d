import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from gymtracker.api.analytics import router as analytics_router
from gymtracker.api.workouts import router as workouts_router
from gymtracker.db import Base, engine
from gymtracker.models.workout import Workout  # noqa: F401  (import ensures tables are registered)
from gymtracker.core.config import settings


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Gym Tracker")

# Allow CORS for the mobile/web client
origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create DB tables (workouts, exercises, sets) on startup
Base.metadata.create_all(bind=engine)

app.include_router(workouts_router)
app.include_router(analytics_router)


@app.get("/")
def root():
    return {"message": "Gym Tracker backend is running"}


@app.get("/health")
def health():
    return {"status": "ok"}
