import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette import status
from starlette.responses import JSONResponse

from rcl.config import config, environment
from rcl.database import database
from rcl.routes import (
    auth,
    brackets,
    club_points,
    clubs,
    day_registrations,
    events,
    leaderboard,
    membership,
    participation_points,
    permissions,
    players,
    portal_settings,
    registrations,
    teams,
    track_events,
)
from rcl.utils.alembic import alembic_run_migrations
from rcl.utils.logging import logger


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting RCL portal in %s mode", environment.value)
    if config.auto_run_migrations:
        await asyncio.to_thread(alembic_run_migrations)

    await database.connect()
    yield
    await database.disconnect()


app = FastAPI(
    title="RCL Portal API",
    docs_url="/docs",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in config.cors_origins.split(",") if origin.strip()],
    allow_origin_regex=config.cors_origin_regex or None,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    _: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


routers = {
    "Auth": auth.router,
    "Brackets": brackets.router,
    "Club points": club_points.router,
    "Clubs": clubs.router,
    "Day registrations": day_registrations.router,
    "Events": events.router,
    "Leaderboard": leaderboard.router,
    "Membership": membership.router,
    "Participation points": participation_points.router,
    "Permissions": permissions.router,
    "Players": players.router,
    "Portal settings": portal_settings.router,
    "Registrations": registrations.router,
    "Teams": teams.router,
    "Track events": track_events.router,
}

for tag, router in routers.items():
    app.include_router(router, tags=[tag])
