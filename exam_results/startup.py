"""
Application Startup Module

Startup and shutdown handlers for the FastAPI application.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable

from fastapi import FastAPI

from exam_results.utils.logger import logger
from exam_results.config.constants import get_openrouter_api_key, get_openrouter_model_name


def create_startup_handler() -> Callable:
    """
    Creates a startup handler function for FastAPI.

    Returns:
        A function that will be executed when the FastAPI application starts
    """
    async def startup() -> None:
        logger.info("Starting application initialization...")
        logger.info(f"Exam results extraction will use model {get_openrouter_model_name()}")

        if not get_openrouter_api_key():
            logger.warning("OPENROUTER_API_KEY is not set; extraction requests will fail until it is configured")

        logger.info("Application initialization completed")

    return startup


def create_shutdown_handler() -> Callable:
    """
    Creates a shutdown handler function for FastAPI.

    Returns:
        A function that will be executed when the FastAPI application shuts down
    """
    async def shutdown() -> None:
        logger.info("Application shutdown completed")

    return shutdown


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Lifespan context for the FastAPI application, running the startup handler
    before serving and the shutdown handler afterwards.

    Args:
        app: The FastAPI application instance
    """
    await create_startup_handler()()
    yield
    await create_shutdown_handler()()
