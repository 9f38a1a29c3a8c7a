"""
Description:
Module for adding CORS middleware to FastAPI application.

Arguments:
- app: FastAPI application instance to which CORS middleware will be added.
- origins: Allowed origins, taken from the CORS_ORIGINS setting.

Returns:
- None, but modifies the app to allow cross-origin requests from specified origins.

Dependencies:
- fastapi: For creating the FastAPI application and adding middleware.
- fastapi.middleware.cors: For CORS middleware functionality.
- loguru: For logging information about the middleware setup.

Author: @kcaparas1630
"""

from typing import List
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

DEFAULT_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
]

def add_cors_middleware(app: FastAPI, origins: List[str] = None):
    allowed_origins = origins or DEFAULT_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info(f"CORS middleware added for {len(allowed_origins)} origins")
