"""
Description:
This module sets up a rate limiter for the application using SlowAPI.
It initializes a Limiter instance with a key function to identify clients by their IP address,
and reads the feedback endpoint limit from FEEDBACK_RATE_LIMIT.

Dependencies:
- slowapi: For rate limiting functionality.
- slowapi.util: For utility functions like get_remote_address to retrieve the client's IP address.
- loguru: For logging information about the rate limiter initialization.

Author: @kcaparas1630
"""
import os
from dotenv import load_dotenv
from slowapi import Limiter
from slowapi.util import get_remote_address
from loguru import logger

load_dotenv()

FEEDBACK_RATE_LIMIT = os.getenv("FEEDBACK_RATE_LIMIT", "20/minute")

limiter = Limiter(key_func=get_remote_address, default_limits=["5/minute"])
logger.info(f"Rate limiter initialized (feedback limit {FEEDBACK_RATE_LIMIT})")
