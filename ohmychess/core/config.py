"""Configuration constants. Anything that may differ per deployment can be overridden through environment variables."""

import os

# Chess board is always 8x8 (files, ranks)
BOARD_DIMENSIONS = (8, 8)

LOGGER_NAME = "ohmychess"
LOG_LEVEL = os.getenv("OHMYCHESS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Document database holding the game sessions (find-one request body)
DOCUMENT_DATA_SOURCE = os.getenv("OHMYCHESS_DATA_SOURCE", "Cluster0")
DOCUMENT_DATABASE = os.getenv("OHMYCHESS_DATABASE", "hackathon")
DOCUMENT_COLLECTION = os.getenv("OHMYCHESS_COLLECTION", "game_sessions")
