"""Test package initialization - keep adminkit logging quiet during tests."""

import logging

logging.basicConfig(level=logging.ERROR, force=True)
logging.getLogger("adminkit").setLevel(logging.ERROR)
