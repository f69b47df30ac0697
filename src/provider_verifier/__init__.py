"""Contract verification of provider responses and messages."""

import logging

logging.getLogger("provider_verifier").addHandler(logging.NullHandler())
