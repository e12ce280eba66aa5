import logging

from constants import DEBUG, LOG_FORMAT

logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format=LOG_FORMAT,
)
