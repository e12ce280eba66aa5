"""
Global constants used throughout the project
"""

import os

# Directory holding JSON card sort fixtures, relative paths resolve against it
DATA = os.path.join(os.path.dirname(os.path.abspath(__file__)), "tests", "data")

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"
DEBUG = False
