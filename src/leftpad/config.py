"""
Configuration settings for the leftpad application.
All constants and configuration variables are defined here.
"""

# Padding defaults
DEFAULT_PAD_CHAR = " "
DEFAULT_WIDTH = 10

# Upper bound for a requested width; anything larger is rejected before
# the padded string is allocated
MAX_PAD_WIDTH = 100_000_000

# Logging
LOG_DIR_NAME = ".leftpad"
LOG_FILE_NAME = "leftpad.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Interactive shell
SHELL_PROMPT = "pad> "
COMMAND_ESCAPE_PREFIX = "\\"
SPACE_ALIAS = "space"
PREVIEW_LENGTH = 40
