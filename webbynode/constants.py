"""Global constants for webbynode"""

import re

# Application
APP_NAME = "wn"
APP_TITLE = "Webbynode"
LOG_FORMAT = "%(message)s"

# Git repository layout
GIT_DIR = ".git"
GIT_CONFIG_FILE = ".git/config"
REMOTE_NAME = "webbynode"
DEFAULT_GIT_USER = "git"
DEFAULT_BRANCH = "master"
INITIAL_COMMIT_MESSAGE = "Initial commit"

# Deployment markers
MARKER_DIR = ".webbynode"
PUSHAND_FILE = ".pushand"
GITIGNORE_FILE = ".gitignore"

PUSHAND_TEMPLATE = "#! /bin/bash\nphd $0 {host}\n"

GITIGNORE_TEMPLATE = """config/database.yml
log/*
tmp/*
db/*.sqlite3
"""

# Git output patterns
GIT_NOT_REPO_PATTERN = re.compile(r"not a git repository", re.IGNORECASE)
GIT_INIT_SUCCESS_PATTERN = re.compile(r"^Initialized empty Git repository in", re.MULTILINE)
GIT_REMOTE_EXISTS_PATTERN = re.compile(r"remote \w+ already exists")
REMOTE_URL_PATTERN = re.compile(r"^(\w+)@(.+):(.+)$")

# Git config syntax
CONFIG_SECTION_PATTERN = re.compile(r'^\[(\w+)(?: "(.+)")*\]')
CONFIG_SEPARATOR = " = "

# Help layout
HELP_INDENT = "    "
HELP_COLUMN_WIDTH = 28

# Notifications
DEFAULT_NOTIFY_HELPER = "growlnotify"
ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[([0-9]{1,2}(;[0-9]{1,2})?)?[mK]")

# Settings file
SETTINGS_DIR = "~/.webbynode"
SETTINGS_FILE = "config.yml"

# Environment variables
ENV_CONFIG_PATH = "WEBBYNODE_CONFIG"
ENV_LOG_LEVEL = "WEBBYNODE_LOG_LEVEL"
ENV_TESTING = "WEBBYNODE_TESTING"

# Precondition messages
MSG_NO_GIT_REPO = "Could not find a git repository."
MSG_NO_REMOTE = "Webbynode has not been initialized for this git repository."
MSG_NO_PUSHAND = "Could not find .pushand file, has Webbynode been initialized for this repository?"


# Error codes
class ErrorCode:
    GIT_ERROR = "WN001"
    GIT_NOT_REPO = "WN002"
    GIT_REMOTE_MISSING = "WN003"
    GIT_REMOTE_EXISTS = "WN004"
    PUSHAND_NOT_FOUND = "WN005"
    CONFIG_PARSE_ERROR = "WN006"
    SETTINGS_ERROR = "WN007"
    COMMAND_NOT_FOUND = "WN008"
    MISSING_PARAMETER = "WN009"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ROCKET = "🚀"
