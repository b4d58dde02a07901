import os

# Default game directory searched for dependencies and baseline packages
GAME_PATH = os.environ.get("UE3_GAME_PATH", ".")

# Root under which packaged content is written
OUTPUT_DIR = os.environ.get("UE3_OUTPUT_DIR", ".")

LOG_LEVEL = os.environ.get("UE3_LOG_LEVEL", "WARNING")

# Packaged content layout: <OUTPUT_DIR>/<GUID>/<GAME_DIR>/...
GAME_DIR = "UDKGame"
CONFIG_DIR = "Config"
COOKED_DIR = "CookedPC"
CUSTOM_CONTENT_DIR = "Custom_Content"
CONFIG_EXTENSION = "ini"
