# QuickConnect
# Copyright (C) 2025 Amirreza "Farnam" Taheri
# This program comes with ABSOLUTELY NO WARRANTY; for details type `show w`.
# This is free software, and you are welcome to redistribute it
# under certain conditions; type `show c` for details.

from pathlib import Path

# Defaults applied when the URI leaves a component out
DEFAULT_URI_PROTOCOL = "ssh"
DEFAULT_URI_HOST = "localhost"

# Well-known parameter names
HOSTNAME_PARAM = "hostname"
PORT_PARAM = "port"
USERNAME_PARAM = "username"
PASSWORD_PARAM = "password"

# Text encoding used for percent-decoding
URI_ENCODING = "utf-8"

# Default file names
CONFIG_FILE_NAME = "quickconnect.yaml"
CONFIG_DIR = Path.home() / ".config" / "quickconnect"
