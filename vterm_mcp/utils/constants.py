# Identity of the simulated machine
TERMINAL_USER = "learner"
TERMINAL_HOSTNAME = "linux-learning"
PROMPT_HOST = "linux"
DEFAULT_HOME_DIR = "/home/learner"

# Synthetic long-listing columns for `ls -l`
DIRECTORY_PERMISSIONS = "drwxr-xr-x"
FILE_PERMISSIONS = "-rw-r--r--"

# Shown at the top of every fresh session
WELCOME_LINES = [
    "Welcome to Linux Terminal Simulator!",
    "Type 'help' to see available commands.",
    "",
]

DEFAULT_HISTORY_LIMIT = 500
