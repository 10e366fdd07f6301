import os

# Prompt shown before every read
PROMPT = "marinelli: "

# Token that sends a command to the background and ends the argument list
BACKGROUND_MARKER = "#"

# Builtin vocabulary (exact, case-sensitive)
BUILTIN_EXIT = ("exit", "quit")
BUILTIN_CD = ("cd", "chdir")

HOME_VAR = "HOME"

# Status codes for commands that never got to run
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127

LOG_LEVEL = os.getenv("MYSHELL_LOG_LEVEL", "WARNING").upper()
