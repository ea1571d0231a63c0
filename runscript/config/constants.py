"""Hard-coded configuration constants not meant to be user-configurable."""

# Subdirectory of the temp dir that holds staged scripts
PACKAGE_NAME = "run_script"

SCRIPT_NAME_LENGTH = 10

POSIX_DEFAULT_RUNNER = "sh"
POSIX_SCRIPT_EXTENSION = "sh"

WINDOWS_DEFAULT_RUNNER = "cmd.exe"
WINDOWS_RUNNER_FLAG = "/C"
WINDOWS_SCRIPT_EXTENSION = "bat"

CWD_ERROR_MESSAGE = "Unable to extract current working directory path."
