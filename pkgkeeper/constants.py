"""Constants for pkgkeeper."""

# Exit codes
EXIT_SUCCESS = 0  # Command completed
EXIT_ERROR = 1  # Command failed while running
EXIT_VALIDATION_FAILURE = -1  # Settings could not be validated

# Built-in option defaults, lowest precedence layer
DEFAULT_MINIMUM_PACKAGE_AGE = "7d"

# Glob used to discover solution files at any depth
SOLUTION_FILE_PATTERN = "*.sln"

# Public nuget.org v3 feed
NUGET_GLOBAL_FEED = "https://api.nuget.org/v3/index.json"
