"""Exit codes returned by the tailwindcov CLI."""

EXIT_SUCCESS = 0
EXIT_COVERAGE_BELOW_THRESHOLD = 1
EXIT_PROGRAM_ERROR = 2
EXIT_INVALID_USAGE = 3
EXIT_RETRIEVAL_FAILURE = 4
EXIT_MISSING_DEPENDENCY = 5
