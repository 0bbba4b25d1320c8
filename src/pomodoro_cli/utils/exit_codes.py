"""
Exit codes for Pomodoro CLI.

Normal quit and session completion both exit with SUCCESS; anything else
means the timer never got going. Usage errors keep Click's own code (2).
"""

# Success (user quit or all sessions completed)
SUCCESS = 0

# General error (the terminal UI failed to start or crashed)
ERROR_GENERAL = 1

# Configuration file could not be read or validated
ERROR_CONFIG = 3
