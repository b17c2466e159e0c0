# config/settings.py

# Search Settings
# Per-step cost used by the remaining-cost heuristic. The demonstration
# worlds were tuned with 900, far above any real step cost.
STEP_COST_ESTIMATE = 900
MAX_STEPS = None  # None = always drain the frontier

# Logging
LOG_LEVEL = "INFO"
LOG_DIR = "logs"

# File name of the demonstration worlds
WORLDS_FILE = "worlds.yml"
DEFAULT_WORLD = "z_world"
