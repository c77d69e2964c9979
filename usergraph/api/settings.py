# usergraph/api/settings.py
import os
import json

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config", "server.json")
CONFIG_PATH = os.getenv("USERGRAPH_CONFIG", DEFAULT_CONFIG_PATH)

TRUE_VALUES = {"1", "true", "yes", "on"}

with open(CONFIG_PATH) as f:
    config_data = json.load(f)

def env_flag(name: str, default) -> bool:
    """
    Read a boolean from the environment, falling back to `default`
    (usually the value from server.json) when the variable is unset.
    """
    value = os.getenv(name)
    if value is None:
        return bool(default)
    return value.strip().lower() in TRUE_VALUES

# Only adds "extensions.exception" to errors raised inside resolvers;
# validation errors and lookup misses never carry exception details.
DEBUG = env_flag("USERGRAPH_DEBUG", config_data.get("DEBUG", False))
INTROSPECTION = env_flag("USERGRAPH_INTROSPECTION", config_data.get("INTROSPECTION", True))
LOG_EVENTS = env_flag("USERGRAPH_LOG_EVENTS", config_data.get("LOG_EVENTS", True))
