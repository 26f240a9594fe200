# session_parameters.py
import copy
import json
import logging

import yaml

logger = logging.getLogger("checkpoint_calc")

DEFAULT_MESSAGES = {
    # Help command
    "help_prompt": "Specify the command you want help for",
    "help_commands": "Available commands: add, median, rand",
    "help_exit_hint": "Type end to leave help mode",
    "help_unknown": "No such command",
    "help_topic_add": "Computes the sum of two numbers",
    "help_topic_median": "Computes the median of a list of numbers",
    "help_topic_rand": "Generates a list of random numbers",
    # Dispatcher fallback
    "not_found": "No such command, use help to list commands",
}


class SessionParameters:
    def __init__(self, initial_params=None):
        """
        all parameters are defined with underscore, _, instead of spaces
        """
        self._params = {
            # Session accumulator used when no checkpoint is present; also the
            # seed of the rand sequence.
            "initial_accumulator": 420,
            # Slot file used when the caller does not pass one explicitly.
            "storage_path": "calculator.state",
            # Literal texts emitted by help/not-found. Only the keys are ever
            # persisted in a snapshot, so these can change between restarts.
            "messages": copy.deepcopy(DEFAULT_MESSAGES),
        }
        if initial_params:
            self.update(initial_params)

    def __getattr__(self, name):
        """Attribute access for known parameter keys."""
        params = self.__dict__.get("_params")
        if params is not None and name in params:
            return params[name]
        raise AttributeError(
            f"{type(self).__name__!s} object has no attribute {name!r}"
        )

    def get(self, key, default=None):
        """Retrieve a parameter value, or return a default if not found."""
        return self._params.get(key, default)

    def set(self, key, value):
        """Set or update a parameter."""
        self._params[key] = value

    def update(self, params):
        """Merge ``params`` into the current values.

        ``messages`` is merged key by key so a config file can override a
        single text without restating the rest.
        """
        for key, value in params.items():
            if key == "messages":
                if not isinstance(value, dict):
                    raise ValueError("'messages' must be a mapping of key -> text")
                self._params["messages"].update(
                    {str(k): str(v) for k, v in value.items()}
                )
                continue
            if key == "initial_accumulator":
                value = int(value)
                # The rand step only stays inside its cycle for seeds in
                # [1, 2**31 - 2].
                if not 1 <= value <= 2**31 - 2:
                    raise ValueError(
                        f"initial_accumulator {value} must be in [1, 2**31 - 2]"
                    )
            if key not in self._params:
                logger.warning("Unknown session parameter '%s'", key)
            self._params[key] = value

    def message(self, key: str) -> str:
        """Return the text for message ``key``."""
        try:
            return self._params["messages"][key]
        except KeyError:
            raise KeyError(f"No message text configured for '{key}'") from None

    def __contains__(self, key):
        """Check if a parameter exists."""
        return key in self._params

    def __repr__(self):
        return f"SessionParameters({self._params})"


def load_parameters(filename) -> SessionParameters:
    """Load session parameters from a YAML or JSON file.

    Expected format:
    {
        "initial_accumulator": 420,
        "storage_path": "calculator.state",
        "messages": {"not_found": "..."}
    }"""
    filename_str = str(filename)
    with open(filename_str, "r", encoding="utf-8") as f:
        if filename_str.endswith((".yaml", ".yml")):
            data = yaml.safe_load(f)
        elif filename_str.endswith(".json"):
            data = json.load(f)
        else:
            logger.error(f"Unsupported config format for: {filename_str}")
            raise ValueError(f"Unsupported config format for: {filename_str}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {filename_str} must hold a mapping")
    return SessionParameters(data)
