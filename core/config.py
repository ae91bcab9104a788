import os
import yaml
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "config.yaml"))


class ConfigLoader:
    _instance = None
    _config = None

    def __new__(cls):
        """
        Create a singleton instance of ConfigLoader.
        Loads configuration from YAML file on first instantiation.
        """
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._load_config()
        return cls._instance

    @classmethod
    def _load_config(cls):
        """
        Load the configuration from the YAML file into the class variable _config.

        BUILDBEAR_MCP_CONFIG may point at an alternative file.
        """
        config_path = os.path.abspath(os.getenv("BUILDBEAR_MCP_CONFIG") or DEFAULT_CONFIG_PATH)
        with open(config_path, "r") as f:
            cls._config = yaml.safe_load(f) or {}

        api_url = os.getenv("BUILDBEAR_API_URL")
        if api_url:
            cls._config["buildbear_api_url"] = api_url

    @classmethod
    def reset(cls):
        """Drop the cached instance so the next access re-reads the file."""
        cls._instance = None
        cls._config = None

    def get_config(self):
        """
        Return the loaded configuration dictionary.
        """
        return self._config


def get_config():
    """
    Helper function to get the singleton configuration instance's config dictionary.
    """
    return ConfigLoader().get_config()


def get_api_key() -> str | None:
    """Bearer token for the BuildBear API, read from the environment (or .env)."""
    return os.getenv("BUILDBEAR_API_KEY") or None
