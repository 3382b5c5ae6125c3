# src/config_loader.py
import logging
import yaml
from typing import Dict, Any, List

DEFAULT_SETTINGS: Dict[str, Any] = {
    "input_file": "pages.yaml",
    "output_base_dir": "output",
    "output_subfolder": "seo_heads",
    "log_level": "INFO",
    "output_format": "HTML", # "HTML", "JSON" or "CSV"

    # --- Site-wide defaults, used when a page does not set the field ---
    "title_suffix": "",
    "site_name": "",
    "card_type": "summary",

    # Joins the tags rendered for one page
    "tag_separator": "\n",
}

OUTPUT_FORMATS: List[str] = ["HTML", "JSON", "CSV"]

# ========================================
# Function: load_configuration
# ========================================
def load_configuration(config_path: str = "config.yaml") -> Dict[str, Any]:
    """
    Loads settings from a YAML file, merges with defaults, validates types.

    Args:
        config_path: Path to the configuration file.

    Returns:
        A dictionary containing the final configuration settings.
    """
    settings = DEFAULT_SETTINGS.copy()
    try:
        with open(config_path, "r") as config_file:
            config = yaml.safe_load(config_file)
            loaded_settings = config.get("settings", {}) if isinstance(config, dict) else {}
            settings.update(loaded_settings or {})
        logging.debug(f"Configuration loaded successfully from {config_path}")
    except FileNotFoundError:
        logging.warning(f"{config_path} not found. Using default settings.")
    except yaml.YAMLError as e:
        logging.error(f"Error parsing {config_path}: {e}. Using default settings.")
    except Exception as e:
        logging.error(f"Error reading {config_path}: {e}. Using default settings.")

    # --- Type and Value Validation ---
    # String settings; None means "empty" for the site-wide defaults
    string_keys = ["input_file", "output_base_dir", "output_subfolder", "log_level",
                   "title_suffix", "site_name", "card_type", "tag_separator"]
    for key in string_keys:
        if key not in settings:
            continue
        if settings[key] is None and key in ("title_suffix", "site_name", "card_type"):
            settings[key] = ""
        elif not isinstance(settings[key], str):
            logging.warning(f"Invalid non-string value for '{key}' in config. Using default: {DEFAULT_SETTINGS[key]!r}")
            settings[key] = DEFAULT_SETTINGS[key]

    # String choice settings
    output_format = settings.get("output_format", DEFAULT_SETTINGS["output_format"])
    if str(output_format).upper() not in OUTPUT_FORMATS:
        logging.warning(f"Invalid output_format '{output_format}'. Defaulting to 'HTML'.")
        settings["output_format"] = "HTML"
    else:
        settings["output_format"] = str(output_format).upper()

    logging.info("Final settings loaded (some values might be truncated):")
    for key, value in settings.items():
        logging.info(f"  {key}: {str(value)[:100]}{'...' if len(str(value)) > 100 else ''}")

    return settings

# ========================================
# Function: setup_logging
# ========================================
def setup_logging(log_level_str: str):
    """
    Configures the root logger based on the provided level string.

    Args:
        log_level_str: The desired logging level (e.g., "INFO", "DEBUG").
    """
    log_level: int = getattr(logging, log_level_str.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s', force=True)
    logging.info(f"Logging configured to level: {log_level_str.upper()}")
