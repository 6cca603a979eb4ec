import toml
import os
from .cli_logger import logger

CONFIG_FILE = "antdroid.toml"

SIGNING_KEYS = ("keystore", "alias", "store_password", "password", "keystore_type")

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.verbose(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def get_sdk_dir(conf):
    """Return the Android SDK root from config, ANDROID_HOME or ANDROID_SDK_ROOT."""
    sdk_dir = conf.get("android", {}).get("sdk_dir")
    if sdk_dir:
        return os.path.expanduser(sdk_dir)
    return os.environ.get("ANDROID_HOME") or os.environ.get("ANDROID_SDK_ROOT")

def get_build_type(conf, default="debug"):
    return conf.get("build", {}).get("type", default)

def get_signing_config(conf, build_type):
    """Return the [signing.<build_type>] table restricted to the known keys."""
    section = conf.get("signing", {}).get(build_type, {})
    return {key: section[key] for key in SIGNING_KEYS if section.get(key)}
