from glyph_api import get_default_app
from glyph_api.bootstrap import validate_startup_config
from glyph_api.config import Config
from glyph_api.logging_config import configure_logging

if __name__ == "__main__":
    config = Config()
    validate_startup_config(config)
    configure_logging(level=config.LOG_LEVEL, json_logs=config.LOG_JSON)
    get_default_app(config.APP_SECRET).start()
