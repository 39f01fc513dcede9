import logging

import uvicorn

from .app import create_app
from .core.config import Config


config = Config.from_env()

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
    ]
)
logger = logging.getLogger(__name__)

app = create_app(config)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8080)
