from main import app # Import the FastAPI app
from qbank import settings
from uvicorn import Config, Server
import logging

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

port = settings.PORT
logger.info(f"Running on port {port}, serving questions from {settings.DATA_DIR}")

config = Config(app, host="0.0.0.0", port=port, workers=1, log_level="info")
server = Server(config)
logger.info("Server running...")
server.run()
logger.info("Server stopped")
