"""
TaskBoard - Main Application
Server-rendered To-Do list backed by MongoDB
"""

import sys
import os
import logging

from taskboard.config import Config
from taskboard.apps.todo.manager import StorageConnectionError, TaskStore
from taskboard.web.webserver import TaskBoardWebServer


class TaskBoardApp:
    """
    Main TaskBoard application
    """

    def __init__(self, config_path: str):
        """
        Initialize application

        Args:
            config_path: Path to config.yaml
        """
        # Load configuration
        self.config = Config(config_path)

        # Setup logging
        self._setup_logging()
        self.logger = logging.getLogger(__name__)
        self.logger.info("TaskBoard starting...")

        # Created in start()
        self.store = None
        self.web_server = None

    def _setup_logging(self):
        """Configure logging"""
        log_level = getattr(logging, str(self.config.get('logging.level', 'INFO')).upper(), logging.INFO)
        log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

        handlers = []

        # Console handler
        if self.config.get('logging.console', True):
            handlers.append(logging.StreamHandler())

        # File handler
        log_file = self.config.get('logging.file')
        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        logging.basicConfig(
            level=log_level,
            format=log_format,
            handlers=handlers
        )

    def connect_storage(self) -> TaskStore:
        """
        Open the MongoDB connection; failure here is fatal

        Returns:
            Connected TaskStore
        """
        try:
            self.store = TaskStore.connect(
                url=self.config.get('mongo.url'),
                database=self.config.get('mongo.database'),
                collection=self.config.get('mongo.collection'),
                timeout_ms=self.config.get('mongo.timeout_ms', 5000),
            )
        except StorageConnectionError as e:
            self.logger.error(str(e))
            sys.exit(1)

        return self.store

    def start(self):
        """Start the application"""
        try:
            self.connect_storage()

            self.web_server = TaskBoardWebServer(
                self.store,
                host=self.config.get('web.host', '0.0.0.0'),
                port=self.config.get('web.port', 3009),
                static_url_path=self.config.get('web.static_url_path', '/static'),
            )
            self.web_server.run()

        except KeyboardInterrupt:
            self.logger.info("Received interrupt signal")
        finally:
            self.stop()

    def stop(self):
        """Release the storage connection"""
        if self.store is not None:
            self.store.close()
        self.logger.info("TaskBoard stopped")


def main():
    """Main entry point"""
    # Determine config path
    if len(sys.argv) > 1:
        config_path = sys.argv[1]
    else:
        config_path = os.environ.get(
            'TASKBOARD_CONFIG',
            os.path.join(os.path.dirname(__file__), '../config/config.yaml')
        )

    # Ensure config exists
    if not os.path.exists(config_path):
        print(f"ERROR: Configuration file not found: {config_path}")
        print(f"Usage: {os.path.basename(sys.argv[0])} [config_path]")
        sys.exit(1)

    # Create and start application
    app = TaskBoardApp(config_path)
    app.start()


if __name__ == '__main__':
    main()
