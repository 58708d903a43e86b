"""
Flask web server for TaskBoard.
Provides the server-rendered To-Do interface:
- Task list, detail and edit pages
- Static assets (stylesheet, client script)
"""

from flask import Flask
import os
import logging

from taskboard.apps.todo.manager import TaskStore
from taskboard.apps.todo.routes import create_todo_blueprint


WEB_DIR = os.path.dirname(os.path.abspath(__file__))


class TaskBoardWebServer:
    """
    Web server for the To-Do pages
    """

    def __init__(self, store: TaskStore, host: str = '0.0.0.0', port: int = 3009,
                 static_url_path: str = '/static'):
        """
        Initialize web server

        Args:
            store: Connected TaskStore shared by all requests
            host: Interface to listen on
            port: Port to run server on
            static_url_path: URL prefix for static assets
        """
        self.logger = logging.getLogger(__name__)
        self.store = store
        self.host = host
        self.port = port
        self.flask_app = Flask(
            __name__,
            template_folder=os.path.join(WEB_DIR, 'templates'),
            static_folder=os.path.join(WEB_DIR, 'static'),
            static_url_path=static_url_path,
        )

        self._setup_routes()

    def _setup_routes(self):
        """Register Flask blueprints"""
        self.flask_app.register_blueprint(create_todo_blueprint(self.store))

    def run(self):
        """Start the web server (blocks until interrupted)"""
        self.logger.info(f"Server running at http://localhost:{self.port}")
        self.flask_app.run(host=self.host, port=self.port, debug=False,
                           use_reloader=False, threaded=True)
