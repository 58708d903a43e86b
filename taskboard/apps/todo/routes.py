"""
To-Do List Routes

Flask Blueprint for the server-rendered To-Do pages.
"""

import logging
from functools import wraps

from flask import Blueprint, redirect, render_template, request, url_for
from werkzeug.exceptions import HTTPException

from taskboard.apps.todo.manager import (
    InvalidTaskId,
    TaskStore,
    ValidationError,
    clean_fields,
    parse_task_id,
)
from taskboard.ui.navigation import section_for_path

logger = logging.getLogger(__name__)


def catch_errors(view):
    """
    Wrap a view so unexpected failures become a generic 500 response

    HTTP exceptions raised by Flask/Werkzeug pass through unchanged.
    """
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as e:
            logger.error(f"Unhandled error on {request.method} {request.path}: {e}", exc_info=True)
            return 'Internal Server Error', 500
    return wrapper


def _render(template: str, **context):
    """Render a template with the navbar section for the current path"""
    return render_template(template, active_page=section_for_path(request.path).value, **context)


def _task_fields():
    """Read title/description from a form body, or a JSON object body"""
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
    else:
        data = request.form

    title = data.get('title')
    description = data.get('description')
    return (title if isinstance(title, str) else None,
            description if isinstance(description, str) else None)


def create_todo_blueprint(store: TaskStore) -> Blueprint:
    """
    Build the To-Do Blueprint bound to a TaskStore

    Args:
        store: Connected TaskStore used by every route

    Returns:
        Blueprint ready to be registered on a Flask app
    """
    todo_bp = Blueprint('todo', __name__)

    @todo_bp.route('/')
    @catch_errors
    def list_tasks():
        """List all tasks"""
        return _render('list.html', tasks=store.list_tasks())

    @todo_bp.route('/add', methods=['GET'])
    @catch_errors
    def add_form():
        """Empty create form"""
        return _render('form.html', task=None)

    @todo_bp.route('/add', methods=['POST'])
    @catch_errors
    def add_task():
        """Create a task"""
        try:
            title, description = clean_fields(*_task_fields())
        except ValidationError as e:
            return str(e), 400

        if store.insert_task(title, description) is None:
            return redirect(url_for('todo.add_form'))
        return redirect(url_for('todo.list_tasks'))

    @todo_bp.route('/update/<task_id>', methods=['GET'])
    @catch_errors
    def edit_form(task_id):
        """Edit form pre-filled with the task"""
        try:
            oid = parse_task_id(task_id)
        except InvalidTaskId:
            return 'Invalid task id', 400

        task = store.get_task(oid)
        if task is None:
            return 'Task not found', 404
        return _render('form.html', task=task)

    @todo_bp.route('/update/<task_id>', methods=['POST'])
    @catch_errors
    def update_task(task_id):
        """Overwrite title and description of a task"""
        try:
            title, description = clean_fields(*_task_fields())
        except ValidationError as e:
            return str(e), 400

        try:
            oid = parse_task_id(task_id)
        except InvalidTaskId:
            return 'Invalid task id', 400

        store.update_task(oid, title, description)
        return redirect(url_for('todo.list_tasks'))

    @todo_bp.route('/task/<task_id>')
    @catch_errors
    def task_detail(task_id):
        """Task detail page"""
        try:
            oid = parse_task_id(task_id)
        except InvalidTaskId:
            return 'Invalid task id', 400

        task = store.get_task(oid)
        if task is None:
            return 'Task not found', 404
        return _render('task.html', task=task)

    @todo_bp.route('/delete/<task_id>')
    @catch_errors
    def delete_task(task_id):
        """Delete a task; missing tasks are ignored"""
        try:
            oid = parse_task_id(task_id)
        except InvalidTaskId:
            return 'Invalid task id', 400

        store.delete_task(oid)
        return redirect(url_for('todo.list_tasks'))

    logger.info("Initialized To-Do routes")
    return todo_bp
