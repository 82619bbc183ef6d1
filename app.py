import logging
import sqlite3

from flask import Flask, Blueprint, request, jsonify
from flask_migrate import Migrate
from pydantic import ValidationError
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from config import get_config
from models import db, Family, MealPlanning, MealEvent
from services import (
    create_services, PlanningError, OverlapError, NotFoundError,
)
from tools import ToolContext, ToolInputError, UnknownToolError, list_tools, run_tool
from tools.planning_tools import CreatePlanningInput, UpdatePlanningInput, ResolvePlanningInput
from tools.event_tools import CreateEventInput, UpdateEventInput

logger = logging.getLogger(__name__)

migrate = Migrate()
api = Blueprint('api', __name__)

# Shown to callers when the database fails, keyed by endpoint
FAILURE_MESSAGES = {
    'api.latest_planning': 'Failed to fetch meal planning',
    'api.family_plannings': 'Failed to fetch meal plannings',
    'api.planning_create': 'Failed to create meal planning',
    'api.planning_view': 'Failed to fetch meal planning',
    'api.planning_update': 'Failed to update meal planning',
    'api.planning_events': 'Failed to fetch meal events',
    'api.planning_resolve': 'Failed to resolve meal planning',
    'api.family_events': 'Failed to fetch meal events',
    'api.event_create': 'Failed to create meal event',
    'api.event_update': 'Failed to update meal event',
    'api.event_delete': 'Failed to delete meal event',
    'api.tool_run': 'Failed to run tool',
}


# Enable SQLite foreign key enforcement
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_services():
    """Planning and event services bound to the request's db session."""
    return create_services(db.session)


def json_body():
    return request.get_json(silent=True) or {}


# ============================================
# ROUTES - HEALTH
# ============================================

@api.route('/health')
def health():
    return jsonify({'status': 'ok'})


# ============================================
# ROUTES - MEAL PLANNINGS
# ============================================

@api.route('/api/family/<family_id>/planning')
def latest_planning(family_id):
    planning_service, _ = get_services()
    planning = planning_service.latest_planning(family_id)
    if planning is None:
        return jsonify({'error': 'No meal planning found'}), 404
    return jsonify(planning.to_dict())


@api.route('/api/family/<family_id>/plannings')
def family_plannings(family_id):
    planning_service, _ = get_services()
    return jsonify([p.to_dict() for p in planning_service.list_plannings(family_id)])


@api.route('/api/family/<family_id>/plannings', methods=['POST'])
def planning_create(family_id):
    params = CreatePlanningInput.model_validate({**json_body(), 'family_id': family_id})
    planning_service, _ = get_services()
    planning = planning_service.create_planning(
        params.family_id, params.start_date, params.end_date, status=params.status
    )
    return jsonify(planning.to_dict()), 201


@api.route('/api/planning/<planning_id>')
def planning_view(planning_id):
    planning_service, _ = get_services()
    planning = planning_service.get_planning(planning_id)
    if planning is None:
        return jsonify({'error': 'Meal planning not found'}), 404
    return jsonify(planning.to_dict())


@api.route('/api/planning/<planning_id>', methods=['PATCH'])
def planning_update(planning_id):
    params = UpdatePlanningInput.model_validate({**json_body(), 'id': planning_id})
    planning_service, _ = get_services()
    planning = planning_service.update_planning(
        params.id, status=params.status, start_date=params.start_date, end_date=params.end_date
    )
    return jsonify(planning.to_dict())


@api.route('/api/planning/<planning_id>/events')
def planning_events(planning_id):
    planning_service, event_service = get_services()
    if planning_service.get_planning(planning_id) is None:
        return jsonify({'error': 'Meal planning not found'}), 404
    return jsonify([e.to_dict() for e in event_service.list_events_for_planning(planning_id)])


@api.route('/api/family/<family_id>/planning/resolve', methods=['POST'])
def planning_resolve(family_id):
    params = ResolvePlanningInput.model_validate({**json_body(), 'family_id': family_id})
    planning_service, _ = get_services()
    planning = planning_service.resolve_planning_for_date(params.family_id, params.date)
    return jsonify(planning.to_dict())


# ============================================
# ROUTES - MEAL EVENTS
# ============================================

@api.route('/api/family/<family_id>/events')
def family_events(family_id):
    start = request.args.get('start')
    end = request.args.get('end')
    if not start or not end:
        return jsonify({'error': 'start and end query parameters are required'}), 400
    _, event_service = get_services()
    return jsonify([e.to_dict() for e in event_service.list_events(family_id, start, end)])


@api.route('/api/family/<family_id>/events', methods=['POST'])
def event_create(family_id):
    params = CreateEventInput.model_validate({**json_body(), 'family_id': family_id})
    _, event_service = get_services()
    meal_event = event_service.create_event(
        params.family_id,
        params.date,
        params.meal_type,
        recipe_name=params.recipe_name,
        participants=params.participants,
        planning_id=params.planning_id,
    )
    return jsonify(meal_event.to_dict()), 201


@api.route('/api/event/<event_id>', methods=['PATCH'])
def event_update(event_id):
    params = UpdateEventInput.model_validate({**json_body(), 'id': event_id})
    _, event_service = get_services()
    meal_event = event_service.update_event(
        params.id, recipe_name=params.recipe_name, participants=params.participants
    )
    return jsonify(meal_event.to_dict())


@api.route('/api/event/<event_id>', methods=['DELETE'])
def event_delete(event_id):
    _, event_service = get_services()
    deleted_id = event_service.delete_event(event_id)
    return jsonify({'success': True, 'deleted_id': deleted_id})


# ============================================
# ROUTES - AGENT TOOLS
# ============================================

@api.route('/api/tools')
def tool_list():
    return jsonify(list_tools())


@api.route('/api/tools/<tool_id>', methods=['POST'])
def tool_run(tool_id):
    planning_service, event_service = get_services()
    result = run_tool(tool_id, json_body(), ToolContext(planning_service, event_service))
    return jsonify(result)


# ============================================
# ERROR HANDLERS
# ============================================

@api.app_errorhandler(OverlapError)
def handle_overlap(e):
    return jsonify({
        'error': str(e),
        'conflicts': [p.to_dict() for p in e.conflicting_plannings],
    }), 409


@api.app_errorhandler(NotFoundError)
def handle_not_found(e):
    return jsonify({'error': str(e)}), 404


@api.app_errorhandler(PlanningError)
def handle_planning_error(e):
    return jsonify({'error': str(e)}), 400


@api.app_errorhandler(ValidationError)
def handle_validation_error(e):
    return jsonify({
        'error': 'Invalid request body',
        'details': e.errors(include_url=False, include_context=False),
    }), 400


@api.app_errorhandler(ToolInputError)
def handle_tool_input_error(e):
    return jsonify({'error': str(e), 'details': e.errors}), 400


@api.app_errorhandler(UnknownToolError)
def handle_unknown_tool(e):
    return jsonify({'error': str(e)}), 404


@api.app_errorhandler(SQLAlchemyError)
def handle_database_error(e):
    db.session.rollback()
    message = FAILURE_MESSAGES.get(request.endpoint, 'Database error')
    logger.exception("%s (%s %s)", message, request.method, request.path)
    return jsonify({'error': message}), 500


# ============================================
# APPLICATION FACTORY
# ============================================

def create_app(config_name=None):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.json.sort_keys = False

    logging.basicConfig(level=app.config['LOG_LEVEL'], format=app.config['LOG_FORMAT'])

    db.init_app(app)
    migrate.init_app(app, db)
    app.register_blueprint(api)
    return app


def init_db(app):
    """Create any missing tables."""
    with app.app_context():
        db.create_all()


app = create_app()

# Models exported for flask shell and the smoke tests
__all__ = ['app', 'create_app', 'init_db', 'db', 'Family', 'MealPlanning', 'MealEvent']


if __name__ == '__main__':
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
