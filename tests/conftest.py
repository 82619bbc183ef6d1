"""
Shared pytest fixtures.

`app` runs on the testing config (in-memory SQLite). `memory_service` runs
the planning service on a plain in-memory repository, no database at all.
"""

import pytest

from app import create_app
from models import db, Family
from services import MealPlanningService, create_services


class InMemoryPlanningRepository:
    """Dict-backed stand-in for services.repository.PlanningRepository."""

    def __init__(self):
        self.plannings = {}
        self.locked_families = []

    def _for_family(self, family_id):
        return [p for p in self.plannings.values() if p.family_id == family_id]

    def find_overlapping(self, family_id, start_date, end_date, exclude_id=None):
        found = [
            p for p in self._for_family(family_id)
            if p.start_date <= end_date and p.end_date >= start_date and p.id != exclude_id
        ]
        return sorted(found, key=lambda p: p.start_date)

    def find_containing_date(self, family_id, day):
        found = self.find_overlapping(family_id, day, day)
        return found[0] if found else None

    def find_by_id(self, planning_id):
        return self.plannings.get(planning_id)

    def list_for_family(self, family_id):
        return sorted(self._for_family(family_id), key=lambda p: p.start_date, reverse=True)

    def latest_for_family(self, family_id):
        plannings = sorted(self._for_family(family_id), key=lambda p: p.created_at)
        return plannings[-1] if plannings else None

    def lock_family(self, family_id):
        self.locked_families.append(family_id)

    def insert(self, planning):
        self.plannings[planning.id] = planning
        return planning

    def update(self, planning):
        return planning


@pytest.fixture
def memory_repository():
    return InMemoryPlanningRepository()


@pytest.fixture
def memory_service(memory_repository):
    return MealPlanningService(memory_repository)


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_family(app):
    def _make(name='Test Family'):
        family = Family(name=name, country='FR', language='fr')
        db.session.add(family)
        db.session.commit()
        return family.id
    return _make


@pytest.fixture
def family_id(make_family):
    return make_family()


@pytest.fixture
def services(app):
    return create_services(db.session)


@pytest.fixture
def planning_service(services):
    return services[0]


@pytest.fixture
def event_service(services):
    return services[1]
