"""
Tests for MealPlanningService overlap rules, updates and date resolution.
Runs on the in-memory repository from conftest.
"""

import itertools

import pytest

from services import (
    OverlapError, NotFoundError, InvalidDateError, InvalidDateRangeError, InvalidStatusError,
)

FAMILY = 'family-1'
OTHER_FAMILY = 'family-2'


def test_create_planning_defaults_to_draft(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')

    assert planning.id
    assert planning.family_id == FAMILY
    assert planning.start_date == '2026-01-01'
    assert planning.end_date == '2026-01-07'
    assert planning.status == 'draft'
    assert planning.created_at == planning.updated_at


def test_create_planning_with_explicit_status(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07', status='active')
    assert planning.status == 'active'


def test_create_planning_normalizes_dates(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-1-1', '2026-1-7')
    assert (planning.start_date, planning.end_date) == ('2026-01-01', '2026-01-07')


def test_adjacent_plannings_are_allowed(memory_service):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    second = memory_service.create_planning(FAMILY, '2026-01-08', '2026-01-14')
    assert second.start_date == '2026-01-08'


def test_exact_duplicate_is_rejected(memory_service):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    with pytest.raises(OverlapError):
        memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')


def test_shared_boundary_day_is_an_overlap(memory_service):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    with pytest.raises(OverlapError):
        memory_service.create_planning(FAMILY, '2026-01-07', '2026-01-14')


@pytest.mark.parametrize('existing, candidate', [
    (('2026-01-05', '2026-01-12'), ('2026-01-01', '2026-01-07')),  # new ends during existing
    (('2026-01-01', '2026-01-07'), ('2026-01-05', '2026-01-12')),  # new starts during existing
    (('2026-01-01', '2026-01-14'), ('2026-01-05', '2026-01-10')),  # new inside existing
    (('2026-01-05', '2026-01-10'), ('2026-01-01', '2026-01-14')),  # new contains existing
])
def test_overlapping_ranges_are_rejected(memory_service, existing, candidate):
    memory_service.create_planning(FAMILY, *existing)
    with pytest.raises(OverlapError):
        memory_service.create_planning(FAMILY, *candidate)


def test_overlap_error_carries_conflicts(memory_service):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')

    with pytest.raises(OverlapError) as excinfo:
        memory_service.create_planning(FAMILY, '2026-01-05', '2026-01-12')

    error = excinfo.value
    assert len(error.conflicting_plannings) == 1
    assert error.conflicting_ranges == [('2026-01-01', '2026-01-07')]
    assert '2026-01-01 to 2026-01-07' in str(error)


def test_overlap_error_lists_every_conflict(memory_service):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    memory_service.create_planning(FAMILY, '2026-01-08', '2026-01-14')

    with pytest.raises(OverlapError) as excinfo:
        memory_service.create_planning(FAMILY, '2026-01-06', '2026-01-09')

    assert excinfo.value.conflicting_ranges == [
        ('2026-01-01', '2026-01-07'),
        ('2026-01-08', '2026-01-14'),
    ]


def test_rejected_create_writes_nothing(memory_service, memory_repository):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    with pytest.raises(OverlapError):
        memory_service.create_planning(FAMILY, '2026-01-03', '2026-01-04')
    assert len(memory_repository.plannings) == 1


def test_overlap_detected_before_year_1000(memory_service):
    memory_service.create_planning(FAMILY, '0999-12-01', '0999-12-31')

    with pytest.raises(OverlapError):
        memory_service.create_planning(FAMILY, '0998-01-01', '2026-01-01')


def test_families_never_interact(memory_service):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    other = memory_service.create_planning(OTHER_FAMILY, '2026-01-01', '2026-01-07')
    assert other.family_id == OTHER_FAMILY


def test_inverted_range_is_rejected(memory_service):
    with pytest.raises(InvalidDateRangeError):
        memory_service.create_planning(FAMILY, '2026-01-07', '2026-01-01')


def test_single_day_planning_is_allowed(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-07', '2026-01-07')
    assert planning.start_date == planning.end_date


@pytest.mark.parametrize('bad_date', ['2026-02-30', 'next monday', '', None, 20260101])
def test_invalid_dates_are_rejected(memory_service, bad_date):
    with pytest.raises(InvalidDateError):
        memory_service.create_planning(FAMILY, bad_date, '2026-03-01')


def test_invalid_status_is_rejected(memory_service):
    with pytest.raises(InvalidStatusError):
        memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07', status='archived')


def test_empty_status_is_rejected(memory_service):
    with pytest.raises(InvalidStatusError):
        memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07', status='')


def test_create_locks_the_family(memory_service, memory_repository):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    assert memory_repository.locked_families == [FAMILY]


def test_successful_plannings_are_pairwise_disjoint(memory_service, memory_repository):
    candidates = [
        ('2026-01-01', '2026-01-07'), ('2026-01-05', '2026-01-09'), ('2026-01-08', '2026-01-08'),
        ('2026-01-09', '2026-01-20'), ('2025-12-25', '2026-01-01'), ('2025-12-20', '2025-12-31'),
        ('2026-01-21', '2026-01-27'), ('2026-01-15', '2026-01-22'),
    ]
    for start, end in candidates:
        try:
            memory_service.create_planning(FAMILY, start, end)
        except OverlapError:
            pass

    created = list(memory_repository.plannings.values())
    assert len(created) >= 4
    for a, b in itertools.combinations(created, 2):
        assert a.end_date < b.start_date or b.end_date < a.start_date


def test_find_overlapping(memory_service):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')

    assert memory_service.find_overlapping(FAMILY, '2026-01-15', '2026-01-21') == []
    assert len(memory_service.find_overlapping(FAMILY, '2026-01-05', '2026-01-12')) == 1
    assert memory_service.find_overlapping(OTHER_FAMILY, '2026-01-05', '2026-01-12') == []


def test_find_overlapping_excludes_given_id(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    assert memory_service.find_overlapping(FAMILY, '2026-01-01', '2026-01-07', exclude_id=planning.id) == []


# ---------------------------------------------------------------------------
# Updates
# ---------------------------------------------------------------------------

def test_status_only_update_skips_overlap_check(memory_service, memory_repository):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    memory_repository.locked_families.clear()

    updated = memory_service.update_planning(planning.id, status='active')

    assert updated.status == 'active'
    assert memory_repository.locked_families == []


def test_any_status_transition_is_allowed(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07', status='completed')
    assert memory_service.update_planning(planning.id, status='draft').status == 'draft'


def test_update_refreshes_updated_at(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    created_at = planning.created_at

    updated = memory_service.update_planning(planning.id, status='active')

    assert updated.created_at == created_at
    assert updated.updated_at >= created_at


def test_update_dates_to_free_range(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')

    updated = memory_service.update_planning(planning.id, start_date='2026-01-08', end_date='2026-01-14')

    assert (updated.start_date, updated.end_date) == ('2026-01-08', '2026-01-14')


def test_update_dates_within_own_range_is_not_a_self_conflict(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    updated = memory_service.update_planning(planning.id, end_date='2026-01-05')
    assert updated.end_date == '2026-01-05'
    assert updated.start_date == '2026-01-01'


def test_update_dates_into_other_planning_is_rejected(memory_service):
    first = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    second = memory_service.create_planning(FAMILY, '2026-01-15', '2026-01-21')

    with pytest.raises(OverlapError) as excinfo:
        memory_service.update_planning(second.id, start_date='2026-01-05', end_date='2026-01-10')

    assert [p.id for p in excinfo.value.conflicting_plannings] == [first.id]
    # nothing written
    assert (second.start_date, second.end_date) == ('2026-01-15', '2026-01-21')


def test_update_with_status_and_conflicting_dates_writes_nothing(memory_service):
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    second = memory_service.create_planning(FAMILY, '2026-01-15', '2026-01-21')

    with pytest.raises(OverlapError):
        memory_service.update_planning(second.id, status='active', start_date='2026-01-07')

    assert second.status == 'draft'
    assert second.start_date == '2026-01-15'


def test_update_rejects_inverted_range(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')
    with pytest.raises(InvalidDateRangeError):
        memory_service.update_planning(planning.id, start_date='2026-01-10')


def test_update_missing_planning_raises(memory_service):
    with pytest.raises(NotFoundError, match='not found'):
        memory_service.update_planning('non-existent-id', status='active')


def test_get_missing_planning_returns_none(memory_service):
    assert memory_service.get_planning('non-existent-id') is None


def test_list_and_latest_plannings(memory_service):
    assert memory_service.latest_planning(FAMILY) is None

    memory_service.create_planning(FAMILY, '2026-01-08', '2026-01-14')
    last = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')

    assert [p.start_date for p in memory_service.list_plannings(FAMILY)] == ['2026-01-08', '2026-01-01']
    assert memory_service.latest_planning(FAMILY).id == last.id


# ---------------------------------------------------------------------------
# Date resolution
# ---------------------------------------------------------------------------

def test_resolve_creates_sunday_to_saturday_week(memory_service):
    planning = memory_service.resolve_planning_for_date(FAMILY, '2026-01-01')

    assert planning.start_date == '2025-12-28'
    assert planning.end_date == '2026-01-03'
    assert planning.status == 'draft'


def test_resolve_is_idempotent_within_a_week(memory_service, memory_repository):
    first = memory_service.resolve_planning_for_date(FAMILY, '2026-01-01')
    second = memory_service.resolve_planning_for_date(FAMILY, '2026-01-03')

    assert second.id == first.id
    assert len(memory_repository.plannings) == 1


def test_resolve_returns_existing_custom_range(memory_service):
    existing = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-10')
    assert memory_service.resolve_planning_for_date(FAMILY, '2026-01-09').id == existing.id


def test_resolve_next_week_creates_adjacent_planning(memory_service):
    first = memory_service.resolve_planning_for_date(FAMILY, '2026-01-01')
    second = memory_service.resolve_planning_for_date(FAMILY, '2026-01-04')

    assert second.id != first.id
    assert (second.start_date, second.end_date) == ('2026-01-04', '2026-01-10')


def test_resolve_propagates_overlap_from_partial_cover(memory_service):
    # Covers Thursday-Friday of the week but not Wednesday
    memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-02')
    with pytest.raises(OverlapError):
        memory_service.resolve_planning_for_date(FAMILY, '2025-12-31')


def test_find_planning_for_date(memory_service):
    planning = memory_service.create_planning(FAMILY, '2026-01-01', '2026-01-07')

    assert memory_service.find_planning_for_date(FAMILY, '2026-01-07').id == planning.id
    assert memory_service.find_planning_for_date(FAMILY, '2026-01-08') is None
    assert memory_service.find_planning_for_date(OTHER_FAMILY, '2026-01-03') is None
