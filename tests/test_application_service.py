"""
Tests for the application store: ownership scoping, filters, ordering and cascades.
"""
from datetime import datetime

import pytest

from tracker.core.errors import InvalidFilterError
from tracker.db.models.application import ApplicationStatus
from tracker.db.models.interview import Interview
from tracker.db.models.resource import ResourceCategory
from tracker.schemas.application import ApplicationUpdate
from tracker.schemas.resource import ResourceCreate
from tracker.services import application_service, interview_service, resource_service
from factories import application_data, interview_data


def test_create_stamps_caller_as_owner(db, alice):
    application = application_service.create_application(db, alice.id, application_data())
    
    assert application.user_id == alice.id
    assert application.status == ApplicationStatus.APPLIED
    assert application.is_remote is False
    assert application.created_at is not None
    assert application.updated_at is not None


def test_other_user_cannot_read_update_or_delete(db, alice, bob):
    application = application_service.create_application(db, alice.id, application_data())
    
    assert application_service.get_application(db, bob.id, application.id) is None
    assert application_service.update_application(
        db, bob.id, application.id, ApplicationUpdate(status="offer")
    ) is None
    assert application_service.delete_application(db, bob.id, application.id) is False
    
    untouched = application_service.get_application(db, alice.id, application.id)
    assert untouched is not None
    assert untouched.status == ApplicationStatus.APPLIED


def test_missing_id_behaves_like_foreign_id(db, alice):
    assert application_service.get_application(db, alice.id, "does-not-exist") is None
    assert application_service.update_application(
        db, alice.id, "does-not-exist", ApplicationUpdate(notes="x")
    ) is None
    assert application_service.delete_application(db, alice.id, "does-not-exist") is False


def test_list_is_scoped_and_newest_first(db, alice, bob):
    application_service.create_application(db, alice.id, application_data(company_name="Older", application_date=datetime(2024, 1, 1)))
    application_service.create_application(db, alice.id, application_data(company_name="Newer", application_date=datetime(2024, 3, 1)))
    application_service.create_application(db, bob.id, application_data(company_name="Bob Co"))
    
    applications = application_service.list_applications(db, alice.id)
    
    assert [a.company_name for a in applications] == ["Newer", "Older"]


def test_list_empty_returns_empty_list(db, alice):
    assert application_service.list_applications(db, alice.id) == []


def test_status_filter_all_matches_no_filter(db, alice):
    application_service.create_application(db, alice.id, application_data(status="applied"))
    application_service.create_application(db, alice.id, application_data(status="onsite"))
    
    unfiltered = application_service.list_applications(db, alice.id)
    all_filtered = application_service.list_applications(db, alice.id, status="all")
    onsite = application_service.list_applications(db, alice.id, status="onsite")
    
    assert len(unfiltered) == 2
    assert [a.id for a in all_filtered] == [a.id for a in unfiltered]
    assert [a.status for a in onsite] == [ApplicationStatus.ONSITE]


def test_unknown_status_filter_is_rejected(db, alice):
    with pytest.raises(InvalidFilterError):
        application_service.list_applications(db, alice.id, status="hired")


def test_search_matches_company_or_position_case_insensitively(db, alice):
    application_service.create_application(db, alice.id, application_data(company_name="Globex", position_title="Data Engineer"))
    application_service.create_application(db, alice.id, application_data(company_name="Initech", position_title="Platform Lead"))
    
    by_company = application_service.list_applications(db, alice.id, search="glob")
    by_position = application_service.list_applications(db, alice.id, search="PLATFORM")
    
    assert [a.company_name for a in by_company] == ["Globex"]
    assert [a.company_name for a in by_position] == ["Initech"]


def test_search_treats_wildcards_literally(db, alice):
    application_service.create_application(db, alice.id, application_data(company_name="100% Remote Inc"))
    application_service.create_application(db, alice.id, application_data(company_name="Plain Co"))
    
    results = application_service.list_applications(db, alice.id, search="%")
    
    assert [a.company_name for a in results] == ["100% Remote Inc"]


def test_empty_update_only_advances_updated_at(db, alice):
    application = application_service.create_application(db, alice.id, application_data())
    before = {
        "company_name": application.company_name,
        "status": application.status,
        "salary_min": application.salary_min,
        "application_date": application.application_date,
    }
    previous_updated_at = application.updated_at
    
    updated = application_service.update_application(db, alice.id, application.id, ApplicationUpdate())
    
    assert updated.updated_at > previous_updated_at
    assert updated.company_name == before["company_name"]
    assert updated.status == before["status"]
    assert updated.salary_min == before["salary_min"]
    assert updated.application_date == before["application_date"]


def test_any_status_may_follow_any_other(db, alice):
    application = application_service.create_application(db, alice.id, application_data(status="rejected"))
    
    updated = application_service.update_application(db, alice.id, application.id, ApplicationUpdate(status="applied"))
    
    assert updated.status == ApplicationStatus.APPLIED


def test_salary_range_order_is_not_enforced(db, alice):
    application = application_service.create_application(
        db, alice.id, application_data(salary_min=200000, salary_max=50000)
    )
    
    assert (application.salary_min, application.salary_max) == (200000, 50000)


def test_delete_then_get_is_absent(db, alice):
    application = application_service.create_application(db, alice.id, application_data())
    application_id = application.id
    
    assert application_service.delete_application(db, alice.id, application_id) is True
    assert application_service.get_application(db, alice.id, application_id) is None
    assert application_service.delete_application(db, alice.id, application_id) is False


def test_delete_cascades_interviews_and_clears_resource_links(db, alice):
    application = application_service.create_application(db, alice.id, application_data())
    for _ in range(3):
        interview_service.create_interview(db, alice.id, interview_data(application.id))
    resource = resource_service.create_resource(
        db, alice.id,
        ResourceCreate(title="Company research", category=ResourceCategory.COMPANY_SPECIFIC,
                       linked_application_id=application.id),
    )
    application_id = application.id
    
    application_service.delete_application(db, alice.id, application_id)
    
    assert db.query(Interview).filter(Interview.application_id == application_id).count() == 0
    survivor = resource_service.get_resource(db, alice.id, resource.id)
    assert survivor is not None
    assert survivor.linked_application_id is None
    
    assert resource_service.delete_resource(db, alice.id, resource.id) is True
