"""
Tests for preparation resources, including links to applications.
"""
import pytest

from tracker.core.errors import AccessDeniedError, InvalidFilterError
from tracker.db.models.resource import ResourceCategory
from tracker.schemas.resource import ResourceCreate, ResourceUpdate
from tracker.services import application_service, resource_service
from factories import application_data


def _resource(**overrides):
    data = {"title": "Grokking the System Design Interview", "category": "system_design"}
    data.update(overrides)
    return ResourceCreate(**data)


def test_create_defaults(db, alice):
    resource = resource_service.create_resource(db, alice.id, _resource())
    
    assert resource.user_id == alice.id
    assert resource.is_reviewed is False
    assert resource.linked_application_id is None


def test_list_scoped_and_filtered_by_category(db, alice, bob):
    resource_service.create_resource(db, alice.id, _resource(title="LeetCode", category="algorithms"))
    resource_service.create_resource(db, alice.id, _resource(title="STAR method", category="behavioral"))
    resource_service.create_resource(db, bob.id, _resource(title="Bob's notes", category="algorithms"))
    
    assert len(resource_service.list_resources(db, alice.id)) == 2
    assert len(resource_service.list_resources(db, alice.id, category="all")) == 2
    
    algorithms = resource_service.list_resources(db, alice.id, category="algorithms")
    assert [r.title for r in algorithms] == ["LeetCode"]
    
    with pytest.raises(InvalidFilterError):
        resource_service.list_resources(db, alice.id, category="videos")


def test_link_to_own_application(db, alice):
    application = application_service.create_application(db, alice.id, application_data())
    
    resource = resource_service.create_resource(db, alice.id, _resource(linked_application_id=application.id))
    
    assert resource.linked_application_id == application.id


def test_link_to_foreign_application_is_denied(db, alice, bob):
    bobs_application = application_service.create_application(db, bob.id, application_data())
    
    with pytest.raises(AccessDeniedError):
        resource_service.create_resource(db, alice.id, _resource(linked_application_id=bobs_application.id))
    
    assert resource_service.list_resources(db, alice.id) == []


def test_update_cannot_link_foreign_application(db, alice, bob):
    resource = resource_service.create_resource(db, alice.id, _resource())
    bobs_application = application_service.create_application(db, bob.id, application_data())
    
    with pytest.raises(AccessDeniedError):
        resource_service.update_resource(
            db, alice.id, resource.id, ResourceUpdate(linked_application_id=bobs_application.id)
        )


def test_update_marks_reviewed_and_unlinks(db, alice):
    application = application_service.create_application(db, alice.id, application_data())
    resource = resource_service.create_resource(db, alice.id, _resource(linked_application_id=application.id))
    
    updated = resource_service.update_resource(
        db, alice.id, resource.id, ResourceUpdate(is_reviewed=True, linked_application_id=None)
    )
    
    assert updated.is_reviewed is True
    assert updated.linked_application_id is None
    assert updated.category == ResourceCategory.SYSTEM_DESIGN


def test_foreign_resource_is_invisible(db, alice, bob):
    resource = resource_service.create_resource(db, alice.id, _resource())
    resource_id = resource.id
    
    assert resource_service.get_resource(db, bob.id, resource_id) is None
    assert resource_service.update_resource(db, bob.id, resource_id, ResourceUpdate(title="Mine now")) is None
    assert resource_service.delete_resource(db, bob.id, resource_id) is False
    assert resource_service.delete_resource(db, alice.id, resource_id) is True
    assert resource_service.get_resource(db, alice.id, resource_id) is None
