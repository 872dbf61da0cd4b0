"""
Tests — Building and Room API endpoints.

@file facilities/tests/test_views.py
"""

import uuid

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse

from facilities.models import Building, Room
from tests.factories import BuildingFactory, CollegeFactory, RoomFactory, make_image_upload


pytestmark = pytest.mark.django_db

BUILDING_LIST = 'api-v1:facilities:building-list'
BUILDING_DETAIL = 'api-v1:facilities:building-detail'
ROOM_LIST = 'api-v1:facilities:room-list'
ROOM_DETAIL = 'api-v1:facilities:room-detail'


class TestBuildingEndpoints:

    def test_create_several_from_names(self, admin_client):
        college = CollegeFactory()
        resp = admin_client.post(reverse(BUILDING_LIST), {
            'name': ['Block A', 'Block B', 'Block C'],
            'college': str(college.pk),
        })
        assert resp.status_code == 201
        assert [b['name'] for b in resp.data] == ['Block A', 'Block B', 'Block C']
        assert Building.objects.filter(college=college).count() == 3

    def test_create_envelope_holds_list(self, admin_client):
        college = CollegeFactory()
        body = admin_client.post(reverse(BUILDING_LIST), {
            'name': ['Block A'], 'college': str(college.pk),
        }).json()
        assert body['success'] is True
        assert isinstance(body['data'], list)

    def test_create_requires_names(self, admin_client):
        college = CollegeFactory()
        resp = admin_client.post(reverse(BUILDING_LIST), {'name': [], 'college': str(college.pk)})
        assert resp.status_code == 400

    def test_create_with_unknown_college(self, admin_client):
        resp = admin_client.post(reverse(BUILDING_LIST), {
            'name': ['Block A'], 'college': str(uuid.uuid4()),
        })
        assert resp.status_code == 400
        assert not Building.objects.exists()

    def test_patch_name(self, admin_client):
        building = BuildingFactory(name='Block A')
        resp = admin_client.patch(
            reverse(BUILDING_DETAIL, kwargs={'pk': building.pk}), {'name': 'Main Block'},
        )
        assert resp.status_code == 200
        assert resp.data['name'] == 'Main Block'
        assert resp.data['college_detail']['id'] == str(building.college_id)

    def test_buildings_by_college(self, authenticated_client):
        college = CollegeFactory()
        BuildingFactory.create_batch(2, college=college)
        resp = authenticated_client.get(
            reverse('api-v1:facilities:building-by-college', kwargs={'parent_id': college.pk}),
        )
        assert resp.status_code == 200
        assert len(resp.data['college']['buildings']) == 2

    def test_delete_many(self, admin_client):
        buildings = BuildingFactory.create_batch(2)
        resp = admin_client.delete(
            reverse('api-v1:facilities:building-delete-many'),
            {'buildingIds': [str(b.pk) for b in buildings]},
        )
        assert resp.status_code == 204
        assert not Building.objects.exists()


class TestRoomEndpoints:

    def test_create_json_without_image(self, admin_client):
        building = BuildingFactory()
        resp = admin_client.post(reverse(ROOM_LIST), {
            'name': '101', 'description': 'Lecture hall', 'building': str(building.pk),
        })
        assert resp.status_code == 201
        assert resp.data['image'] == ''
        assert resp.data['building_detail']['name'] == building.name

    def test_create_multipart_with_image(self, admin_client, in_memory_storage):
        building = BuildingFactory()
        resp = admin_client.post(reverse(ROOM_LIST), {
            'name': '101',
            'building': str(building.pk),
            'image': make_image_upload(),
        }, format='multipart')
        assert resp.status_code == 201
        assert resp.data['image']
        room = Room.objects.get(pk=resp.data['id'])
        assert in_memory_storage.exists(room.image_key)
        assert 'image_key' not in resp.data

    def test_create_requires_building(self, admin_client):
        resp = admin_client.post(reverse(ROOM_LIST), {'name': '101'})
        assert resp.status_code == 400

    def test_rejects_non_image_file(self, admin_client, in_memory_storage):
        building = BuildingFactory()
        upload = SimpleUploadedFile('notes.png', b'not really a png', content_type='image/png')
        resp = admin_client.post(reverse(ROOM_LIST), {
            'name': '101', 'building': str(building.pk), 'image': upload,
        }, format='multipart')
        assert resp.status_code == 400
        assert 'image' in resp.data['errors']
        assert not Room.objects.exists()

    def test_rejects_disallowed_image_type(self, admin_client, in_memory_storage):
        building = BuildingFactory()
        upload = make_image_upload('room.gif', 'GIF', 'image/gif')
        resp = admin_client.post(reverse(ROOM_LIST), {
            'name': '101', 'building': str(building.pk), 'image': upload,
        }, format='multipart')
        assert resp.status_code == 400
        assert 'image' in resp.data['errors']

    def test_rejects_oversized_image(self, admin_client, in_memory_storage, settings):
        settings.ROOM_IMAGE_MAX_BYTES = 16
        building = BuildingFactory()
        resp = admin_client.post(reverse(ROOM_LIST), {
            'name': '101', 'building': str(building.pk), 'image': make_image_upload(),
        }, format='multipart')
        assert resp.status_code == 400
        assert 'image' in resp.data['errors']

    def test_patch_replaces_image(self, admin_client, in_memory_storage):
        building = BuildingFactory()
        created = admin_client.post(reverse(ROOM_LIST), {
            'name': '101', 'building': str(building.pk), 'image': make_image_upload(),
        }, format='multipart')
        old_key = Room.objects.get(pk=created.data['id']).image_key

        resp = admin_client.patch(
            reverse(ROOM_DETAIL, kwargs={'pk': created.data['id']}),
            {'image': make_image_upload('new.jpeg', 'JPEG', 'image/jpeg')},
            format='multipart',
        )
        assert resp.status_code == 200
        assert resp.data['image'] != created.data['image']
        assert not in_memory_storage.exists(old_key)

    def test_patch_image_returns_200_when_old_image_cannot_be_deleted(
        self, admin_client, in_memory_storage, settings,
    ):
        building = BuildingFactory()
        created = admin_client.post(reverse(ROOM_LIST), {
            'name': '101', 'building': str(building.pk), 'image': make_image_upload(),
        }, format='multipart')

        settings.IMAGE_STORE = 'tests.stores.FailingImageStore'
        resp = admin_client.patch(
            reverse(ROOM_DETAIL, kwargs={'pk': created.data['id']}),
            {'image': make_image_upload('new.png')},
            format='multipart',
        )
        assert resp.status_code == 200
        assert resp.data['image'] != created.data['image']

    def test_delete_removes_image(self, admin_client, in_memory_storage):
        building = BuildingFactory()
        created = admin_client.post(reverse(ROOM_LIST), {
            'name': '101', 'building': str(building.pk), 'image': make_image_upload(),
        }, format='multipart')
        key = Room.objects.get(pk=created.data['id']).image_key

        resp = admin_client.delete(reverse(ROOM_DETAIL, kwargs={'pk': created.data['id']}))
        assert resp.status_code == 204
        assert not in_memory_storage.exists(key)
        with pytest.raises(FileNotFoundError):
            in_memory_storage.open(key)
        assert not Room.objects.exists()

    def test_delete_storage_failure_is_500_and_keeps_room(self, admin_client, in_memory_storage, settings):
        building = BuildingFactory()
        created = admin_client.post(reverse(ROOM_LIST), {
            'name': '101', 'building': str(building.pk), 'image': make_image_upload(),
        }, format='multipart')

        settings.IMAGE_STORE = 'tests.stores.FailingImageStore'
        resp = admin_client.delete(reverse(ROOM_DETAIL, kwargs={'pk': created.data['id']}))
        assert resp.status_code == 500
        assert resp.data['code'] == 'STORAGE_ERROR'
        assert Room.objects.filter(pk=created.data['id']).exists()

    def test_rooms_by_building(self, authenticated_client):
        building = BuildingFactory()
        RoomFactory.create_batch(3, building=building)
        resp = authenticated_client.get(
            reverse('api-v1:facilities:room-by-building', kwargs={'parent_id': building.pk}),
        )
        assert resp.status_code == 200
        assert resp.data['building']['id'] == str(building.pk)
        assert len(resp.data['building']['rooms']) == 3

    def test_rooms_by_missing_building(self, authenticated_client):
        resp = authenticated_client.get(
            reverse('api-v1:facilities:room-by-building', kwargs={'parent_id': uuid.uuid4()}),
        )
        assert resp.status_code == 404
        assert resp.data['errors']['detail'] == 'Building not found.'

    def test_delete_many_partial(self, admin_client):
        room = RoomFactory()
        missing = uuid.uuid4()
        resp = admin_client.delete(
            reverse('api-v1:facilities:room-delete-many'),
            {'roomIds': [str(room.pk), str(missing)]},
        )
        assert resp.status_code == 404
        assert resp.data['errors']['deleted'] == [str(room.pk)]
        assert not Room.objects.exists()
