"""
Campus Registry — Test Factories

Factory Boy factories for generating test data. Used across all test
modules.

@file tests/factories.py
"""

import io

import factory
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from facilities.models import Building, Room
from geography.models import Country, State
from institutions.models import College, University


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = get_user_model()
        skip_postgeneration_save = True

    username = factory.Sequence(lambda n: f'user-{n}')
    email = factory.LazyAttribute(lambda o: f'{o.username}@campus.test')
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    is_active = True

    @factory.post_generation
    def password(self, create, extracted, **kwargs):
        password = extracted or 'TestPass2026!'
        self.set_password(password)
        if create:
            self.save(update_fields=['password'])


class StaffUserFactory(UserFactory):
    is_staff = True


class SuperuserFactory(UserFactory):
    is_staff = True
    is_superuser = True


# ---------------------------------------------------------------------------
# Geography
# ---------------------------------------------------------------------------

class CountryFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Country

    name = factory.Sequence(lambda n: f'Country-{n}')
    code = factory.Sequence(lambda n: f'C{n:03d}')


class StateFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = State

    name = factory.Sequence(lambda n: f'State-{n}')
    state_code = factory.Sequence(lambda n: f'S{n:03d}')
    country = factory.SubFactory(CountryFactory)


# ---------------------------------------------------------------------------
# Institutions
# ---------------------------------------------------------------------------

class UniversityFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = University

    name = factory.Sequence(lambda n: f'University-{n}')
    state = factory.SubFactory(StateFactory)


class CollegeFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = College

    name = factory.Sequence(lambda n: f'College-{n}')
    university = factory.SubFactory(UniversityFactory)


# ---------------------------------------------------------------------------
# Facilities
# ---------------------------------------------------------------------------

class BuildingFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Building

    name = factory.Sequence(lambda n: f'Block-{n}')
    college = factory.SubFactory(CollegeFactory)


class RoomFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Room

    name = factory.Sequence(lambda n: f'Room-{n}')
    description = factory.Faker('sentence')
    building = factory.SubFactory(BuildingFactory)


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------

def make_image_upload(name='room.png', image_format='PNG', content_type='image/png'):
    """A small valid image wrapped as an uploaded file."""
    buffer = io.BytesIO()
    Image.new('RGB', (8, 8), color=(200, 30, 30)).save(buffer, format=image_format)
    return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)
