"""
Core — Management Command: seed_hierarchy

Loads a nested JSON tree of countries, states, universities, colleges,
buildings and rooms.

Usage::

    python manage.py seed_hierarchy --file hierarchy.json

Idempotent: safe to re-run (uses get_or_create). Countries and states
are matched on their code, universities and colleges on their name,
buildings and rooms on their name within the parent.

@file core/management/commands/seed_hierarchy.py
"""

import json
import logging
from collections import Counter

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from facilities.models import Building, Room
from geography.models import Country, State
from institutions.models import College, University

logger = logging.getLogger('campus')


class Command(BaseCommand):
    help = 'Seed the campus hierarchy from a nested JSON file.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--file',
            type=str,
            required=True,
            help='Path to a local JSON file.',
        )

    def handle(self, *args, **options):
        try:
            with open(options['file'], 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise CommandError(f'Cannot read {options["file"]}: {exc}') from exc

        if isinstance(data, dict):
            data = data.get('countries', [])
        if not isinstance(data, list):
            raise CommandError('Expected a list of countries or {"countries": [...]}.')

        counter = Counter()
        with transaction.atomic():
            for country_data in data:
                self._seed_country(country_data, counter)

        logger.info('Hierarchy seeded: %s', dict(counter))
        self.stdout.write(self.style.SUCCESS(
            f'Done. Countries: {counter["country"]}, States: {counter["state"]}, '
            f'Universities: {counter["university"]}, Colleges: {counter["college"]}, '
            f'Buildings: {counter["building"]}, Rooms: {counter["room"]}'
        ))

    def _seed_country(self, data, counter):
        """
        Expected JSON shape:

        [
          {
            "name": "India", "code": "IN",
            "states": [
              {
                "name": "Karnataka", "state_code": "KA",
                "universities": [
                  {
                    "name": "VTU",
                    "colleges": [
                      {
                        "name": "RVCE",
                        "buildings": [
                          {"name": "Block A", "rooms": [{"name": "101"}]}
                        ]
                      }
                    ]
                  }
                ]
              }
            ]
          }
        ]
        """
        country, _ = Country.objects.get_or_create(
            code=data['code'].strip(),
            defaults={'name': data['name'].strip()},
        )
        counter['country'] += 1
        self.stdout.write(f'  Country: {country}')

        for state_data in data.get('states', []):
            state, _ = State.objects.get_or_create(
                state_code=state_data['state_code'].strip(),
                defaults={'name': state_data['name'].strip(), 'country': country},
            )
            counter['state'] += 1

            for university_data in state_data.get('universities', []):
                university, _ = University.objects.get_or_create(
                    name=university_data['name'].strip(),
                    defaults={'state': state},
                )
                counter['university'] += 1

                for college_data in university_data.get('colleges', []):
                    college, _ = College.objects.get_or_create(
                        name=college_data['name'].strip(),
                        defaults={'university': university},
                    )
                    counter['college'] += 1
                    self._seed_buildings(college, college_data.get('buildings', []), counter)

    @staticmethod
    def _seed_buildings(college, buildings, counter):
        for building_data in buildings:
            if isinstance(building_data, str):
                building_data = {'name': building_data}
            building, _ = Building.objects.get_or_create(
                name=building_data['name'].strip(), college=college,
            )
            counter['building'] += 1

            for room_data in building_data.get('rooms', []):
                if isinstance(room_data, str):
                    room_data = {'name': room_data}
                Room.objects.get_or_create(
                    name=room_data['name'].strip(),
                    building=building,
                    defaults={'description': room_data.get('description', '')},
                )
                counter['room'] += 1
