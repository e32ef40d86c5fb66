import json
from decimal import Decimal
from http import HTTPStatus

from django.contrib.auth.models import User
from django.test import TestCase
from rest_framework.test import APIClient

from core.models import LeagueSettings
from events.tests.factories import LeagueSettingsFactory


class LeagueSettingsTests(TestCase):

    def test_no_settings(self):
        self.assertIsNone(LeagueSettings.objects.current_settings())

    def test_update_creates_settings(self):
        settings = LeagueSettings.objects.update_fees(tournament_fee_18_holes=Decimal("35.00"))

        self.assertEqual(settings.id, 1)
        self.assertEqual(LeagueSettings.objects.current_settings().tournament_fee_18_holes, Decimal("35.00"))

    def test_update_one_fee(self):
        LeagueSettingsFactory()

        LeagueSettings.objects.update_fees(tournament_fee_9_holes=Decimal("25.00"))

        settings = LeagueSettings.objects.current_settings()
        self.assertEqual(settings.tournament_fee_18_holes, Decimal("40.00"))
        self.assertEqual(settings.tournament_fee_9_holes, Decimal("25.00"))

    def test_update_nothing(self):
        with self.assertRaises(ValueError):
            LeagueSettings.objects.update_fees()


class LeagueSettingsViewTests(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=User.objects.create_user(username="admin", password="secret"))

    def patch(self, data):
        return self.client.patch("/api/settings/", data=json.dumps(data), content_type="application/json")

    def test_get_missing_settings(self):
        response = APIClient().get("/api/settings/")

        self.assertEqual(response.status_code, HTTPStatus.NOT_FOUND)

    def test_get_settings(self):
        LeagueSettingsFactory()

        response = APIClient().get("/api/settings/")

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.data["tournament_fee_18_holes"], "40.00")

    def test_patch_settings(self):
        LeagueSettingsFactory()

        response = self.patch({"tournament_fee_18_holes": "45.00"})

        self.assertEqual(response.status_code, HTTPStatus.OK)
        self.assertEqual(response.data["tournament_fee_18_holes"], "45.00")
        self.assertEqual(response.data["tournament_fee_9_holes"], "20.00")

    def test_patch_nothing(self):
        response = self.patch({})

        self.assertEqual(response.status_code, HTTPStatus.BAD_REQUEST)

    def test_patch_requires_login(self):
        response = APIClient().patch("/api/settings/", data=json.dumps({"tournament_fee_9_holes": "10.00"}),
                                     content_type="application/json")

        self.assertEqual(response.status_code, HTTPStatus.FORBIDDEN)
