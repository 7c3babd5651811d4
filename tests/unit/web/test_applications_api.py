#!/usr/bin/env python3
"""
Unit tests for the application and job endpoints.
Services are mocked; these cover routing, validation and error mapping.
"""

import unittest
import uuid
from unittest.mock import patch, MagicMock

from fastapi.testclient import TestClient

from core.lifecycle import ApplicationAction, bulk_apply, shortlist
from tests.fixtures.records import make_application_state
from web.backend.app import create_app
from web.backend.dependencies import get_db
from web.backend.exceptions import ApplicationConflictException, ApplicationNotFoundException
from web.backend.models.responses import ApplicationSummary


def _summary(application_id, status='SHORTLISTED', **kwargs) -> ApplicationSummary:
    return ApplicationSummary(
        application_id=str(application_id),
        job_id=str(uuid.uuid4()),
        talent_id=str(uuid.uuid4()),
        status=status,
        match_score=85.0,
        **kwargs
    )


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.app = create_app()
        self.app.dependency_overrides[get_db] = lambda: MagicMock()
        self.client = TestClient(self.app)


class TestApplicationActions(ApiTestCase):

    def setUp(self):
        super().setUp()
        patcher = patch('web.backend.routers.applications.ApplicationService')
        self.service_cls = patcher.start()
        self.addCleanup(patcher.stop)
        self.service = self.service_cls.return_value
        self.application_id = uuid.uuid4()

    def test_shortlist(self):
        result = shortlist(make_application_state(id=self.application_id))
        self.service.transition.return_value = (result, _summary(self.application_id))

        response = self.client.post(
            f"/api/applications/{self.application_id}/shortlist",
            json={"notes": "Strong portfolio"},
            headers={"X-Admin-Id": "admin-1"},
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body['success'])
        self.assertEqual(body['message'], "Application shortlisted successfully")
        self.assertEqual(body['previous_status'], 'NEW')
        self.assertEqual(body['application']['status'], 'SHORTLISTED')
        self.service.transition.assert_called_once_with(
            self.application_id,
            ApplicationAction.SHORTLIST,
            notes="Strong portfolio",
            reason=None,
            admin_id="admin-1",
        )

    def test_hire_without_body(self):
        result = shortlist(make_application_state(id=self.application_id))
        self.service.transition.return_value = (result, _summary(self.application_id, status='HIRED'))

        response = self.client.post(f"/api/applications/{self.application_id}/hire")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['message'], "Application hired successfully")
        _, kwargs = self.service.transition.call_args
        self.assertIsNone(kwargs['notes'])
        self.assertIsNone(kwargs['admin_id'])

    def test_reject_passes_reason(self):
        result = shortlist(make_application_state(id=self.application_id))
        self.service.transition.return_value = (result, _summary(self.application_id, status='REJECTED'))

        response = self.client.post(
            f"/api/applications/{self.application_id}/reject",
            json={"reason": "Rate too high"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['message'], "Application rejected successfully")
        _, kwargs = self.service.transition.call_args
        self.assertEqual(kwargs['reason'], "Rate too high")

    def test_invalid_transition_is_409(self):
        self.service.transition.side_effect = ApplicationConflictException("Cannot reject a hired application")

        response = self.client.post(f"/api/applications/{self.application_id}/reject", json={})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {
            "success": False,
            "error": "Cannot reject a hired application",
            "type": "ApplicationConflictException",
        })

    def test_unknown_application_is_404(self):
        self.service.get.side_effect = ApplicationNotFoundException("Application not found")

        response = self.client.get(f"/api/applications/{self.application_id}")

        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.json()['success'])

    def test_invalid_uuid_is_400(self):
        response = self.client.post("/api/applications/not-a-uuid/shortlist")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['type'], "HTTPException")
        self.service.transition.assert_not_called()

    def test_note_too_long_is_422(self):
        response = self.client.post(
            f"/api/applications/{self.application_id}/shortlist",
            json={"notes": "x" * 501},
        )

        self.assertEqual(response.status_code, 422)
        self.service.transition.assert_not_called()

    def test_create_application(self):
        job_id, talent_id = uuid.uuid4(), uuid.uuid4()
        self.service.create.return_value = _summary(uuid.uuid4(), status='NEW')

        response = self.client.post(
            "/api/applications",
            json={"job_id": str(job_id), "talent_id": str(talent_id)},
        )

        self.assertEqual(response.status_code, 201)
        self.service.create.assert_called_once_with(job_id, talent_id, match_score=None, match_breakdown=None)

    def test_create_rejects_score_over_100(self):
        response = self.client.post(
            "/api/applications",
            json={"job_id": str(uuid.uuid4()), "talent_id": str(uuid.uuid4()), "match_score": 120},
        )

        self.assertEqual(response.status_code, 422)


class TestJobEndpoints(ApiTestCase):

    def setUp(self):
        super().setUp()
        patcher = patch('web.backend.routers.jobs.ApplicationService')
        self.service = patcher.start().return_value
        self.addCleanup(patcher.stop)
        self.job_id = uuid.uuid4()

    def test_bulk_action_reports_partial_failure(self):
        app = make_application_state(job_id=self.job_id)
        missing = uuid.uuid4()
        self.service.bulk_action.return_value = bulk_apply(
            self.job_id, [app.talent_id, missing], ApplicationAction.SHORTLIST, {app.talent_id: app}
        )

        response = self.client.post(
            f"/api/jobs/{self.job_id}/applications/bulk",
            json={"talent_ids": [str(app.talent_id), str(missing)], "action": "SHORTLIST"},
            headers={"X-Admin-Id": "admin-2"},
        )

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertFalse(body['success'])
        self.assertEqual(body['action'], 'SHORTLIST')
        self.assertEqual(body['succeeded'], 1)
        self.assertEqual(body['failed'], 1)
        self.assertEqual(body['results'][0]['status'], 'SHORTLISTED')
        self.assertEqual(body['results'][1]['error'], f"No application for talent {missing} on job {self.job_id}")
        _, kwargs = self.service.bulk_action.call_args
        self.assertEqual(kwargs['admin_id'], "admin-2")

    def test_bulk_action_requires_talents(self):
        response = self.client.post(
            f"/api/jobs/{self.job_id}/applications/bulk",
            json={"talent_ids": [], "action": "HIRE"},
        )
        self.assertEqual(response.status_code, 422)

    def test_bulk_action_rejects_unknown_action(self):
        response = self.client.post(
            f"/api/jobs/{self.job_id}/applications/bulk",
            json={"talent_ids": [str(uuid.uuid4())], "action": "ARCHIVE"},
        )
        self.assertEqual(response.status_code, 422)

    def test_list_applications(self):
        self.service.list_for_job.return_value = (
            [_summary(uuid.uuid4(), status='NEW')],
            {'page': 1, 'limit': 20, 'total': 1, 'total_pages': 1, 'has_next': False, 'has_prev': False},
        )

        response = self.client.get(
            f"/api/jobs/{self.job_id}/applications",
            params={"status": "NEW", "min_match_score": 70, "sort_by": "applied_at", "sort_order": "asc"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['pagination']['total'], 1)
        self.service.list_for_job.assert_called_once_with(
            self.job_id,
            status='NEW',
            min_match_score=70,
            page=1,
            limit=20,
            sort_by='applied_at',
            sort_order='asc',
        )

    def test_list_applications_rejects_bad_sort(self):
        response = self.client.get(f"/api/jobs/{self.job_id}/applications", params={"sort_by": "name"})
        self.assertEqual(response.status_code, 422)

    def test_applicant_summary(self):
        self.service.applicant_summary.return_value = {
            'job_id': str(self.job_id),
            'job_title': 'Data Engineer',
            'total': 3,
            'new': 1,
            'shortlisted': 1,
            'hired': 0,
            'rejected': 1,
        }

        response = self.client.get(f"/api/jobs/{self.job_id}/applicants/summary")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['total'], 3)


class TestTalentEndpoints(ApiTestCase):

    def setUp(self):
        super().setUp()
        patcher = patch('web.backend.routers.talents.ApplicationService')
        self.service = patcher.start().return_value
        self.addCleanup(patcher.stop)

    def test_list_talent_applications(self):
        talent_id = uuid.uuid4()
        self.service.list_for_talent.return_value = (
            [_summary(uuid.uuid4(), status='HIRED', job_title='Data Engineer')],
            {'page': 1, 'limit': 20, 'total': 1, 'total_pages': 1, 'has_next': False, 'has_prev': False},
        )

        response = self.client.get(f"/api/talents/{talent_id}/applications", params={"status": "HIRED"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['data'][0]['job_title'], 'Data Engineer')
        _, kwargs = self.service.list_for_talent.call_args
        self.assertEqual(kwargs['status'], 'HIRED')
        self.assertEqual(kwargs['sort_by'], 'applied_at')

    def test_unknown_status_is_422(self):
        response = self.client.get(f"/api/talents/{uuid.uuid4()}/applications", params={"status": "ARCHIVED"})
        self.assertEqual(response.status_code, 422)


class TestHealth(ApiTestCase):

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['status'], 'healthy')


if __name__ == '__main__':
    unittest.main()
