#!/usr/bin/env python3
"""
Unit tests for ApplicationRepository and TalentRepository against a mocked session.
"""

import unittest
import uuid
from types import SimpleNamespace
from unittest.mock import MagicMock

from sqlalchemy.dialects import postgresql

from database.models import Application
from database.repositories import ApplicationRepository, TalentRepository

class TestApplicationRepository(unittest.TestCase):

    def setUp(self):
        self.db = MagicMock()
        self.repo = ApplicationRepository(self.db)
        self.job_id = uuid.uuid4()

    def test_create_adds_new_application_and_flushes(self):
        talent_id = uuid.uuid4()
        breakdown = {'skillOverlap': 100, 'total': 90}

        application = self.repo.create(self.job_id, talent_id, 90, breakdown)

        self.assertIsInstance(application, Application)
        self.assertEqual(application.status, 'NEW')
        self.assertEqual(application.match_score, 90)
        self.assertEqual(application.match_breakdown, breakdown)
        self.db.add.assert_called_once_with(application)
        self.db.flush.assert_called_once()
        self.db.commit.assert_not_called()

    def test_get_by_id_uses_identity_map(self):
        app_id = uuid.uuid4()
        self.repo.get_by_id(app_id)
        self.db.get.assert_called_once_with(Application, app_id)

    def test_get_by_id_for_update_locks_row(self):
        app_id = uuid.uuid4()
        self.repo.get_by_id(app_id, for_update=True)
        self.db.get.assert_called_once_with(
            Application, app_id, with_for_update=True, populate_existing=True
        )

    def test_get_for_job_by_talents_for_update_locks_rows(self):
        self.db.execute.return_value.scalars.return_value.all.return_value = []

        self.repo.get_for_job_by_talents(self.job_id, [uuid.uuid4()], for_update=True)

        stmt = self.db.execute.call_args[0][0]
        self.assertIn("FOR UPDATE", str(stmt.compile(dialect=postgresql.dialect())))

    def test_get_for_job_by_talents_plain_read(self):
        self.db.execute.return_value.scalars.return_value.all.return_value = []

        self.repo.get_for_job_by_talents(self.job_id, [uuid.uuid4()])

        stmt = self.db.execute.call_args[0][0]
        self.assertNotIn("FOR UPDATE", str(stmt.compile(dialect=postgresql.dialect())))

    def test_get_for_job_by_talents_keys_by_talent(self):
        t1, t2 = uuid.uuid4(), uuid.uuid4()
        rows = [SimpleNamespace(talent_id=t1), SimpleNamespace(talent_id=t2)]
        self.db.execute.return_value.scalars.return_value.all.return_value = rows

        result = self.repo.get_for_job_by_talents(self.job_id, [t1, t2, uuid.uuid4()])

        self.assertEqual(result, {t1: rows[0], t2: rows[1]})

    def test_get_for_job_by_talents_empty_input_skips_query(self):
        self.assertEqual(self.repo.get_for_job_by_talents(self.job_id, []), {})
        self.db.execute.assert_not_called()

    def test_query_for_job_returns_rows_and_total(self):
        rows = [SimpleNamespace(id=1), SimpleNamespace(id=2)]
        count_result = MagicMock()
        count_result.scalar_one.return_value = 7
        rows_result = MagicMock()
        rows_result.unique.return_value.scalars.return_value.all.return_value = rows
        self.db.execute.side_effect = [count_result, rows_result]

        result_rows, total = self.repo.query_for_job(
            self.job_id, status='NEW', min_match_score=60, page=2, limit=2
        )

        self.assertEqual(result_rows, rows)
        self.assertEqual(total, 7)
        self.assertEqual(self.db.execute.call_count, 2)

    def test_query_for_talent_unknown_sort_falls_back(self):
        count_result = MagicMock()
        count_result.scalar_one.return_value = 0
        rows_result = MagicMock()
        rows_result.unique.return_value.scalars.return_value.all.return_value = []
        self.db.execute.side_effect = [count_result, rows_result]

        rows, total = self.repo.query_for_talent(uuid.uuid4(), sort_by='name')

        self.assertEqual(rows, [])
        self.assertEqual(total, 0)

    def test_status_counts_for_job(self):
        self.db.execute.return_value.all.return_value = [('NEW', 3), ('SHORTLISTED', 2), ('HIRED', 1)]

        counts = self.repo.status_counts_for_job(self.job_id)

        self.assertEqual(counts, {'NEW': 3, 'SHORTLISTED': 2, 'HIRED': 1})

class TestTalentRepository(unittest.TestCase):

    def setUp(self):
        self.db = MagicMock()
        self.repo = TalentRepository(self.db)

    def test_mark_hired_updates_status(self):
        talent = SimpleNamespace(id=uuid.uuid4(), status='APPROVED')
        self.db.get.return_value = talent

        result = self.repo.mark_hired(talent.id)

        self.assertIs(result, talent)
        self.assertEqual(talent.status, 'HIRED')
        self.db.commit.assert_not_called()

    def test_mark_hired_missing_talent(self):
        self.db.get.return_value = None
        self.assertIsNone(self.repo.mark_hired(uuid.uuid4()))

if __name__ == '__main__':
    unittest.main()
