#!/usr/bin/env python3
"""
Test suite for the four component scores.
"""

import unittest

from core.matching import EngagementType, ExperienceLevel, OneOrMany, ServiceCategory
from core.matching.components import (
    NEUTRAL_SCORE,
    calculate_category_match,
    calculate_engagement_match,
    calculate_experience_match,
    calculate_skill_overlap,
)


class TestSkillOverlap(unittest.TestCase):
    """Test bidirectional substring skill matching."""

    def test_all_job_skills_present(self):
        talent = ["JavaScript", "TypeScript", "React", "Node.js", "PostgreSQL", "MongoDB"]
        job = ["JavaScript", "TypeScript", "React", "Node.js", "PostgreSQL"]
        self.assertEqual(calculate_skill_overlap(talent, job), 1.0)

    def test_partial_overlap_is_fraction_of_job_skills(self):
        talent = ["Python", "Django", "PostgreSQL"]
        job = ["Python", "Django", "PostgreSQL", "Kubernetes", "Terraform"]
        self.assertAlmostEqual(calculate_skill_overlap(talent, job), 0.6)

    def test_no_job_skills_scores_zero(self):
        self.assertEqual(calculate_skill_overlap(["Python"], []), 0.0)

    def test_no_talent_skills_scores_zero(self):
        self.assertEqual(calculate_skill_overlap([], ["Python", "SQL"]), 0.0)

    def test_case_and_whitespace_are_ignored(self):
        talent = ["  REACT ", "node.js"]
        job = ["react", "  Node.JS"]
        self.assertEqual(calculate_skill_overlap(talent, job), 1.0)

    def test_substring_matches_in_both_directions(self):
        # job skill inside talent skill
        self.assertEqual(calculate_skill_overlap(["React.js"], ["React"]), 1.0)
        # talent skill inside job skill
        self.assertEqual(calculate_skill_overlap(["React"], ["React Native"]), 1.0)

    def test_substring_matching_is_permissive(self):
        """'java' is contained in 'javascript', so it counts as a match."""
        self.assertEqual(calculate_skill_overlap(["JavaScript"], ["Java"]), 1.0)

    def test_synonyms_do_not_match(self):
        self.assertEqual(calculate_skill_overlap(["JS"], ["JavaScript"]), 0.0)

    def test_result_is_bounded(self):
        talent = ["a", "ab", "abc"]
        job = ["abc", "xyz"]
        score = calculate_skill_overlap(talent, job)
        self.assertGreaterEqual(score, 0.0)
        self.assertLessEqual(score, 1.0)
        self.assertEqual(score, 0.5)


class TestCategoryMatch(unittest.TestCase):

    def test_single_category_match(self):
        cats = OneOrMany.of(ServiceCategory.AI)
        self.assertEqual(calculate_category_match(cats, ServiceCategory.AI), 1.0)

    def test_single_category_mismatch(self):
        cats = OneOrMany.of(ServiceCategory.AI)
        self.assertEqual(calculate_category_match(cats, ServiceCategory.ITO), 0.0)

    def test_membership_in_list(self):
        cats = OneOrMany.of(['AI', 'DATA_ANALYTICS'], ServiceCategory)
        self.assertEqual(calculate_category_match(cats, ServiceCategory.DATA_ANALYTICS), 1.0)
        self.assertEqual(calculate_category_match(cats, ServiceCategory.AUTOMATION), 0.0)

    def test_empty_list_never_matches(self):
        cats = OneOrMany.of([], ServiceCategory)
        self.assertEqual(calculate_category_match(cats, ServiceCategory.ITO), 0.0)


class TestExperienceMatch(unittest.TestCase):
    """Test rank distance with asymmetric penalties."""

    def test_job_without_level_is_neutral(self):
        for level in ExperienceLevel:
            self.assertEqual(calculate_experience_match(level, None), NEUTRAL_SCORE)

    def test_same_level_is_full_score(self):
        for level in ExperienceLevel:
            self.assertEqual(calculate_experience_match(level, level), 1.0)

    def test_overqualified_by_one(self):
        self.assertAlmostEqual(
            calculate_experience_match(ExperienceLevel.LEAD, ExperienceLevel.SENIOR), 0.9
        )

    def test_overqualified_by_two(self):
        self.assertAlmostEqual(
            calculate_experience_match(ExperienceLevel.LEAD, ExperienceLevel.MID), 0.8
        )

    def test_overqualified_is_floored(self):
        self.assertAlmostEqual(
            calculate_experience_match(ExperienceLevel.ARCHITECT, ExperienceLevel.JUNIOR), 0.7
        )
        self.assertAlmostEqual(
            calculate_experience_match(ExperienceLevel.ARCHITECT, ExperienceLevel.MID), 0.7
        )

    def test_underqualified_by_one(self):
        self.assertAlmostEqual(
            calculate_experience_match(ExperienceLevel.MID, ExperienceLevel.SENIOR), 0.7
        )

    def test_underqualified_by_two(self):
        self.assertAlmostEqual(
            calculate_experience_match(ExperienceLevel.JUNIOR, ExperienceLevel.SENIOR), 0.4
        )

    def test_underqualified_is_floored_at_zero(self):
        self.assertEqual(
            calculate_experience_match(ExperienceLevel.JUNIOR, ExperienceLevel.ARCHITECT), 0.0
        )

    def test_overqualified_beats_equally_distant_underqualified(self):
        over = calculate_experience_match(ExperienceLevel.LEAD, ExperienceLevel.SENIOR)
        under = calculate_experience_match(ExperienceLevel.MID, ExperienceLevel.SENIOR)
        self.assertGreater(over, under)


class TestEngagementMatch(unittest.TestCase):

    def test_no_preference_is_neutral(self):
        self.assertEqual(calculate_engagement_match(None, EngagementType.CONTRACT), NEUTRAL_SCORE)

    def test_single_preference(self):
        pref = OneOrMany.of(EngagementType.FULL_TIME)
        self.assertEqual(calculate_engagement_match(pref, EngagementType.FULL_TIME), 1.0)
        self.assertEqual(calculate_engagement_match(pref, EngagementType.PART_TIME), 0.0)

    def test_list_preference(self):
        pref = OneOrMany.of(['CONTRACT', 'FREELANCE'], EngagementType)
        self.assertEqual(calculate_engagement_match(pref, EngagementType.FREELANCE), 1.0)
        self.assertEqual(calculate_engagement_match(pref, EngagementType.FULL_TIME), 0.0)

    def test_empty_list_is_not_neutral(self):
        pref = OneOrMany.of([], EngagementType)
        self.assertEqual(calculate_engagement_match(pref, EngagementType.FULL_TIME), 0.0)


if __name__ == '__main__':
    unittest.main()
