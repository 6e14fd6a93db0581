import sys
import unittest
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.deadlines import DeadlineStatus, get_deadline_status, partition_deadlines  # noqa: E402

TODAY = date(2026, 10, 17)


@dataclass
class Deadline:
    title: str
    due_date: str | None


def _in_days(title: str, offset: int) -> Deadline:
    return Deadline(title=title, due_date=(TODAY + timedelta(days=offset)).isoformat())


class DeadlineStatusTests(unittest.TestCase):
    def test_empty_list_has_no_status(self):
        result = get_deadline_status([], today=TODAY)
        self.assertEqual(result, DeadlineStatus())
        self.assertIsNone(result.next_deadline)
        self.assertIsNone(result.closest_deadline)
        self.assertFalse(result.is_finished)
        self.assertFalse(result.has_upcoming)

    def test_next_upcoming_deadline_is_earliest_future_one(self):
        next_week = _in_days("Project", 7)
        tomorrow = _in_days("Quiz", 1)

        result = get_deadline_status([next_week, tomorrow], today=TODAY)

        self.assertTrue(result.has_upcoming)
        self.assertFalse(result.is_finished)
        self.assertIs(result.next_deadline, tomorrow)
        self.assertIs(result.closest_deadline, tomorrow)

    def test_past_only_deadlines_are_finished(self):
        yesterday = _in_days("Essay", -1)

        result = get_deadline_status([yesterday], today=TODAY)

        self.assertFalse(result.has_upcoming)
        self.assertTrue(result.is_finished)
        self.assertIsNone(result.next_deadline)
        self.assertIs(result.closest_deadline, yesterday)

    def test_closest_past_deadline_is_the_most_recent(self):
        older = _in_days("Lab 1", -20)
        recent = _in_days("Lab 2", -3)

        result = get_deadline_status([recent, older], today=TODAY)

        self.assertIs(result.closest_deadline, recent)

    def test_deadline_due_today_counts_as_upcoming(self):
        earlier_today = Deadline(title="Standup", due_date=f"{TODAY.isoformat()}T00:01:00")
        past = _in_days("Reading", -2)

        result = get_deadline_status([past, earlier_today], today=TODAY)

        self.assertIs(result.next_deadline, earlier_today)
        self.assertTrue(result.has_upcoming)

    def test_unparsable_only_is_neither_finished_nor_upcoming(self):
        result = get_deadline_status(
            [Deadline("Final", "TBD"), Deadline("Talk", None)],
            today=TODAY,
        )
        self.assertEqual(result, DeadlineStatus())

    def test_unparsable_records_are_ignored_in_ordering(self):
        upcoming = _in_days("Midterm", 5)
        result = get_deadline_status([Deadline("Final", "TBD"), upcoming], today=TODAY)
        self.assertIs(result.next_deadline, upcoming)

    def test_equal_dates_keep_input_order(self):
        first = _in_days("Problem set", 2)
        second = _in_days("Reading quiz", 2)

        result = get_deadline_status([first, second], today=TODAY)

        self.assertIs(result.next_deadline, first)

    def test_academic_dates_take_part_in_ordering(self):
        academic = Deadline("Presentation", "Tue. Oct. 20 @ 9:00am")
        later = _in_days("Paper", 30)

        result = get_deadline_status([later, academic], today=TODAY)

        self.assertIs(result.next_deadline, academic)

    def test_explicit_future_year_is_not_misdated(self):
        next_year = Deadline("Capstone", "Monday, November 24, 2027")
        past = _in_days("Quiz", -1)

        result = get_deadline_status([past, next_year], today=TODAY)

        self.assertIs(result.next_deadline, next_year)
        self.assertTrue(result.has_upcoming)

    def test_out_of_range_aware_date_degrades_to_unparsable(self):
        edge = Deadline("Edge", "0001-01-01T00:00:00+05:00")
        self.assertEqual(get_deadline_status([edge], today=TODAY), DeadlineStatus())

    def test_status_is_idempotent(self):
        deadlines = [_in_days("A", -2), _in_days("B", 4)]
        self.assertEqual(
            get_deadline_status(deadlines, today=TODAY),
            get_deadline_status(deadlines, today=TODAY),
        )


class PartitionDeadlinesTests(unittest.TestCase):
    def test_undated_records_land_in_tbd_bucket(self):
        late = _in_days("Late", 9)
        early = _in_days("Early", -4)
        undated = Deadline("Office hours", "TBD")
        missing = Deadline("Field trip", None)

        dated, tbd = partition_deadlines([late, undated, early, missing], today=TODAY)

        self.assertEqual([item.title for item in dated], ["Early", "Late"])
        self.assertEqual([item.title for item in tbd], ["Office hours", "Field trip"])


if __name__ == "__main__":
    unittest.main()
