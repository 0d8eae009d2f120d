import unittest

from fitcoach.client.plan_model import (
    Plan, ExerciseRef, fitness_day_index, parse_duration_seconds, parse_reps,
)
from tests.helpers import plan_data


def dashboard_body(data=None, **overrides):
    body = {
        "planId": 3, "plan": data or plan_data(), "currentDay": 1, "durationDays": 30,
        "isActive": True, "isExpired": False, "progress": [],
    }
    body.update(overrides)
    return body


class TestDayIndexing(unittest.TestCase):

    def test_day_index_cycles(self):
        self.assertEqual(fitness_day_index(9, 7), 1)
        self.assertEqual(fitness_day_index(1, 7), 0)
        self.assertEqual(fitness_day_index(30, 7), 1)
        self.assertEqual(fitness_day_index(30, 15), 14)

    def test_day_index_rejects_empty_plan(self):
        with self.assertRaises(ValueError):
            fitness_day_index(1, 0)
        with self.assertRaises(ValueError):
            fitness_day_index(0, 7)

    def test_plan_day_lookup_uses_cycle(self):
        plan = Plan.from_api(dashboard_body())
        self.assertEqual(plan.day_plan(3).workout_name, "Full Body A")
        self.assertTrue(plan.day_plan(4).is_rest_day)

    def test_nutrition_prefers_explicit_day(self):
        data = plan_data()
        day_one = data["nutrition_plan_7_days"][0]
        data["nutrition_plan_7_days"] = [dict(day_one, day=5), dict(day_one, day=2, meals=[])]
        plan = Plan.from_api(dashboard_body(data))

        self.assertEqual(plan.nutrition_day_index(2), 1)
        self.assertEqual(plan.nutrition_day_index(5), 0)
        # No entry numbered 3: (3 - 1) % 2
        self.assertEqual(plan.nutrition_day_index(3), 0)


class TestPlanParsing(unittest.TestCase):

    def test_durations_and_reps(self):
        self.assertEqual(parse_duration_seconds("45 sec"), 45)
        self.assertEqual(parse_duration_seconds("1 min"), 60)
        self.assertEqual(parse_duration_seconds("1.5 minutes"), 90)
        self.assertEqual(parse_duration_seconds("30 segundos"), 30)
        self.assertEqual(parse_duration_seconds("20s"), 20)
        self.assertIsNone(parse_duration_seconds("12 reps"))
        self.assertIsNone(parse_duration_seconds(None))
        self.assertEqual(parse_reps("12 repetições"), 12)
        self.assertIsNone(parse_reps("40 sec"))

    def test_reps_with_rest_note_stay_rep_based(self):
        self.assertIsNone(parse_duration_seconds("12 reps (rest 30 sec)"))
        self.assertEqual(parse_reps("12 reps (rest 30 sec)"), 12)
        self.assertIsNone(parse_duration_seconds("10 repetições, descanso 45 seg"))
        ref = ExerciseRef.from_raw({"name": "Squat", "reps_or_time": "12 reps (rest 30 sec)"})
        self.assertIsNone(ref.timed_seconds)

    def test_warmup_duration_becomes_timed_ref(self):
        ref = ExerciseRef.from_raw({"name_pt": "Joelhos Altos", "duration_seconds": 30})
        self.assertEqual(ref.name, "Joelhos Altos")
        self.assertEqual(ref.reps_or_time, "30 sec")
        self.assertEqual(ref.timed_seconds, 30)
        self.assertEqual(ref.sets, 1)

    def test_day_refs_order_and_filter(self):
        data = plan_data()
        data["fitness_plan_7_days"][0]["exercises"].append({"name": "", "sets": 3})
        plan = Plan.from_api(dashboard_body(data))

        names = [r.name for r in plan.day_refs(1)]
        self.assertEqual(names, ["High Knees", "Push Up", "Plank", "Quad Stretch"])
        self.assertEqual(plan.day_refs(1)[1].exercise_id, "push_up")
        self.assertEqual(plan.day_refs(2), [])

    def test_plan_list_entry_shape(self):
        plan = Plan.from_api({"id": 8, "userId": 1, "planData": plan_data(), "currentDay": 4,
                              "durationDays": 60, "isActive": False})
        self.assertEqual(plan.id, 8)
        self.assertEqual(plan.duration_days, 60)
        self.assertEqual(len(plan.fitness_days), 2)
        self.assertEqual(plan.nutrition_days[0].meals[1].description, "Chicken and rice")

    def test_clamp_day(self):
        plan = Plan.from_api(dashboard_body(durationDays=30))
        self.assertEqual(plan.clamp_day(0), 1)
        self.assertEqual(plan.clamp_day(45), 30)


if __name__ == "__main__":
    unittest.main()
