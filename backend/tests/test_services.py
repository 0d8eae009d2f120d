import unittest
from datetime import datetime, timedelta
from unittest.mock import patch

import pytz

from fitcoach.database import Base
from fitcoach.crud import progress as crud_progress
from fitcoach.models.exercise import Exercise
from fitcoach.models.notification import Notification, NotificationSettings
from fitcoach.schemas.meal import MealTargets
from fitcoach.services import meal_service, notification_service
from fitcoach.services.coach_service import CoachService, classify_intent
from fitcoach.services.exercise_service import enrich_exercise
from fitcoach.services.llm_service import GenerationError, _parse_json_from_text
from fitcoach.services.nutrition_service import calculate_daily_targets, validate_weight_goal
from fitcoach.services.plan_service import validate_plan_data
from fitcoach.tasks.reminders import sweep_water_reminders
from tests.helpers import engine, TestingSessionLocal, make_profile, make_plan, plan_data

TARGETS = MealTargets(target_calories=500, target_protein=35, target_carbs=50, target_fat=15, meal_time="Lunch")


class TestPureHelpers(unittest.TestCase):

    def test_daily_targets_for_muscle_gain(self):
        targets = calculate_daily_targets(80, 180, 30, "male", "moderate", "muscle")
        # BMR = 800 + 1125 - 150 + 5 = 1780, TDEE = 1780 * 1.55 = 2759
        self.assertEqual(targets["bmr"], 1780)
        self.assertEqual(targets["tdee"], 2759)
        self.assertEqual(targets["calories"], 3059)
        self.assertEqual(targets["water_ml"], 2800)

    def test_weight_goal_pace_depends_on_goal(self):
        # 1 kg/week: challenging when losing, too fast when gaining
        self.assertEqual(validate_weight_goal(80, 70, 10, "loss")["status"], "challenging")
        self.assertEqual(validate_weight_goal(70, 80, 10, "muscle")["status"], "not_possible")
        self.assertEqual(validate_weight_goal(70, 74, 10, "gain"), {"status": "possible", "weekly_change": 0.4})
        self.assertEqual(validate_weight_goal(70, 75, 10, "gain")["status"], "challenging")
        with self.assertRaises(ValueError):
            validate_weight_goal(80, 70, 0, "loss")

    def test_validate_plan_drops_unknown_exercise_ids(self):
        data = validate_plan_data(plan_data(), library_ids={"plank"})
        main = data["fitness_plan_7_days"][0]["exercises"]
        self.assertNotIn("exerciseId", main[0])
        self.assertEqual(main[0]["name"], "Push Up")

    def test_validate_plan_requires_both_halves(self):
        data = plan_data()
        del data["nutrition_plan_7_days"]
        with self.assertRaises(GenerationError):
            validate_plan_data(data, set())
        with self.assertRaises(GenerationError):
            validate_plan_data(None, set())

    def test_parse_json_repairs_model_output(self):
        text = "Here you go:\n```json\n{'meal': {\"calories\": 400,},}\n```"
        self.assertEqual(_parse_json_from_text(text), {"meal": {"calories": 400}})
        self.assertIsNone(_parse_json_from_text("no json here"))

    def test_normalize_meal_accepts_portuguese_keys(self):
        meal = meal_service.normalize_meal(
            {"description_pt": "Omelete", "main_ingredients_pt": "ovos", "calories": "350", "protein_g": None},
            "Pequeno-almoço",
        )
        self.assertEqual(meal["description"], "Omelete")
        self.assertEqual(meal["ingredients"], "ovos")
        self.assertEqual(meal["calories"], 350.0)
        self.assertEqual(meal["protein_g"], 0.0)
        self.assertEqual(meal["meal_time"], "Pequeno-almoço")

    def test_meal_from_no_ingredients_skips_model(self):
        with patch("fitcoach.services.meal_service.llm_service.call_llm_json") as mock_llm:
            with self.assertRaises(ValueError):
                meal_service.generate_meal_from_ingredients(TARGETS, [])
            mock_llm.assert_not_called()

    @patch("fitcoach.services.meal_service.llm_service.call_llm_json")
    def test_meal_from_ingredients(self, mock_llm):
        mock_llm.return_value = {"meal": {"description": "Tuna pasta", "ingredients": "tuna, pasta", "calories": 520}}
        meal = meal_service.generate_meal_from_ingredients(TARGETS, ["tuna", "pasta"])
        self.assertEqual(meal["description"], "Tuna pasta")
        self.assertEqual(meal["meal_time"], "Lunch")

    def test_sleep_window_wraps_midnight(self):
        self.assertTrue(notification_service.is_within_sleep_hours(23, 22, 7))
        self.assertTrue(notification_service.is_within_sleep_hours(3, 22, 7))
        self.assertFalse(notification_service.is_within_sleep_hours(12, 22, 7))
        self.assertTrue(notification_service.is_within_sleep_hours(14, 13, 15))

    def test_intent_classification(self):
        self.assertEqual(classify_intent("Sim, cria o plano novo"), "authorize_plan")
        self.assertEqual(classify_intent("This is too hard for me"), "suggest_plan")
        self.assertEqual(classify_intent("What should I eat before training?"), "none")


class DbTestCase(unittest.TestCase):
    def setUp(self):
        Base.metadata.create_all(bind=engine)
        self.db = TestingSessionLocal()
        self.user = make_profile(self.db)

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=engine)


class TestExerciseEnrichment(DbTestCase):

    @patch("fitcoach.services.exercise_service.llm_service.call_llm_json")
    def test_complete_record_is_not_regenerated(self, mock_llm):
        self.db.add(Exercise(
            id="push_up", name="Push Up", category="Strength", primary_muscles=["chest"],
            equipment="bodyweight", difficulty="beginner", instructions="Lower and push.",
            instructions_pt="Descer e empurrar.",
        ))
        self.db.commit()

        exercise, missing = enrich_exercise(self.db, "Push Up", "push_up")

        self.assertEqual(exercise.id, "push_up")
        self.assertEqual(missing, [])
        mock_llm.assert_not_called()

    @patch("fitcoach.services.exercise_service.llm_service.call_llm_json")
    def test_empty_model_output_raises(self, mock_llm):
        mock_llm.return_value = None
        with self.assertRaises(GenerationError):
            enrich_exercise(self.db, "Bear Crawl")
        self.assertEqual(self.db.query(Exercise).count(), 0)

    @patch("fitcoach.services.exercise_service.llm_service.call_llm_json")
    def test_enrichment_normalises_muscles(self, mock_llm):
        mock_llm.return_value = {
            "name": "Bear Crawl", "category": "Cardio", "primary_muscles": "Shoulders, Core",
            "equipment": "bodyweight", "difficulty": "Intermediate",
            "instructions": "Crawl forward.", "instructions_pt": "Gatinhar para a frente.",
        }
        exercise, missing = enrich_exercise(self.db, "Bear Crawl")

        self.assertEqual(exercise.primary_muscles, ["shoulders", "core"])
        self.assertEqual(exercise.difficulty, "intermediate")
        self.assertTrue(exercise.is_enriched)
        self.assertEqual(missing, [])


class TestWaterReminders(DbTestCase):

    def test_reminder_respects_interval(self):
        now = datetime(2026, 10, 18, 12, 0, tzinfo=pytz.UTC)

        first = notification_service.create_water_reminder(self.db, self.user.id, "en", now)
        again = notification_service.create_water_reminder(self.db, self.user.id, "en", now + timedelta(minutes=30))
        later = notification_service.create_water_reminder(self.db, self.user.id, "en", now + timedelta(minutes=91))

        self.assertIn("8 glasses (2000ml)", first.message)
        self.assertIsNone(again)
        self.assertIsNotNone(later)

    def test_no_reminder_during_local_night(self):
        tokyo_user = make_profile(self.db, timezone="Asia/Tokyo")
        # 14:00 UTC is 23:00 in Tokyo
        now = datetime(2026, 10, 18, 14, 0, tzinfo=pytz.UTC)
        self.assertIsNone(notification_service.water_reminder_message(self.db, tokyo_user.id, "en", now))
        self.assertIsNotNone(notification_service.water_reminder_message(self.db, self.user.id, "en", now))

    def test_reminder_time_is_stored_in_utc(self):
        # 12:00 in Sao Paulo is 15:00 UTC
        local = pytz.timezone("America/Sao_Paulo").localize(datetime(2026, 10, 18, 12, 0))

        reminder = notification_service.create_water_reminder(self.db, self.user.id, "en", local)

        self.assertEqual(reminder.sent_at, datetime(2026, 10, 18, 15, 0))
        self.assertIsNone(
            notification_service.create_water_reminder(self.db, self.user.id, "en", datetime(2026, 10, 18, 15, 30))
        )

    def test_sweep_skips_disabled_users(self):
        quiet = make_profile(self.db)
        self.db.add(NotificationSettings(user_id=quiet.id, water_reminders_enabled=False))
        self.db.commit()

        sent = sweep_water_reminders(self.db, datetime(2026, 10, 18, 12, 0, tzinfo=pytz.UTC))

        self.assertEqual(sent, 1)
        self.assertEqual(self.db.query(Notification).filter(Notification.user_id == quiet.id).count(), 0)


class TestCoachService(DbTestCase):

    def test_context_without_plan(self):
        context = CoachService(self.db).get_context(self.user.id)
        self.assertEqual(context, {"has_plan": False, "can_create_new_plan": True})

    def test_context_counts_distinct_days(self):
        plan = make_plan(self.db, self.user.id, duration_days=30)
        crud_progress.create_progress(self.db, self.user.id, plan.id, 1, "easy")
        crud_progress.create_progress(self.db, self.user.id, plan.id, 1, "easy")

        context = CoachService(self.db).get_context(self.user.id)

        self.assertEqual(context["completed_days"], 1)
        self.assertEqual(context["completion_rate"], 3)
        self.assertEqual(context["training_days_per_cycle"], 1)
        self.assertTrue(context["can_create_new_plan"])

    @patch("fitcoach.services.coach_service.llm_service.call_llm")
    def test_reply_falls_back_and_keeps_history(self, mock_llm):
        mock_llm.return_value = None
        coach = CoachService(self.db)

        answer = coach.reply(self.user.id, "Hello", language="en")

        self.assertTrue(answer.startswith("Sorry"))
        self.assertEqual([m.role for m in coach.history(self.user.id)], ["user", "assistant"])

        mock_llm.return_value = "Hi again"
        coach.reply(self.user.id, "Still there?", language="en")
        history_sent = mock_llm.call_args.kwargs["history"]
        self.assertEqual([h["content"] for h in history_sent], ["Hello", answer])


if __name__ == "__main__":
    unittest.main()
