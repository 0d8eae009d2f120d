import unittest

from fitcoach.database import Base
from fitcoach.crud import fitness_plan as crud_plan
from fitcoach.crud import progress as crud_progress
from fitcoach.crud import custom_meal as crud_custom_meal
from fitcoach.crud import exercise as crud_exercise
from fitcoach.crud import user_profile as crud_profile
from fitcoach.data.exercise_library import EXERCISE_LIBRARY
from fitcoach.models.custom_meal import CustomMeal
from fitcoach.models.exercise import Exercise
from fitcoach.models.exercise_progress import ExerciseProgress
from fitcoach.models.fitness_plan import FitnessPlan
from fitcoach.schemas.meal import CustomMealCreate
from fitcoach.schemas.plan import OnboardingRequest
from tests.helpers import engine, TestingSessionLocal, make_profile, make_plan


class TestPlanVersioning(unittest.TestCase):
    def setUp(self):
        Base.metadata.create_all(bind=engine)
        self.db = TestingSessionLocal()
        self.user = make_profile(self.db)

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=engine)

    def active_ids(self, user_id):
        return [p.id for p in self.db.query(FitnessPlan).filter(
            FitnessPlan.user_id == user_id, FitnessPlan.is_active.is_(True)
        ).all()]

    def test_create_plan_deactivates_previous(self):
        first = make_plan(self.db, self.user.id)
        second = make_plan(self.db, self.user.id)

        self.assertEqual(self.active_ids(self.user.id), [second.id])
        self.db.refresh(first)
        self.assertFalse(first.is_active)
        self.assertEqual(second.current_day, 1)
        self.assertEqual((second.end_date - second.start_date).days, 30)

    def test_activate_switches_active_plan(self):
        older = make_plan(self.db, self.user.id)
        newer = make_plan(self.db, self.user.id)

        activated = crud_plan.set_active_plan(self.db, self.user.id, older.id)

        self.assertTrue(activated.is_active)
        self.assertEqual(self.active_ids(self.user.id), [older.id])
        self.db.refresh(newer)
        self.assertFalse(newer.is_active)

    def test_activate_other_users_plan_is_rejected(self):
        other = make_profile(self.db)
        plan = make_plan(self.db, other.id)

        self.assertIsNone(crud_plan.set_active_plan(self.db, self.user.id, plan.id))
        self.assertIsNone(crud_plan.set_active_plan(self.db, self.user.id, 9999))
        self.assertEqual(self.active_ids(other.id), [plan.id])

    def test_activation_does_not_touch_other_users(self):
        other = make_profile(self.db)
        other_plan = make_plan(self.db, other.id)
        mine = make_plan(self.db, self.user.id, activate=False)

        crud_plan.set_active_plan(self.db, self.user.id, mine.id)

        self.assertEqual(self.active_ids(other.id), [other_plan.id])

    def test_current_plan_falls_back_to_latest(self):
        plan = make_plan(self.db, self.user.id)
        crud_plan.deactivate_plan(self.db, plan.id)

        self.assertIsNone(crud_plan.get_active_plan(self.db, self.user.id))
        self.assertEqual(crud_plan.get_current_plan(self.db, self.user.id).id, plan.id)

    def test_list_plans_newest_first(self):
        first = make_plan(self.db, self.user.id)
        second = make_plan(self.db, self.user.id)
        self.assertEqual([p.id for p in crud_plan.list_plans(self.db, self.user.id)], [second.id, first.id])

    def test_delete_cascades_progress_and_custom_meals(self):
        plan = make_plan(self.db, self.user.id)
        crud_progress.create_progress(self.db, self.user.id, plan.id, 1, "easy")
        crud_custom_meal.save_custom_meal(self.db, CustomMealCreate(
            user_id=self.user.id, plan_id=plan.id, day_index=0, meal_slot=0,
            custom_meal={"description": "Eggs"},
        ))

        self.assertTrue(crud_plan.delete_plan(self.db, plan.id))

        self.assertEqual(self.db.query(ExerciseProgress).count(), 0)
        self.assertEqual(self.db.query(CustomMeal).count(), 0)
        self.assertIsNone(crud_plan.get_active_plan(self.db, self.user.id))
        self.assertFalse(crud_plan.delete_plan(self.db, plan.id))


class TestProgressAndCustomMeals(unittest.TestCase):
    def setUp(self):
        Base.metadata.create_all(bind=engine)
        self.db = TestingSessionLocal()
        self.user = make_profile(self.db)
        self.plan = make_plan(self.db, self.user.id)

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=engine)

    def test_duplicate_progress_counts_once(self):
        crud_progress.create_progress(self.db, self.user.id, self.plan.id, 1, "easy")
        crud_progress.create_progress(self.db, self.user.id, self.plan.id, 1, "hard")
        crud_progress.create_progress(self.db, self.user.id, self.plan.id, 2, "just right")

        self.assertEqual(len(crud_progress.list_progress(self.db, self.user.id, self.plan.id)), 3)
        self.assertEqual(crud_progress.count_completed_days(self.db, self.user.id, self.plan.id), 2)

    def test_custom_meal_upsert_keeps_one_per_slot(self):
        def save(description):
            return crud_custom_meal.save_custom_meal(self.db, CustomMealCreate(
                user_id=self.user.id, plan_id=self.plan.id, day_index=2, meal_slot=1,
                custom_meal={"description": description}, source="ai_ingredients",
            ))

        save("First")
        second = save("Second")

        meals = crud_custom_meal.list_custom_meals(self.db, self.user.id, self.plan.id)
        self.assertEqual(len(meals), 1)
        self.assertEqual(meals[0].id, second.id)
        self.assertEqual(meals[0].custom_meal["description"], "Second")
        self.assertEqual(meals[0].source, "ai_ingredients")

    def test_delete_missing_custom_meal(self):
        self.assertFalse(crud_custom_meal.delete_custom_meal(self.db, 12345))


class TestExerciseMatching(unittest.TestCase):
    def setUp(self):
        Base.metadata.create_all(bind=engine)
        self.db = TestingSessionLocal()
        self.db.add_all([
            Exercise(id="push_up", name="Push Up", name_pt="Flexão", equipment="bodyweight"),
            Exercise(id="bench_step_up", name="Bench Step Up", name_pt="Subida ao Banco", equipment="bench"),
        ])
        self.db.commit()

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=engine)

    def test_match_by_id_and_loose_name(self):
        by_name, by_id = crud_exercise.match_exercises(self.db, [
            {"exercise_id": "bench_step_up", "name": "Step Ups"},
            {"exercise_id": None, "name": "push up (knees)"},
            {"exercise_id": None, "name": "Flexão"},
            {"exercise_id": "unknown", "name": "Burpee"},
        ])

        self.assertEqual(set(by_id), {"bench_step_up"})
        self.assertEqual(by_name["push up (knees)"].id, "push_up")
        self.assertEqual(by_name["Flexão"].id, "push_up")
        self.assertNotIn("Burpee", by_name)

    def test_upsert_uses_slug_id(self):
        exercise = crud_exercise.upsert_exercise(self.db, {"name": "Goblet Squat", "equipment": "dumbbell"})
        self.assertEqual(exercise.id, "goblet_squat")

        updated = crud_exercise.upsert_exercise(self.db, {"id": "goblet_squat", "name": "Goblet Squat", "difficulty": "beginner"})
        self.assertEqual(updated.equipment, "dumbbell")
        self.assertEqual(updated.difficulty, "beginner")

    def test_seed_replaces_enriched_rows_and_is_repeatable(self):
        self.db.add(Exercise(id="dumbbell_goblet_squat", name="Goblet", is_enriched=True))
        self.db.commit()

        count = crud_exercise.seed_exercises(self.db, EXERCISE_LIBRARY)
        crud_exercise.seed_exercises(self.db, EXERCISE_LIBRARY)

        self.assertEqual(count, len(EXERCISE_LIBRARY))
        # push_up from setUp is not in the bundled library
        self.assertEqual(self.db.query(Exercise).count(), len(EXERCISE_LIBRARY) + 1)
        goblet = crud_exercise.get_exercise(self.db, "dumbbell_goblet_squat")
        self.assertEqual(goblet.name, "Dumbbell Goblet Squat")
        self.assertFalse(goblet.is_enriched)
        self.assertIn("quadriceps", goblet.primary_muscles)


class TestPhoneLogin(unittest.TestCase):
    def setUp(self):
        Base.metadata.create_all(bind=engine)
        self.db = TestingSessionLocal()

    def tearDown(self):
        self.db.close()
        Base.metadata.drop_all(bind=engine)

    def test_pin_is_hashed_and_verified(self):
        request = OnboardingRequest(
            sex="female", age=28, weight=62, height=165, goal="loss", activity_level="light",
            phone_number="+351912345678", pin="4321",
        )
        profile = crud_profile.create_profile(self.db, request)

        self.assertNotEqual(profile.pin_hash, "4321")
        self.assertEqual(crud_profile.authenticate(self.db, "+351912345678", "4321").id, profile.id)
        self.assertIsNone(crud_profile.authenticate(self.db, "+351912345678", "1234"))
        self.assertIsNone(crud_profile.authenticate(self.db, "+351000000000", "4321"))

    def test_profile_without_pin_cannot_log_in(self):
        make_profile(self.db, phone_number="+351911111111")
        self.assertIsNone(crud_profile.authenticate(self.db, "+351911111111", "0000"))


if __name__ == "__main__":
    unittest.main()
