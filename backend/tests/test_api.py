import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from fitcoach.data.exercise_library import EXERCISE_LIBRARY
from fitcoach.database import Base, get_db
from fitcoach.main import app
from fitcoach.models.exercise import Exercise
from fitcoach.models.fitness_plan import FitnessPlan
from fitcoach.models.user_profile import UserProfile
from tests.helpers import engine, TestingSessionLocal, make_profile, make_plan, plan_data


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


ONBOARDING = {
    "sex": "female", "age": 28, "weight": 62, "height": 165, "goal": "loss",
    "activityLevel": "light", "equipment": ["Bench"], "timePerDay": 30, "language": "en",
}


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        Base.metadata.create_all(bind=engine)
        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)
        self.db = TestingSessionLocal()

    def tearDown(self):
        self.db.close()
        app.dependency_overrides.clear()
        Base.metadata.drop_all(bind=engine)


class TestPlanEndpoints(ApiTestCase):

    @patch("fitcoach.services.plan_service.llm_service.call_llm_json")
    def test_onboarding_creates_active_plan(self, mock_llm):
        mock_llm.return_value = plan_data()

        response = self.client.post("/api/onboarding", json=ONBOARDING)

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertIn("fitness_plan_7_days", body["plan"])

        plan = self.client.get(f"/api/plan/{body['userId']}").json()
        self.assertEqual(plan["planId"], body["planId"])
        self.assertTrue(plan["isActive"])
        self.assertEqual(plan["durationDays"], 30)
        self.assertFalse(plan["isExpired"])

    @patch("fitcoach.services.plan_service.llm_service.call_llm_json")
    def test_onboarding_generation_failure(self, mock_llm):
        mock_llm.return_value = None

        response = self.client.post("/api/onboarding", json=ONBOARDING)

        self.assertEqual(response.status_code, 500)
        self.assertEqual(self.db.query(FitnessPlan).count(), 0)

    def test_get_plan_missing(self):
        self.assertEqual(self.client.get("/api/plan/42").status_code, 404)

    def test_activate_and_list(self):
        user = make_profile(self.db)
        older = make_plan(self.db, user.id)
        newer = make_plan(self.db, user.id)

        response = self.client.patch(f"/api/plan/{older.id}/activate", json={"userId": user.id})
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["isActive"])

        plans = self.client.get(f"/api/plans/{user.id}").json()
        self.assertEqual([p["id"] for p in plans], [newer.id, older.id])
        self.assertEqual([p["isActive"] for p in plans], [False, True])

    def test_activate_unknown_plan(self):
        user = make_profile(self.db)
        response = self.client.patch("/api/plan/999/activate", json={"userId": user.id})
        self.assertEqual(response.status_code, 404)

    def test_delete_plan(self):
        user = make_profile(self.db)
        plan = make_plan(self.db, user.id)

        self.assertEqual(self.client.delete(f"/api/plan/{plan.id}").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/plan/{plan.id}").status_code, 404)
        self.assertEqual(self.client.get(f"/api/plan/{user.id}").status_code, 404)

    def test_update_day_rejects_past_duration(self):
        user = make_profile(self.db)
        plan = make_plan(self.db, user.id, duration_days=30)

        self.assertEqual(self.client.patch(f"/api/plan/{plan.id}/day", json={"day": 31}).status_code, 400)
        response = self.client.patch(f"/api/plan/{plan.id}/day", json={"day": 12})
        self.assertEqual(response.json(), {"planId": plan.id, "currentDay": 12})

    def test_renew_requires_valid_duration(self):
        user = make_profile(self.db)
        response = self.client.post("/api/plan/renew", json={"userId": user.id, "durationDays": 10})
        self.assertEqual(response.status_code, 422)

    @patch("fitcoach.services.plan_service.llm_service.call_llm_json")
    def test_renew_creates_longer_plan(self, mock_llm):
        mock_llm.return_value = plan_data()
        user = make_profile(self.db)
        old = make_plan(self.db, user.id)

        response = self.client.post("/api/plan/renew", json={"userId": user.id, "durationDays": 60})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["durationDays"], 60)
        self.db.refresh(old)
        self.assertFalse(old.is_active)


class TestProgressEndpoint(ApiTestCase):

    def test_progress_advances_and_caps_day(self):
        user = make_profile(self.db)
        plan = make_plan(self.db, user.id, duration_days=30)

        payload = {"userId": user.id, "planId": plan.id, "day": 1, "difficulty": "just right"}
        self.assertEqual(self.client.post("/api/progress", json=payload).status_code, 201)
        self.assertEqual(self.client.get(f"/api/plan/{user.id}").json()["currentDay"], 2)

        payload["day"] = 30
        self.client.post("/api/progress", json=payload)
        body = self.client.get(f"/api/plan/{user.id}").json()
        self.assertEqual(body["currentDay"], 30)
        self.assertEqual([p["day"] for p in body["progress"]], [1, 30])

    def test_progress_rejects_unknown_difficulty(self):
        user = make_profile(self.db)
        plan = make_plan(self.db, user.id)
        payload = {"userId": user.id, "planId": plan.id, "day": 1, "difficulty": "brutal"}
        self.assertEqual(self.client.post("/api/progress", json=payload).status_code, 422)

    def test_profile_update(self):
        user = make_profile(self.db)
        response = self.client.patch(f"/api/profile/{user.id}", json={"weight": 78, "timezone": "Europe/Lisbon"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["weight"], 78)
        self.assertEqual(response.json()["goal"], "muscle")


    def test_validate_weight_goal(self):
        goal = {
            "currentWeight": 80, "targetWeight": 70, "weeks": 20, "sex": "male", "age": 30,
            "height": 180, "goal": "loss", "activityLevel": "moderate",
        }

        response = self.client.post("/api/validate-weight-goal", json=goal)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "possible", "weeklyChange": 0.5})

        rushed = self.client.post("/api/validate-weight-goal", json={**goal, "weeks": 8}).json()
        self.assertEqual(rushed["status"], "not_possible")
        self.assertEqual(self.client.post("/api/validate-weight-goal", json={**goal, "weeks": 200}).status_code, 422)
        self.assertEqual(self.client.post("/api/validate-weight-goal", json={**goal, "age": 16}).status_code, 422)


class TestLoginEndpoint(ApiTestCase):
    PHONE = "+351912345678"

    @patch("fitcoach.services.plan_service.llm_service.call_llm_json")
    def test_onboarding_with_phone_then_login(self, mock_llm):
        mock_llm.return_value = plan_data()
        created = self.client.post("/api/onboarding", json={**ONBOARDING, "phoneNumber": self.PHONE, "pin": "1234"})
        self.assertEqual(created.status_code, 201)

        response = self.client.post("/api/login", json={"phoneNumber": self.PHONE, "pin": "1234"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"userId": created.json()["userId"], "language": "en"})
        self.assertNotEqual(self.db.query(UserProfile).one().pin_hash, "1234")

    def test_login_failures(self):
        self.assertEqual(self.client.post("/api/login", json={}).status_code, 400)
        self.assertEqual(self.client.post("/api/login", json={"phoneNumber": self.PHONE}).status_code, 400)
        self.assertEqual(self.client.post("/api/login", json={"pin": "1234"}).status_code, 400)

        response = self.client.post("/api/login", json={"phoneNumber": self.PHONE, "pin": "1234"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json()["detail"], "Invalid phone number or PIN")

    def test_onboarding_rejects_taken_or_partial_phone(self):
        make_profile(self.db, phone_number=self.PHONE)

        taken = self.client.post("/api/onboarding", json={**ONBOARDING, "phoneNumber": self.PHONE, "pin": "1234"})
        partial = self.client.post("/api/onboarding", json={**ONBOARDING, "phoneNumber": "+351900000000"})
        bad_pin = self.client.post("/api/onboarding", json={**ONBOARDING, "phoneNumber": "+351900000000", "pin": "12"})

        self.assertEqual(taken.status_code, 400)
        self.assertEqual(partial.status_code, 400)
        self.assertEqual(bad_pin.status_code, 422)
        self.assertEqual(self.db.query(UserProfile).count(), 1)

class TestExerciseAndNutritionEndpoints(ApiTestCase):

    def test_match_returns_name_and_id_maps(self):
        self.db.add(Exercise(id="push_up", name="Push Up", name_pt="Flexão"))
        self.db.commit()

        response = self.client.post("/api/exercises/match", json={
            "exercises": [{"name": "Push-up variation", "exerciseId": "push_up"}, {"name": "Flexão"}]
        })

        body = response.json()
        self.assertEqual(body["exercisesById"]["push_up"]["name"], "Push Up")
        self.assertEqual(body["exercises"]["Flexão"]["id"], "push_up")

    @patch("fitcoach.services.exercise_service.llm_service.call_llm_json")
    def test_enrich_reports_missing_fields(self, mock_llm):
        mock_llm.return_value = {"name": "Bear Crawl", "name_pt": "Gatinhar", "category": "Cardio"}

        response = self.client.post("/api/exercises/enrich", json={"name": "Bear Crawl"})

        body = response.json()
        self.assertEqual(body["exercise"]["id"], "bear_crawl")
        self.assertIn("instructions", body["missingFields"])
        self.assertEqual(self.client.get("/api/exercises/bear_crawl").status_code, 200)

    def test_seed_makes_library_matchable(self):
        response = self.client.post("/api/exercises/seed")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "count": len(EXERCISE_LIBRARY), "message": f"Seeded {len(EXERCISE_LIBRARY)} exercises",
        })
        body = self.client.post("/api/exercises/match", json={
            "exercises": [{"exerciseId": "kettlebell_clean"}, {"name": "Dumbbell Goblet Squat"}, {"exerciseId": "burpee"}]
        }).json()
        self.assertEqual(set(body["exercisesById"]), {"kettlebell_clean"})
        self.assertEqual(body["exercises"]["Dumbbell Goblet Squat"]["id"], "dumbbell_goblet_squat")
        self.assertEqual(body["exercises"]["Dumbbell Goblet Squat"]["namePt"], "Agachamento Cálice com Haltere")

    def test_custom_meal_lifecycle(self):
        user = make_profile(self.db)
        plan = make_plan(self.db, user.id)
        payload = {
            "userId": user.id, "planId": plan.id, "dayIndex": 0, "mealSlot": 1,
            "customMeal": {"description": "Tofu bowl"}, "originalMeal": {"description": "Chicken and rice"},
        }

        self.client.post("/api/nutrition/custom-meal", json=payload)
        payload["customMeal"] = {"description": "Salmon bowl"}
        replaced = self.client.post("/api/nutrition/custom-meal", json=payload).json()

        listed = self.client.get(f"/api/nutrition/custom-meals/{user.id}/{plan.id}").json()
        self.assertEqual([m["id"] for m in listed], [replaced["id"]])
        self.assertEqual(listed[0]["customMeal"], {"description": "Salmon bowl"})

        self.assertEqual(self.client.delete(f"/api/nutrition/custom-meal/{replaced['id']}").status_code, 200)
        self.assertEqual(self.client.delete(f"/api/nutrition/custom-meal/{replaced['id']}").status_code, 404)

    def test_meal_from_blank_ingredients_rejected(self):
        response = self.client.post("/api/nutrition/meal-from-ingredients", json={
            "targetCalories": 500, "targetProtein": 30, "targetCarbs": 50, "targetFat": 15,
            "mealTime": "Lunch", "ingredients": ["  ", ""],
        })
        self.assertEqual(response.status_code, 422)

    @patch("fitcoach.services.meal_service.llm_service.call_llm_json")
    def test_meal_swap_failure(self, mock_llm):
        mock_llm.return_value = {"alternatives": []}
        response = self.client.post("/api/nutrition/meal-swap", json={
            "targetCalories": 500, "targetProtein": 30, "targetCarbs": 50, "targetFat": 15,
            "mealTime": "Lunch", "originalMeal": {"description": "Chicken"},
        })
        self.assertEqual(response.status_code, 500)


class TestNotificationAndCoachEndpoints(ApiTestCase):

    def test_poll_creates_single_reminder_per_interval(self):
        user = make_profile(self.db, timezone="UTC")
        self.client.patch(f"/api/notifications/settings/{user.id}", json={"sleepStartHour": 0, "sleepEndHour": 0})

        first = self.client.post(f"/api/notifications/poll/{user.id}").json()
        second = self.client.post(f"/api/notifications/poll/{user.id}").json()

        self.assertEqual(len(first), 1)
        self.assertEqual(first[0]["type"], "water")
        self.assertEqual(len(second), 1)

        self.client.patch(f"/api/notifications/{first[0]['id']}/read")
        self.assertEqual(self.client.post(f"/api/notifications/poll/{user.id}").json(), [])

    @patch("fitcoach.services.coach_service.llm_service.call_llm")
    def test_coach_message_and_clear(self, mock_llm):
        mock_llm.return_value = "Keep going!"
        user = make_profile(self.db)

        response = self.client.post("/api/coach/message", json={"userId": user.id, "message": "How am I doing?"})

        body = response.json()
        self.assertEqual(body["reply"], "Keep going!")
        self.assertEqual([m["role"] for m in body["history"]], ["user", "assistant"])

        cleared = self.client.delete(f"/api/coach/messages/{user.id}").json()
        self.assertEqual(cleared["deleted"], 2)

    @patch("fitcoach.services.plan_service.llm_service.call_llm_json")
    def test_coach_regenerate_keeps_duration(self, mock_llm):
        mock_llm.return_value = plan_data()
        user = make_profile(self.db)
        make_plan(self.db, user.id, duration_days=60)

        response = self.client.post("/api/coach/regenerate-plan", json={"userId": user.id, "feedback": "too hard"})

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["plan"]["durationDays"], 60)
        self.assertTrue(response.json()["plan"]["isActive"])


if __name__ == "__main__":
    unittest.main()
