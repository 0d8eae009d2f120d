import logging
from typing import Any, Dict, List, Optional

import httpx

from fitcoach.config import FITCOACH_API_URL, HTTP_TIMEOUT_SECONDS
from fitcoach.client.errors import CoachError, NetworkFailure, NotFound, ValidationFailure, GenerationError

logger = logging.getLogger(__name__)


class FitCoachClient:
    """
    Async JSON client for the FitCoach API.

    Every call either returns the decoded body or raises one of the
    fitcoach.client.errors types. AI endpoints report a failed generation
    as a 5xx; for those the error becomes GenerationError instead of
    NetworkFailure.
    """

    def __init__(
        self,
        base_url: str = FITCOACH_API_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._http = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "FitCoachClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(self, method: str, path: str, json: Any = None, generation: bool = False) -> Any:
        try:
            response = await self._http.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning(f"[API Client] {method} {path} failed: {e}")
            raise NetworkFailure(f"Could not reach server: {e}") from e

        body = _decode(response)
        detail = _detail(body) or response.reason_phrase

        if response.status_code == 404:
            raise NotFound(detail, response.status_code)
        if response.status_code in (400, 422):
            raise ValidationFailure(detail, response.status_code)
        if response.status_code >= 500:
            if generation:
                raise GenerationError(detail, response.status_code)
            raise NetworkFailure(detail, response.status_code)
        if response.status_code >= 400:
            raise CoachError(detail, response.status_code)

        if isinstance(body, dict) and body.get("success") is False:
            error_cls = GenerationError if generation else ValidationFailure
            raise error_cls(detail or "Request failed", response.status_code)
        return body

    # --- Login ---

    async def login(self, phone_number: str, pin: str) -> Dict[str, Any]:
        return await self._request("POST", "/api/login", json={"phoneNumber": phone_number, "pin": pin})

    # --- Plans ---

    async def get_plan(self, user_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/api/plan/{user_id}")

    async def list_plans(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/api/plans/{user_id}")

    async def activate_plan(self, plan_id: int, user_id: int) -> Dict[str, Any]:
        return await self._request("PATCH", f"/api/plan/{plan_id}/activate", json={"userId": user_id})

    async def delete_plan(self, plan_id: int) -> None:
        await self._request("DELETE", f"/api/plan/{plan_id}")

    async def renew_plan(self, user_id: int, duration_days: int) -> Dict[str, Any]:
        return await self._request(
            "POST", "/api/plan/renew", json={"userId": user_id, "durationDays": duration_days}, generation=True
        )

    async def update_day(self, plan_id: int, day: int) -> Dict[str, Any]:
        return await self._request("PATCH", f"/api/plan/{plan_id}/day", json={"day": day})

    async def record_progress(self, user_id: int, plan_id: int, day: int, difficulty: str) -> Dict[str, Any]:
        return await self._request("POST", "/api/progress", json={
            "userId": user_id, "planId": plan_id, "day": day, "difficulty": difficulty,
        })

    # --- Exercises ---

    async def match_exercises(self, refs: List[Dict[str, Optional[str]]]) -> Dict[str, Any]:
        return await self._request("POST", "/api/exercises/match", json={"exercises": refs})

    async def enrich_exercise(
        self, name: str, exercise_id: Optional[str] = None, equipment: Optional[str] = None, language: str = "pt"
    ) -> Dict[str, Any]:
        return await self._request("POST", "/api/exercises/enrich", json={
            "name": name, "exerciseId": exercise_id, "equipment": equipment, "language": language,
        }, generation=True)

    # --- Nutrition ---

    async def validate_weight_goal(self, goal: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/api/validate-weight-goal", json=goal)

    async def meal_swap(self, targets: Dict[str, Any], original_meal: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request(
            "POST", "/api/nutrition/meal-swap", json={**targets, "originalMeal": original_meal}, generation=True
        )

    async def meal_from_ingredients(self, targets: Dict[str, Any], ingredients: List[str]) -> Dict[str, Any]:
        return await self._request(
            "POST", "/api/nutrition/meal-from-ingredients", json={**targets, "ingredients": ingredients},
            generation=True,
        )

    async def save_custom_meal(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/api/nutrition/custom-meal", json=payload)

    async def list_custom_meals(self, user_id: int, plan_id: int) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/api/nutrition/custom-meals/{user_id}/{plan_id}")

    async def delete_custom_meal(self, custom_meal_id: int) -> None:
        await self._request("DELETE", f"/api/nutrition/custom-meal/{custom_meal_id}")

    # --- Notifications / coach ---

    async def poll_notifications(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._request("POST", f"/api/notifications/poll/{user_id}")

    async def mark_notification_read(self, notification_id: int) -> None:
        await self._request("PATCH", f"/api/notifications/{notification_id}/read")

    async def coach_message(self, user_id: int, message: str, language: str = "pt") -> Dict[str, Any]:
        return await self._request("POST", "/api/coach/message", json={
            "userId": user_id, "message": message, "language": language,
        })

    async def clear_coach_messages(self, user_id: int) -> None:
        await self._request("DELETE", f"/api/coach/messages/{user_id}")

    async def regenerate_plan(
        self, user_id: int, feedback: Optional[str] = None, duration_days: Optional[int] = None
    ) -> Dict[str, Any]:
        return await self._request("POST", "/api/coach/regenerate-plan", json={
            "userId": user_id, "feedback": feedback, "durationDays": duration_days,
        }, generation=True)


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _detail(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        detail = body.get("detail") or body.get("error") or body.get("message")
        if isinstance(detail, list):
            # FastAPI 422: list of {"loc", "msg", ...}
            return "; ".join(str(d.get("msg", d)) if isinstance(d, dict) else str(d) for d in detail)
        return str(detail) if detail else None
    if isinstance(body, str):
        return body or None
    return None
