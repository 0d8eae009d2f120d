import logging
from typing import Dict, Any, List, Optional
from sqlalchemy.orm import Session

from fitcoach.config import DEFAULT_PLAN_DURATION_DAYS
from fitcoach.crud import fitness_plan as crud_plan
from fitcoach.crud import progress as crud_progress
from fitcoach.models.coach_message import CoachMessage
from fitcoach.models.fitness_plan import FitnessPlan
from fitcoach.models.user_profile import UserProfile
from fitcoach.services import llm_service, plan_service

logger = logging.getLogger(__name__)

HISTORY_TURNS = 10

AUTHORIZE_PLAN_KEYWORDS = (
    "sim, cria", "sim cria", "pode criar", "cria o plano", "criar plano",
    "gera o plano", "gerar plano", "quero o plano", "quero um plano",
    "yes, create", "yes create", "create the plan", "create plan",
    "generate plan", "i want the plan", "i want a plan",
    "go ahead", "let's do it", "yes please", "sim por favor",
)

SUGGEST_PLAN_KEYWORDS = (
    "novo plano", "mudar plano", "outro plano", "plano diferente",
    "não está a funcionar", "muito difícil", "muito fácil",
    "new plan", "change plan", "different plan", "not working",
    "too hard", "too easy", "recomeçar", "start over",
)

FALLBACK_REPLY = {
    "pt": "Desculpa, não consegui responder agora. Tenta novamente daqui a pouco.",
    "en": "Sorry, I couldn't answer right now. Please try again in a moment.",
}


def classify_intent(message: str) -> str:
    """
    Keyword intent: "authorize_plan" (user asks to generate now),
    "suggest_plan" (plan is not working for them) or "none".
    """
    lower = (message or "").lower()
    if any(k in lower for k in AUTHORIZE_PLAN_KEYWORDS):
        return "authorize_plan"
    if any(k in lower for k in SUGGEST_PLAN_KEYWORDS):
        return "suggest_plan"
    return "none"


class CoachService:
    """
    The virtual coach: answers questions with the user's plan and
    progress as context, and regenerates the plan on request.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_context(self, user_id: int) -> Dict[str, Any]:
        plan = crud_plan.get_active_plan(self.db, user_id)
        if not plan:
            return {"has_plan": False, "can_create_new_plan": True}

        data = plan.plan_data or {}
        workout_days = plan_service._first_list(data, plan_service.FITNESS_KEYS) or []
        training_days = len([d for d in workout_days if not d.get("is_rest_day")])
        completed = crud_progress.count_completed_days(self.db, user_id, plan.id)
        completion_rate = round(completed / plan.duration_days * 100) if plan.duration_days else 0

        recent = crud_progress.list_progress(self.db, user_id, plan.id)[-5:]
        return {
            "has_plan": True,
            "plan": plan_service.summarize_plan(plan),
            "training_days_per_cycle": training_days,
            "completed_days": completed,
            "completion_rate": completion_rate,
            "current_day": plan.current_day,
            "days_remaining": plan.duration_days - plan.current_day,
            "recent_progress": [f"day {p.day}: {p.difficulty or 'n/a'}" for p in recent],
            "can_create_new_plan": completion_rate < 30 or plan.current_day >= plan.duration_days,
        }

    def history(self, user_id: int, limit: int = HISTORY_TURNS) -> List[CoachMessage]:
        rows = self.db.query(CoachMessage).filter(
            CoachMessage.user_id == user_id
        ).order_by(CoachMessage.created_at.desc(), CoachMessage.id.desc()).limit(limit).all()
        return list(reversed(rows))

    def clear_history(self, user_id: int) -> int:
        deleted = self.db.query(CoachMessage).filter(CoachMessage.user_id == user_id).delete()
        self.db.commit()
        return deleted

    def reply(self, user_id: int, message: str, language: str = "pt") -> str:
        context = self.get_context(user_id)
        intent = classify_intent(message)

        system_prompt = f"""
        You are a friendly, evidence-based virtual fitness coach.
        Answer in {'European Portuguese' if language == 'pt' else 'English'}, in at most 120 words.

        # USER CONTEXT
        {context}

        # DETECTED INTENT: {intent}
        - suggest_plan: acknowledge the difficulty and offer to create a new plan (ask for confirmation).
        - authorize_plan: tell the user the new plan is being generated.
        """
        past = [{"role": m.role, "content": m.content} for m in self.history(user_id)]
        answer = llm_service.call_llm(system_prompt, message, temperature=0.6, max_tokens=600, history=past)
        if not answer:
            logger.warning(f"[Coach] Empty LLM answer for user {user_id}, using fallback")
            answer = FALLBACK_REPLY.get(language, FALLBACK_REPLY["en"])

        self.db.add(CoachMessage(user_id=user_id, role="user", content=message))
        self.db.add(CoachMessage(user_id=user_id, role="assistant", content=answer))
        self.db.commit()
        return answer

    def regenerate_plan(
        self,
        profile: UserProfile,
        feedback: Optional[str] = None,
        duration_days: Optional[int] = None,
    ) -> FitnessPlan:
        """
        Coach-triggered regeneration. The new plan keeps the duration of
        the current one unless given, and becomes the active plan.
        """
        current = crud_plan.get_current_plan(self.db, profile.id)
        duration = duration_days or (current.duration_days if current else None)
        duration = duration or DEFAULT_PLAN_DURATION_DAYS

        plan = plan_service.create_plan_for_user(self.db, profile, duration, feedback)
        self.db.add(CoachMessage(
            user_id=profile.id,
            role="assistant",
            content="Novo plano criado!" if (profile.language or "pt") == "pt" else "New plan created!",
        ))
        self.db.commit()
        return plan
