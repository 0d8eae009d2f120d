import logging
from typing import List, Optional

from fitcoach.client.api_client import FitCoachClient
from fitcoach.client.errors import NotFound
from fitcoach.client.plan_model import Plan

logger = logging.getLogger(__name__)


class PlanVersions:
    """
    All plans of a user, newest first. At most one is active; having none
    means the dashboard should offer to create a plan.
    """

    def __init__(self, client: FitCoachClient, user_id: int):
        self.client = client
        self.user_id = user_id
        self.plans: List[Plan] = []

    @property
    def active_plan(self) -> Optional[Plan]:
        return next((p for p in self.plans if p.is_active), None)

    async def list_plans(self) -> List[Plan]:
        body = await self.client.list_plans(self.user_id)
        self.plans = [Plan.from_api(p) for p in body or []]
        return self.plans

    async def activate(self, plan_id: int) -> Plan:
        """
        The backend flips the flags in one transaction; the local list is
        only updated from its answer, so two active plans are never shown.
        """
        body = await self.client.activate_plan(plan_id, self.user_id)
        activated = Plan.from_api(body)
        self.plans = [
            activated if p.id == plan_id else p.model_copy(update={"is_active": False})
            for p in self.plans
        ]
        if not any(p.id == plan_id for p in self.plans):
            self.plans.insert(0, activated)
        return activated

    async def delete(self, plan_id: int) -> None:
        try:
            await self.client.delete_plan(plan_id)
        except NotFound:
            logger.info(f"[Plans] Plan {plan_id} was already deleted")
            self.plans = [p for p in self.plans if p.id != plan_id]
            raise
        self.plans = [p for p in self.plans if p.id != plan_id]
