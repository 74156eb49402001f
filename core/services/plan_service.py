# =============================================================================
# core/services/plan_service.py - Saved Event Plan Business Logic
# =============================================================================
# Handles saved plans in the `event_plans` table: an event-builder
# selection plus the packages generated for it.
# =============================================================================

import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from core.models.builder import GeneratedPackage
from core.models.store import SavedPlan
from lib.supabase_client import SupabaseClient, SupabaseClientError, is_not_found
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)


class EventPlanService:
    """
    Service for saved event plan operations.

    Handles creating, loading, listing and deleting plans.
    """

    @staticmethod
    def create_plan(plan: SavedPlan, user_id: str | UUID | None = None) -> SavedPlan:
        """
        Save a plan.

        Args:
            plan: Plan from the storefront state
            user_id: Owning user, if signed in

        Returns:
            The stored SavedPlan

        Raises:
            SupabaseClientError: If the insert fails
        """
        client = SupabaseClient.get_client()

        data = EventPlanService._plan_to_dict(plan)
        data["user_id"] = normalize_uuid(user_id) if user_id else None

        try:
            response = (
                client.table("event_plans")
                .insert(data)
                .execute()
            )

            if response.data:
                saved = EventPlanService._dict_to_plan(response.data[0])
                logger.info(f"Saved plan {saved.id} ({len(saved.packages)} packages)")
                return saved

            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA"
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            logger.error(f"Failed to save plan: {e}")
            raise SupabaseClientError(
                message=f"Failed to save plan: {e}",
                code="INSERT_PLAN_FAILED",
                details={"plan_id": plan.id}
            )

    @staticmethod
    def get_plan(plan_id: str | UUID) -> SavedPlan | None:
        """
        Get a plan by ID.

        Returns:
            SavedPlan, or None if the plan doesn't exist
        """
        plan_id_str = normalize_uuid(plan_id)
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("event_plans")
                .select("*")
                .eq("id", plan_id_str)
                .single()
                .execute()
            )
        except Exception as e:
            if is_not_found(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch plan: {e}",
                code="FETCH_PLAN_FAILED",
                details={"plan_id": plan_id_str}
            )

        if not response.data:
            return None
        return EventPlanService._dict_to_plan(response.data)

    @staticmethod
    def list_user_plans(user_id: str | UUID) -> list[SavedPlan]:
        """List a user's saved plans, newest first."""
        user_id_str = normalize_uuid(user_id)
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("event_plans")
                .select("*")
                .eq("user_id", user_id_str)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch plans: {e}",
                code="FETCH_PLANS_FAILED",
                details={"user_id": user_id_str}
            )

        return [EventPlanService._dict_to_plan(row) for row in response.data or []]

    @staticmethod
    def delete_plan(plan_id: str | UUID) -> None:
        """
        Delete a plan. Deleting a plan that doesn't exist is not an error.

        Raises:
            SupabaseClientError: If the delete fails
        """
        plan_id_str = normalize_uuid(plan_id)
        client = SupabaseClient.get_client()

        try:
            client.table("event_plans").delete().eq("id", plan_id_str).execute()
            logger.info(f"Deleted plan {plan_id_str}")
        except Exception as e:
            logger.error(f"Failed to delete plan: {e}")
            raise SupabaseClientError(
                message=f"Failed to delete plan: {e}",
                code="DELETE_PLAN_FAILED",
                details={"plan_id": plan_id_str}
            )

    @staticmethod
    def _plan_to_dict(plan: SavedPlan) -> dict[str, Any]:
        """Convert a SavedPlan to an event_plans row."""
        return {
            "id": plan.id,
            "name": plan.name,
            "event_type": plan.event_type,
            "theme": plan.theme,
            "colors": plan.color_palette,
            "guest_size": plan.guest_size,
            "venue": plan.venue_type,
            "budget": plan.budget,
            "event_date": plan.event_date,
            "packages": [p.model_dump(mode="json") for p in plan.packages],
            "created_at": plan.created_at.isoformat(),
        }

    @staticmethod
    def _dict_to_plan(data: dict[str, Any]) -> SavedPlan:
        """Convert an event_plans row to a SavedPlan."""
        created_at = data.get("created_at")

        return SavedPlan(
            id=str(data.get("id")),
            name=data.get("name") or "Event Plan",
            event_type=data.get("event_type") or "",
            theme=data.get("theme") or "",
            color_palette=data.get("colors") or "",
            guest_size=data.get("guest_size") or "",
            venue_type=data.get("venue") or "",
            budget=str(data.get("budget") or ""),
            event_date=data.get("event_date"),
            created_at=datetime.fromisoformat(created_at) if created_at else datetime.utcnow(),
            packages=[GeneratedPackage.model_validate(p) for p in data.get("packages") or []],
        )
