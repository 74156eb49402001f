# =============================================================================
# core/services/booking_service.py - Booking Business Logic
# =============================================================================
# Handles booking persistence in the `bookings` table.
# =============================================================================

import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from app.exceptions import BookingNotFoundError
from core.models.store import Booking, BookingStatus
from lib.supabase_client import SupabaseClient, SupabaseClientError, is_not_found
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)


class BookingService:
    """
    Service for booking operations.

    Handles creating bookings, moving them through their statuses and
    listing a customer's bookings.
    """

    @staticmethod
    def create_booking(booking: Booking, user_id: str | UUID | None = None) -> dict[str, Any]:
        """
        Insert a booking.

        Args:
            booking: Booking from the storefront state
            user_id: Owning user, if signed in

        Returns:
            Inserted booking row

        Raises:
            SupabaseClientError: If the insert fails
        """
        client = SupabaseClient.get_client()
        first_service = booking.services[0].service if booking.services else None

        data = {
            "id": booking.id,
            "user_id": normalize_uuid(user_id) if user_id else None,
            "vendor_id": first_service.vendor_id if first_service else None,
            "service_id": first_service.id if first_service else None,
            "services": [
                {"service_id": item.service.id, "quantity": item.quantity, "notes": item.notes}
                for item in booking.services
            ],
            "event_type": booking.event_type,
            "event_date": booking.event_date,
            "venue": booking.venue,
            "guest_count": booking.guest_count,
            "total_price": booking.total_amount,
            "status": booking.status.value,
            "customer_name": booking.customer_name,
            "customer_email": booking.customer_email,
            "customer_phone": booking.customer_phone,
        }

        try:
            response = (
                client.table("bookings")
                .insert(data)
                .execute()
            )

            if response.data:
                logger.info(f"Created booking {booking.id} ({len(booking.services)} services)")
                return response.data[0]

            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA"
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            logger.error(f"Failed to create booking: {e}")
            raise SupabaseClientError(
                message=f"Failed to create booking: {e}",
                code="INSERT_BOOKING_FAILED",
                details={"booking_id": booking.id}
            )

    @staticmethod
    def update_booking_status(booking_id: str | UUID, status: BookingStatus) -> dict[str, Any]:
        """
        Move a booking to a new status.

        Raises:
            BookingNotFoundError: If no booking has this id
            SupabaseClientError: If the update fails
        """
        booking_id_str = normalize_uuid(booking_id)
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("bookings")
                .update({"status": status.value, "updated_at": datetime.utcnow().isoformat()})
                .eq("id", booking_id_str)
                .execute()
            )

        except Exception as e:
            logger.error(f"Failed to update booking {booking_id_str}: {e}")
            raise SupabaseClientError(
                message=f"Failed to update booking status: {e}",
                code="UPDATE_BOOKING_FAILED",
                details={"booking_id": booking_id_str, "status": status.value}
            )

        if not response.data:
            raise BookingNotFoundError(booking_id_str)

        logger.info(f"Booking {booking_id_str} is now {status.value}")
        return response.data[0]

    @staticmethod
    def list_user_bookings(user_id: str | UUID) -> list[dict[str, Any]]:
        """
        List a user's bookings, newest first.

        Raises:
            SupabaseClientError: If the query fails
        """
        user_id_str = normalize_uuid(user_id)
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("bookings")
                .select("*")
                .eq("user_id", user_id_str)
                .order("created_at", desc=True)
                .execute()
            )
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch bookings: {e}",
                code="FETCH_BOOKINGS_FAILED",
                details={"user_id": user_id_str}
            )

    @staticmethod
    def get_booking(booking_id: str | UUID) -> dict[str, Any]:
        """
        Get a booking by ID.

        Raises:
            BookingNotFoundError: If the booking doesn't exist
        """
        booking_id_str = normalize_uuid(booking_id)
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table("bookings")
                .select("*")
                .eq("id", booking_id_str)
                .single()
                .execute()
            )

        except Exception as e:
            if is_not_found(e):
                raise BookingNotFoundError(booking_id_str)
            raise SupabaseClientError(
                message=f"Failed to fetch booking: {e}",
                code="FETCH_BOOKING_FAILED",
                details={"booking_id": booking_id_str}
            )

        if not response.data:
            raise BookingNotFoundError(booking_id_str)
        return response.data
