"""
Profile service
Loads the user profile from the key-value store and saves it on every edit
"""

from typing import Optional
import logging

from pydantic import ValidationError as PydanticValidationError

from storefront.core.events import EventBus, EventType
from storefront.schemas.user import ProfileUpdate, UserProfile
from storefront.services.storage import KeyValueStore
from storefront.utils.validators import (
    validate_email_address,
    validate_phone_number,
    validate_required,
)

logger = logging.getLogger(__name__)


class ProfileService:

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: str = "user_profile",
        events: Optional[EventBus] = None,
    ):
        self.store = store
        self.storage_key = storage_key
        self.events = events or EventBus()
        self.profile = self.load_profile()

    def load_profile(self) -> UserProfile:
        """Stored profile, or the default one when nothing readable is stored"""
        data = self.store.get(self.storage_key)
        if data:
            try:
                return UserProfile.model_validate_json(data)
            except PydanticValidationError as e:
                logger.warning(f"Stored profile under {self.storage_key} is unreadable, using default: {e}")
        return UserProfile()

    def save_profile(self) -> None:
        """Save profile to the key-value store"""
        self.store.set(self.storage_key, self.profile.model_dump_json().encode("utf-8"))
        logger.info("Profile saved")
        self.events.publish(EventType.PROFILE_SAVED, email=self.profile.email)

    def update_profile(self, data: ProfileUpdate) -> UserProfile:
        """
        Validate and apply a profile edit, then persist it

        The profile is unchanged if any field is invalid.

        Raises:
            ValidationError: Invalid name, email, phone or address
        """
        name = validate_required(data.name, "Name")
        email = validate_email_address(data.email)
        phone = validate_phone_number(data.phone)
        address = validate_required(data.address, "Address")

        self.profile = self.profile.model_copy(
            update={"name": name, "email": email, "phone": phone, "address": address}
        )
        self.save_profile()
        return self.profile
