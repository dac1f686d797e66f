from dataclasses import dataclass
from enum import StrEnum


class UserType(StrEnum):
    PROSPECT = 'prospect'
    RESIDENT = 'resident'


class Action(StrEnum):
    SMS_CONSENT = 'smsConsent'
    APPOINTMENT_CHANGE = 'appointmentChange'


# fmt: off
@dataclass(frozen=True)
class IdentityRecord:
    user: str             # Opaque subject identifier
    user_type: UserType   # Kind of subject the slug was issued for
    action: Action        # Action the slug authorizes a lookup for

    def to_dict(self) -> dict[str, str]:
        """Return the record with its wire (and Redis hash) field names."""
        return {
            'user': self.user,
            'userType': str(self.user_type),
            'action': str(self.action),
        }
# fmt: on
