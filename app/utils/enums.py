from enum import Enum


class NotificationPolicyEnum(str, Enum):
    BEST_EFFORT = "best_effort"
    FAIL_TOGETHER = "fail_together"


class EmailKindEnum(str, Enum):
    ADMIN_NOTIFICATION = "admin_notification"
    CONFIRMATION = "confirmation"
    TEST = "test"
